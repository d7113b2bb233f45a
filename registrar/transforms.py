"""Transform library — structured tool input to the registrar's flat dialect.

The registrar takes flat query parameters with snake_case or abbreviated
names, and represents arrays as repeated indexed keys (``domain0``,
``domain1``, ...).  Tool input is camelCase and nested.  Every helper
here is a pure function; none of them performs I/O, and none of them
returns a key whose value is ``None``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from contracts.errors import ParamValidationError
from contracts.tool_sdk import FlatParams, FlatValue, Transform

from registrar.constants import BATCH_LIMIT


# ── Primitives ───────────────────────────────────────────────────────


def compact(params: Mapping[str, FlatValue]) -> FlatParams:
    """Drop keys whose value is ``None``."""
    return {k: v for k, v in params.items() if v is not None}


def flag(value: Any) -> str | None:
    """Registrar boolean switch: ``"1"`` when truthy, omitted otherwise."""
    return "1" if value else None


def indexed(values: Iterable[FlatValue] | None, prefix: str) -> FlatParams:
    """``[a, b]`` -> ``{prefix0: a, prefix1: b}``; nothing for an empty list."""
    return {f"{prefix}{i}": v for i, v in enumerate(values or [])}


def require_targets(
    values: Sequence[Any] | None,
    field: str,
    action: str,
    *,
    limit: int = BATCH_LIMIT,
) -> list[Any]:
    """Return *values* or fail when the batch is empty or over the remote limit."""
    items = list(values or [])
    if not items:
        raise ParamValidationError(f"'{field}' must contain at least one entry for action '{action}'")
    if len(items) > limit:
        raise ParamValidationError(
            f"'{field}' has {len(items)} entries; action '{action}' accepts at most {limit} per call"
        )
    return items


def flatten_map(mapping: Mapping[str, Any] | None) -> FlatParams:
    """Copy a free-form ``{name: value}`` map into flat parameters."""
    return compact({str(k): v for k, v in (mapping or {}).items()})


def dns_records(
    main: Sequence[Mapping[str, Any]] | None = None,
    sub: Sequence[Mapping[str, Any]] | None = None,
) -> FlatParams:
    """Flatten main-domain and subdomain records into indexed keys.

    Structured ``priority`` maps to the registrar's ``distance`` suffix.
    ``ttl`` is sent only when truthy; ``priority`` whenever it is given.
    """
    params: FlatParams = {}
    for i, record in enumerate(main or []):
        params[f"main_record_type{i}"] = record["type"]
        params[f"main_record{i}"] = record["value"]
        if record.get("ttl"):
            params[f"main_record_ttl{i}"] = record["ttl"]
        if record.get("priority") is not None:
            params[f"main_record_distance{i}"] = record["priority"]

    for i, record in enumerate(sub or []):
        params[f"subdomain{i}"] = record["subdomain"]
        params[f"sub_record_type{i}"] = record["type"]
        params[f"sub_record{i}"] = record["value"]
        if record.get("ttl"):
            params[f"sub_record_ttl{i}"] = record["ttl"]
        if record.get("priority") is not None:
            params[f"sub_record_distance{i}"] = record["priority"]
    return params


# ── Transform factories ──────────────────────────────────────────────


def rename(mapping: Mapping[str, str], defaults: Mapping[str, FlatValue] | None = None) -> Transform:
    """Scalar passthrough with rename.

    *mapping* is ``{inputField: output_key}``.  *defaults* is keyed by
    output key and fills in when the input is absent or empty.
    """
    fallback = dict(defaults or {})

    def transform(_action: str, data: dict[str, Any]) -> FlatParams:
        params: dict[str, FlatValue] = {out: data.get(src) for src, out in mapping.items()}
        for key, value in fallback.items():
            if params.get(key) in (None, ""):
                params[key] = value
        return compact(params)

    return transform


def with_list(
    field: str,
    prefix: str,
    *,
    scope: Mapping[str, str] | None = None,
    required: bool = True,
    limit: int = BATCH_LIMIT,
    extra: Transform | None = None,
) -> Transform:
    """Array-to-indexed-keys, optionally merged with renamed scalar fields.

    *scope* renames the scalar fields that accompany the list
    (``{"domain": "domain"}``, ``{"folderId": "folder_id"}``); *extra*
    contributes further keys.
    """
    base = rename(scope or {})

    def transform(action: str, data: dict[str, Any]) -> FlatParams:
        values = data.get(field)
        if required:
            values = require_targets(values, field, action, limit=limit)
        params = base(action, data)
        if extra is not None:
            params.update(extra(action, data))
        params.update(indexed(values, prefix))
        return compact(params)

    return transform


def with_dns(scope: Mapping[str, str] | None = None) -> Transform:
    """Structured DNS records plus renamed scope fields (domain, folder, none)."""
    base = rename(scope or {})

    def transform(action: str, data: dict[str, Any]) -> FlatParams:
        params = base(action, data)
        params.update(dns_records(data.get("mainRecords"), data.get("subdomainRecords")))
        return params

    return transform


def with_map(field: str, scope: Mapping[str, str] | None = None) -> Transform:
    """Free-form map flattened alongside renamed scope fields."""
    base = rename(scope or {})

    def transform(action: str, data: dict[str, Any]) -> FlatParams:
        params = base(action, data)
        params.update(flatten_map(data.get(field)))
        return params

    return transform


CONTACT_KEYS = {
    "name": "name",
    "organization": "organization",
    "email": "email",
    "phoneCc": "phonecc",
    "phoneNum": "phonenum",
    "address1": "address1",
    "address2": "address2",
    "city": "city",
    "state": "state",
    "zipCode": "zip",
    "country": "country",
}

contact = rename(CONTACT_KEYS)
