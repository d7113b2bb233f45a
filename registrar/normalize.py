"""Response normalizer — raw registrar envelopes to flat, typed results.

The registrar nests payloads one or two levels deep under command-specific
wrapper keys (``DomainInfoResponse`` -> ``DomainInfo``) and sends booleans
as the strings ``"yes"``/``"no"``.  Locating the payload is a suffix
heuristic: exactly one top-level ``...Response`` key, then the first
nested key ending in ``Content``, ``Info`` or ``List``, in that order.

Every function here is pure.
"""

from __future__ import annotations

from typing import Any, Callable

from contracts.errors import ResponseShapeError

STATUS_KEYS = ("Status", "Error")
CONTENT_SUFFIXES = ("Content", "Info", "List")


# ── Envelope inspection ──────────────────────────────────────────────


def _response_keys(raw: dict[str, Any]) -> list[str]:
    return [k for k in raw if k.endswith("Response") and k not in STATUS_KEYS]


def envelope_error(raw: dict[str, Any]) -> str | None:
    """Return the remote error message when the envelope signals failure.

    The status lives either at the top level (``Status``/``Error``) or
    inside the ``...Response`` wrapper, where ``ResponseCode`` other than
    ``"0"`` also means failure.
    """
    if raw.get("Status") == "error":
        return str(raw.get("Error") or "Unknown error")

    for key in _response_keys(raw):
        inner = raw[key]
        if not isinstance(inner, dict):
            continue
        code = inner.get("ResponseCode")
        if inner.get("Status") == "error" or (code is not None and str(code) != "0"):
            return str(inner.get("Error") or "Unknown error")
    return None


def extract_content(raw: dict[str, Any]) -> dict[str, Any]:
    """Locate the command payload inside *raw*.

    Raises ``ResponseShapeError`` when more than one ``...Response`` key
    is present; picking one arbitrarily would hide a format change.
    """
    keys = _response_keys(raw)
    if len(keys) > 1:
        raise ResponseShapeError(f"Ambiguous response envelope: multiple wrapper keys {sorted(keys)}")
    if not keys:
        return {k: v for k, v in raw.items() if k not in STATUS_KEYS}

    response = raw[keys[0]]
    if not isinstance(response, dict):
        return {}
    for suffix in CONTENT_SUFFIXES:
        for key, value in response.items():
            if key.endswith(suffix) and isinstance(value, dict):
                return value
    return response


# ── Re-casing ────────────────────────────────────────────────────────


def camel_key(key: str) -> str:
    """``DomainName`` -> ``domainName``."""
    return key[:1].lower() + key[1:]


def camel_case_keys(value: Any) -> Any:
    """Recursively re-case dict keys; lists and leaves are kept as-is."""
    if isinstance(value, dict):
        return {camel_key(str(k)): camel_case_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [camel_case_keys(v) for v in value]
    return value


def _pick(content: dict[str, Any], name: str) -> Any:
    # Accept both the registrar's PascalCase and already-camelCased payloads
    value = content.get(name)
    return content.get(camel_key(name)) if value is None else value


def _yes(value: Any) -> bool:
    return value == "yes"


def _as_id(value: Any) -> str | None:
    return None if value is None else str(value)


# ── Command-specific normalizers ─────────────────────────────────────


def _create_folder(content: dict[str, Any]) -> dict[str, Any]:
    return {"folderId": _as_id(_pick(content, "FolderId"))}


def _create_contact(content: dict[str, Any]) -> dict[str, Any]:
    return {"contactId": _as_id(_pick(content, "ContactId"))}


def _domain_info(content: dict[str, Any]) -> dict[str, Any]:
    return {
        "domain": _pick(content, "Name"),
        "expiration": _pick(content, "Expiration"),
        "locked": _yes(_pick(content, "Locked")),
        "renewOption": _pick(content, "RenewOption"),
        "privacy": _pick(content, "Privacy"),
        "nameservers": _pick(content, "NameServers"),
        "note": _pick(content, "Note"),
    }


def _search(content: dict[str, Any]) -> dict[str, Any]:
    rows = _pick(content, "SearchResults") or []
    return {
        "results": [
            {
                "domain": _pick(row, "Domain"),
                "available": _yes(_pick(row, "Available")),
                "price": _pick(row, "Price"),
            }
            for row in rows
            if isinstance(row, dict)
        ]
    }


NORMALIZERS: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
    "create_folder": _create_folder,
    "create_contact": _create_contact,
    "domain_info": _domain_info,
    "search": _search,
}


# ── Entry point ──────────────────────────────────────────────────────


def normalize(command: str, raw: dict[str, Any]) -> dict[str, Any]:
    """Flatten *raw* for *command* into ``{"success": ..., ...}``."""
    error = envelope_error(raw)
    if error is not None:
        return {"success": False, "error": error}

    normalizer = NORMALIZERS.get(command)
    if normalizer is not None:
        return {"success": True, **normalizer(extract_content(raw))}

    rest = {k: v for k, v in raw.items() if k not in STATUS_KEYS}
    return {"success": True, **camel_case_keys(rest)}
