"""Input validation for composite-tool actions.

Validates a dispatch input against an action's JSON Schema shape with
``jsonschema`` and maps failures onto the structured error taxonomy:
missing required fields become ``MissingParamError``, everything else
(enum, type, bounds, array length) becomes ``ParamValidationError``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as SchemaError

from contracts.errors import MissingParamError, ParamValidationError

ACTION_FIELD = "action"


def strip_input(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop the discriminator and explicitly-null values."""
    return {k: v for k, v in data.items() if k != ACTION_FIELD and v is not None}


def apply_defaults(schema: Mapping[str, Any], data: Mapping[str, Any]) -> dict[str, Any]:
    """Fill absent top-level fields from their declared ``default``."""
    merged = dict(data)
    for name, prop in schema.get("properties", {}).items():
        if name not in merged and "default" in prop:
            merged[name] = prop["default"]
    return merged


def validate_input(
    schema: Mapping[str, Any] | None,
    data: Mapping[str, Any],
    *,
    action: str = "",
    tool: str = "",
) -> dict[str, Any]:
    """Return the validated input for one action.

    Fields the shape does not declare are ignored.  Without a shape the
    stripped input is returned unchanged.
    """
    cleaned = strip_input(data)
    if schema is None:
        return cleaned

    declared = schema.get("properties", {})
    candidate = apply_defaults(schema, {k: v for k, v in cleaned.items() if k in declared})

    errors = sorted(Draft202012Validator(schema).iter_errors(candidate), key=_error_rank)
    if not errors:
        return candidate

    first = errors[0]
    if first.validator == "required":
        raise MissingParamError(_missing_field(first), action=action, tool=tool)
    raise ParamValidationError(_describe(first, action), tool=tool)


# ── internal ────────────────────────────────────────────────────────


def _error_rank(error: SchemaError) -> tuple[int, int]:
    # Missing fields first, shallowest first
    return (0 if error.validator == "required" else 1, len(error.absolute_path))


def _field_path(path: Iterable[Any]) -> str:
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out


def _missing_field(error: SchemaError) -> str:
    instance = error.instance if isinstance(error.instance, dict) else {}
    missing = [name for name in error.validator_value if name not in instance]
    name = missing[0] if missing else "?"
    prefix = _field_path(error.absolute_path)
    return f"{prefix}.{name}" if prefix else name


def _describe(error: SchemaError, action: str) -> str:
    field = _field_path(error.absolute_path) or "input"
    suffix = f" (action '{action}')" if action else ""
    kind = error.validator
    value = error.validator_value

    if kind == "enum":
        allowed = ", ".join(str(v) for v in value)
        return f"Invalid value {error.instance!r} for '{field}': expected one of {allowed}{suffix}"
    if kind == "minItems":
        return f"'{field}' must contain at least {value} item(s){suffix}"
    if kind == "maxItems":
        return f"'{field}' accepts at most {value} items per call{suffix}"
    if kind == "type":
        return f"'{field}' must be of type {value}{suffix}"
    if kind in ("minimum", "maximum"):
        bound = "at least" if kind == "minimum" else "at most"
        return f"'{field}' must be {bound} {value}{suffix}"
    return f"Invalid '{field}': {error.message}{suffix}"
