"""
Value normalization - adapts raw JSON/query values to typed values.

Handles:
- Whitelisting (undeclared keys split off before validation)
- Per-kind type checks (bool is never an int, 5.0 is an int)
- Opt-in coercion ("60" -> 60, "true" -> True) for fields that set coerce
- ISO-8601 parsing (DATETIME -> datetime)
- Enum resolution (wire value -> catalog member)

Container kinds (LIST, NESTED) are walked by the validation engine, which
calls coerce_value() for every scalar it reaches.
"""

import logging
import re
from typing import Any, Dict, List, Tuple

from utils.normalize import (
    ValidationError,
    to_bool,
    to_datetime,
    to_enum,
    to_float,
    to_int,
)

from .registry import ContractSchema, FieldKind, FieldSpec


logger = logging.getLogger('api.contracts.normalize')

# UUIDs, cuids and auth-provider ids ("user_2ab...") all fit.
IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_-]{1,128}")

_NUMERIC_KINDS = (FieldKind.INTEGER, FieldKind.DECIMAL)


def split_declared(raw: Dict[str, Any], schema: ContractSchema) -> Tuple[Dict[str, Any], List[str]]:
    """
    Split a payload into declared keys and undeclared key names.

    Returns:
        (declared, unknown) where declared keeps schema order and unknown
        keeps payload order. The input mapping is not mutated.
    """
    declared = {name: raw[name] for name in schema.fields if name in raw}
    unknown = [key for key in raw if key not in schema.fields]
    for key in unknown:
        _log_normalization(key, "dropped", "undeclared")
    return declared, unknown


def is_absent(value: Any, spec: FieldSpec) -> bool:
    """
    Absent means not supplied for presence purposes.

    An empty string counts as absent only for coerced fields: a query string
    `?fiscalYear=` carries no value, whereas a JSON body `"title": ""` is a
    supplied (and empty) title.
    """
    if value is None:
        return True
    return spec.coerce and isinstance(value, str) and value.strip() == ""


def coerce_value(value: Any, spec: FieldSpec) -> Any:
    """
    Type-check and normalize a non-null scalar value against its spec.

    Raises:
        ValidationError: When the value does not fit the field kind
    """
    kind = spec.kind

    if kind is FieldKind.TEXT:
        return _expect(value, str, spec)

    if kind is FieldKind.IDENTIFIER:
        text = _expect(value, str, spec)
        if IDENTIFIER_RE.fullmatch(text) is None:
            raise ValidationError(
                f"Expected identifier, got: {value!r}",
                field=spec.name,
                received_value=value,
            )
        return text

    if kind in _NUMERIC_KINDS:
        if isinstance(value, str) and not spec.coerce:
            raise ValidationError(
                f"Expected number, got str: {value!r}",
                field=spec.name,
                received_value=value,
            )
        if not isinstance(value, (int, float, str)) or isinstance(value, bool):
            raise ValidationError(
                f"Expected number, got {type(value).__name__}: {value!r}",
                field=spec.name,
                received_value=value,
            )
        if kind is FieldKind.INTEGER:
            coerced = to_int(value, field=spec.name)
        else:
            coerced = to_float(value, field=spec.name)
            # keep ints as ints so 100 round-trips as 100, not 100.0
            if isinstance(value, int) or (isinstance(value, str) and coerced.is_integer() and '.' not in value):
                coerced = int(coerced)
        if coerced is not value and isinstance(value, str):
            _log_normalization(spec.name, coerced, "coerce")
        return coerced

    if kind is FieldKind.BOOLEAN:
        if isinstance(value, bool):
            return value
        if spec.coerce and isinstance(value, str):
            coerced = to_bool(value, field=spec.name)
            _log_normalization(spec.name, coerced, "coerce")
            return coerced
        raise ValidationError(
            f"Expected bool, got {type(value).__name__}: {value!r}",
            field=spec.name,
            received_value=value,
        )

    if kind is FieldKind.DATETIME:
        text = _expect(value, str, spec)
        parsed = to_datetime(text, field=spec.name) if text.strip() else None
        if parsed is None:
            raise ValidationError(
                f"Expected ISO datetime, got: {value!r}",
                field=spec.name,
                received_value=value,
            )
        return parsed

    if kind is FieldKind.ENUM:
        # Any failure here is reported by the engine as an enum miss
        member = to_enum(value, spec.enum, field=spec.name) if value != "" else None
        if member is None:
            raise ValidationError(
                f"Expected one of {[m.value for m in spec.enum]}, got: {value!r}",
                field=spec.name,
                received_value=value,
            )
        return member

    if kind is FieldKind.OBJECT:
        return dict(_expect(value, dict, spec))

    if kind is FieldKind.LIST:
        return _expect(value, list, spec)

    if kind is FieldKind.NESTED:
        return _expect(value, dict, spec)

    raise ValueError(f"Unhandled field kind: {kind}")


def _expect(value: Any, expected: type, spec: FieldSpec) -> Any:
    if isinstance(value, expected):
        return value
    raise ValidationError(
        f"Expected {_KIND_LABELS.get(expected, expected.__name__)}, "
        f"got {type(value).__name__}: {value!r}",
        field=spec.name,
        received_value=value,
    )


_KIND_LABELS = {
    str: "string",
    dict: "object",
    list: "array",
}


def _log_normalization(key: str, value: Any, reason: str) -> None:
    """Log value normalization for observability."""
    logger.debug(
        f"value_normalization: {key} -> {value} ({reason})"
    )
