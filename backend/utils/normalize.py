"""
Input Normalization Utilities
=============================

Single source of truth for single-value input coercion.
The contract engine (api/contracts/normalize.py) calls these helpers when a
field opts into coercion; they can also be used directly on a query string
value.

Usage:
    from utils.normalize import to_int, to_datetime, ValidationError

    try:
        year = to_int(request.args.get("year"), field="year")
    except ValidationError as e:
        return {"error": str(e)}, 400
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional, Type, TypeVar

from dateutil.parser import isoparse

E = TypeVar('E', bound=Enum)

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


class ValidationError(ValueError):
    """Raised when input cannot be normalized to expected type."""

    def __init__(self, message: str, field: str = None, received_value=None):
        super().__init__(message)
        self.field = field
        self.received_value = received_value


def to_int(
    value,
    *,
    default: Optional[int] = None,
    field: str = None
) -> Optional[int]:
    """
    Convert a number or numeric string to int.

    Floats are accepted only when they carry an integral value (5.0 -> 5).
    Booleans are rejected even though Python treats them as ints.

    Raises:
        ValidationError: If value cannot be converted to int
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(
            f"Expected int, got bool: {value!r}",
            field=field,
            received_value=value
        )
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValidationError(
            f"Expected int, got float: {value!r}",
            field=field,
            received_value=value
        )
    try:
        return int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"Expected int, got {type(value).__name__}: {value!r}",
            field=field,
            received_value=value
        )


def to_float(
    value,
    *,
    default: Optional[float] = None,
    field: str = None
) -> Optional[float]:
    """
    Convert a number or numeric string to float.

    NaN and infinities are rejected.

    Raises:
        ValidationError: If value cannot be converted to a finite float
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(
            f"Expected float, got bool: {value!r}",
            field=field,
            received_value=value
        )
    try:
        result = float(value)
    except (ValueError, TypeError, OverflowError):
        raise ValidationError(
            f"Expected float, got {type(value).__name__}: {value!r}",
            field=field,
            received_value=value
        )
    if not math.isfinite(result):
        raise ValidationError(
            f"Expected finite float, got: {value!r}",
            field=field,
            received_value=value
        )
    return result


def to_bool(
    value,
    *,
    default: bool = False,
    field: str = None
) -> bool:
    """
    Convert string to bool.

    Accepts (case-insensitive):
        True: 'true', '1', 'yes', 'on'
        False: 'false', '0', 'no', 'off'

    Raises:
        ValidationError: If value is not a recognized boolean string
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    lower = str(value).strip().lower()
    if lower in _TRUE_STRINGS:
        return True
    if lower in _FALSE_STRINGS:
        return False
    raise ValidationError(
        f"Expected bool, got: {value!r}",
        field=field,
        received_value=value
    )


def to_datetime(
    value,
    *,
    default: Optional[datetime] = None,
    field: str = None
) -> Optional[datetime]:
    """
    Convert an ISO-8601 string to a datetime.

    Accepts formats:
        - 2024-01-15
        - 2024-01-15T10:30:00
        - 2024-01-15T10:30:00Z / +08:00 offsets
        - Already a datetime object (passthrough)

    Raises:
        ValidationError: If value is not an ISO-8601 date or date-time
    """
    if value is None or value == "":
        return default
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValidationError(
            f"Expected ISO datetime, got {type(value).__name__}: {value!r}",
            field=field,
            received_value=value
        )
    try:
        return isoparse(value.strip())
    except (ValueError, OverflowError):
        raise ValidationError(
            f"Expected ISO datetime, got: {value!r}",
            field=field,
            received_value=value
        )


def to_str(
    value,
    *,
    default: Optional[str] = None,
    strip: bool = True,
    field: str = None
) -> Optional[str]:
    """
    Normalize string input, optionally stripping whitespace.

    Whitespace-only input is treated as empty.
    """
    if value is None or value == "":
        return default
    result = str(value)
    if strip:
        result = result.strip()
    if result == "":
        return default
    return result


def to_enum(
    value,
    enum_class: Type[E],
    *,
    default: Optional[E] = None,
    field: str = None
) -> Optional[E]:
    """
    Convert a wire value to an enum member.

    Matching is exact on the member value: 'for' is not 'FOR'. Clients send
    the canonical uppercase tokens and a near miss is reported, not guessed.

    Raises:
        ValidationError: If value doesn't match any enum member
    """
    if value is None or value == "":
        return default
    if isinstance(value, enum_class):
        return value

    for member in enum_class:
        if member.value == value:
            return member

    valid_values = [m.value for m in enum_class]
    raise ValidationError(
        f"Expected one of {valid_values}, got: {value!r}",
        field=field,
        received_value=value
    )
