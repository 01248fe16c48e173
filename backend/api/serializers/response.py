"""
Response envelope helpers.

Provides standardized success and error response builders, and
to_jsonable() for normalized contract values (datetimes and enum members
are not JSON types).
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from flask import g


def to_jsonable(value: Any) -> Any:
    """
    Convert a normalized value to JSON-safe primitives.

    - datetime/date -> ISO-8601 string
    - Enum member -> its wire value
    - dict/list/tuple -> converted recursively
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def success_envelope(
    data: Any,
    meta: Optional[Dict[str, Any]] = None,
    warnings: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Build a standardized success response envelope.

    Args:
        data: Response data (converted with to_jsonable)
        meta: Optional metadata dict
        warnings: Optional list of warning messages

    Returns:
        Response dict with standard structure:
        {
            "data": ...,
            "meta": {...},
            "warnings": [...]  # if any
        }
    """
    response = {"data": to_jsonable(data)}

    meta = dict(meta) if meta else {}

    # Always include request ID if available
    if hasattr(g, 'request_id'):
        meta['requestId'] = g.request_id

    response['meta'] = meta

    if warnings:
        response['warnings'] = warnings

    return response


def error_envelope(
    code: str,
    message: str,
    field: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    hint: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a standardized error response envelope.

    Args:
        code: Error code (e.g., "VALIDATION_FAILED")
        message: Human-readable error message
        field: Optional field that caused the error
        details: Optional additional details
        hint: Optional hint for fixing the error

    Returns:
        Error response dict:
        {
            "error": {
                "code": "...",
                "message": "...",
                "requestId": "...",
                ...
            }
        }
    """
    error = {
        "code": code,
        "message": message,
    }

    if hasattr(g, 'request_id'):
        error['requestId'] = g.request_id

    if field:
        error['field'] = field
    if details:
        error['details'] = details
    if hint:
        error['hint'] = hint

    return {"error": error}
