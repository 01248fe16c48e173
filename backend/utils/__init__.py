"""
Utility modules for the backend.
"""
from .normalize import (
    ValidationError,
    to_int,
    to_float,
    to_bool,
    to_datetime,
    to_str,
    to_enum,
)

__all__ = [
    'ValidationError',
    'to_int',
    'to_float',
    'to_bool',
    'to_datetime',
    'to_str',
    'to_enum',
]
