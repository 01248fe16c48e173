"""
Response serializers and envelope helpers.
"""

from .response import success_envelope, error_envelope, to_jsonable

__all__ = ['success_envelope', 'error_envelope', 'to_jsonable']
