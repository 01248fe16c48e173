"""
API package - request contract enforcement layer.

This package provides:
- Contract registry for inbound request payloads
- Value normalization and field rules
- The validation engine (all violations in one pass)
- @api_contract decorator for route enforcement
- Global middleware (request_id, error_envelope, request_logging)
"""

from .contracts import api_contract, get_contract, SchemaMode

__all__ = ['api_contract', 'get_contract', 'SchemaMode']
