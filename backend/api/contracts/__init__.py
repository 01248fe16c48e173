"""
Contract enforcement package.

Provides the request contract registry, the validation engine, the
update-contract derivation and the @api_contract decorator.
"""

from .registry import (
    SchemaMode,
    FieldKind,
    FieldSpec,
    ContractSchema,
    Contract,
    schema_of,
    partial,
    register_contract,
    get_contract,
    list_contracts,
    CONTRACTS,
)
from .validate import (
    Violation,
    ValidationResult,
    ValidationFailed,
    validate_payload,
    enforce,
)
from .wrapper import api_contract, validate_event

__all__ = [
    'SchemaMode',
    'FieldKind',
    'FieldSpec',
    'ContractSchema',
    'Contract',
    'schema_of',
    'partial',
    'register_contract',
    'get_contract',
    'list_contracts',
    'CONTRACTS',
    'Violation',
    'ValidationResult',
    'ValidationFailed',
    'validate_payload',
    'enforce',
    'api_contract',
    'validate_event',
]
