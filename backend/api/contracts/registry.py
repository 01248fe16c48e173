"""
Contract Registry - Single source of truth for request contracts.

Each inbound operation (create, update, status change, list query, tag or
membership mutation) has one Contract:
- ContractSchema: the ordered field specs plus cross-field checks
- SchemaMode: what happens to undeclared input keys
- version: bumped when the accepted shape changes

Update contracts are derived from create contracts with partial(), so the
two never drift apart.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Any, Iterable, Tuple, Type

from .rules import CrossFieldCheck, Rule


logger = logging.getLogger('api.contracts')


class SchemaMode(Enum):
    """Undeclared-field policy."""
    WARN = "warn"      # Drop undeclared keys, log at DEBUG (default)
    STRICT = "strict"  # Reject undeclared keys with an unknown_field violation


class FieldKind(Enum):
    """Primitive kinds a field value can take."""
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    IDENTIFIER = "identifier"
    ENUM = "enum"
    OBJECT = "object"
    LIST = "list"
    NESTED = "nested"


def _get_default_mode() -> SchemaMode:
    """Get schema mode from environment."""
    mode = os.environ.get('CONTRACT_MODE', 'warn').lower()
    return SchemaMode.STRICT if mode == 'strict' else SchemaMode.WARN


def _get_strict_contracts() -> List[str]:
    """Contracts forced to STRICT regardless of CONTRACT_MODE."""
    raw = os.environ.get("CONTRACT_STRICT_CONTRACTS", "")
    return [c.strip() for c in raw.split(",") if c.strip()]


@dataclass(frozen=True)
class FieldSpec:
    """Specification for a single field."""
    name: str
    kind: FieldKind
    required: bool = False
    nullable: bool = False               # optional null forwarded as None
    rules: Tuple[Rule, ...] = ()
    enum: Optional[Type[Enum]] = None    # ENUM fields
    item: Optional['FieldSpec'] = None   # LIST element spec
    schema: Optional['ContractSchema'] = None  # NESTED shape
    coerce: bool = False                 # accept numeric/boolean text
    description: str = ""

    def __post_init__(self):
        # Accept kind names ("text", "integer") for terse declarations
        if isinstance(self.kind, str):
            object.__setattr__(self, 'kind', FieldKind(self.kind))
        if self.kind is FieldKind.ENUM and self.enum is None:
            raise ValueError(f"ENUM field '{self.name}' needs an enum class")
        if self.kind is FieldKind.LIST and self.item is None:
            raise ValueError(f"LIST field '{self.name}' needs an item spec")
        if self.kind is FieldKind.NESTED and self.schema is None:
            raise ValueError(f"NESTED field '{self.name}' needs a schema")

    def describe(self) -> Dict[str, Any]:
        """JSON-safe description for contract introspection."""
        out = {
            "name": self.name,
            "kind": self.kind.value,
            "required": self.required,
            "nullable": self.nullable,
            "coerce": self.coerce,
            "rules": [r.describe() for r in self.rules],
        }
        if self.enum is not None:
            out["allowed"] = [m.value for m in self.enum]
        if self.item is not None:
            out["item"] = self.item.describe()
        if self.schema is not None:
            out["fields"] = [f.describe() for f in self.schema.fields.values()]
        if self.description:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class ContractSchema:
    """Ordered field specs plus the cross-field checks run after them."""
    fields: Dict[str, FieldSpec]
    checks: Tuple[CrossFieldCheck, ...] = ()

    def get_field(self, name: str) -> Optional[FieldSpec]:
        return self.fields.get(name)

    def get_required_fields(self) -> List[str]:
        """Get list of required field names."""
        return [name for name, spec in self.fields.items() if spec.required]


def schema_of(*specs: FieldSpec, checks: Iterable[CrossFieldCheck] = ()) -> ContractSchema:
    """Build a ContractSchema from specs in declaration order."""
    fields = {}
    for spec in specs:
        if spec.name in fields:
            raise ValueError(f"Duplicate field '{spec.name}'")
        fields[spec.name] = spec
    return ContractSchema(fields=fields, checks=tuple(checks))


@dataclass
class Contract:
    """Complete contract for one inbound operation."""
    name: str                             # e.g., "meeting.create"
    schema: ContractSchema
    version: str = "v1"
    description: str = ""
    mode: SchemaMode = field(default_factory=_get_default_mode)

    @property
    def entity(self) -> str:
        return self.name.split('.', 1)[0]

    @property
    def operation(self) -> str:
        return self.name.split('.', 1)[-1]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "entity": self.entity,
            "operation": self.operation,
            "version": self.version,
            "mode": self.mode.value,
            "description": self.description,
            "fields": [spec.describe() for spec in self.schema.fields.values()],
            "checks": [c.describe() for c in self.schema.checks],
        }


def partial(
    source: Contract,
    name: str,
    *,
    omit: Iterable[str] = (),
    extra: Iterable[FieldSpec] = (),
    nullable: Iterable[str] = (),
    description: str = "",
) -> Contract:
    """
    Derive an update contract: every field of `source`, none required.

    Args:
        source: The create contract to derive from (never mutated)
        name: Name of the derived contract
        omit: Source fields the update does not accept
        extra: Update-only fields, appended after the source fields
        nullable: Fields that accept null to clear a stored value
        description: Description of the derived contract

    Cross-field checks survive only when they set keep_on_partial: a
    presence check such as AtLeastOneOf would make the empty update fail.
    """
    omit = set(omit)
    nullable = set(nullable)

    specs = []
    for field_name, spec in source.schema.fields.items():
        if field_name in omit:
            continue
        specs.append(replace(
            spec,
            required=False,
            nullable=spec.nullable or field_name in nullable,
        ))
    for spec in extra:
        specs.append(replace(spec, nullable=spec.nullable or spec.name in nullable))

    unknown = nullable - {s.name for s in specs}
    if unknown:
        raise ValueError(f"nullable names unknown fields: {sorted(unknown)}")

    checks = [c for c in source.schema.checks if c.keep_on_partial]
    return Contract(
        name=name,
        schema=schema_of(*specs, checks=checks),
        version=source.version,
        description=description or f"Partial update derived from {source.name}",
    )


# Global registry instance
CONTRACTS: Dict[str, Contract] = {}


def register_contract(contract: Contract) -> Contract:
    """
    Register a contract.

    Re-registration replaces the previous entry (tests, hot reload).
    Contracts named in CONTRACT_STRICT_CONTRACTS are forced to STRICT.

    Returns:
        The registered contract, so modules can register inline
    """
    if contract.name in CONTRACTS:
        logger.debug(f"Re-registering contract '{contract.name}'")
    if contract.name in _get_strict_contracts():
        contract.mode = SchemaMode.STRICT
    CONTRACTS[contract.name] = contract
    return contract


def get_contract(name: str) -> Optional[Contract]:
    """
    Get contract by name.

    Returns:
        Contract if found, None otherwise
    """
    return CONTRACTS.get(name)


def list_contracts(entity: Optional[str] = None) -> List[str]:
    """Get registered contract names, optionally for one entity."""
    names = sorted(CONTRACTS.keys())
    if entity:
        names = [n for n in names if CONTRACTS[n].entity == entity]
    return names


def set_contract_mode(name: str, mode: SchemaMode) -> None:
    """
    Set enforcement mode for a specific contract.

    Useful for gradual rollout (e.g., enable STRICT for one contract at a time).
    """
    contract = get_contract(name)
    if contract:
        contract.mode = mode


def set_global_mode(mode: SchemaMode) -> None:
    """Set enforcement mode for all registered contracts."""
    for contract in CONTRACTS.values():
        contract.mode = mode
