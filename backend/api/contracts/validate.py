"""
Contract validation engine.

validate_payload() checks a raw payload against a Contract and returns
either the normalized value or the complete list of violations:
- Required fields present
- Values fit their field kind (with opt-in coercion)
- Enum values are catalog members
- Per-field rules (length, bounds, formats, list size)
- List elements, each reported with its index
- Cross-field checks, in a second pass over the normalized value
- Undeclared keys dropped (WARN) or reported (STRICT)

Validation is all-or-nothing and never fail-fast: one pass reports every
problem so the caller can fix them together, and no normalized value is
produced while any violation remains.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from pydantic import BaseModel, ConfigDict

from utils.normalize import ValidationError

from .normalize import coerce_value, is_absent, split_declared
from .registry import Contract, ContractSchema, FieldKind, FieldSpec, SchemaMode, get_contract
from .rules import rule_name


logger = logging.getLogger('api.contracts.validate')

# Violation rule names produced by the engine itself (rules name their own)
REQUIRED = "required"
TYPE_MISMATCH = "type"
INVALID_ENUM_VALUE = "invalid_enum_value"
UNKNOWN_FIELD = "unknown_field"


class Violation(BaseModel):
    """A single failure of one field (or field combination) against one rule."""
    model_config = ConfigDict(frozen=True)

    field: str
    rule: str
    message: str
    index: Optional[int] = None
    allowed: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation: a value or violations, never both."""
    value: Optional[Dict[str, Any]]
    violations: Tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations


class ValidationFailed(Exception):
    """Raised by enforce() when a payload does not satisfy its contract."""

    def __init__(self, violations: List[Violation], contract: Optional[str] = None):
        self.violations = list(violations)
        self.contract = contract
        self.message = f"{len(self.violations)} validation error(s)"
        super().__init__(self.message)

    def __str__(self):
        return self.message

    @property
    def details(self) -> Dict[str, Any]:
        return {"violations": [v.to_dict() for v in self.violations]}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "message": self.message,
            "details": self.details,
        }


def validate_payload(raw: Any, contract: Contract) -> ValidationResult:
    """
    Validate a deserialized payload against a contract.

    Args:
        raw: Payload as decoded from JSON or a query string (not mutated)
        contract: The Contract to validate against

    Returns:
        ValidationResult with the normalized value, or with every violation
    """
    if not isinstance(raw, Mapping):
        violation = Violation(
            field="payload",
            rule=TYPE_MISMATCH,
            message=f"Expected a JSON object, got {type(raw).__name__}",
        )
        _log_failure(contract, [violation])
        return ValidationResult(value=None, violations=(violation,))

    value, violations = _validate_mapping(raw, contract.schema, contract.mode)

    if violations:
        _log_failure(contract, violations)
        return ValidationResult(value=None, violations=tuple(violations))
    return ValidationResult(value=value)


def enforce(raw: Any, contract: Union[Contract, str]) -> Dict[str, Any]:
    """
    Validate and return the normalized value.

    Raises:
        KeyError: If a contract name is not registered
        ValidationFailed: If the payload violates the contract
    """
    if isinstance(contract, str):
        resolved = get_contract(contract)
        if resolved is None:
            raise KeyError(f"No contract registered as '{contract}'")
        contract = resolved

    result = validate_payload(raw, contract)
    if not result.ok:
        raise ValidationFailed(list(result.violations), contract=contract.name)
    return result.value


def _validate_mapping(
    raw: Mapping,
    schema: ContractSchema,
    mode: SchemaMode,
    prefix: str = "",
    index: Optional[int] = None,
) -> Tuple[Dict[str, Any], List[Violation]]:
    """Field pass then cross-field pass over one mapping."""
    violations: List[Violation] = []
    value: Dict[str, Any] = {}
    failed: Set[str] = set()

    declared, unknown = split_declared(raw, schema)
    if unknown:
        if mode == SchemaMode.STRICT:
            for key in unknown:
                violations.append(Violation(
                    field=f"{prefix}{key}",
                    rule=UNKNOWN_FIELD,
                    message=f"Field '{prefix}{key}' is not allowed",
                    index=index,
                ))
        else:
            logger.debug(f"Dropped undeclared field(s): {', '.join(prefix + k for k in unknown)}")

    for name, spec in schema.fields.items():
        path = f"{prefix}{name}"
        supplied = name in declared
        raw_value = declared.get(name)

        if not supplied or is_absent(raw_value, spec):
            if spec.required:
                failed.add(name)
                violations.append(Violation(
                    field=path,
                    rule=REQUIRED,
                    message=f"Field '{path}' is required",
                    index=index,
                ))
            elif supplied and raw_value is None and spec.nullable:
                value[name] = None
            continue

        normalized, field_violations = _validate_field(raw_value, spec, path, index, mode)
        if field_violations:
            failed.add(name)
            violations.extend(field_violations)
        else:
            value[name] = normalized

    for check in schema.checks:
        if failed.intersection(check.involved):
            continue
        message = check.check(value)
        if message:
            violations.append(Violation(
                field=f"{prefix}{check.label}",
                rule=check.name,
                message=message,
                index=index,
            ))

    return value, violations


def _validate_field(
    raw_value: Any,
    spec: FieldSpec,
    path: str,
    index: Optional[int],
    mode: SchemaMode,
) -> Tuple[Any, List[Violation]]:
    """Type-check, normalize and apply rules to one present value."""
    try:
        normalized = coerce_value(raw_value, spec)
    except ValidationError as e:
        if spec.kind is FieldKind.ENUM:
            allowed = [m.value for m in spec.enum]
            return None, [Violation(
                field=path,
                rule=INVALID_ENUM_VALUE,
                message=f"Field '{path}' must be one of {allowed}, got {raw_value!r}",
                index=index,
                allowed=allowed,
            )]
        return None, [Violation(
            field=path,
            rule=TYPE_MISMATCH,
            message=f"Field '{path}': {e}",
            index=index,
        )]

    violations = [
        Violation(
            field=path,
            rule=rule_name(rule),
            message=f"Field '{path}' {message}",
            index=index,
        )
        for rule, message in ((r, r.check(normalized)) for r in spec.rules)
        if message
    ]

    if spec.kind is FieldKind.LIST:
        items = []
        for i, element in enumerate(normalized):
            if element is None:
                violations.append(Violation(
                    field=path,
                    rule=REQUIRED,
                    message=f"Field '{path}' item {i} must not be null",
                    index=i,
                ))
                continue
            item_value, item_violations = _validate_field(element, spec.item, path, i, mode)
            violations.extend(item_violations)
            items.append(item_value)
        normalized = items

    elif spec.kind is FieldKind.NESTED:
        normalized, nested_violations = _validate_mapping(
            normalized, spec.schema, mode, prefix=f"{path}.", index=index
        )
        violations.extend(nested_violations)

    if violations:
        return None, violations
    return normalized, []


def _log_failure(contract: Contract, violations: List[Violation]) -> None:
    """Log a rejected payload for observability."""
    logger.info(
        f"Validation failed: contract={contract.name} violations={len(violations)}",
        extra={
            "event": "validation_failed",
            "contract": contract.name,
            "fields": sorted({v.field for v in violations}),
        }
    )
