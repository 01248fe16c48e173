"""
Properties that hold for every registered contract.

Payloads are generated from each contract's own field specs, so a new
contract is covered the moment it is registered.
"""

import pytest

from api.contracts import CONTRACTS, FieldKind, enforce, get_contract, list_contracts, validate_payload
from api.contracts.rules import AtLeastOneOf, Email, Max, Min, MinLength, Url
from api.serializers import to_jsonable
from constants import enum_values


SAMPLE_DATETIME = "2025-01-15T10:00:00Z"

DERIVED_UPDATES = [
    "company.update",
    "member.update",
    "agenda_item.update",
    "meeting.update",
    "action_item.update",
    "resolution.update",
    "document.update",
    "financial_report.update",
    "okr_period.update",
    "objective.update",
    "key_result.update",
    "org_role.update",
    "custom_role.update",
]


def sample_value(spec):
    """A valid wire value for one field spec."""
    kind = spec.kind
    if kind is FieldKind.TEXT:
        if any(isinstance(r, Email) for r in spec.rules):
            return "secretary@example.com"
        if any(isinstance(r, Url) for r in spec.rules):
            return "https://example.com/x"
        min_length = max([r.limit for r in spec.rules if isinstance(r, MinLength)], default=1)
        return "x" * max(min_length, 4)
    if kind is FieldKind.IDENTIFIER:
        return "id_123"
    if kind in (FieldKind.INTEGER, FieldKind.DECIMAL):
        value = 1
        for rule in spec.rules:
            if isinstance(rule, Min):
                value = max(value, int(rule.bound))
            if isinstance(rule, Max):
                value = min(value, int(rule.bound))
        return value
    if kind is FieldKind.BOOLEAN:
        return True
    if kind is FieldKind.DATETIME:
        return SAMPLE_DATETIME
    if kind is FieldKind.ENUM:
        return enum_values(spec.enum)[0]
    if kind is FieldKind.OBJECT:
        return {}
    if kind is FieldKind.LIST:
        return [sample_value(spec.item)]
    if kind is FieldKind.NESTED:
        return required_payload(spec.schema)
    raise AssertionError(f"no sample for {kind}")


def required_payload(schema):
    return {name: sample_value(spec) for name, spec in schema.fields.items() if spec.required}


def full_payload(schema):
    return {name: sample_value(spec) for name, spec in schema.fields.items()}


def _has_presence_check(contract):
    return any(isinstance(c, AtLeastOneOf) for c in contract.schema.checks)


ALL_NAMES = list_contracts()
PLAIN_NAMES = [n for n in ALL_NAMES if not _has_presence_check(CONTRACTS[n])]
REQUIRED_FIELD_CASES = [
    (name, field_name)
    for name in ALL_NAMES
    for field_name in CONTRACTS[name].schema.get_required_fields()
]
ENUM_FIELD_CASES = [
    (name, field_name)
    for name in ALL_NAMES
    for field_name, spec in CONTRACTS[name].schema.fields.items()
    if spec.kind is FieldKind.ENUM
]


def test_catalog_is_loaded():
    for name in ("meeting.create", "vote.cast", "session.cast_vote", "financial_report.create",
                 "document.add_tags", "role_permissions.update", "monthly_financial.upsert"):
        assert get_contract(name) is not None


@pytest.mark.parametrize("name", PLAIN_NAMES)
def test_required_fields_alone_succeed(name):
    contract = get_contract(name)
    payload = required_payload(contract.schema)

    result = validate_payload(payload, contract)

    assert result.ok, result.violations
    assert set(result.value) == set(payload)


@pytest.mark.parametrize("name", ALL_NAMES)
def test_all_fields_succeed(name):
    contract = get_contract(name)
    result = validate_payload(full_payload(contract.schema), contract)
    assert result.ok, result.violations


@pytest.mark.parametrize("name,missing", REQUIRED_FIELD_CASES)
def test_missing_required_field_named(name, missing):
    contract = get_contract(name)
    payload = full_payload(contract.schema)
    del payload[missing]

    result = validate_payload(payload, contract)

    assert [(v.field, v.rule) for v in result.violations] == [(missing, "required")]


@pytest.mark.parametrize("name,field_name", ENUM_FIELD_CASES)
def test_enum_outside_catalog_rejected(name, field_name):
    contract = get_contract(name)
    payload = full_payload(contract.schema)
    payload[field_name] = "NOT_A_MEMBER"

    result = validate_payload(payload, contract)

    assert len(result.violations) == 1
    violation = result.violations[0]
    assert violation.field == field_name
    assert violation.rule == "invalid_enum_value"
    assert violation.allowed == enum_values(contract.schema.fields[field_name].enum)


@pytest.mark.parametrize("name,field_name", ENUM_FIELD_CASES)
def test_every_enum_member_accepted(name, field_name):
    contract = get_contract(name)
    spec = contract.schema.fields[field_name]
    payload = full_payload(contract.schema)
    for member in spec.enum:
        payload[field_name] = member.value
        assert enforce(payload, contract)[field_name] is member


@pytest.mark.parametrize("name", DERIVED_UPDATES)
def test_empty_update_succeeds(name):
    result = validate_payload({}, get_contract(name))
    assert result.ok
    assert result.value == {}


@pytest.mark.parametrize("name", ALL_NAMES)
def test_normalized_value_validates_to_itself(name):
    contract = get_contract(name)
    first = enforce(full_payload(contract.schema), contract)
    assert enforce(to_jsonable(first), contract) == first


def test_meeting_status_shared_by_rest_and_session():
    rest = get_contract("meeting.update").schema.fields["status"].enum
    live = get_contract("session.update_status").schema.fields["status"].enum
    assert rest is live
    assert "PAUSED" in enum_values(live)


def test_vote_choice_shared_by_rest_and_session():
    assert (get_contract("vote.cast").schema.fields["vote"].enum
            is get_contract("session.cast_vote").schema.fields["vote"].enum)
