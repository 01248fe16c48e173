"""
Contract registry mode tests.
"""

from api.contracts import validate_payload
from api.contracts.registry import (
    Contract,
    SchemaMode,
    get_contract,
    list_contracts,
    register_contract,
    schema_of,
    set_contract_mode,
    set_global_mode,
)
from api.contracts.schemas.fields import text


def _probe(name="probe.create"):
    return Contract(name=name, schema=schema_of(text("title", required=True)), mode=SchemaMode.WARN)


def test_register_contract_forces_strict_when_listed(monkeypatch, contract_registry):
    """Contracts named in CONTRACT_STRICT_CONTRACTS reject undeclared keys."""
    monkeypatch.setenv("CONTRACT_STRICT_CONTRACTS", "probe.create, probe.other")

    contract = register_contract(_probe())

    assert contract_registry["probe.create"] is contract
    assert contract.mode == SchemaMode.STRICT


def test_default_mode_from_environment(monkeypatch):
    monkeypatch.setenv("CONTRACT_MODE", "STRICT")
    contract = Contract(name="probe.create", schema=schema_of(text("title")))
    assert contract.mode == SchemaMode.STRICT

    monkeypatch.setenv("CONTRACT_MODE", "anything-else")
    contract = Contract(name="probe.create", schema=schema_of(text("title")))
    assert contract.mode == SchemaMode.WARN


def test_set_contract_mode_applies_to_one_contract(contract_registry):
    set_contract_mode("vote.cast", SchemaMode.STRICT)

    strict = validate_payload({"vote": "FOR", "weight": 2}, get_contract("vote.cast"))
    relaxed = validate_payload({"meetingId": "m1", "weight": 2}, get_contract("session.join"))

    assert [v.rule for v in strict.violations] == ["unknown_field"]
    assert relaxed.ok


def test_set_global_mode(contract_registry):
    set_global_mode(SchemaMode.STRICT)
    assert all(c.mode == SchemaMode.STRICT for c in contract_registry.values())


def test_reregistration_replaces(contract_registry):
    first = register_contract(_probe())
    second = register_contract(_probe())
    assert get_contract("probe.create") is second is not first


def test_list_contracts_by_entity():
    names = list_contracts("session")
    assert names == [
        "session.cast_vote",
        "session.join",
        "session.leave",
        "session.update_attendance",
        "session.update_status",
    ]
    assert list_contracts() == sorted(list_contracts())
