"""
Tests for update-contract derivation (registry.partial).
"""

import pytest

from api.contracts import Contract, FieldKind, SchemaMode, get_contract, partial, schema_of, validate_payload
from api.contracts.rules import AtLeastOneOf, DateOrder, NotEmpty
from api.contracts.schemas.fields import datetime_field, decimal, text


def _source():
    return Contract(
        name="thing.create",
        version="v2",
        mode=SchemaMode.WARN,
        schema=schema_of(
            text("title", required=True, rules=(NotEmpty(),)),
            text("note"),
            datetime_field("startDate"),
            datetime_field("endDate"),
            checks=(
                DateOrder(start="startDate", end="endDate"),
                AtLeastOneOf(fields=("note", "title")),
            ),
        ),
    )


def test_every_field_optional():
    derived = partial(_source(), "thing.update")
    assert derived.schema.get_required_fields() == []
    assert list(derived.schema.fields) == ["title", "note", "startDate", "endDate"]


def test_source_untouched():
    source = _source()
    partial(source, "thing.update", omit=("note",))
    assert source.schema.fields["title"].required is True
    assert "note" in source.schema.fields
    assert len(source.schema.checks) == 2


def test_rules_and_version_carried_over():
    derived = partial(_source(), "thing.update")
    assert derived.version == "v2"
    result = validate_payload({"title": "  "}, derived)
    assert [(v.field, v.rule) for v in result.violations] == [("title", "not_empty")]


def test_empty_update_succeeds():
    result = validate_payload({}, partial(_source(), "thing.update"))
    assert result.ok
    assert result.value == {}


def test_only_ordering_checks_survive():
    derived = partial(_source(), "thing.update")
    assert [c.name for c in derived.schema.checks] == ["date_order"]

    result = validate_payload(
        {"startDate": "2025-02-01T00:00:00Z", "endDate": "2025-01-01T00:00:00Z"},
        derived,
    )
    assert [(v.field, v.rule) for v in result.violations] == [("endDate", "date_order")]


def test_omit_extra_and_nullable():
    derived = partial(
        _source(),
        "thing.update",
        omit=("note",),
        extra=(decimal("positionX"),),
        nullable=("title",),
    )
    assert list(derived.schema.fields) == ["title", "startDate", "endDate", "positionX"]
    assert derived.schema.fields["positionX"].kind is FieldKind.DECIMAL
    assert validate_payload({"title": None}, derived).value == {"title": None}


def test_nullable_must_name_a_field():
    with pytest.raises(ValueError):
        partial(_source(), "thing.update", nullable=("ghost",))


@pytest.mark.parametrize("create_name,update_name,omitted", [
    ("meeting.create", "meeting.update", {"attendeeIds", "agendaItems"}),
    ("action_item.create", "action_item.update", {"meetingId", "agendaItemId"}),
    ("member.add", "member.update", {"userId"}),
    ("document.create", "document.update", {"meetingId"}),
])
def test_catalog_updates_omit_fixed_fields(create_name, update_name, omitted):
    create = get_contract(create_name)
    update = get_contract(update_name)
    assert set(create.schema.fields) - set(update.schema.fields) == omitted
