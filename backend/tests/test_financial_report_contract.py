"""
Financial report contracts: a report needs structured data, an uploaded
file, or both.
"""

import pytest

from api.contracts import ValidationFailed, enforce, get_contract, validate_payload
from constants import FinancialReportType


BASE = {"type": "PROFIT_LOSS", "fiscalYear": 2024, "period": "Q1"}


def test_neither_data_nor_file_fails():
    result = validate_payload(BASE, get_contract("financial_report.create"))

    assert [(v.field, v.rule) for v in result.violations] == [("data|storageKey", "at_least_one_of")]
    assert result.violations[0].message == "Either data or storageKey must be provided"


@pytest.mark.parametrize("extra", [{"data": {}}, {"storageKey": "x"}, {"data": {"revenue": 1}, "storageKey": "x"}])
def test_either_one_succeeds(extra):
    value = enforce({**BASE, **extra}, "financial_report.create")
    assert value["type"] is FinancialReportType.PROFIT_LOSS
    for key in extra:
        assert value[key] == extra[key]


def test_null_data_counts_as_absent():
    result = validate_payload({**BASE, "data": None}, get_contract("financial_report.create"))
    assert [v.rule for v in result.violations] == ["at_least_one_of"]


def test_cross_field_violation_alongside_field_violations():
    with pytest.raises(ValidationFailed) as exc:
        enforce({"type": "P&L", "fiscalYear": 1850, "period": "Q1"}, "financial_report.create")

    assert [(v.field, v.rule) for v in exc.value.violations] == [
        ("type", "invalid_enum_value"),
        ("fiscalYear", "min"),
        ("data|storageKey", "at_least_one_of"),
    ]


def test_data_must_be_an_object():
    result = validate_payload({**BASE, "data": "revenue=1"}, get_contract("financial_report.create"))
    assert [(v.field, v.rule) for v in result.violations] == [("data", "type")]


def test_update_does_not_require_data_or_file():
    result = validate_payload({"period": "Q2"}, get_contract("financial_report.update"))
    assert result.ok
    assert result.value == {"period": "Q2"}


def test_list_query_coerces_year():
    value = enforce({"fiscalYear": "2024", "type": "CASH_FLOW"}, "financial_report.list")
    assert value == {"fiscalYear": 2024, "type": FinancialReportType.CASH_FLOW}


def test_monthly_figures_accept_form_text():
    value = enforce({"revenue": "12500.75", "cost": "8000"}, "monthly_financial.upsert")
    assert value == {"revenue": 12500.75, "cost": 8000}


def test_monthly_figures_not_negative():
    result = validate_payload({"revenue": -1, "cost": 0}, get_contract("monthly_financial.upsert"))
    assert [(v.field, v.rule) for v in result.violations] == [("revenue", "min")]


def test_empty_storage_key_is_not_a_file():
    result = validate_payload({**BASE, "storageKey": ""}, get_contract("financial_report.create"))
    assert [(v.field, v.rule) for v in result.violations] == [("storageKey", "not_empty")]


def test_empty_data_object_still_counts():
    value = enforce({**BASE, "data": {}, "storageKey": "reports/q1.pdf"}, "financial_report.create")
    assert value["data"] == {}
