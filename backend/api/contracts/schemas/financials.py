"""
Contract schemas for financial reporting endpoints.

Endpoints:
- POST /api/companies/:companyId/financial-reports              financial_report.create
- GET  /api/companies/:companyId/financial-reports              financial_report.list
- PUT  /api/companies/:companyId/financial-reports/:id          financial_report.update
- POST /api/companies/:companyId/financial-reports/:id/upload   financial_report.upload
- PUT  /api/companies/:companyId/monthly-financials/:year/:month  monthly_financial.upsert

A report carries structured `data`, an uploaded file (`storageKey`), or
both. Neither is required on its own, so the rule is a cross-field check
rather than a per-field one.
"""

from constants import MIN_FISCAL_YEAR, FinancialReportType, ReportStatus

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import AtLeastOneOf, Min, NotEmpty
from .fields import decimal, enum_field, integer, obj, text


# =============================================================================
# financial_report.*
# =============================================================================

FINANCIAL_REPORT_CREATE_CONTRACT = register_contract(Contract(
    name="financial_report.create",
    schema=schema_of(
        enum_field("type", FinancialReportType, required=True),
        integer("fiscalYear", required=True, rules=(Min(MIN_FISCAL_YEAR),)),
        text("period", required=True, rules=(NotEmpty(),), description='e.g. "Q1", "January", "Annual"'),
        obj("data", description="Structured financial data"),
        text("storageKey", rules=(NotEmpty(),), description="Uploaded PDF/Excel file"),
        checks=(AtLeastOneOf(fields=("data", "storageKey")),),
    ),
))

FINANCIAL_REPORT_UPDATE_CONTRACT = register_contract(partial(
    FINANCIAL_REPORT_CREATE_CONTRACT,
    "financial_report.update",
))

FINANCIAL_REPORT_LIST_CONTRACT = register_contract(Contract(
    name="financial_report.list",
    description="Query-string filters for the report list",
    schema=schema_of(
        enum_field("type", FinancialReportType),
        integer("fiscalYear", rules=(Min(MIN_FISCAL_YEAR),), coerce=True),
        text("period"),
        enum_field("status", ReportStatus),
    ),
))

FINANCIAL_REPORT_UPLOAD_CONTRACT = register_contract(Contract(
    name="financial_report.upload",
    description="Attach an uploaded file to an existing report",
    schema=schema_of(
        text("storageKey", required=True, rules=(NotEmpty(),)),
    ),
))


# =============================================================================
# monthly_financial.upsert
# =============================================================================

MONTHLY_FINANCIAL_UPSERT_CONTRACT = register_contract(Contract(
    name="monthly_financial.upsert",
    description="Revenue and cost for one month; year and month come from the path",
    schema=schema_of(
        decimal("revenue", required=True, rules=(Min(0),), coerce=True),
        decimal("cost", required=True, rules=(Min(0),), coerce=True),
        text("notes"),
    ),
))
