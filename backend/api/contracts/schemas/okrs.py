"""
Contract schemas for OKR endpoints.

Endpoints:
- POST /api/companies/:companyId/okr-periods                 okr_period.create
- PUT  /api/companies/:companyId/okr-periods/:id             okr_period.update
- POST /api/companies/:companyId/okr-periods/:id/objectives  objective.create
- PUT  /api/companies/:companyId/objectives/:id              objective.update
- POST /api/companies/:companyId/objectives/:id/key-results  key_result.create
- PUT  /api/companies/:companyId/key-results/:id             key_result.update
"""

from constants import MetricType

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import DateOrder, MaxLength, Min, NotEmpty
from .fields import boolean, datetime_field, decimal, enum_field, integer, text


# =============================================================================
# okr_period.*
# =============================================================================

OKR_PERIOD_CREATE_CONTRACT = register_contract(Contract(
    name="okr_period.create",
    schema=schema_of(
        text("name", required=True, rules=(NotEmpty(), MaxLength(255))),
        datetime_field("startDate", required=True),
        datetime_field("endDate", required=True),
        checks=(DateOrder(start="startDate", end="endDate"),),
    ),
))

OKR_PERIOD_UPDATE_CONTRACT = register_contract(partial(OKR_PERIOD_CREATE_CONTRACT, "okr_period.update"))


# =============================================================================
# objective.*
# =============================================================================

OBJECTIVE_CREATE_CONTRACT = register_contract(Contract(
    name="objective.create",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(), MaxLength(500))),
        integer("order", rules=(Min(0),), description="Display order"),
    ),
))

OBJECTIVE_UPDATE_CONTRACT = register_contract(partial(OBJECTIVE_CREATE_CONTRACT, "objective.update"))


# =============================================================================
# key_result.*
# =============================================================================

KEY_RESULT_CREATE_CONTRACT = register_contract(Contract(
    name="key_result.create",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(), MaxLength(1000))),
        enum_field("metricType", MetricType, description="Defaults to NUMERIC when stored"),
        decimal("startValue", required=True, description="Baseline"),
        decimal("targetValue", required=True, description="Goal"),
        decimal("currentValue"),
        boolean("inverse", description="Lower is better"),
        text("comment", rules=(MaxLength(2000),)),
        integer("order", rules=(Min(0),), description="Display order"),
    ),
))

KEY_RESULT_UPDATE_CONTRACT = register_contract(partial(KEY_RESULT_CREATE_CONTRACT, "key_result.update"))
