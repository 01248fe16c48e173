"""
Contract schemas for /resolutions endpoints.

Endpoints:
- POST /api/companies/:companyId/resolutions       resolution.create
- GET  /api/companies/:companyId/resolutions       resolution.list
- PUT  /api/companies/:companyId/resolutions/:id   resolution.update
"""

from constants import MIN_FISCAL_YEAR, ResolutionCategory, ResolutionStatus

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import Min, NotEmpty
from .fields import datetime_field, enum_field, identifier, integer, text


RESOLUTION_CREATE_CONTRACT = register_contract(Contract(
    name="resolution.create",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(),)),
        text("content", required=True, rules=(NotEmpty(),)),
        enum_field("category", ResolutionCategory, required=True),
        enum_field("status", ResolutionStatus),
        identifier("decisionId", description="Decision the resolution records"),
        datetime_field("effectiveDate"),
    ),
))

RESOLUTION_UPDATE_CONTRACT = register_contract(partial(RESOLUTION_CREATE_CONTRACT, "resolution.update"))

RESOLUTION_LIST_CONTRACT = register_contract(Contract(
    name="resolution.list",
    description="Query-string filters for the resolution register",
    schema=schema_of(
        enum_field("status", ResolutionStatus),
        enum_field("category", ResolutionCategory),
        integer("year", rules=(Min(MIN_FISCAL_YEAR),), coerce=True),
    ),
))
