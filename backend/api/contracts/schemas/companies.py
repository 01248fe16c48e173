"""
Contract schemas for company, membership and invitation endpoints.

Endpoints:
- POST  /api/companies                              company.create
- PUT   /api/companies/:companyId                   company.update
- POST  /api/companies/:companyId/members           member.add
- PUT   /api/companies/:companyId/members/:id       member.update
- POST  /api/companies/:companyId/invitations       invitation.create
"""

from constants import MemberRole, MemberStatus

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import DateOrder, Email, Max, MaxLength, Min, NotEmpty, Url
from .fields import datetime_field, enum_field, identifier, integer, text


# =============================================================================
# company.create / company.update
# =============================================================================

COMPANY_CREATE_CONTRACT = register_contract(Contract(
    name="company.create",
    description="Create a company; the caller becomes its OWNER",
    schema=schema_of(
        text("name", required=True, rules=(NotEmpty(), MaxLength(200))),
        text("logo", rules=(Url(),), description="Logo image URL"),
        text("timezone", description="IANA timezone, e.g. Asia/Singapore"),
        integer("fiscalYearStart", rules=(Min(1), Max(12)), description="Month the fiscal year starts (1-12)"),
    ),
))

COMPANY_UPDATE_CONTRACT = register_contract(partial(COMPANY_CREATE_CONTRACT, "company.update"))


# =============================================================================
# member.add / member.update
# =============================================================================

MEMBER_ADD_CONTRACT = register_contract(Contract(
    name="member.add",
    description="Add an existing user to a company",
    schema=schema_of(
        identifier("userId", required=True),
        enum_field("role", MemberRole),
        text("title"),
        datetime_field("termStart"),
        datetime_field("termEnd"),
        checks=(DateOrder(start="termStart", end="termEnd"),),
    ),
))

MEMBER_UPDATE_CONTRACT = register_contract(partial(
    MEMBER_ADD_CONTRACT,
    "member.update",
    omit=("userId",),
    extra=(enum_field("status", MemberStatus),),
    description="Change a member's role, title, term or status",
))


# =============================================================================
# invitation.create
# =============================================================================

INVITATION_CREATE_CONTRACT = register_contract(Contract(
    name="invitation.create",
    description="Invite someone by email",
    schema=schema_of(
        text("email", required=True, rules=(Email(),)),
        enum_field("role", MemberRole),
        text("title"),
    ),
))
