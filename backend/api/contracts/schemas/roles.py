"""
Contract schemas for org chart, custom roles and role permissions.

Endpoints:
- POST /api/companies/:companyId/org-roles          org_role.create
- PUT  /api/companies/:companyId/org-roles/:id      org_role.update
- POST /api/companies/:companyId/custom-roles       custom_role.create
- PUT  /api/companies/:companyId/custom-roles/:id   custom_role.update
- PUT  /api/companies/:companyId/permissions        role_permissions.update
"""

from constants import PERMISSION_KEYS, EmploymentType, MemberRole

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import AtLeastOneOf, KnownKeys, MaxLength, MinLength, NotEmpty, ValuesOfType
from .fields import decimal, enum_field, identifier, obj, text


# =============================================================================
# org_role.*
# =============================================================================

ORG_ROLE_CREATE_CONTRACT = register_contract(Contract(
    name="org_role.create",
    description="Position on the company org chart",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(), MaxLength(100))),
        text("personName", rules=(MaxLength(100),)),
        text("responsibilities"),
        text("department", rules=(MaxLength(100),)),
        enum_field("employmentType", EmploymentType),
        identifier("parentId", description="Role this one reports to"),
    ),
))

# null clears the assignment; canvas position is only set by dragging
ORG_ROLE_UPDATE_CONTRACT = register_contract(partial(
    ORG_ROLE_CREATE_CONTRACT,
    "org_role.update",
    extra=(
        decimal("positionX", description="Canvas X position"),
        decimal("positionY", description="Canvas Y position"),
    ),
    nullable=("personName", "responsibilities", "department", "employmentType", "parentId"),
))


# =============================================================================
# custom_role.*
# =============================================================================

CUSTOM_ROLE_CREATE_CONTRACT = register_contract(Contract(
    name="custom_role.create",
    schema=schema_of(
        text("name", required=True, rules=(MinLength(2), MaxLength(50))),
        text("description", rules=(MaxLength(200),)),
    ),
))

CUSTOM_ROLE_UPDATE_CONTRACT = register_contract(partial(CUSTOM_ROLE_CREATE_CONTRACT, "custom_role.update"))


# =============================================================================
# role_permissions.update
# =============================================================================

ROLE_PERMISSIONS_UPDATE_CONTRACT = register_contract(Contract(
    name="role_permissions.update",
    description="Grant or revoke permissions for a system role or a custom role",
    schema=schema_of(
        enum_field("role", MemberRole),
        identifier("customRoleId"),
        obj(
            "permissions",
            required=True,
            rules=(KnownKeys(keys=PERMISSION_KEYS), ValuesOfType(value_type=bool)),
            description="permission key -> granted",
        ),
        checks=(AtLeastOneOf(fields=("role", "customRoleId")),),
    ),
))
