"""
Centralized Constants - SINGLE SOURCE OF TRUTH

Every enumeration used by request contracts and persisted records is
defined here exactly once and imported everywhere else.

DO NOT redefine member lists in contract modules, gateways or services.
A status or vote option declared locally drifts from this catalog the
first time someone adds a member.

All enums are str-valued, so a resolved member compares equal to its raw
wire value ("FOR" == VoteChoice.FOR).
"""

from enum import Enum


# =============================================================================
# MEMBERS
# =============================================================================

class MemberRole(str, Enum):
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    BOARD_MEMBER = "BOARD_MEMBER"
    OBSERVER = "OBSERVER"


class MemberStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    FORMER = "FORMER"


class InvitationStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REVOKED = "REVOKED"


class EmploymentType(str, Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACTOR = "CONTRACTOR"


# =============================================================================
# MEETINGS, DECISIONS, VOTES
# =============================================================================

class MeetingStatus(str, Enum):
    """Lifecycle of a board meeting.

    PAUSED is only reachable from IN_PROGRESS (live session paused).
    """
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class VoteChoice(str, Enum):
    """Shared by the REST vote endpoint and the live-session vote event."""
    FOR = "FOR"
    AGAINST = "AGAINST"
    ABSTAIN = "ABSTAIN"


class DecisionOutcome(str, Enum):
    PASSED = "PASSED"
    REJECTED = "REJECTED"
    TABLED = "TABLED"


# =============================================================================
# ACTION ITEMS
# =============================================================================

class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ActionStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"


# =============================================================================
# RESOLUTIONS
# =============================================================================

class ResolutionCategory(str, Enum):
    FINANCIAL = "FINANCIAL"
    GOVERNANCE = "GOVERNANCE"
    HR = "HR"
    OPERATIONS = "OPERATIONS"
    STRATEGIC = "STRATEGIC"
    OTHER = "OTHER"


class ResolutionStatus(str, Enum):
    DRAFT = "DRAFT"
    PROPOSED = "PROPOSED"
    PASSED = "PASSED"
    REJECTED = "REJECTED"
    TABLED = "TABLED"


# =============================================================================
# DOCUMENTS & FINANCIALS
# =============================================================================

class DocumentType(str, Enum):
    MEETING = "MEETING"
    FINANCIAL = "FINANCIAL"
    GOVERNANCE = "GOVERNANCE"
    GENERAL = "GENERAL"


class FinancialReportType(str, Enum):
    PROFIT_LOSS = "PROFIT_LOSS"
    BALANCE_SHEET = "BALANCE_SHEET"
    CASH_FLOW = "CASH_FLOW"
    BUDGET_VS_ACTUAL = "BUDGET_VS_ACTUAL"
    CUSTOM = "CUSTOM"


class ReportStatus(str, Enum):
    DRAFT = "DRAFT"
    FINAL = "FINAL"


# =============================================================================
# OKRS
# =============================================================================

class MetricType(str, Enum):
    NUMERIC = "NUMERIC"
    PERCENTAGE = "PERCENTAGE"
    CURRENCY = "CURRENCY"
    BOOLEAN = "BOOLEAN"


class OkrPeriodStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


# =============================================================================
# PERMISSIONS
# =============================================================================

# Every permission a role-permission mapping may grant or revoke.
# OWNER bypasses checks and is never stored with explicit grants.
PERMISSION_KEYS = frozenset({
    # Meetings
    'meetings.view',
    'meetings.view_all',
    'meetings.create',
    'meetings.edit',
    'meetings.delete',
    'meetings.start_live',
    # Action items
    'action_items.view',
    'action_items.view_all',
    'action_items.create',
    'action_items.edit',
    'action_items.delete',
    'action_items.complete',
    # Resolutions
    'resolutions.view',
    'resolutions.create',
    'resolutions.edit',
    'resolutions.delete',
    'resolutions.change_status',
    # Documents
    'documents.view',
    'documents.upload',
    'documents.download',
    'documents.delete',
    # Financials
    'financials.view',
    'financials.edit',
    'financials.manage_pdfs',
    # OKRs
    'okrs.view',
    'okrs.create',
    'okrs.edit',
    'okrs.delete',
    'okrs.close',
    # Members
    'members.view',
    'members.invite',
    'members.remove',
    'members.change_roles',
    # Company
    'company.view_settings',
    'company.edit_settings',
    # Team / org chart
    'team.view',
    'team.create',
    'team.edit',
    'team.delete',
})


# =============================================================================
# LIMITS
# =============================================================================

MAX_TAGS_PER_REQUEST = 20
MAX_TAG_LENGTH = 50
MIN_FISCAL_YEAR = 1900


ALL_ENUMS = (
    MemberRole,
    MemberStatus,
    InvitationStatus,
    EmploymentType,
    MeetingStatus,
    VoteChoice,
    DecisionOutcome,
    Priority,
    ActionStatus,
    ResolutionCategory,
    ResolutionStatus,
    DocumentType,
    FinancialReportType,
    ReportStatus,
    MetricType,
    OkrPeriodStatus,
)


def enum_values(enum_class) -> list:
    """Return the wire values of an enum in declaration order."""
    return [member.value for member in enum_class]
