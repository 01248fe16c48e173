"""
Contract schemas for meeting endpoints.

Covers meetings, their agenda items, attendance, decisions, votes and
meeting notes.

Endpoints:
- POST   /api/companies/:companyId/meetings                        meeting.create
- GET    /api/companies/:companyId/meetings                        meeting.list
- PUT    /api/companies/:companyId/meetings/:id                    meeting.update
- PUT    /api/companies/:companyId/meetings/:id/notes              meeting.update_notes
- POST   /api/companies/:companyId/meetings/:id/attendees          meeting.add_attendees
- PUT    /api/companies/:companyId/meetings/:id/attendance         meeting.mark_attendance
- POST   /api/companies/:companyId/meetings/:id/agenda             agenda_item.create
- PUT    /api/companies/:companyId/meetings/:id/agenda/:itemId     agenda_item.update
- PUT    /api/companies/:companyId/meetings/:id/agenda/reorder     agenda_item.reorder
- POST   /api/companies/:companyId/meetings/:id/decisions          decision.create
- PUT    /api/companies/:companyId/meetings/:id/decisions/:did     decision.update
- PUT    /api/companies/:companyId/meetings/:id/decisions/reorder  decision.reorder
- POST   /api/companies/:companyId/meetings/:id/decisions/:did/vote  vote.cast
- POST   /api/companies/:companyId/meetings/:id/meeting-notes      meeting_note.create
- PUT    /api/companies/:companyId/meetings/:id/meeting-notes/:nid meeting_note.update

Durations arrive from HTML forms as text, so duration fields coerce.
"""

from constants import DecisionOutcome, MeetingStatus, VoteChoice

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import ListSize, MaxLength, Min, NotEmpty, Url
from .fields import (
    boolean,
    datetime_field,
    enum_field,
    identifier,
    integer,
    list_of,
    nested,
    text,
)


AGENDA_TITLE_MAX = 500
AGENDA_DESCRIPTION_MAX = 2000
MEETING_NOTE_MAX = 10000


def _duration(required: bool = False):
    return integer(
        "duration",
        required=required,
        rules=(Min(1),),
        coerce=True,
        description="Minutes",
    )


# =============================================================================
# agenda_item.create / agenda_item.update / agenda_item.reorder
# =============================================================================

AGENDA_ITEM_SCHEMA = schema_of(
    text("title", required=True, rules=(NotEmpty(), MaxLength(AGENDA_TITLE_MAX))),
    text("description", rules=(MaxLength(AGENDA_DESCRIPTION_MAX),)),
    _duration(),
)

AGENDA_ITEM_CREATE_CONTRACT = register_contract(Contract(
    name="agenda_item.create",
    description="Add an agenda item to a meeting",
    schema=AGENDA_ITEM_SCHEMA,
))

AGENDA_ITEM_UPDATE_CONTRACT = register_contract(partial(
    AGENDA_ITEM_CREATE_CONTRACT,
    "agenda_item.update",
    extra=(text("notes"),),
))

AGENDA_ITEM_REORDER_CONTRACT = register_contract(Contract(
    name="agenda_item.reorder",
    description="Full ordering of a meeting's agenda item ids",
    schema=schema_of(
        list_of("itemIds", identifier("itemId"), required=True, rules=(NotEmpty(),)),
    ),
))


# =============================================================================
# meeting.create / meeting.update / meeting.list
# =============================================================================

MEETING_CREATE_CONTRACT = register_contract(Contract(
    name="meeting.create",
    description="Schedule a meeting, optionally with attendees and agenda",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(), MaxLength(AGENDA_TITLE_MAX))),
        text("description"),
        datetime_field("scheduledAt", required=True),
        _duration(required=True),
        text("location"),
        text("videoLink", rules=(Url(),)),
        list_of("attendeeIds", identifier("attendeeId")),
        list_of("agendaItems", nested("agendaItem", AGENDA_ITEM_SCHEMA)),
    ),
))

MEETING_UPDATE_CONTRACT = register_contract(partial(
    MEETING_CREATE_CONTRACT,
    "meeting.update",
    omit=("attendeeIds", "agendaItems"),
    extra=(enum_field("status", MeetingStatus),),
))

MEETING_LIST_CONTRACT = register_contract(Contract(
    name="meeting.list",
    description="Query-string filters for the meeting list",
    schema=schema_of(
        enum_field("status", MeetingStatus),
        boolean("upcoming", coerce=True),
        boolean("past", coerce=True),
    ),
))


# =============================================================================
# Attendance & notes
# =============================================================================

MEETING_ADD_ATTENDEES_CONTRACT = register_contract(Contract(
    name="meeting.add_attendees",
    schema=schema_of(
        list_of("memberIds", identifier("memberId"), required=True, rules=(NotEmpty(),)),
    ),
))

MEETING_MARK_ATTENDANCE_CONTRACT = register_contract(Contract(
    name="meeting.mark_attendance",
    schema=schema_of(
        boolean("isPresent", required=True),
    ),
))

MEETING_UPDATE_NOTES_CONTRACT = register_contract(Contract(
    name="meeting.update_notes",
    description="Replace the free-text minutes of a meeting",
    schema=schema_of(
        text("notes", required=True),
    ),
))


# =============================================================================
# decision.create / decision.update / decision.reorder / vote.cast
# =============================================================================

DECISION_CREATE_CONTRACT = register_contract(Contract(
    name="decision.create",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(),)),
        text("description"),
        identifier("agendaItemId"),
    ),
))

DECISION_UPDATE_CONTRACT = register_contract(Contract(
    name="decision.update",
    description="Record an outcome or edit a decision",
    schema=schema_of(
        enum_field("outcome", DecisionOutcome),
        text("title", rules=(NotEmpty(),)),
        text("description"),
    ),
))

DECISION_REORDER_CONTRACT = register_contract(Contract(
    name="decision.reorder",
    schema=schema_of(
        list_of("decisionIds", identifier("decisionId"), required=True, rules=(NotEmpty(),)),
    ),
))

VOTE_CAST_CONTRACT = register_contract(Contract(
    name="vote.cast",
    schema=schema_of(
        enum_field("vote", VoteChoice, required=True),
    ),
))


# =============================================================================
# meeting_note.create / meeting_note.update
# =============================================================================

_NOTE_CONTENT = text("content", required=True, rules=(NotEmpty(), MaxLength(MEETING_NOTE_MAX)))

MEETING_NOTE_CREATE_CONTRACT = register_contract(Contract(
    name="meeting_note.create",
    schema=schema_of(_NOTE_CONTENT),
))

# Single-field mutation: content stays required on update
MEETING_NOTE_UPDATE_CONTRACT = register_contract(Contract(
    name="meeting_note.update",
    schema=schema_of(_NOTE_CONTENT),
))
