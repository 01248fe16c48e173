"""
Contract schemas for live meeting session (socket) events.

Events:
- joinMeeting          session.join
- leaveMeeting         session.leave
- castVote             session.cast_vote
- updateAttendance     session.update_attendance
- updateMeetingStatus  session.update_status

Statuses and vote options come from the shared catalog; the REST
contracts validate against the very same enums.
"""

from constants import MeetingStatus, VoteChoice

from ..registry import Contract, register_contract, schema_of
from .fields import boolean, enum_field, identifier


SESSION_JOIN_CONTRACT = register_contract(Contract(
    name="session.join",
    schema=schema_of(identifier("meetingId", required=True)),
))

SESSION_LEAVE_CONTRACT = register_contract(Contract(
    name="session.leave",
    schema=schema_of(identifier("meetingId", required=True)),
))

SESSION_CAST_VOTE_CONTRACT = register_contract(Contract(
    name="session.cast_vote",
    schema=schema_of(
        identifier("decisionId", required=True),
        enum_field("vote", VoteChoice, required=True),
    ),
))

SESSION_UPDATE_ATTENDANCE_CONTRACT = register_contract(Contract(
    name="session.update_attendance",
    schema=schema_of(
        identifier("meetingId", required=True),
        boolean("isPresent", required=True),
    ),
))

SESSION_UPDATE_STATUS_CONTRACT = register_contract(Contract(
    name="session.update_status",
    schema=schema_of(
        identifier("meetingId", required=True),
        enum_field("status", MeetingStatus, required=True),
    ),
))
