"""
Contract schemas for /action-items endpoints.

Endpoints:
- POST  /api/companies/:companyId/action-items              action_item.create
- GET   /api/companies/:companyId/action-items              action_item.list
- PUT   /api/companies/:companyId/action-items/:id          action_item.update
- PATCH /api/companies/:companyId/action-items/:id/status   action_item.update_status
"""

from constants import ActionStatus, Priority

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import DateOrder, NotEmpty
from .fields import datetime_field, enum_field, identifier, text


ACTION_ITEM_CREATE_CONTRACT = register_contract(Contract(
    name="action_item.create",
    schema=schema_of(
        text("title", required=True, rules=(NotEmpty(),)),
        text("description"),
        identifier("assigneeId", description="Company member id"),
        datetime_field("dueDate"),
        enum_field("priority", Priority),
        enum_field("status", ActionStatus),
        identifier("meetingId"),
        identifier("agendaItemId"),
    ),
))

# Meeting/agenda links are fixed at creation
ACTION_ITEM_UPDATE_CONTRACT = register_contract(partial(
    ACTION_ITEM_CREATE_CONTRACT,
    "action_item.update",
    omit=("meetingId", "agendaItemId"),
))

ACTION_ITEM_UPDATE_STATUS_CONTRACT = register_contract(Contract(
    name="action_item.update_status",
    schema=schema_of(
        enum_field("status", ActionStatus, required=True),
    ),
))

ACTION_ITEM_LIST_CONTRACT = register_contract(Contract(
    name="action_item.list",
    description="Query-string filters for the action item list",
    schema=schema_of(
        enum_field("status", ActionStatus),
        identifier("assigneeId"),
        enum_field("priority", Priority),
        datetime_field("dueDateFrom"),
        datetime_field("dueDateTo"),
        checks=(DateOrder(start="dueDateFrom", end="dueDateTo"),),
    ),
))
