"""
Contract schemas for document library endpoints.

Endpoints:
- POST /api/companies/:companyId/documents             document.create
- GET  /api/companies/:companyId/documents             document.list
- PUT  /api/companies/:companyId/documents/:id         document.update
- POST /api/companies/:companyId/documents/:id/tags    document.add_tags
- POST /api/companies/:companyId/folders               folder.create
- PUT  /api/companies/:companyId/folders/:id           folder.update
"""

from constants import MAX_TAG_LENGTH, MAX_TAGS_PER_REQUEST, DocumentType

from ..registry import Contract, register_contract, partial, schema_of
from ..rules import ListSize, MaxLength, NotEmpty
from .fields import enum_field, identifier, list_of, text


# =============================================================================
# document.*
# =============================================================================

DOCUMENT_CREATE_CONTRACT = register_contract(Contract(
    name="document.create",
    description="Metadata sent alongside an uploaded file",
    schema=schema_of(
        text("name", required=True, rules=(NotEmpty(),)),
        text("description"),
        enum_field("type", DocumentType, required=True),
        identifier("folderId"),
        identifier("meetingId", description="Meeting to attach the document to"),
    ),
))

DOCUMENT_UPDATE_CONTRACT = register_contract(partial(
    DOCUMENT_CREATE_CONTRACT,
    "document.update",
    omit=("meetingId",),
))

DOCUMENT_ADD_TAGS_CONTRACT = register_contract(Contract(
    name="document.add_tags",
    description="Tags already on the document are ignored",
    schema=schema_of(
        list_of(
            "tags",
            text("tag", rules=(NotEmpty(), MaxLength(MAX_TAG_LENGTH))),
            required=True,
            rules=(ListSize(min=1, max=MAX_TAGS_PER_REQUEST),),
        ),
    ),
))

DOCUMENT_LIST_CONTRACT = register_contract(Contract(
    name="document.list",
    description="Query-string filters for the document library",
    schema=schema_of(
        enum_field("type", DocumentType),
        identifier("folderId"),
        text("tag"),
    ),
))


# =============================================================================
# folder.*
# =============================================================================

FOLDER_CREATE_CONTRACT = register_contract(Contract(
    name="folder.create",
    schema=schema_of(
        text("name", required=True, rules=(NotEmpty(),)),
        identifier("parentId"),
    ),
))

# Rename only
FOLDER_UPDATE_CONTRACT = register_contract(Contract(
    name="folder.update",
    schema=schema_of(
        text("name", required=True, rules=(NotEmpty(),)),
    ),
))
