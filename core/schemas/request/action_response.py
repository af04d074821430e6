"""Generic acknowledgement schemas."""

from uuid import UUID

from core.schemas.base_schema_model import BaseSchemaModel


class ActionResponse(BaseSchemaModel):
    """Result of a state-changing request action."""

    success: bool
    message: str | None = None


class RequestCreated(BaseSchemaModel):
    """Id of a newly created blood request."""

    request_id: UUID
