"""Schema for user statistics."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserStats(BaseSchemaModel):
    """Counts shown on the profile screen."""

    helped_count: int = Field(
        ..., description="Requests this user accepted as donor (accepted or completed)"
    )
