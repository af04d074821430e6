"""Schema for first-contact user registration."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class BootstrapUserRequest(BaseSchemaModel):
    """Optional profile fields captured when a user first signs in.

    Email and name fall back to token claims when omitted.
    """

    email: str | None = Field(None, max_length=255)
    full_name: str | None = Field(None, max_length=255)
    blood_type: str | None = Field(
        None, description="Setting a blood type at sign-up makes the user a donor"
    )
