"""Privacy-gated views of the people attached to a blood request."""

from typing import Any
from uuid import UUID

from pydantic import SerializerFunctionWrapHandler, model_serializer

from core.schemas.base_schema_model import BaseSchemaModel


class PartyInfo(BaseSchemaModel):
    """Seeker or donor as seen by the viewer of a request.

    ``phone`` is only populated for the counterpart of an accepted request.
    When it is not populated the key is left out of the output entirely, so
    a hidden number and a missing number look the same.
    """

    user_id: UUID
    blood_type: str | None = None
    city: str | None = None
    phone: str | None = None

    @model_serializer(mode="wrap")
    def _omit_hidden_phone(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        if self.phone is None:
            data.pop("phone", None)
        return data


class CityOnlyParty(BaseSchemaModel):
    """Seeker reduced to id and city, used by feeds and open-market listings."""

    user_id: UUID
    city: str | None = None
