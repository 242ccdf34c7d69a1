"""Pydantic models for contact creation request/response."""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import CONTACT_FIELD_MAX_LENGTH


class CreateContactRequest(BaseModel):
    """Validation model for contact creation.

    `id` and `photoUrl` are assigned by the service, so any value the client
    sends for them is ignored along with other unknown fields.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str | None = Field(None, max_length=CONTACT_FIELD_MAX_LENGTH, description="Display name")
    email: str | None = Field(None, max_length=CONTACT_FIELD_MAX_LENGTH, description="Email address")
    title: str | None = Field(None, max_length=CONTACT_FIELD_MAX_LENGTH, description="Job title")
    phone: str | None = Field(None, max_length=CONTACT_FIELD_MAX_LENGTH, description="Phone number")
    address: str | None = Field(None, max_length=CONTACT_FIELD_MAX_LENGTH, description="Postal address")
    status: str | None = Field(None, max_length=CONTACT_FIELD_MAX_LENGTH, description="Free-form status")

    def to_fields(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)
