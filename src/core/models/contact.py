"""Shared contact model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from core.models.pagination import PaginationInfo


class Contact(BaseModel):
    """Contact record as stored in DynamoDB and returned by the API.

    Stored under snake_case attribute names; API responses use the
    `photoUrl` alias. Null fields are left out of both.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: StrictStr = Field(..., description="Opaque contact identifier, immutable")
    name: StrictStr | None = Field(None, description="Display name")
    email: StrictStr | None = Field(None, description="Email address")
    title: StrictStr | None = Field(None, description="Job title")
    phone: StrictStr | None = Field(None, description="Phone number")
    address: StrictStr | None = Field(None, description="Postal address")
    status: StrictStr | None = Field(None, description="Free-form status")

    photo_url: StrictStr | None = Field(
        None,
        alias="photoUrl",
        description="Retrieval URL of the contact photo, set once a photo is stored",
    )

    def to_item(self) -> dict[str, str]:
        """DynamoDB item representation."""
        return self.model_dump(exclude_none=True)

    def to_api(self) -> dict[str, str]:
        """API response representation."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ContactPage(BaseModel):
    """Page of contacts, sorted by name ascending."""

    contacts: list[Contact] = Field(..., description="Contacts on this page")
    total_count: StrictInt = Field(..., description="Total number of contacts")
    returned_count: StrictInt = Field(..., description="Number of contacts on this page")
    pagination: PaginationInfo = Field(..., description="Pagination metadata")

    def to_api(self) -> dict:
        return {
            "contacts": [contact.to_api() for contact in self.contacts],
            "total_count": self.total_count,
            "returned_count": self.returned_count,
            "pagination": self.pagination.model_dump(),
        }
