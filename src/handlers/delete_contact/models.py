"""Pydantic models for contact deletion request/response."""

from pydantic import BaseModel, ConfigDict, Field


class DeleteContactRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(..., min_length=1, description="Contact id from the path")


class DeleteContactResponse(BaseModel):
    """Response model for successful contact deletion."""

    id: str = Field(..., description="Deleted contact id")
    message: str = Field(..., description="Success message")
    deleted_at: str = Field(..., description="Deletion timestamp")
    photo_retained: bool = Field(
        ...,
        description="Whether a stored photo file was left in place",
    )
