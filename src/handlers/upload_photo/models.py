"""Pydantic models for photo upload request."""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import CONTACT_FIELD_MAX_LENGTH


class UploadPhotoRequest(BaseModel):
    """Validation model for the text parts of a photo upload form.

    The file bytes stay out of the model so they are never echoed back
    in validation error details.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        max_length=CONTACT_FIELD_MAX_LENGTH,
        description="Contact the photo is attached to",
    )
    filename: str | None = Field(
        None,
        max_length=CONTACT_FIELD_MAX_LENGTH,
        description="Original filename supplied with the file part",
    )
