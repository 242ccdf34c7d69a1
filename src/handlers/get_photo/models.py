"""Pydantic models for photo retrieval request."""

from pydantic import BaseModel, Field


class GetPhotoRequest(BaseModel):
    """Validation model for GET /contacts/image/{filename}."""

    filename: str = Field(..., min_length=1, max_length=255, description="Stored photo filename")
