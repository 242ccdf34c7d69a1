"""Pydantic models for get contact request."""

from pydantic import BaseModel, ConfigDict, Field


class GetContactRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(..., min_length=1, description="Contact id from the path")
