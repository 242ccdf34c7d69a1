"""
Pydantic models for the list contacts request.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MIN_PAGE_SIZE


class ListContactsRequest(BaseModel):
    """
    Validation model for list contacts API.

    Query string values arrive as strings and are coerced to integers.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    page: int = Field(
        default=DEFAULT_PAGE,
        ge=0,
        description="Zero-based page number",
    )
    size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
        description="Contacts per page (1-100)",
    )
