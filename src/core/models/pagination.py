"""Pagination model."""

from pydantic import BaseModel, Field, StrictBool, StrictInt


class PaginationInfo(BaseModel):
    """Page-number pagination metadata for list responses."""

    page: StrictInt = Field(..., description="Zero-based page number")
    size: StrictInt = Field(..., description="Maximum number of items per page")
    total_pages: StrictInt = Field(..., description="Number of pages available")
    has_more: StrictBool = Field(..., description="Whether more items are available after this page")
    next_page: StrictInt | None = Field(
        None,
        description="Page number to request next, if available",
    )
