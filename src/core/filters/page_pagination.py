"""
Page-number pagination utilities.
"""

from typing import Any

from core.models.pagination import PaginationInfo
from core.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)


class PagePagination:
    """
    Page-number pagination helper.

    Pages are zero-based: page 0 holds items [0, size), page 1 holds
    [size, 2 * size), and so on. A page past the end is empty, not an error.
    """

    @staticmethod
    def paginate(
        items: list[dict[str, Any]],
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
    ) -> tuple[list[dict[str, Any]], int, bool]:
        """
        Slice one page out of an already sorted list.

        Args:
            items: Full list of items to paginate
            page: Zero-based page number
            size: Maximum number of items per page

        Returns:
            A tuple containing:
            - page_items: Items on the requested page
            - total_count: Total number of items before pagination
            - has_more: True if more items exist beyond this page

        Example:
            items = [1, 2, 3, 4, 5]
            page = 1
            size = 2

            → ([3, 4], 5, True)
        """
        total_count = len(items)
        start = page * size
        page_items = items[start : start + size]
        has_more = start + size < total_count

        return page_items, total_count, has_more

    @staticmethod
    def validate(page: int, size: int) -> tuple[bool, str]:
        """
        Validate pagination parameters.

        Validation rules:
        - size must be within [MIN_PAGE_SIZE, MAX_PAGE_SIZE]
        - page must be zero or positive

        Returns:
            A tuple of:
            - is_valid: Whether parameters are valid
            - error_message: Human-readable error message if invalid
        """
        if size < MIN_PAGE_SIZE:
            return False, f"Size must be at least {MIN_PAGE_SIZE}"

        if size > MAX_PAGE_SIZE:
            return False, f"Size must not exceed {MAX_PAGE_SIZE}"

        if page < 0:
            return False, "Page must be zero or a positive integer"

        return True, ""

    @staticmethod
    def get_page_info(page: int, size: int, total_count: int) -> PaginationInfo:
        """
        Build pagination metadata for API responses.

        Notes:
            - total_pages is rounded up
            - an empty result set has zero pages
        """
        total_pages = (total_count + size - 1) // size if size > 0 else 0
        has_more = (page + 1) * size < total_count

        return PaginationInfo(
            page=page,
            size=size,
            total_pages=total_pages,
            has_more=has_more,
            next_page=page + 1 if has_more else None,
        )
