import pytest

from core.filters.page_pagination import PagePagination


class TestPaginate:
    def test_middle_page(self) -> None:
        assert PagePagination.paginate([1, 2, 3, 4, 5], page=1, size=2) == ([3, 4], 5, True)

    def test_last_partial_page(self) -> None:
        assert PagePagination.paginate([1, 2, 3, 4, 5], page=2, size=2) == ([5], 5, False)

    def test_page_past_end_is_empty(self) -> None:
        assert PagePagination.paginate([1, 2], page=5, size=10) == ([], 2, False)


class TestValidate:
    @pytest.mark.parametrize("page,size", [(0, 1), (0, 100), (7, 10)])
    def test_valid(self, page, size) -> None:
        assert PagePagination.validate(page, size) == (True, "")

    @pytest.mark.parametrize("page,size", [(0, 0), (0, 101), (-1, 10)])
    def test_invalid(self, page, size) -> None:
        is_valid, message = PagePagination.validate(page, size)

        assert is_valid is False
        assert message


class TestPageInfo:
    def test_exact_multiple(self) -> None:
        info = PagePagination.get_page_info(page=1, size=5, total_count=10)

        assert info.total_pages == 2
        assert info.has_more is False
        assert info.next_page is None

    def test_more_available(self) -> None:
        info = PagePagination.get_page_info(page=0, size=5, total_count=11)

        assert info.total_pages == 3
        assert info.next_page == 1

    def test_empty(self) -> None:
        assert PagePagination.get_page_info(page=0, size=10, total_count=0).total_pages == 0
