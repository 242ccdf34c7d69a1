"""
E2E Tests for the contact endpoints
"""

import pytest

pytestmark = pytest.mark.e2e


class TestContactEndpoints:
    def test_list_is_sorted_and_paginated(self, api_client) -> None:
        for name in ("Charlie", "Alice", "Bob"):
            assert api_client.post("/contacts", {"name": name}).status_code == 201

        first = api_client.get("/contacts", {"page": 0, "size": 2}).json()
        second = api_client.get("/contacts", {"page": 1, "size": 2}).json()

        assert [c["name"] for c in first["contacts"]] == ["Alice", "Bob"]
        assert [c["name"] for c in second["contacts"]] == ["Charlie"]
        assert first["pagination"]["has_more"] is True
        assert second["pagination"]["has_more"] is False

    def test_new_contact_has_no_photo(self, new_contact) -> None:
        assert "photoUrl" not in new_contact

    def test_get_unknown_contact(self, api_client) -> None:
        assert api_client.get("/contacts/does-not-exist").status_code == 404
