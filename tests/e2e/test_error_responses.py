"""
E2E Tests for HTTP Error Responses
"""

import pytest

pytestmark = pytest.mark.e2e


class TestErrorResponses:
    def test_non_object_body_is_400(self, api_client) -> None:
        response = api_client.post("/contacts", "not an object")

        assert response.status_code == 400
        assert "message" in response.json()

    def test_out_of_range_page_size_is_422(self, api_client) -> None:
        response = api_client.get("/contacts", {"size": 1000})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "VALIDATION_FAILED"
        assert body["details"][0]["field"] == "size"

    def test_404_error_has_code(self, api_client) -> None:
        body = api_client.get("/contacts/fake-id").json()

        assert body["error"] == "NOT_FOUND"
        assert "timestamp" in body
