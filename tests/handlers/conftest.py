import base64
import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest
from requests_toolbelt import MultipartEncoder


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def create_contact_event() -> dict[str, Any]:
    return {
        "httpMethod": "POST",
        "path": "/contacts",
        "body": json.dumps(
            {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "title": "Analyst",
            }
        ),
        "headers": {"Content-Type": "application/json"},
    }


@pytest.fixture
def list_contacts_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/contacts",
        "queryStringParameters": {"page": "0", "size": "2"},
        "headers": {},
    }


@pytest.fixture
def get_contact_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/contacts/abc123",
        "pathParameters": {"id": "abc123"},
        "headers": {},
    }


@pytest.fixture
def delete_contact_event() -> dict[str, Any]:
    return {
        "httpMethod": "DELETE",
        "path": "/contacts/abc123",
        "pathParameters": {"id": "abc123"},
        "headers": {},
    }


@pytest.fixture
def get_photo_event() -> Callable[[str], dict[str, Any]]:
    def _make(filename: str) -> dict[str, Any]:
        return {
            "httpMethod": "GET",
            "path": f"/contacts/image/{filename}",
            "pathParameters": {"filename": filename},
            "headers": {},
        }

    return _make


@pytest.fixture
def upload_photo_event() -> Callable[..., dict[str, Any]]:
    """
    Build a PUT /contacts/photo proxy event with a multipart body.

    Usage:
        event = upload_photo_event("abc123", png_bytes, "me.png")
        event = upload_photo_event(None, png_bytes)  # no id part
    """

    def _make(
        contact_id: str | None,
        file_data: bytes | None,
        filename: str = "me.png",
        *,
        headers: dict[str, str] | None = None,
        request_path: str = "/contacts/photo",
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if contact_id is not None:
            fields["id"] = contact_id
        if file_data is not None:
            fields["file"] = (filename, file_data, "application/octet-stream")

        encoder = MultipartEncoder(fields=fields)

        return {
            "httpMethod": "PUT",
            "path": "/contacts/photo",
            "headers": {
                "Content-Type": encoder.content_type,
                "Host": "api.example.com",
                "X-Forwarded-Proto": "https",
                **(headers or {}),
            },
            "requestContext": {"path": request_path},
            "body": base64.b64encode(encoder.to_string()).decode("ascii"),
            "isBase64Encoded": True,
        }

    return _make
