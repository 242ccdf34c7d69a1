"""
Pytest configuration and fixtures for contact directory tests.
Provides AWS mocking, the contacts DynamoDB table and an isolated photo root.
"""

import base64
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("CONTACTS_TABLE_NAME", "contacts-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "contact-directory-test")


@pytest.fixture(autouse=True)
def photo_dir(tmp_path, monkeypatch) -> Path:
    """
    Point the photo root at a per-test directory.

    The directory is not created up front so tests see the lazy
    creation on first write.
    """
    root = tmp_path / "uploads"
    monkeypatch.setenv("PHOTO_DIRECTORY", str(root))
    monkeypatch.delenv("PUBLIC_BASE_URL", raising=False)
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    return root


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_contacts_table(dynamodb_resource):
    """Helper to create the contacts table keyed by id."""
    return dynamodb_resource.create_table(
        TableName=os.getenv("CONTACTS_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
    )


@pytest.fixture(scope="function")
def contacts_table(dynamodb_resource):
    """
    Create the contacts table for testing.

    moto discards the table when the mock context exits.
    """
    try:
        table = dynamodb_resource.Table(os.getenv("CONTACTS_TABLE_NAME"))
        table.load()
    except ClientError:
        table = _create_contacts_table(dynamodb_resource)
        table.wait_until_exists()

    return table


@pytest.fixture
def dynamodb_put_item(contacts_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single contact item.

    Usage:
        item = dynamodb_put_item({"id": "abc123", "name": "Ada"})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        contacts_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_put_multiple_items(
    contacts_table,
) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with contacts_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


@pytest.fixture
def dynamodb_get_item(contacts_table) -> Callable[[str], dict[str, Any] | None]:
    """
    Helper to read a contact item back.

    Usage:
        item = dynamodb_get_item("abc123")
    """

    def _get(contact_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = contacts_table.get_item(Key={"id": contact_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture
def sample_contact() -> dict[str, Any]:
    """Single stored contact without a photo."""
    return {
        "id": "abc123",
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "title": "Analyst",
        "phone": "+44 20 0000 0000",
        "address": "12 St James's Square, London",
        "status": "active",
    }


@pytest.fixture
def multiple_contacts() -> list[dict[str, Any]]:
    """Contacts stored out of name order."""
    return [
        {"id": "c-3", "name": "Grace Hopper", "email": "grace@example.com"},
        {"id": "c-1", "name": "Alan Turing", "email": "alan@example.com"},
        {"id": "c-4", "name": "Katherine Johnson", "status": "retired"},
        {"id": "c-2", "name": "Edsger Dijkstra"},
        {"id": "c-5", "email": "anonymous@example.com"},
    ]


@pytest.fixture
def dynamodb_with_multiple_contacts(
    dynamodb_put_multiple_items,
    multiple_contacts,
) -> list[dict[str, Any]]:
    items: list[dict[str, Any]] = dynamodb_put_multiple_items(multiple_contacts)
    return items


@pytest.fixture
def sample_png_bytes() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_bytes() -> bytes:
    """Sample binary JPEG data (SOI, JFIF header and EOI markers)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\xff\xd9"
    )
