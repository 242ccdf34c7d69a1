"""E2E fixtures. Tests run against a LocalStack deployment and are skipped without one."""

import base64
import logging

import boto3
import pytest
import requests
from botocore.exceptions import ClientError

from e2e_api_client import E2EAPIClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

DYNAMODB_TABLE_NAME = "contact-directory-contacts-snd"
ENDPOINT_BASE_URL = "http://localhost:4566"
STAGE = "snd"

# ============================================================================
# API Details Fixture
# ============================================================================


@pytest.fixture(scope="session")
def api_details():
    """Get API Gateway details from LocalStack"""
    try:
        requests.get(f"{ENDPOINT_BASE_URL}/_localstack/health", timeout=2).raise_for_status()

        apigateway = boto3.client("apigateway", endpoint_url=ENDPOINT_BASE_URL)
        apis = apigateway.get_rest_apis()
        api = next(api for api in apis["items"] if "contact-directory" in api["name"])
        api_id = api["id"]
    except (requests.RequestException, ClientError, StopIteration) as e:
        logger.warning(f"Could not get API details from LocalStack: {e}")
        pytest.skip(f"Could not get API details from LocalStack: {e}")

    endpoint = f"{ENDPOINT_BASE_URL}/restapis/{api_id}/{STAGE}/_user_request_"
    return {"api_id": api_id, "endpoint": endpoint, "stage": STAGE}


@pytest.fixture(scope="session")
def api_headers():
    return {"Accept": "application/json"}


@pytest.fixture
def api_client(api_details, api_headers):
    """HTTP client wrapper for E2E API testing"""
    _client = E2EAPIClient(api_details["endpoint"], api_headers)
    yield _client
    _cleanup_dynamodb()


def _cleanup_dynamodb():
    """Delete all contacts so tests do not see each other's data."""
    logger.info("Cleaning DynamoDB table: %s", DYNAMODB_TABLE_NAME)

    table = boto3.resource("dynamodb", endpoint_url=ENDPOINT_BASE_URL).Table(DYNAMODB_TABLE_NAME)

    try:
        deleted = 0
        scan_kwargs = {"ProjectionExpression": "id"}

        while True:
            response = table.scan(**scan_kwargs)
            for item in response.get("Items", []):
                table.delete_item(Key={"id": item["id"]})
                deleted += 1

            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                break
            scan_kwargs["ExclusiveStartKey"] = start_key

        logger.info("Deleted %d contacts", deleted)

    except ClientError as err:
        logger.error("Failed to cleanup DynamoDB table: %s", DYNAMODB_TABLE_NAME, exc_info=err)


# ============================================================================
# Sample Data
# ============================================================================

SAMPLE_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


@pytest.fixture
def sample_png() -> bytes:
    return SAMPLE_PNG


@pytest.fixture
def new_contact(api_client) -> dict:
    """Create a contact through the API and return it."""
    response = api_client.post("/contacts", {"name": "E2E Contact", "email": "e2e@example.com"})
    assert response.status_code == 201, response.text
    return response.json()
