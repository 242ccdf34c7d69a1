"""
Lambda handler responsible for listing contacts.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import DynamoDBError, FilterError
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import query_params, validate_request

from .models import ListContactsRequest
from .service import ListContactsService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle paginated contact listing.

    Query parameters:
        page: zero-based page number (default 0)
        size: contacts per page, 1-100 (default 10)

    Contacts are sorted by name ascending.
    """
    request_id = getattr(context, "aws_request_id", None)
    raw_params = event.get("queryStringParameters") or {}

    logger.info(
        "Received list contacts request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": raw_params,
            "request_id": request_id,
        },
    )

    is_valid, result = validate_request(
        ListContactsRequest,
        query_params(event, ListContactsRequest),
        request_id=request_id,
    )
    if not is_valid:
        logger.warning("Request validation failed", extra={"query_params": raw_params})
        return result

    service = ListContactsService()

    try:
        contact_page = service.list_contacts(page=result.page, size=result.size)
    except (FilterError, DynamoDBError) as exc:
        logger.exception("Error listing contacts", extra={"error_code": exc.error_code})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    return ResponseBuilder.ok(contact_page.to_api())
