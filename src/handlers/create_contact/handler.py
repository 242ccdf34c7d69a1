"""
Lambda handler responsible for contact creation.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import ContactOperationFailedError, DynamoDBError
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_body_bytes, request_base_url
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import CreateContactRequest
from .service import CreateContactService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle contact creation requests.

    Expected API Gateway event structure:
    {
        "body": "{\"name\": \"...\", \"email\": \"...\"}",
        "isBase64Encoded": false
    }

    Args:
        event: API Gateway Lambda proxy event containing the contact fields
        context: AWS Lambda execution context

    Returns:
        201 response with the created contact and its Location
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact create request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    try:
        body = json.loads(get_body_bytes(event) or b"{}")
    except ValueError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request("Invalid JSON body", request_id=request_id)

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request(
            "Request body must be a JSON object", request_id=request_id
        )

    is_valid, result = validate_request(CreateContactRequest, body, request_id=request_id)
    if not is_valid:
        logger.warning("Request validation failed", extra={"request_id": request_id})
        return result

    service = CreateContactService()

    try:
        contact = service.create_contact(result.to_fields())
    except (DynamoDBError, ContactOperationFailedError) as exc:
        logger.exception("Contact creation failed", extra={"error_code": exc.error_code})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    return ResponseBuilder.created(
        contact.to_api(),
        location=f"{request_base_url(event)}/contacts/{contact.id}",
    )
