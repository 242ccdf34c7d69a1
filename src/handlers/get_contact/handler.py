"""
Lambda handler responsible for fetching a single contact.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import ContactOperationFailedError, DynamoDBError, NotFoundError
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetContactRequest
from .service import GetContactService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle GET /contacts/{id}.

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        200 with the contact, or 404 if it does not exist.
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received get contact request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        GetContactRequest,
        {"id": path_params.get("id")},
        request_id=request_id,
    )
    if not is_valid:
        return result

    service = GetContactService()

    try:
        contact = service.get_contact(result.id)

    except NotFoundError:
        return ResponseBuilder.not_found(f"Contact not found: {result.id}", request_id=request_id)

    except (DynamoDBError, ContactOperationFailedError) as exc:
        logger.exception("Get contact failed", extra={"contact_id": result.id})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    return ResponseBuilder.ok(contact.to_api())
