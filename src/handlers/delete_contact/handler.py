"""
Lambda handler responsible for deleting a contact.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import ContactOperationFailedError, DynamoDBError, NotFoundError
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import DeleteContactRequest, DeleteContactResponse
from .service import DeleteContactService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle contact deletion requests.

    This function:
    - Extracts the contact id from API Gateway path parameters
    - Delegates deletion to the service layer
    - Translates domain errors into HTTP responses

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        DeleteContactRequest,
        {"id": path_params.get("id")},
        request_id=request_id,
    )
    if not is_valid:
        return result

    service = DeleteContactService()

    try:
        delete_result = service.delete_contact(result.id)

    except NotFoundError:
        logger.warning("Contact not found during delete", extra={"contact_id": result.id})
        return ResponseBuilder.not_found(f"Contact not found: {result.id}", request_id=request_id)

    except (DynamoDBError, ContactOperationFailedError) as exc:
        logger.exception("Deletion failed", extra={"contact_id": result.id})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    response = DeleteContactResponse(
        id=delete_result["id"],
        message="Contact deleted successfully",
        deleted_at=delete_result["deleted_at"],
        photo_retained=delete_result["photo_retained"],
    )

    return ResponseBuilder.ok(response.model_dump())
