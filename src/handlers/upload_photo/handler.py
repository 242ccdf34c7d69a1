"""
Lambda handler responsible for attaching a photo to a contact.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import (
    ContactOperationFailedError,
    DynamoDBError,
    FileSizeError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from core.utils.constants import FORM_FIELD_CONTACT_ID, FORM_FIELD_FILE, METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.multipart import parse_form_data
from core.utils.request import get_body_bytes, get_header, request_base_url
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import UploadPhotoRequest
from .service import UploadPhotoService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle PUT /contacts/photo.

    The body is multipart/form-data with two parts:
    - id: the contact id
    - file: the photo bytes, with its original filename

    API Gateway delivers binary bodies base64-encoded with
    "isBase64Encoded": true.

    Args:
        event: API Gateway Lambda proxy event containing the upload form
        context: AWS Lambda execution context

    Returns:
        200 text/plain response whose body is the photo URL
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received photo upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    try:
        form = parse_form_data(get_body_bytes(event), get_header(event, "Content-Type"))
    except ValidationError as exc:
        logger.warning("Unreadable upload form", extra={"error": exc.message})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    id_part = form.get(FORM_FIELD_CONTACT_ID)
    file_part = form.get(FORM_FIELD_FILE)

    is_valid, result = validate_request(
        UploadPhotoRequest,
        {
            "id": id_part.text if id_part else None,
            "filename": file_part.filename if file_part else None,
        },
        request_id=request_id,
        field_names={"filename": FORM_FIELD_FILE},
    )
    if not is_valid:
        return result

    if file_part is None:
        return ResponseBuilder.bad_request(
            f"Missing '{FORM_FIELD_FILE}' form field", request_id=request_id
        )

    service = UploadPhotoService()

    try:
        service.check_file(file_part.content)
        url = service.attach_photo(
            contact_id=result.id,
            file_data=file_part.content,
            original_filename=result.filename,
            base_url=request_base_url(event),
        )

    except (ValidationError, FileSizeError) as exc:
        logger.warning(
            "Photo rejected",
            extra={"contact_id": result.id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    except NotFoundError:
        return ResponseBuilder.not_found(f"Contact not found: {result.id}", request_id=request_id)

    except (StorageError, DynamoDBError, ContactOperationFailedError) as exc:
        logger.exception(
            "Infrastructure error during photo upload",
            extra={"contact_id": result.id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    metrics.add_metric(name="PhotoAttached", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.text(url)
