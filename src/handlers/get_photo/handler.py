"""
Lambda handler responsible for serving contact photos.
"""

from typing import Any
from urllib.parse import unquote

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import (
    NotFoundError,
    StorageError,
    UnsupportedMediaError,
    ValidationError,
)
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetPhotoRequest
from .service import GetPhotoService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle GET /contacts/image/{filename}.

    Returns the raw photo bytes as a base64-encoded Lambda body with the
    content type derived from the filename extension.
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received photo request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    path_params = event.get("pathParameters") or {}
    raw_filename = path_params.get("filename")

    is_valid, result = validate_request(
        GetPhotoRequest,
        {"filename": unquote(raw_filename) if raw_filename else None},
        request_id=request_id,
    )
    if not is_valid:
        return result

    service = GetPhotoService()

    try:
        content, content_type, content_length = service.read_photo(result.filename)

    except NotFoundError:
        return ResponseBuilder.not_found(f"Photo not found: {result.filename}", request_id=request_id)

    except (ValidationError, UnsupportedMediaError) as exc:
        logger.warning(
            "Photo request rejected",
            extra={"photo_filename": result.filename, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    except StorageError as exc:
        logger.exception("Photo read failed", extra={"photo_filename": result.filename})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    logger.info(
        "Serving photo",
        extra={"photo_filename": result.filename, "content_type": content_type, "size": content_length},
    )

    return ResponseBuilder.binary_response(
        content,
        content_type=content_type,
        headers={"Cache-Control": "no-cache"},
    )
