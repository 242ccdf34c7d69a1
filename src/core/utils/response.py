"""
Centralized API response builder for AWS Lambda / API Gateway.
"""

from __future__ import annotations

import base64
import json
from http import HTTPStatus
from typing import Any

from core.models.errors import (
    ContactServiceError,
    FileSizeError,
    FilterError,
    NotFoundError,
    StorageError,
    UnsupportedMediaError,
    ValidationError,
)
from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_STORAGE_FULL,
    ERROR_CODE_VALIDATION_FAILED,
    EXPOSE_HEADERS,
    TEXT_CONTENT_TYPE,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]

# Most specific first; the first isinstance match wins.
ERROR_STATUS: tuple[tuple[type[ContactServiceError], HTTPStatus], ...] = (
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (FileSizeError, HTTPStatus.REQUEST_ENTITY_TOO_LARGE),
    (UnsupportedMediaError, HTTPStatus.UNSUPPORTED_MEDIA_TYPE),
    (ValidationError, HTTPStatus.BAD_REQUEST),
    (FilterError, HTTPStatus.BAD_REQUEST),
)


def status_for_error(exc: ContactServiceError) -> HTTPStatus:
    """Map a domain error onto the HTTP status it is reported with."""
    if isinstance(exc, StorageError):
        if exc.error_code == ERROR_CODE_STORAGE_FULL:
            return HTTPStatus.INSUFFICIENT_STORAGE
        return HTTPStatus.INTERNAL_SERVER_ERROR

    for error_type, status in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status

    return HTTPStatus.INTERNAL_SERVER_ERROR


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": DEFAULT_CONTENT_TYPE,
    }

    DEFAULT_CORS_HEADERS: dict[str, str] = {
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }

    @staticmethod
    def _build_headers(
        extra: dict[str, str] | None = None,
    ) -> dict[str, str]:
        headers: dict[str, str] = dict(ResponseBuilder.DEFAULT_HEADERS)

        # Always include CORS headers
        headers.update(ResponseBuilder.DEFAULT_CORS_HEADERS)

        if extra:
            headers.update(extra)

        return headers

    @staticmethod
    def _response(
        *,
        status: HTTPStatus,
        body: JsonDict | None = None,
        headers: dict[str, str] | None = None,
        request_id: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {}

        if body:
            payload.update(body)

        if request_id:
            payload["request_id"] = request_id

        response: JsonDict = {
            "statusCode": status.value,
            "headers": ResponseBuilder._build_headers(headers),
            "body": json.dumps(payload),
        }

        return response

    @staticmethod
    def ok(
        body: JsonDict,
        *,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder._response(
            status=HTTPStatus.OK,
            body=body,
            request_id=request_id,
        )

    @staticmethod
    def created(
        body: JsonDict,
        *,
        location: str | None = None,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder._response(
            status=HTTPStatus.CREATED,
            body=body,
            headers={"Location": location} if location else None,
            request_id=request_id,
        )

    @staticmethod
    def text(
        content: str,
        *,
        status: HTTPStatus = HTTPStatus.OK,
    ) -> JsonDict:
        """Plain-text response; the body is returned verbatim."""
        return {
            "statusCode": status.value,
            "headers": ResponseBuilder._build_headers({"Content-Type": TEXT_CONTENT_TYPE}),
            "body": content,
        }

    @staticmethod
    def no_content() -> JsonDict:
        response: JsonDict = {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": ResponseBuilder._build_headers(),
            "body": "",
        }
        return response

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: Any = None,
        request_id: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }

        if details:
            payload["details"] = details

        return ResponseBuilder._response(
            status=status,
            body=payload,
            request_id=request_id,
        )

    @staticmethod
    def from_error(
        exc: ContactServiceError,
        *,
        request_id: str | None = None,
    ) -> JsonDict:
        """Error response for a domain exception, keeping its error code."""
        return ResponseBuilder.error(
            status=status_for_error(exc),
            error=exc.error_code,
            message=exc.message,
            details=exc.details or None,
            request_id=request_id,
        )

    @staticmethod
    def bad_request(
        message: str,
        *,
        details: Any = None,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            details=details,
            request_id=request_id,
        )

    @staticmethod
    def validation_error(
        *,
        message: str,
        details: Any = None,
        request_id: str | None = None,
    ) -> JsonDict:
        """422 Unprocessable Entity validation error."""
        return ResponseBuilder.error(
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            error=ERROR_CODE_VALIDATION_FAILED,
            message=message,
            details=details,
            request_id=request_id,
        )

    @staticmethod
    def not_found(
        message: str = "Resource not found",
        *,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.NOT_FOUND,
            message=message,
            request_id=request_id,
        )

    @staticmethod
    def internal_error(
        message: str = "Internal server error",
        *,
        request_id: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            request_id=request_id,
        )

    @staticmethod
    def binary_response(
        content: bytes,
        *,
        content_type: str,
        headers: dict[str, str] | None = None,
    ) -> JsonDict:
        response_headers: dict[str, str] = {
            "Content-Type": content_type,
            "Content-Length": str(len(content)),
            "Access-Control-Expose-Headers": EXPOSE_HEADERS,
        }

        if headers:
            response_headers.update(headers)

        return {
            "statusCode": HTTPStatus.OK.value,
            "headers": response_headers,
            "body": base64.b64encode(content).decode("utf-8"),
            "isBase64Encoded": True,
        }
