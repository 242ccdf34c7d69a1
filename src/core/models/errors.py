"""Custom exception classes for the contact directory service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_CONTACT_OPERATION_FAILED,
    ERROR_CODE_DYNAMODB,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORAGE,
    ERROR_CODE_UNSUPPORTED_MEDIA_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
)


class ContactServiceError(Exception):
    """
    Base exception for all contact service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(ContactServiceError):
    """Raised when request or filename validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(ContactServiceError):
    """Raised when a contact or a photo file does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StorageError(ContactServiceError):
    """Raised when the photo root cannot be created, written or read.

    `error_code` keeps the failure cause apart (disk full, permission
    denied, generic I/O) and `retryable` tells callers whether trying the
    same operation again can succeed without operator action.
    """

    retryable: bool

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        self.retryable = retryable
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnsupportedMediaError(ContactServiceError):
    """Raised when a stored photo has an extension with no known content type."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_MEDIA_TYPE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ContactOperationFailedError(ContactServiceError):
    """Raised when a contact record operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONTACT_OPERATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DynamoDBError(ContactServiceError):
    """Raised when a DynamoDB operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DYNAMODB,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FilterError(ContactServiceError):
    """Raised when pagination parameters are invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_FILTER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileSizeError(ContactServiceError):
    """Raised when an uploaded photo exceeds the allowed size."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
