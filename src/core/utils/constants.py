"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_FILENAME = "INVALID_FILENAME"
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"
ERROR_CODE_UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_CONTACT_NOT_FOUND = "CONTACT_NOT_FOUND"
ERROR_CODE_PHOTO_NOT_FOUND = "PHOTO_NOT_FOUND"

# Photo Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_STORAGE_FULL = "STORAGE_FULL"
ERROR_CODE_STORAGE_PERMISSION_DENIED = "STORAGE_PERMISSION_DENIED"
ERROR_CODE_STORAGE_DIRECTORY_FAILED = "STORAGE_DIRECTORY_FAILED"
ERROR_CODE_STORAGE_WRITE_FAILED = "STORAGE_WRITE_FAILED"
ERROR_CODE_STORAGE_READ_FAILED = "STORAGE_READ_FAILED"

# Contact / DynamoDB Errors
ERROR_CODE_DYNAMODB = "DYNAMODB_ERROR"
ERROR_CODE_CONTACT_OPERATION_FAILED = "CONTACT_OPERATION_FAILED"
ERROR_CODE_CONTACT_SAVE_FAILED = "CONTACT_SAVE_FAILED"
ERROR_CODE_CONTACT_FETCH_FAILED = "CONTACT_FETCH_FAILED"
ERROR_CODE_CONTACT_DELETE_FAILED = "CONTACT_DELETE_FAILED"
ERROR_CODE_CONTACT_LIST_FAILED = "CONTACT_LIST_FAILED"
ERROR_CODE_CONTACT_INVALID_FORMAT = "CONTACT_INVALID_FORMAT"
ERROR_CODE_PHOTO_URL_UPDATE_FAILED = "PHOTO_URL_UPDATE_FAILED"
ERROR_CODE_CONTACT_ALREADY_EXISTS = "CONTACT_ALREADY_EXISTS"


# ============================================================================
# Photo Constraints
# ============================================================================

MAX_FILE_SIZE = 4 * 1024 * 1024  # 4MB in bytes

DEFAULT_PHOTO_EXTENSION: Final[str] = ".png"

CONTENT_TYPE_BY_EXTENSION: Final[dict[str, str]] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}

PHOTO_URL_PATH: Final[str] = "/contacts/image/"

# Characters that may never appear in a stored photo filename
FORBIDDEN_FILENAME_CHARACTERS: Final[frozenset[str]] = frozenset({"/", "\\", "\x00", ":"})

DEFAULT_PHOTO_DIRECTORY = "/tmp/uploads"

# ============================================================================
# Multipart Form Fields
# ============================================================================

FORM_FIELD_CONTACT_ID = "id"
FORM_FIELD_FILE = "file"

# ============================================================================
# Contact Constraints
# ============================================================================

CONTACT_FIELD_MAX_LENGTH = 255

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length,Location"
DEFAULT_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# ============================================================================
# Observability
# ============================================================================

METRICS_NAMESPACE = "ContactDirectory"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_CONTACTS_TABLE_NAME = "CONTACTS_TABLE_NAME"
ENV_PHOTO_DIRECTORY = "PHOTO_DIRECTORY"
ENV_PUBLIC_BASE_URL = "PUBLIC_BASE_URL"
DEFAULT_AWS_REGION = "us-east-1"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
