"""
Unit tests for core.models.errors
"""

import pytest

from core.models.errors import (
    ContactOperationFailedError,
    ContactServiceError,
    DynamoDBError,
    FileSizeError,
    FilterError,
    NotFoundError,
    StorageError,
    UnsupportedMediaError,
    ValidationError,
)


class TestContactServiceError:
    def test_base_error(self) -> None:
        err = ContactServiceError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert str(err) == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}

    def test_details_default_to_empty_dict(self) -> None:
        err = ContactServiceError(message="x", error_code="X")

        assert err.details == {}


@pytest.mark.parametrize(
    "error_type,code",
    [
        (ValidationError, "VALIDATION_FAILED"),
        (NotFoundError, "NOT_FOUND"),
        (StorageError, "STORAGE_ERROR"),
        (UnsupportedMediaError, "UNSUPPORTED_MEDIA_TYPE"),
        (ContactOperationFailedError, "CONTACT_OPERATION_FAILED"),
        (DynamoDBError, "DYNAMODB_ERROR"),
        (FilterError, "INVALID_FILTER"),
        (FileSizeError, "FILE_SIZE_EXCEEDED"),
    ],
)
def test_default_error_codes(error_type, code) -> None:
    err = error_type(message="x")

    assert isinstance(err, ContactServiceError)
    assert err.error_code == code


class TestStorageError:
    def test_not_retryable_by_default(self) -> None:
        assert StorageError(message="x").retryable is False

    def test_keeps_cause_code_and_retry_flag(self) -> None:
        err = StorageError(message="x", error_code="STORAGE_WRITE_FAILED", retryable=True)

        assert err.error_code == "STORAGE_WRITE_FAILED"
        assert err.retryable is True
