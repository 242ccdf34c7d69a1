"""DynamoDB-backed implementation of ContactRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.filters.page_pagination import PagePagination
from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import ContactOperationFailedError, DynamoDBError, FilterError
from core.repositories.contact_repository import ContactItem, ContactRepository
from core.utils.constants import (
    ERROR_CODE_CONTACT_ALREADY_EXISTS,
    ERROR_CODE_CONTACT_DELETE_FAILED,
    ERROR_CODE_CONTACT_FETCH_FAILED,
    ERROR_CODE_CONTACT_LIST_FAILED,
    ERROR_CODE_CONTACT_SAVE_FAILED,
)

logger = Logger(UTC=True)

NEW_CONTACT_CONDITION = "attribute_not_exists(id)"


def _name_sort_key(item: ContactItem) -> tuple[bool, str]:
    # Contacts without a name sort first, then by name
    name = item.get("name")
    return (name is not None, name or "")


class DynamoDBContactStore(ContactRepository):
    """DynamoDB-backed contact storage with error handling.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def fetch_contact(self, *, contact_id: str) -> ContactItem | None:
        """Fetch a single contact.

        Raises:
            DynamoDBError: If fetch fails
        """
        logger.debug("Fetching contact", extra={"contact_id": contact_id})

        try:
            response = self._db.get_item(key={"id": contact_id})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"contact_id": contact_id})
            raise DynamoDBError(
                message="Unable to retrieve contact",
                error_code=ERROR_CODE_CONTACT_FETCH_FAILED,
                details={"contact_id": contact_id},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error fetching contact")
            raise DynamoDBError(
                message="Unable to retrieve contact",
                error_code=ERROR_CODE_CONTACT_FETCH_FAILED,
                details={"contact_id": contact_id},
            ) from exc

        item = response.get("Item")
        if item is None:
            return None

        if not isinstance(item, dict):
            raise DynamoDBError(
                message="Invalid contact record format",
                error_code=ERROR_CODE_CONTACT_FETCH_FAILED,
                details={"contact_id": contact_id},
            )

        return item

    def list_contacts(self, *, page: int, size: int) -> tuple[list[ContactItem], int]:
        """List one page of contacts sorted by name ascending.

        NOTE:
        - The whole table is scanned and sorted in memory; DynamoDB has no
          global ordering by a non-key attribute.
        """
        logger.debug("Listing contacts", extra={"page": page, "size": size})

        is_valid, error_message = PagePagination.validate(page, size)
        if not is_valid:
            raise FilterError(
                message=error_message,
                details={"page": page, "size": size},
            )

        items: list[ContactItem] = []
        scan_kwargs: dict[str, Any] = {}

        try:
            while True:
                response = self._db.scan(**scan_kwargs)
                page_items = response.get("Items", [])

                if not isinstance(page_items, list):
                    raise DynamoDBError(
                        message="Invalid scan response from DynamoDB",
                        error_code=ERROR_CODE_CONTACT_LIST_FAILED,
                    )

                items.extend(page_items)

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except DynamoDBError:
            raise

        except ClientError as exc:
            logger.error("DynamoDB scan failed", extra={"page": page, "size": size})
            raise DynamoDBError(
                message="Unable to list contacts",
                error_code=ERROR_CODE_CONTACT_LIST_FAILED,
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error listing contacts")
            raise DynamoDBError(
                message="Unable to list contacts",
                error_code=ERROR_CODE_CONTACT_LIST_FAILED,
            ) from exc

        items.sort(key=_name_sort_key)
        page_items, total_count, _ = PagePagination.paginate(items, page=page, size=size)

        logger.info(
            "Contacts listed",
            extra={"page": page, "size": size, "count": len(page_items), "total": total_count},
        )

        return page_items, total_count

    def insert_contact(self, *, contact: ContactItem) -> None:
        """Store a new contact; an existing record with the same id is kept.

        Raises:
            ValueError: If the contact has no id
            ContactOperationFailedError: If the id is already taken
            DynamoDBError: If the write fails
        """
        self._put(contact, condition_expression=NEW_CONTACT_CONDITION)

    def upsert_contact(self, *, contact: ContactItem) -> None:
        """Create or fully replace a contact.

        Raises:
            ValueError: If the contact has no id
            DynamoDBError: If the write fails
        """
        self._put(contact)

    def _put(self, contact: ContactItem, *, condition_expression: str | None = None) -> None:
        contact_id = contact.get("id")
        if not contact_id or not isinstance(contact_id, str) or not contact_id.strip():
            raise ValueError("contact must contain non-empty 'id' (string)")

        # DynamoDB stores None as NULL; dropped so absent fields stay absent
        item = {key: value for key, value in contact.items() if value is not None}

        try:
            self._db.put_item(item=item, condition_expression=condition_expression)
            logger.info("Contact saved", extra={"contact_id": contact_id})

        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                logger.warning("Contact id already taken", extra={"contact_id": contact_id})
                raise ContactOperationFailedError(
                    message="Contact already exists",
                    error_code=ERROR_CODE_CONTACT_ALREADY_EXISTS,
                    details={"contact_id": contact_id},
                ) from exc

            logger.error("DynamoDB put_item failed", extra={"contact_id": contact_id})
            raise DynamoDBError(
                message="Unable to save contact at this time",
                error_code=ERROR_CODE_CONTACT_SAVE_FAILED,
                details={"contact_id": contact_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error saving contact")
            raise DynamoDBError(
                message="Unable to save contact at this time",
                error_code=ERROR_CODE_CONTACT_SAVE_FAILED,
                details={"contact_id": contact_id},
            ) from exc

    def remove_contact(self, *, contact_id: str) -> None:
        """Delete a contact record.

        Raises:
            DynamoDBError: If deletion fails
        """
        logger.debug("Removing contact", extra={"contact_id": contact_id})

        try:
            self._db.delete_item(key={"id": contact_id})
            logger.info("Contact removed", extra={"contact_id": contact_id})

        except ClientError as exc:
            logger.error("DynamoDB delete_item failed", extra={"contact_id": contact_id})
            raise DynamoDBError(
                message="Unable to delete contact",
                error_code=ERROR_CODE_CONTACT_DELETE_FAILED,
                details={"contact_id": contact_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error removing contact")
            raise DynamoDBError(
                message="Unable to delete contact",
                error_code=ERROR_CODE_CONTACT_DELETE_FAILED,
                details={"contact_id": contact_id},
            ) from exc
