"""Abstract contract for contact record persistence."""

from abc import ABC, abstractmethod
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.models.contact import Contact
from core.models.errors import ContactOperationFailedError, NotFoundError
from core.utils.constants import ERROR_CODE_CONTACT_INVALID_FORMAT, ERROR_CODE_CONTACT_NOT_FOUND

ContactItem = dict[str, Any]

logger = Logger(UTC=True)


class ContactRepository(ABC):
    """Contract for storing and retrieving contact records.

    Implementations could be DynamoDB, PostgreSQL, in-memory, etc.
    Services depend on this interface, not the implementation.
    """

    def get_contact(self, *, contact_id: str) -> Contact:
        """Fetch a contact and parse it into the Contact model.

        Raises:
            NotFoundError: If no record exists for `contact_id`
            ContactOperationFailedError: If the stored record is malformed
            DynamoDBError: If the lookup fails
        """
        item = self.fetch_contact(contact_id=contact_id)

        if not item:
            logger.warning("Contact not found", extra={"contact_id": contact_id})
            raise NotFoundError(
                message="Contact not found",
                error_code=ERROR_CODE_CONTACT_NOT_FOUND,
                details={"contact_id": contact_id},
            )

        try:
            return Contact.model_validate(item)
        except PydanticValidationError as exc:
            logger.error("Invalid contact record format", extra={"contact_id": contact_id})
            raise ContactOperationFailedError(
                message="Invalid contact record format",
                error_code=ERROR_CODE_CONTACT_INVALID_FORMAT,
                details={"contact_id": contact_id},
            ) from exc

    @abstractmethod
    def fetch_contact(self, *, contact_id: str) -> ContactItem | None:
        """Fetch a single contact.

        Args:
            contact_id: Contact identifier

        Returns:
            Contact item or None if not found

        Raises:
            DynamoDBError: If fetch fails
        """

    @abstractmethod
    def list_contacts(self, *, page: int, size: int) -> tuple[list[ContactItem], int]:
        """List one page of contacts sorted by name ascending.

        Args:
            page: Zero-based page number
            size: Page size (1-100)

        Returns:
            Tuple of (contacts on the page, total number of contacts)

        Raises:
            FilterError: If page or size are invalid
            DynamoDBError: If listing fails
        """

    @abstractmethod
    def insert_contact(self, *, contact: ContactItem) -> None:
        """Store a new contact without ever replacing an existing one.

        Raises:
            ContactOperationFailedError: If a contact with the same id exists
            DynamoDBError: If the write fails
        """

    @abstractmethod
    def upsert_contact(self, *, contact: ContactItem) -> None:
        """Create or fully replace a contact.

        Args:
            contact: Contact item; must contain a non-empty 'id'

        Raises:
            DynamoDBError: If the write fails
        """

    @abstractmethod
    def remove_contact(self, *, contact_id: str) -> None:
        """Delete a contact record. Photo files are left in place.

        Raises:
            DynamoDBError: If deletion fails
        """
