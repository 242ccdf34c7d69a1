"""
Business logic for fetching a single contact.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_contact_store import DynamoDBContactStore
from core.models.contact import Contact
from core.repositories.contact_repository import ContactRepository

logger = Logger(UTC=True)


class GetContactService:
    """Application service responsible for contact lookup by id."""

    def __init__(self, contacts: ContactRepository | None = None) -> None:
        self.contacts = contacts or DynamoDBContactStore()

    def get_contact(self, contact_id: str) -> Contact:
        """Return the contact with `contact_id`.

        Raises:
            NotFoundError: If the contact does not exist
            ContactOperationFailedError: If the stored record is malformed
            DynamoDBError: If the lookup fails
        """
        logger.debug("Fetching contact", extra={"contact_id": contact_id})
        return self.contacts.get_contact(contact_id=contact_id)
