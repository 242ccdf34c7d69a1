"""Business logic for contact creation."""

import uuid

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_contact_store import DynamoDBContactStore
from core.models.contact import Contact
from core.repositories.contact_repository import ContactRepository

logger = Logger(UTC=True)


class CreateContactService:
    """Application service responsible for creating contacts.

    The id is generated here, once, and never changes afterwards. New
    contacts never carry a photo URL.
    """

    def __init__(self, contacts: ContactRepository | None = None) -> None:
        self.contacts = contacts or DynamoDBContactStore()

    @staticmethod
    def generate_contact_id() -> str:
        """Generate a unique contact identifier."""
        return str(uuid.uuid4())

    def create_contact(self, fields: dict[str, str]) -> Contact:
        """Persist a new contact built from `fields`.

        Raises:
            ContactOperationFailedError: If the generated id is already taken
            DynamoDBError: If the record cannot be stored
        """
        contact = Contact(**{**fields, "id": self.generate_contact_id(), "photo_url": None})

        self.contacts.insert_contact(contact=contact.to_item())

        logger.info("Contact created", extra={"contact_id": contact.id})
        return contact
