"""Business logic for contact deletion.

Only the contact record is removed. A photo previously attached to the
contact stays in the photo root; the response reports that it was kept.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_contact_store import DynamoDBContactStore
from core.repositories.contact_repository import ContactRepository
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class DeleteContactService:
    """Application service responsible for deleting contacts."""

    def __init__(self, contacts: ContactRepository | None = None) -> None:
        self.contacts = contacts or DynamoDBContactStore()

    def delete_contact(self, contact_id: str) -> dict[str, Any]:
        """Delete a contact record.

        Raises:
            NotFoundError: If the contact does not exist
            DynamoDBError: If the lookup or deletion fails
        """
        contact = self.contacts.get_contact(contact_id=contact_id)

        self.contacts.remove_contact(contact_id=contact_id)

        photo_retained = bool(contact.photo_url)
        if photo_retained:
            logger.info(
                "Contact deleted, photo file kept",
                extra={"contact_id": contact_id, "photo_url": contact.photo_url},
            )
        else:
            logger.info("Contact deleted", extra={"contact_id": contact_id})

        return {
            "id": contact_id,
            "deleted_at": utc_now_iso(),
            "photo_retained": photo_retained,
        }
