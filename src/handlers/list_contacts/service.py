"""
Business logic for listing contacts.
"""

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.filters.page_pagination import PagePagination
from core.infrastructure.aws.dynamodb_contact_store import DynamoDBContactStore
from core.models.contact import Contact, ContactPage
from core.repositories.contact_repository import ContactRepository

logger = Logger(UTC=True)


class ListContactsService:
    """Application service responsible for paginated contact listing."""

    def __init__(self, contacts: ContactRepository | None = None) -> None:
        self.contacts = contacts or DynamoDBContactStore()

    def list_contacts(self, *, page: int, size: int) -> ContactPage:
        """Return one page of contacts sorted by name ascending.

        Stored records that no longer match the Contact model are skipped
        and logged instead of failing the whole page.

        Raises:
            FilterError: If page or size is out of range
            DynamoDBError: If the table cannot be scanned
        """
        items, total_count = self.contacts.list_contacts(page=page, size=size)

        contacts: list[Contact] = []
        for item in items:
            try:
                contacts.append(Contact.model_validate(item))
            except PydanticValidationError as exc:
                logger.warning(
                    "Skipping malformed contact",
                    extra={"contact_id": item.get("id"), "errors": exc.error_count()},
                )

        return ContactPage(
            contacts=contacts,
            total_count=total_count,
            returned_count=len(contacts),
            pagination=PagePagination.get_page_info(page, size, total_count),
        )
