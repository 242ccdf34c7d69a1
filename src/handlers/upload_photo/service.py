"""Business logic for attaching a photo to a contact.

This module coordinates the contact lookup, the photo write and the
contact record update, translating failures into domain-specific errors.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_contact_store import DynamoDBContactStore
from core.infrastructure.local.local_photo_storage import LocalPhotoStorage
from core.models.errors import (
    ContactOperationFailedError,
    DynamoDBError,
    FileSizeError,
    ValidationError,
)
from core.repositories.contact_repository import ContactRepository
from core.repositories.photo_repository import PhotoStorageRepository
from core.utils.constants import (
    ERROR_CODE_PHOTO_URL_UPDATE_FAILED,
    MAX_FILE_SIZE,
    format_file_size,
    get_max_file_size_mb,
)

logger = Logger(UTC=True)


class UploadPhotoService:
    """Application service responsible for contact photos.

    This service orchestrates:
    - Resolving the contact the photo belongs to
    - Storing the photo under the contact's filename
    - Recording the retrieval URL on the contact
    """

    def __init__(
        self,
        contacts: ContactRepository | None = None,
        photos: PhotoStorageRepository | None = None,
    ) -> None:
        self.contacts = contacts or DynamoDBContactStore()
        self.photos = photos or LocalPhotoStorage()

    @staticmethod
    def check_file(file_data: bytes) -> None:
        """Reject empty uploads and uploads above MAX_FILE_SIZE.

        Raises:
            ValidationError: If the file is empty
            FileSizeError: If the file is too large
        """
        if not file_data:
            raise ValidationError(message="File must not be empty")

        if len(file_data) > MAX_FILE_SIZE:
            logger.warning(
                "Photo exceeds size limit",
                extra={"size": format_file_size(len(file_data))},
            )
            raise FileSizeError(
                message=f"File size exceeds {get_max_file_size_mb()}MB limit",
                details={"size": len(file_data), "max_size": MAX_FILE_SIZE},
            )

    def attach_photo(
        self,
        *,
        contact_id: str,
        file_data: bytes,
        original_filename: str | None,
        base_url: str,
    ) -> str:
        """Store a photo for a contact and record its URL on the contact.

        The flow is:
        1. Fetch the contact (nothing is written if it is missing)
        2. Save the photo, replacing any earlier one
        3. Set photo_url and persist the contact
        4. Return the URL

        The photo is written before the record is updated. When the update
        fails the file stays in place; attaching again repairs the record.

        Raises:
            NotFoundError: If the contact does not exist
            ValidationError: If the stored filename would be unsafe
            StorageError: If the photo cannot be written
            ContactOperationFailedError: If the record update fails
        """
        logger.debug("Starting photo attach", extra={"contact_id": contact_id})

        # Step 1: Resolve the contact
        contact = self.contacts.get_contact(contact_id=contact_id)

        # Step 2: Persist the photo
        url = self.photos.save_photo(
            contact_id=contact_id,
            file_data=file_data,
            original_filename=original_filename,
            base_url=base_url,
        )

        # Step 3: Record the URL on the contact
        contact.photo_url = url
        try:
            self.contacts.upsert_contact(contact=contact.to_item())
        except DynamoDBError as exc:
            logger.exception(
                "Photo stored but contact update failed",
                extra={"contact_id": contact_id, "photo_url": url},
            )
            raise ContactOperationFailedError(
                message="Photo was stored but the contact could not be updated",
                error_code=ERROR_CODE_PHOTO_URL_UPDATE_FAILED,
                details={"contact_id": contact_id, "photo_url": url},
            ) from exc

        logger.info(
            "Photo attached",
            extra={"contact_id": contact_id, "photo_url": url, "size": len(file_data)},
        )
        return url
