"""
Business logic for photo retrieval.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.local.local_photo_storage import LocalPhotoStorage
from core.repositories.photo_repository import PhotoStorageRepository

logger = Logger(UTC=True)


class GetPhotoService:
    """Application service responsible for serving stored photos."""

    def __init__(self, photos: PhotoStorageRepository | None = None) -> None:
        self.photos = photos or LocalPhotoStorage()

    def read_photo(self, filename: str) -> tuple[bytes, str, int]:
        """Return (content, content_type, content_length) for a stored photo.

        Raises:
            ValidationError: If the filename could escape the photo root
            NotFoundError: If no photo with that name exists
            UnsupportedMediaError: If the extension is not png/jpg/jpeg
            StorageError: If the file cannot be read
        """
        logger.debug("Serving photo", extra={"photo_filename": filename})
        return self.photos.read_photo(filename=filename)
