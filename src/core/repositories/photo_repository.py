"""Abstract contract for contact photo storage."""

from abc import ABC, abstractmethod


class PhotoStorageRepository(ABC):
    """Contract for storing and reading contact photos.

    Implementations could be local disk or an object store.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def save_photo(
        self,
        *,
        contact_id: str,
        file_data: bytes,
        original_filename: str | None,
        base_url: str,
    ) -> str:
        """Store a contact photo, replacing any previous one, and return its URL.

        Args:
            contact_id: Contact the photo belongs to
            file_data: Binary image content
            original_filename: Filename supplied by the uploader
            base_url: Externally visible origin of the current request

        Returns:
            Retrieval URL of the form {base_url}/contacts/image/{filename}

        Raises:
            ValidationError: If the derived filename is not a safe name
            StorageError: If the photo root cannot be created or written
        """

    @abstractmethod
    def read_photo(self, *, filename: str) -> tuple[bytes, str, int]:
        """Read a stored photo by filename.

        Args:
            filename: Stored filename, e.g. "abc123.png"

        Returns:
            Tuple of (content_bytes, content_type, content_length)

        Raises:
            ValidationError: If the filename could escape the photo root
            NotFoundError: If no such photo exists
            UnsupportedMediaError: If the extension has no known content type
            StorageError: If the read fails
        """
