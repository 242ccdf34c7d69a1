"""Local-filesystem implementation of PhotoStorageRepository."""

import errno

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.filesystem_adapter import (
    FilesystemAdapter,
    FilesystemAdapterProtocol,
)
from core.models.errors import NotFoundError, StorageError, ValidationError
from core.repositories.photo_repository import PhotoStorageRepository
from core.utils.constants import (
    ERROR_CODE_INVALID_FILENAME,
    ERROR_CODE_PHOTO_NOT_FOUND,
    ERROR_CODE_STORAGE_DIRECTORY_FAILED,
    ERROR_CODE_STORAGE_FULL,
    ERROR_CODE_STORAGE_PERMISSION_DENIED,
    ERROR_CODE_STORAGE_READ_FAILED,
    ERROR_CODE_STORAGE_WRITE_FAILED,
)
from core.utils.extension import resolve_extension
from core.utils.filenames import is_safe_filename
from core.utils.mime import content_type_for_filename
from core.utils.request import build_photo_url

logger = Logger(UTC=True)

_FULL_ERRNOS = frozenset({errno.ENOSPC, errno.EDQUOT})
_PERMISSION_ERRNOS = frozenset({errno.EACCES, errno.EPERM, errno.EROFS})


def _translate_os_error(
    exc: OSError,
    *,
    fallback_code: str,
    message: str,
    details: dict[str, str],
) -> StorageError:
    """Turn an OSError into a StorageError that keeps the failure cause."""
    details = {**details, "errno": errno.errorcode.get(exc.errno or 0, "UNKNOWN")}

    if exc.errno in _FULL_ERRNOS:
        return StorageError(
            message="Photo storage is full",
            error_code=ERROR_CODE_STORAGE_FULL,
            details=details,
        )

    if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
        return StorageError(
            message="Photo storage is not writable",
            error_code=ERROR_CODE_STORAGE_PERMISSION_DENIED,
            details=details,
        )

    return StorageError(
        message=message,
        error_code=fallback_code,
        details=details,
        retryable=True,
    )


def _is_sibling(name: str, contact_id: str) -> bool:
    """True if `name` is `contact_id` plus a single-dot extension."""
    if not name.startswith(contact_id):
        return False
    extension = name[len(contact_id) :]
    return extension.startswith(".") and extension.count(".") == 1


class LocalPhotoStorage(PhotoStorageRepository):
    """Photo storage backed by one flat local directory.

    Photos are named `{contact_id}{extension}`. Each contact has at most
    one photo: a new upload replaces the file and removes any copy stored
    under a different extension.
    """

    def __init__(self, adapter: FilesystemAdapterProtocol | None = None) -> None:
        """Create storage using the provided filesystem adapter."""
        self._fs: FilesystemAdapterProtocol = adapter or FilesystemAdapter()

    def save_photo(
        self,
        *,
        contact_id: str,
        file_data: bytes,
        original_filename: str | None,
        base_url: str,
    ) -> str:
        """Write photo bytes under the contact's filename and return its URL."""
        filename = contact_id + resolve_extension(original_filename)

        if not is_safe_filename(filename):
            logger.warning(
                "Rejected unsafe photo filename",
                extra={"contact_id": contact_id, "original_filename": original_filename},
            )
            raise ValidationError(
                message="Invalid photo filename",
                error_code=ERROR_CODE_INVALID_FILENAME,
                details={"contact_id": contact_id},
            )

        logger.debug(
            "Saving photo",
            extra={
                "contact_id": contact_id,
                "photo_filename": filename,
                "root": str(self._fs.root),
                "size": len(file_data),
            },
        )

        try:
            self._fs.ensure_root()
        except OSError as exc:
            logger.exception("Unable to create photo directory", extra={"root": str(self._fs.root)})
            raise _translate_os_error(
                exc,
                fallback_code=ERROR_CODE_STORAGE_DIRECTORY_FAILED,
                message="Unable to prepare photo storage",
                details={"contact_id": contact_id},
            ) from exc

        try:
            self._fs.write_atomic(name=filename, data=file_data)
        except OSError as exc:
            logger.exception("Unable to write photo", extra={"photo_filename": filename})
            raise _translate_os_error(
                exc,
                fallback_code=ERROR_CODE_STORAGE_WRITE_FAILED,
                message="Unable to save image",
                details={"contact_id": contact_id, "filename": filename},
            ) from exc

        self._remove_stale_copies(contact_id=contact_id, keep=filename)

        logger.info("Photo saved", extra={"contact_id": contact_id, "photo_filename": filename})
        return build_photo_url(base_url, filename)

    def read_photo(self, *, filename: str) -> tuple[bytes, str, int]:
        """Read photo bytes and the content type they are served with."""
        if not is_safe_filename(filename):
            logger.warning("Rejected unsafe photo filename", extra={"photo_filename": filename})
            raise ValidationError(
                message="Invalid photo filename",
                error_code=ERROR_CODE_INVALID_FILENAME,
                details={"filename": filename},
            )

        logger.debug("Reading photo", extra={"photo_filename": filename})

        try:
            content = self._fs.read_bytes(name=filename)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
            raise NotFoundError(
                message="Photo not found",
                error_code=ERROR_CODE_PHOTO_NOT_FOUND,
                details={"filename": filename},
            ) from exc
        except OSError as exc:
            logger.exception("Unable to read photo", extra={"photo_filename": filename})
            raise _translate_os_error(
                exc,
                fallback_code=ERROR_CODE_STORAGE_READ_FAILED,
                message="Unable to read image",
                details={"filename": filename},
            ) from exc

        content_type = content_type_for_filename(filename)

        logger.info("Photo read", extra={"photo_filename": filename, "size": len(content)})
        return content, content_type, len(content)

    def _remove_stale_copies(self, *, contact_id: str, keep: str) -> None:
        """Best-effort removal of the contact's photo stored under other extensions."""
        try:
            stale = [
                name
                for name in self._fs.list_names(prefix=contact_id)
                if name != keep
                and _is_sibling(name, contact_id)
                and not self._fs.same_file(name=name, other=keep)
            ]
            for name in stale:
                self._fs.remove(name=name)
                logger.info(
                    "Removed superseded photo",
                    extra={"contact_id": contact_id, "photo_filename": name},
                )
        except OSError:
            logger.warning(
                "Failed to remove superseded photo copies",
                extra={"contact_id": contact_id, "kept": keep},
            )
