from collections.abc import Mapping

from core.models.errors import UnsupportedMediaError
from core.utils.constants import CONTENT_TYPE_BY_EXTENSION

CONTENT_TYPES: Mapping[str, str] = CONTENT_TYPE_BY_EXTENSION


def content_type_for_filename(filename: str) -> str:
    """Return the content type a stored photo is served with.

    Lookup is case-insensitive on the extension, so "abc.JPG" is image/jpeg.
    """
    dot = filename.rfind(".")
    extension = filename[dot:].lower() if dot != -1 else ""

    content_type = CONTENT_TYPES.get(extension)
    if content_type is None:
        raise UnsupportedMediaError(
            message="Unsupported photo type",
            details={"filename": filename, "extension": extension},
        )

    return content_type
