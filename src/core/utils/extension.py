"""File extension resolution for uploaded photos."""

from core.utils.constants import DEFAULT_PHOTO_EXTENSION


def resolve_extension(original_filename: str | None) -> str:
    """Derive the extension a stored photo is saved under.

    The extension is everything from the last "." of the uploaded filename,
    dot included, with its case preserved. Names without a dot fall back to
    DEFAULT_PHOTO_EXTENSION.

    Example:
        resolve_extension("pic.v2.jpg") -> ".jpg"
        resolve_extension("avatar") -> ".png"
        resolve_extension("pic.") -> "."
    """
    if not original_filename or "." not in original_filename:
        return DEFAULT_PHOTO_EXTENSION

    return original_filename[original_filename.rindex(".") :]
