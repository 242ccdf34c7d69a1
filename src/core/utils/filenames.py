"""Checks for photo filenames coming from clients."""

from pathlib import PurePosixPath, PureWindowsPath

from core.utils.constants import FORBIDDEN_FILENAME_CHARACTERS


def is_safe_filename(filename: str | None) -> bool:
    """Return True if `filename` names a single entry inside the photo root.

    Rejects empty names, parent references ("..") anywhere in the name,
    path separators, drive letters, NUL bytes and absolute paths.
    """
    if not filename or not filename.strip():
        return False

    if filename in {".", ".."} or ".." in filename:
        return False

    if any(char in FORBIDDEN_FILENAME_CHARACTERS for char in filename):
        return False

    if PurePosixPath(filename).is_absolute() or PureWindowsPath(filename).is_absolute():
        return False

    return True
