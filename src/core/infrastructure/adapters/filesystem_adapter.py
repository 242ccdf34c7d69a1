"""Thin adapter for the local photo directory."""

import os
import tempfile
from pathlib import Path
from typing import Protocol

from core.utils.constants import DEFAULT_PHOTO_DIRECTORY, ENV_PHOTO_DIRECTORY


class FilesystemAdapterProtocol(Protocol):
    """Minimal filesystem adapter protocol (repository-facing)."""

    root: Path

    def ensure_root(self) -> None: ...

    def write_atomic(self, *, name: str, data: bytes) -> Path: ...

    def read_bytes(self, *, name: str) -> bytes: ...

    def list_names(self, *, prefix: str) -> list[str]: ...

    def remove(self, *, name: str) -> None: ...

    def same_file(self, *, name: str, other: str) -> bool: ...


class FilesystemAdapter:
    """Low-level photo directory operations (mechanical, no error handling).

    This adapter:
    - Owns the resolved, absolute photo root
    - Does NOT handle errors (OSError bubbles up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, root: str | os.PathLike[str] | None = None) -> None:
        """Resolve the photo root from argument or environment."""
        configured = root or os.getenv(ENV_PHOTO_DIRECTORY) or DEFAULT_PHOTO_DIRECTORY
        self.root: Path = Path(configured).expanduser().resolve()

    def ensure_root(self) -> None:
        """Create the root and any missing parents; existing directories are fine."""
        self.root.mkdir(parents=True, exist_ok=True)

    def write_atomic(self, *, name: str, data: bytes) -> Path:
        """Write `data` to root/name so readers never see a partial file.

        Bytes go to a hidden temp file in the same directory, which is then
        renamed over the target. The temp file is removed on failure.
        """
        target = self.root / name
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{name}.", suffix=".tmp")

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        return target

    def read_bytes(self, *, name: str) -> bytes:
        """Read root/name.

        Raises FileNotFoundError if absent - caught by domain implementation.
        """
        return (self.root / name).read_bytes()

    def list_names(self, *, prefix: str) -> list[str]:
        """Names of regular files in the root starting with `prefix`."""
        if not self.root.is_dir():
            return []

        return sorted(
            entry.name
            for entry in self.root.iterdir()
            if entry.name.startswith(prefix) and entry.is_file()
        )

    def remove(self, *, name: str) -> None:
        """Delete root/name; a file that is already gone is not an error."""
        (self.root / name).unlink(missing_ok=True)

    def same_file(self, *, name: str, other: str) -> bool:
        """True if root/name and root/other are one file on disk.

        Differs from name comparison on case-insensitive filesystems, where
        `c.png` and `c.PNG` resolve to the same entry.
        """
        try:
            return (self.root / name).samefile(self.root / other)
        except FileNotFoundError:
            return False
