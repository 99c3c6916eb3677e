"""
Directory entry domain entity.
"""

import os
import stat
from enum import Enum
from typing import Any

from file_manager.exceptions import FileRepositoryError


class EntryKind(str, Enum):
    """Classification of a directory entry for listings."""

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


# Listing order: directories, then files, then everything else
_KIND_ORDER = {EntryKind.DIRECTORY: 0, EntryKind.FILE: 1, EntryKind.OTHER: 2}


class DirectoryEntry:
    """
    File system entry entity (file, directory or other) as seen by a listing.
    """

    def __init__(self, path: str):
        """
        Initialize the DirectoryEntry entity.

        Args:
            path: Absolute path to the entry

        Raises:
            FileRepositoryError: If path is empty or the entry vanished
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.kind, self.size = self._classify()

    def _classify(self) -> tuple[EntryKind, int]:
        """Stat the entry, following symlinks, and fall back to OTHER for dangling ones."""
        try:
            st = os.stat(self.path)
        except FileNotFoundError:
            if os.path.lexists(self.path):
                # Dangling symlink
                return EntryKind.OTHER, 0
            raise FileRepositoryError(f"Entry does not exist: {self.path}")
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, self.path)

        if stat.S_ISDIR(st.st_mode):
            return EntryKind.DIRECTORY, 0
        if stat.S_ISREG(st.st_mode):
            return EntryKind.FILE, st.st_size
        return EntryKind.OTHER, 0

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def sort_key(self) -> tuple[int, str]:
        """Key placing directories first, then files, then others, each by name."""
        return _KIND_ORDER[self.kind], self.name

    def get_details(self) -> dict[str, Any]:
        """
        Get entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "type": self.kind.value,
            "size": self.size,
        }

    def __str__(self) -> str:
        return f"DirectoryEntry(name='{self.name}', kind='{self.kind.value}')"

    def __repr__(self) -> str:
        return f"DirectoryEntry(path='{self.path}')"
