"""
Directory state entity: the session's current working directory.
"""

import os

from file_manager.exceptions import ErrorKind, FileRepositoryError


class DirectoryState:
    """
    Mutable holder of the current working directory.

    The cwd is kept absolute and normalized, and is only ever replaced by an
    existing directory.
    """

    def __init__(self, cwd: str):
        """
        Initialize the state on a starting directory.

        Args:
            cwd: Existing directory to start in

        Raises:
            FileRepositoryError: If cwd is not an existing directory
        """
        self._cwd = self._validated(cwd)

    @property
    def cwd(self) -> str:
        return self._cwd

    def change_to(self, path: str) -> str:
        """
        Replace the cwd with another existing directory.

        Args:
            path: Absolute path of the new directory

        Returns:
            The new cwd (canonical path)

        Raises:
            FileRepositoryError: NotFound or NotADirectory; the cwd is left unchanged
        """
        self._cwd = self._validated(path)
        return self._cwd

    def go_up(self) -> str:
        """Move to the parent directory; a no-op at the filesystem root."""
        parent = os.path.dirname(self._cwd)
        if parent != self._cwd:
            self._cwd = parent
        return self._cwd

    def restore(self, snapshot: str) -> None:
        """Put back a cwd captured before a failed command."""
        self._cwd = snapshot

    @staticmethod
    def _validated(path: str) -> str:
        if not path or not os.path.isabs(path):
            raise FileRepositoryError(f"Path must be absolute: {path!r}")
        if not os.path.exists(path):
            raise FileRepositoryError(f"Directory does not exist: {path}", ErrorKind.NOT_FOUND)
        if not os.path.isdir(path):
            raise FileRepositoryError(f"Path is not a directory: {path}", ErrorKind.NOT_A_DIRECTORY)
        return os.path.realpath(path)

    def __repr__(self) -> str:
        return f"DirectoryState(cwd='{self._cwd}')"
