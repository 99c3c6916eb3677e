"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os

from typing_extensions import override

from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.exceptions import ErrorKind, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort

# errno values meaning the filesystem will not hard-link this entry
_NO_HARD_LINKS = {
    errno.EPERM,
    errno.EXDEV,
    errno.EMLINK,
    errno.ENOSYS,
    errno.EOPNOTSUPP,
    errno.ENOTSUP,
}


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}", ErrorKind.NOT_FOUND)

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}", ErrorKind.NOT_A_DIRECTORY)

    def _create_entries(self, paths: list[str]) -> list[DirectoryEntry]:
        """
        Create DirectoryEntry entities from a list of paths.

        Entries that vanish between listing and stat are skipped.

        Args:
            paths: List of entry paths

        Returns:
            List of DirectoryEntry entities
        """
        entries: list[DirectoryEntry] = []
        for path in paths:
            try:
                entries.append(DirectoryEntry(path))
            except FileRepositoryError as e:
                # Log the error but continue with other entries
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue

        return entries

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        try:
            self._validate_directory(directory)

            paths: list[str] = [
                os.path.join(directory, item) for item in os.listdir(directory)
            ]
            return sorted(self._create_entries(paths), key=DirectoryEntry.sort_key)

        except FileRepositoryError:
            raise
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, directory)

    @override
    def require_directory(self, path: str) -> None:
        self._validate_directory(path)

    @override
    def require_file(self, path: str) -> None:
        if not os.path.exists(path):
            raise FileRepositoryError(f"File does not exist: {path}", ErrorKind.NOT_FOUND)

        if os.path.isdir(path):
            raise FileRepositoryError(f"Path is a directory: {path}", ErrorKind.IS_A_DIRECTORY)

    @override
    def create_file(self, path: str) -> DirectoryEntry:
        try:
            # "x" mode: fail instead of truncating an existing file
            with open(path, "xb"):
                pass
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path)
        self._logger.debug(f"Created empty file {path}")
        return DirectoryEntry(path)

    @override
    def rename(self, source: str, target: str) -> None:
        if not os.path.lexists(source):
            raise FileRepositoryError(f"File does not exist: {source}", ErrorKind.NOT_FOUND)

        if os.path.lexists(target):
            raise FileRepositoryError(f"Target already exists: {target}", ErrorKind.ALREADY_EXISTS)

        if not os.path.isdir(source) or os.path.islink(source):
            if self._link_rename(source, target):
                return

        try:
            os.rename(source, target)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, source)

    def _link_rename(self, source: str, target: str) -> bool:
        """
        Rename a non-directory by hard-linking it to the target, then unlinking it.

        link() never replaces an existing entry, so a target that appeared after
        the existence check is reported instead of overwritten.

        Returns:
            False if the filesystem cannot hard-link, in which case nothing changed
        """
        try:
            os.link(source, target, follow_symlinks=False)
        except FileExistsError as e:
            raise FileRepositoryError.from_os_error(e, target)
        except NotImplementedError:
            return False
        except OSError as e:
            if e.errno in _NO_HARD_LINKS:
                self._logger.debug(f"Hard links unavailable for {source}, falling back to rename")
                return False
            raise FileRepositoryError.from_os_error(e, source)

        try:
            os.unlink(source)
        except OSError as e:
            try:
                os.unlink(target)
            except OSError as cleanup:
                self._logger.warning(f"Could not remove {target} after failed rename: {cleanup}")
            raise FileRepositoryError.from_os_error(e, source)
        return True

    @override
    def delete_file(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            raise FileRepositoryError(f"Path is a directory: {path}", ErrorKind.IS_A_DIRECTORY)

        try:
            os.unlink(path)
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path)

    @override
    def same_file(self, first: str, second: str) -> bool:
        try:
            return os.path.samefile(first, second)
        except OSError:
            return False
