"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from file_manager.entities.directory_entry import DirectoryEntry


class FileRepositoryPort(ABC):
    """Port interface for non-streaming file repository operations."""

    @abstractmethod
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List the entries of a directory, sorted directories first, then files, then others.

        Args:
            directory: Path to the directory to list

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def require_directory(self, path: str) -> None:
        """
        Check that a path is an existing directory.

        Raises:
            FileRepositoryError: NotFound or NotADirectory
        """
        pass

    @abstractmethod
    def require_file(self, path: str) -> None:
        """
        Check that a path exists and is not a directory.

        Raises:
            FileRepositoryError: NotFound or IsADirectory
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> DirectoryEntry:
        """
        Create an empty file, never touching an existing one.

        Args:
            path: Absolute path of the file to create

        Returns:
            A DirectoryEntry for the created file

        Raises:
            FileRepositoryError: AlreadyExists or PermissionDenied
        """
        pass

    @abstractmethod
    def rename(self, source: str, target: str) -> None:
        """
        Rename an entry, refusing to replace an existing target.

        Files never replace a target that appears concurrently. Directories
        are checked first and then renamed, so that window remains for them.

        Raises:
            FileRepositoryError: NotFound or AlreadyExists
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Unlink a file; directories are refused.

        Raises:
            FileRepositoryError: NotFound, IsADirectory or PermissionDenied
        """
        pass

    @abstractmethod
    def same_file(self, first: str, second: str) -> bool:
        """Return True if both paths exist and refer to the same file."""
        pass
