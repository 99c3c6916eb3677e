"""
Use case for creating an empty file.
"""

import logging
from typing import Optional

from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating an empty file without clobbering an existing one."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> DirectoryEntry:
        """
        Create an empty file at ``path``.

        Raises:
            FileRepositoryError: AlreadyExists or PermissionDenied
        """
        try:
            self._logger.info(f"Creating file: {path}")
            return self._file_repository.create_file(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating file: {e}")
            raise FileRepositoryError(f"Failed to create {path}: {str(e)}")
