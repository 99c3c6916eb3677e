"""
Use cases for moving the session between directories.
"""

import logging
from typing import Optional

from file_manager.entities.directory_state import DirectoryState
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.paths import resolve_path


class ChangeDirectoryUseCase:
    """Use case for moving the session into another directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository used to validate the target
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, state: DirectoryState, target: str) -> str:
        """
        Change the cwd to ``target``, resolved against the current cwd.

        Args:
            state: Session directory state
            target: Absolute or cwd-relative path

        Returns:
            The new cwd

        Raises:
            FileRepositoryError: NotFound or NotADirectory; the cwd is left unchanged
        """
        path = resolve_path(state.cwd, target)
        try:
            self._logger.info(f"Changing directory to: {path}")
            self._file_repository.require_directory(path)
            return state.change_to(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileRepositoryError(f"Failed to change directory to {path}: {str(e)}")


class GoUpUseCase:
    """Use case for moving the session to the parent directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, state: DirectoryState) -> str:
        before = state.cwd
        after = state.go_up()
        if after == before:
            self._logger.info(f"Already at filesystem root: {before}")
        return after
