import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class DeleteFileUseCase:
    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> None:
        """Unlink a file. Directories are refused with IsADirectory."""
        try:
            self._logger.info(f"Deleting file: {path}")
            self._file_repository.delete_file(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting file: {e}")
            raise FileRepositoryError(f"Failed to delete {path}: {str(e)}")
