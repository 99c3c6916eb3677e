import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class RenameFileUseCase:
    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, target: str) -> None:
        try:
            self._logger.info(f"Renaming {source} -> {target}")
            self._file_repository.rename(source, target)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error renaming file: {e}")
            raise FileRepositoryError(f"Failed to rename {source}: {str(e)}")
