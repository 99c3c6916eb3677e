"""
Use case for computing the SHA-256 digest of a file.
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.files.stream_port import StreamPort


class HashFileUseCase:
    """Use case for hashing a file without loading it into memory."""

    algorithm = "sha256"

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        stream: StreamPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._stream = stream
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Hash a file.

        Args:
            path: Absolute path of the file

        Returns:
            Lowercase hexadecimal digest, available only once the whole file was read

        Raises:
            FileRepositoryError: If the file is missing, a directory, or unreadable
        """
        try:
            self._logger.info(f"Hashing file: {path}")
            self._file_repository.require_file(path)
            return self._stream.digest(path, self.algorithm)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error hashing file: {e}")
            raise FileRepositoryError(f"Failed to hash {path}: {str(e)}")
