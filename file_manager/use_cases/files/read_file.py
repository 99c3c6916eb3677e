"""
Use case for streaming a file's content to an output sink.
"""

import logging
from typing import Callable, Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.files.stream_port import StreamPort


class ReadFileUseCase:
    """Use case for printing a file chunk by chunk."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        stream: StreamPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._stream = stream
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, sink: Callable[[bytes], None]) -> int:
        """
        Feed the content of ``path`` to ``sink`` as it is read.

        Args:
            path: Absolute path of the file
            sink: Callable receiving each chunk

        Returns:
            Number of bytes read

        Raises:
            FileRepositoryError: NotFound or IsADirectory before any output,
                or a read error mid-stream
        """
        try:
            self._logger.info(f"Reading file: {path}")
            self._file_repository.require_file(path)
            total = 0
            for chunk in self._stream.read_chunks(path):
                sink(chunk)
                total += len(chunk)
            self._logger.info(f"Read {total} bytes")
            return total
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")
