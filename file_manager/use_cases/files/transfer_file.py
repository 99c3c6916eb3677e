"""
Use case for copying or moving a file into another directory.
"""

import logging
import os
from enum import Enum
from typing import Optional

from file_manager.exceptions import ErrorKind, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.files.stream_port import StreamPort


class TransferMode(str, Enum):
    COPY = "copy"
    MOVE = "move"


class TransferFileUseCase:
    """Use case for streaming a file into a directory, optionally removing the original."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        stream: StreamPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for existence checks and deletion
            stream: Stream port performing the chunked copy
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._stream = stream
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination_dir: str, mode: TransferMode) -> str:
        """
        Copy or move ``source`` into ``destination_dir`` under its own basename.

        The source of a move is deleted only once the copy has fully
        succeeded. If that deletion fails both files exist and an
        OperationFailed error is raised.

        Args:
            source: Absolute path of the file to transfer
            destination_dir: Absolute path of an existing directory
            mode: TransferMode.COPY or TransferMode.MOVE

        Returns:
            Absolute path of the written file

        Raises:
            FileRepositoryError: If validation, streaming or the final delete fails
        """
        destination = os.path.join(destination_dir, os.path.basename(source))
        try:
            self._logger.info(f"{mode.value.capitalize()} {source} -> {destination}")
            self._file_repository.require_directory(destination_dir)
            self._file_repository.require_file(source)
            if self._file_repository.same_file(source, destination):
                raise FileRepositoryError(
                    f"Source and destination are the same file: {source}",
                    ErrorKind.ALREADY_EXISTS,
                )

            written = self._stream.pipe(source, destination)
            self._logger.info(f"Wrote {written} bytes to {destination}")
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error during {mode.value}: {e}")
            raise FileRepositoryError(f"Failed to {mode.value} {source}: {str(e)}")

        if mode is TransferMode.MOVE:
            try:
                self._file_repository.delete_file(source)
            except Exception as e:
                self._logger.error(
                    f"Move partially failed: {destination} written but {source} not removed: {e}"
                )
                raise FileRepositoryError(
                    f"Copied to {destination} but could not remove {source}: {str(e)}",
                    ErrorKind.OPERATION_FAILED,
                )
        return destination
