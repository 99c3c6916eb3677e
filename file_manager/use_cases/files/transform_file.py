"""
Use case for compressing or decompressing a file through a codec.
"""

import logging
import os
from enum import Enum
from typing import Optional

from file_manager.exceptions import ErrorKind, FileRepositoryError
from file_manager.ports.codec.codec_port import CodecPort
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.files.stream_port import StreamPort


class TransformDirection(str, Enum):
    COMPRESS = "compress"
    DECOMPRESS = "decompress"


class TransformFileUseCase:
    """Use case for streaming a file through a compressor or a decompressor."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        stream: StreamPort,
        codec: CodecPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for existence checks
            stream: Stream port performing the chunked pipe
            codec: Compression codec
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._stream = stream
        self._codec = codec
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str, direction: TransformDirection) -> int:
        """
        Write the compressed or decompressed content of ``source`` to ``destination``.

        Args:
            source: Absolute path of the input file
            destination: Absolute path of the output file, created or truncated
            direction: TransformDirection.COMPRESS or TransformDirection.DECOMPRESS

        Returns:
            Number of bytes written

        Raises:
            FileRepositoryError: CorruptData for malformed input, or any
                validation or I/O failure. The destination may be left incomplete.
        """
        try:
            self._logger.info(
                f"{direction.value.capitalize()} ({self._codec.name}) {source} -> {destination}"
            )
            self._file_repository.require_file(source)
            self._file_repository.require_directory(os.path.dirname(destination))
            if os.path.isdir(destination):
                raise FileRepositoryError(
                    f"Destination is a directory: {destination}", ErrorKind.IS_A_DIRECTORY
                )
            if self._file_repository.same_file(source, destination):
                raise FileRepositoryError(
                    f"Source and destination are the same file: {source}",
                    ErrorKind.ALREADY_EXISTS,
                )

            if direction is TransformDirection.COMPRESS:
                transform = self._codec.compressor()
            else:
                transform = self._codec.decompressor()
            written = self._stream.pipe(source, destination, transform)
            self._logger.info(f"Wrote {written} bytes to {destination}")
            return written
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error during {direction.value}: {e}")
            raise FileRepositoryError(f"Failed to {direction.value} {source}: {str(e)}")
