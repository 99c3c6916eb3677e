"""
Stream port interface: chunked, bounded-memory file pipelines.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from file_manager.ports.codec.codec_port import ChunkTransform


class StreamPort(ABC):
    """Port interface for streaming file operations."""

    @abstractmethod
    def read_chunks(self, path: str) -> Iterator[bytes]:
        """
        Yield the content of a file in bounded chunks.

        Args:
            path: Absolute path of the file to read

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
    def pipe(
        self, source: str, destination: str, transform: Optional[ChunkTransform] = None
    ) -> int:
        """
        Stream a file into another, optionally through a transform.

        The destination is created or truncated. On failure it may be left
        incomplete.

        Args:
            source: Absolute path of the file to read
            destination: Absolute path of the file to write
            transform: Optional chunk transform applied between read and write

        Returns:
            Number of bytes written to the destination

        Raises:
            FileRepositoryError: If reading, transforming or writing fails
        """
        pass

    @abstractmethod
    def digest(self, path: str, algorithm: str = "sha256") -> str:
        """
        Compute the hex digest of a file, reading it in chunks.

        Raises:
            FileRepositoryError: If the file cannot be read completely
        """
        pass
