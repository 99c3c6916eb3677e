"""
Codec port: incremental byte transforms for compression and decompression.
"""

from abc import ABC, abstractmethod
from typing import Iterator


class ChunkTransform(ABC):
    """
    A stateful transform fed one chunk at a time.

    Output is yielded in pieces so a small input chunk that expands a lot
    never has to be held in memory at once.
    """

    @abstractmethod
    def process(self, chunk: bytes) -> Iterator[bytes]:
        """Feed a chunk and yield whatever output is ready."""
        pass

    @abstractmethod
    def finish(self) -> Iterator[bytes]:
        """
        Signal end of input and yield the remaining output.

        Raises:
            FileRepositoryError: CorruptData if the input stream was incomplete
        """
        pass


class CodecPort(ABC):
    """Port for a compression codec."""

    name: str

    @abstractmethod
    def compressor(self) -> ChunkTransform:
        """Return a fresh compressing transform."""
        pass

    @abstractmethod
    def decompressor(self) -> ChunkTransform:
        """Return a fresh decompressing transform."""
        pass
