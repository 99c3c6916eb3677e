"""
Local stream adapter: chunked pipelines between files on the local disk.
"""

import hashlib
import logging
from typing import Iterator, Optional

from typing_extensions import override

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.codec.codec_port import ChunkTransform
from file_manager.ports.files.stream_port import StreamPort


class LocalStreamAdapter(StreamPort):
    """Stream files through bounded-size chunks so memory use never depends on file size."""

    def __init__(self, chunk_size: int = 64 * 1024, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            chunk_size: Maximum number of bytes read per chunk
            logger: Logger instance to use for logging
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def read_chunks(self, path: str) -> Iterator[bytes]:
        try:
            with open(path, "rb") as f:
                while True:
                    chunk = f.read(self._chunk_size)
                    if not chunk:
                        return
                    yield chunk
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, path)

    @override
    def pipe(
        self, source: str, destination: str, transform: Optional[ChunkTransform] = None
    ) -> int:
        # Open the source first so a missing source never creates the destination
        try:
            src = open(source, "rb")
        except OSError as e:
            raise FileRepositoryError.from_os_error(e, source)

        written = 0
        with src:
            try:
                with open(destination, "wb") as out:
                    for chunk in iter(lambda: src.read(self._chunk_size), b""):
                        pieces = transform.process(chunk) if transform else (chunk,)
                        for data in pieces:
                            out.write(data)
                            written += len(data)
                    if transform is not None:
                        for data in transform.finish():
                            out.write(data)
                            written += len(data)
            except OSError as e:
                raise FileRepositoryError.from_os_error(e, destination)

        self._logger.debug(f"Streamed {source} -> {destination} ({written} bytes)")
        return written

    @override
    def digest(self, path: str, algorithm: str = "sha256") -> str:
        h = hashlib.new(algorithm)
        for chunk in self.read_chunks(path):
            h.update(chunk)
        return h.hexdigest()
