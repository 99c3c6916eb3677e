"""
Brotli codec adapter.

Output is a plain Brotli stream (RFC 7932), readable by any standard Brotli tool.
"""

from typing import Iterator

import brotli
from typing_extensions import override

from file_manager.exceptions import ErrorKind, FileRepositoryError
from file_manager.ports.codec.codec_port import ChunkTransform, CodecPort


class _BrotliCompress(ChunkTransform):
    def __init__(self, quality: int):
        self._compressor = brotli.Compressor(quality=quality)

    @override
    def process(self, chunk: bytes) -> Iterator[bytes]:
        data = self._compressor.process(chunk)
        if data:
            yield data

    @override
    def finish(self) -> Iterator[bytes]:
        data = self._compressor.finish()
        if data:
            yield data


class _BrotliDecompress(ChunkTransform):
    def __init__(self, output_limit: int):
        self._decompressor = brotli.Decompressor()
        self._output_limit = output_limit

    @override
    def process(self, chunk: bytes) -> Iterator[bytes]:
        try:
            data = self._decompressor.process(chunk, output_buffer_limit=self._output_limit)
            if data:
                yield data
            # Pending output must be drained before the next chunk is accepted
            while not self._decompressor.can_accept_more_data():
                data = self._decompressor.process(b"", output_buffer_limit=self._output_limit)
                if not data:
                    break
                yield data
        except brotli.error as e:
            raise FileRepositoryError(f"Invalid brotli data: {e}", ErrorKind.CORRUPT_DATA)

    @override
    def finish(self) -> Iterator[bytes]:
        if not self._decompressor.is_finished():
            raise FileRepositoryError("Truncated brotli stream", ErrorKind.CORRUPT_DATA)
        return iter(())


class BrotliCodec(CodecPort):
    """Brotli implementation of the codec port."""

    name = "brotli"

    def __init__(self, quality: int = 11, output_limit: int = 64 * 1024):
        """
        Args:
            quality: Compression quality, 0 (fastest) to 11 (densest)
            output_limit: Largest piece of decompressed output produced at once
        """
        if output_limit <= 0:
            raise ValueError("output_limit must be positive")
        self._quality = quality
        self._output_limit = output_limit

    @override
    def compressor(self) -> ChunkTransform:
        return _BrotliCompress(self._quality)

    @override
    def decompressor(self) -> ChunkTransform:
        return _BrotliDecompress(self._output_limit)
