"""
Tests for the BrotliCodec adapter.
"""

import os

import brotli
import pytest

from file_manager.adapters.codec.brotli_codec import BrotliCodec
from file_manager.exceptions import ErrorKind, FileRepositoryError


def _run(transform, data: bytes, chunk_size: int = 16) -> bytes:
    out = b""
    for i in range(0, len(data), chunk_size):
        out += b"".join(transform.process(data[i : i + chunk_size]))
    return out + b"".join(transform.finish())


class TestBrotliCodec:
    """Test cases for the BrotliCodec."""

    def test_compressed_output_is_standard_brotli(self):
        """Test that the one-shot brotli module reads our chunked output."""
        payload = b"file manager " * 500
        compressed = _run(BrotliCodec(quality=5).compressor(), payload)

        assert brotli.decompress(compressed) == payload
        assert len(compressed) < len(payload)

    def test_decompresses_standard_brotli(self):
        """Test that output of the one-shot brotli module is accepted."""
        payload = os.urandom(3000)
        compressed = brotli.compress(payload)

        assert _run(BrotliCodec().decompressor(), compressed) == payload

    def test_garbage_is_corrupt_data(self):
        """Test that non-brotli input is reported as CorruptData."""
        with pytest.raises(FileRepositoryError) as exc:
            _run(BrotliCodec().decompressor(), b"this is definitely not brotli data" * 4)
        assert exc.value.kind is ErrorKind.CORRUPT_DATA

    def test_truncated_stream_is_corrupt_data(self):
        """Test that a stream cut before its end marker is rejected."""
        compressed = brotli.compress(os.urandom(5000))

        with pytest.raises(FileRepositoryError) as exc:
            _run(BrotliCodec().decompressor(), compressed[: len(compressed) // 2])
        assert exc.value.kind is ErrorKind.CORRUPT_DATA

    def test_empty_input_round_trip(self):
        """Test that compressing nothing yields a stream decoding to nothing."""
        compressed = _run(BrotliCodec().compressor(), b"")

        assert _run(BrotliCodec().decompressor(), compressed) == b""

    def test_decompressed_pieces_are_bounded(self):
        """Test that a tiny chunk expanding to a lot of data is yielded in bounded pieces."""
        size = 8 * 1024 * 1024
        compressed = brotli.compress(b"\0" * size, quality=5)
        assert len(compressed) < 64 * 1024
        transform = BrotliCodec(output_limit=4096).decompressor()

        total = 0
        for piece in transform.process(compressed):
            assert len(piece) <= 4096
            total += len(piece)
        assert list(transform.finish()) == []

        assert total == size

    def test_invalid_output_limit(self):
        with pytest.raises(ValueError):
            BrotliCodec(output_limit=0)
