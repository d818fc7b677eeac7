"""
Unit tests for HasherImpl with SHA-256 and xxHash algorithms.
Verifies streaming digests, fixed digest sizes, and read error reporting.
"""
import hashlib
from unittest import mock

import pytest
import xxhash

from dupfinder.core import (
    FileReadError, HashAlgorithmName, HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, get_algorithm)


class TestHasherImpl:
    """Test digest computation with chunk-based reading."""

    def test_sha256_matches_hashlib(self, tmp_path):
        content = b"test content " * 10000
        path = tmp_path / "file.bin"
        path.write_bytes(content)

        digest = HasherImpl(Sha256AlgorithmImpl(), chunk_size=4096).compute_digest(str(path))

        assert digest == hashlib.sha256(content).digest()
        assert len(digest) == Sha256AlgorithmImpl.digest_size == 32

    def test_xxhash_matches_library(self, tmp_path):
        content = bytes(range(256)) * 500
        path = tmp_path / "file.bin"
        path.write_bytes(content)

        digest = HasherImpl(XXHashAlgorithmImpl(), chunk_size=4096).compute_digest(str(path))

        assert digest == xxhash.xxh3_128(content).digest()
        assert len(digest) == XXHashAlgorithmImpl.digest_size == 16

    def test_digest_independent_of_chunk_size(self, tmp_path):
        content = b"0123456789abcdef" * 7777
        path = tmp_path / "file.bin"
        path.write_bytes(content)

        digests = {HasherImpl(chunk_size=size).compute_digest(str(path)) for size in (1, 4096, 65536, 10**6)}

        assert len(digests) == 1

    def test_empty_file_has_digest(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")
        assert HasherImpl().compute_digest(str(path)) == hashlib.sha256(b"").digest()

    def test_same_size_different_content(self, tmp_path):
        first = tmp_path / "a"
        second = tmp_path / "b"
        first.write_bytes(b"A" * 1024)
        second.write_bytes(b"B" * 1024)
        hasher = HasherImpl()
        assert hasher.compute_digest(str(first)) != hasher.compute_digest(str(second))

    def test_reads_in_bounded_chunks(self, tmp_path):
        """The file must never be read in one call larger than chunk_size."""
        path = tmp_path / "large.bin"
        path.write_bytes(b"x" * (256 * 1024))
        read_sizes = []
        real_open = open

        def spying_open(*args, **kwargs):
            handle = real_open(*args, **kwargs)
            real_read = handle.read

            def read(size=-1):
                read_sizes.append(size)
                return real_read(size)

            handle.read = read
            return handle

        with mock.patch("builtins.open", side_effect=spying_open):
            HasherImpl(chunk_size=8192).compute_digest(str(path))

        assert read_sizes
        assert all(0 < size <= 8192 for size in read_sizes)

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            HasherImpl(chunk_size=0)

    def test_get_algorithm(self):
        assert isinstance(get_algorithm(HashAlgorithmName.SHA256), Sha256AlgorithmImpl)
        assert isinstance(get_algorithm(HashAlgorithmName.XXHASH), XXHashAlgorithmImpl)


class TestHasherErrors:
    """Unreadable files raise FileReadError with the original cause attached."""

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "gone.bin"
        with pytest.raises(FileReadError) as exc_info:
            HasherImpl().compute_digest(str(missing))

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_read_failure_mid_stream_closes_handle(self, tmp_path):
        path = tmp_path / "flaky.bin"
        path.write_bytes(b"z" * 100000)
        handles = []
        real_open = open

        def failing_open(*args, **kwargs):
            handle = real_open(*args, **kwargs)
            handles.append(handle)
            calls = {"count": 0}
            real_read = handle.read

            def read(size=-1):
                calls["count"] += 1
                if calls["count"] == 2:
                    raise OSError(5, "Input/output error")
                return real_read(size)

            handle.read = read
            return handle

        with mock.patch("builtins.open", side_effect=failing_open):
            with pytest.raises(FileReadError, match="Input/output error"):
                HasherImpl(chunk_size=4096).compute_digest(str(path))

        assert len(handles) == 1
        assert handles[0].closed
