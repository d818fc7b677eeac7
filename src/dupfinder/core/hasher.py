"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content hashing with pluggable hash algorithms.

Files are never loaded whole: HasherImpl reads fixed-size chunks and feeds them
into an incremental hash object, so memory use is bounded by the chunk size no
matter how large the file is.

Equal digests are treated as identical content. For SHA-256 the chance of two
different files colliding is negligible; xxHash XXH3-128 is faster but not
cryptographic, so it offers no protection against crafted collisions.
"""

import hashlib
import logging
from typing import Dict, Type

import xxhash

from dupfinder.core.errors import FileReadError
from dupfinder.core.interfaces import HashAlgorithm, Hasher, IncrementalHash
from dupfinder.core.models import DeduplicationConfig, HashAlgorithmName

logger = logging.getLogger(__name__)


# Use the same way to implement and plug in any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"
    digest_size = 32

    def new(self) -> IncrementalHash:
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh3_128"
    digest_size = 16

    def new(self) -> IncrementalHash:
        return xxhash.xxh3_128()


ALGORITHMS: Dict[HashAlgorithmName, Type[HashAlgorithm]] = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    """Instantiate the algorithm registered under the given name."""
    return ALGORITHMS[name]()


class HasherImpl(Hasher):
    """
    A hasher that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DeduplicationConfig.DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_digest(self, path: str) -> bytes:
        """
        Stream the whole file through the algorithm and return the final digest.

        Raises:
            FileReadError: the file cannot be opened or a read fails mid-stream
        """
        hasher = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    hasher.update(chunk)
        except OSError as e:
            raise FileReadError(path, e) from e

        digest = hasher.digest()
        logger.debug(f"{self.algorithm.name} {digest.hex()} {path}")
        return digest
