"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
components can be swapped in tests (e.g. a counting hasher) without subclassing.

Key Components:
---------------
- HashAlgorithm: Factory for incremental hash objects (SHA-256, xxHash, ...).
- Hasher: Streams a file through a HashAlgorithm and returns its digest.
- FileWalker: Enumerates regular files under a root directory.
- FileGrouper: Groups entries by size or by digest.
- Deduplicator: Resolves size buckets into final duplicate groups.
"""

from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from dupfinder.core.models import (
    DeduplicationStats,
    DuplicateGroup,
    FileEntry,
    ScanWarning,
)

ProgressCallback = Callable[[str, int, Optional[int]], None]


class IncrementalHash(Protocol):
    """The subset of the hashlib object API the hasher relies on."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for pluggable hash algorithms.

    Implementations return a fresh incremental hash object so content can be
    fed in chunks instead of being loaded into memory at once.
    """
    name: str
    digest_size: int

    def new(self) -> IncrementalHash:
        ...


class Hasher(Protocol):
    """Interface for computing the content digest of a file."""
    def compute_digest(self, path: str) -> bytes: ...


class FileWalker(Protocol):
    """
    Interface for scanning a directory tree and collecting file metadata.
    """
    def scan(
        self,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[FileEntry], List[ScanWarning]]:
        """
        Walk the configured root.

        Returns:
            Entries in discovery order and the warnings absorbed on the way.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping entries by a computed key, keeping only groups of 2+.
    """
    def group_by_size(self, files: List[FileEntry]) -> Dict[int, List[FileEntry]]:
        """Group entries by their size in bytes."""
        ...

    def group_by_digest(
        self,
        files: List[FileEntry],
        digests: Dict[str, bytes]
    ) -> Dict[bytes, List[FileEntry]]:
        """Group entries by a precomputed digest, skipping entries without one."""
        ...

    def group_by(self, files: List[FileEntry], key_func: Callable[[FileEntry], Any]) -> Dict[Any, List[FileEntry]]:
        ...


class Deduplicator(Protocol):
    """
    Interface for the resolver that turns scanned entries into duplicate groups.
    """
    def find_duplicates(
        self,
        files: List[FileEntry],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], List[ScanWarning], DeduplicationStats]:
        """
        Run size bucketing and content hashing over the given entries.

        Returns:
            Ordered duplicate groups, per-file warnings, and statistics.
        """
        ...
