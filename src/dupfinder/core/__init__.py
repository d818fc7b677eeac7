"""
Core duplicate detection engine — filter, walker, grouper, hasher, and resolver.

This package contains the whole detection pipeline of dupfinder:
- FileFilter: exact-name / '*.ext' pattern matching
- FileWalkerImpl: recursive traversal with cycle-safe symlink following
- FileGrouperImpl: size and digest grouping with singleton filtering
- HasherImpl + Sha256AlgorithmImpl / XXHashAlgorithmImpl: streaming content hashing
- DeduplicatorImpl: size → content hash pipeline with optional worker pool
- Models: FileEntry, DuplicateGroup, ScanWarning, ScanResult and configuration objects

No I/O beyond reading the scanned tree — suitable for CLI and library usage.
"""

from .errors import DupFinderError, FatalScanError, FileReadError
from .filters import FileFilter, FilterMode
from .walker import FileWalkerImpl
from .grouper import FileGrouperImpl
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, get_algorithm
from .deduplicator import DeduplicatorImpl
from .models import (
    FileEntry, DuplicateGroup, ScanWarning, ScanResult, WarningKind,
    DeduplicationConfig, DeduplicationParams, DeduplicationStats, HashAlgorithmName)

__all__ = [
    "DupFinderError",
    "FatalScanError",
    "FileReadError",
    "FileFilter",
    "FilterMode",
    "FileWalkerImpl",
    "FileGrouperImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "DeduplicatorImpl",
    "FileEntry",
    "DuplicateGroup",
    "ScanWarning",
    "ScanResult",
    "WarningKind",
    "DeduplicationConfig",
    "DeduplicationParams",
    "DeduplicationStats",
    "HashAlgorithmName",
]
