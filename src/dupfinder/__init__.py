"""
dupfinder — finds files with byte-for-byte identical content under a directory tree.

Core features:
- Two-phase detection: size bucketing, then streaming content hashing
- Exact-name ('report.txt') or extension ('*.log') filtering
- SHA-256 by default, xxHash XXH3-128 optional
- Optional parallel hashing with a bounded worker pool
- CLI interface with grouped text or JSON output
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dupfinder")
except PackageNotFoundError:
    __version__ = "0.3.0"

# Public API — only what users should import directly
from dupfinder.commands import DeduplicationCommand, find_duplicates
from dupfinder.core import (
    DeduplicationParams, DuplicateGroup, FatalScanError, FileEntry, FileFilter,
    HashAlgorithmName, ScanResult, ScanWarning, WarningKind)
from dupfinder.utils.convert_utils import ConvertUtils

__all__ = [
    "DeduplicationCommand",
    "find_duplicates",
    "DeduplicationParams",
    "DuplicateGroup",
    "FatalScanError",
    "FileEntry",
    "FileFilter",
    "HashAlgorithmName",
    "ScanResult",
    "ScanWarning",
    "WarningKind",
    "ConvertUtils",
    "__version__",
]
