"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for the duplicate detection engine.

Only root-level structural problems are raised out of a scan (FatalScanError).
Per-file problems (FileReadError) are raised by the hasher and absorbed by the
resolver, which turns them into ScanWarning records.
"""


class DupFinderError(Exception):
    """Base class for all errors raised by dupfinder."""


class FatalScanError(DupFinderError, RuntimeError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, root_dir: str, reason: str):
        self.root_dir = root_dir
        self.reason = reason
        super().__init__(f"{reason}: {root_dir}")


class FileReadError(DupFinderError):
    """A candidate file could not be opened or read while hashing."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read {path}: {cause}")
