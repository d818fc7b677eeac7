"""
Unified command orchestrator for duplicate detection.
This is the single entry point to the engine — used by the CLI and by library callers.
"""
import logging
from typing import Callable, Optional

from dupfinder.core.deduplicator import DeduplicatorImpl
from dupfinder.core.filters import FileFilter
from dupfinder.core.hasher import HasherImpl, get_algorithm
from dupfinder.core.models import DeduplicationParams, ScanResult
from dupfinder.core.walker import FileWalkerImpl

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the whole scan:
    1. Walk the root directory with the name filter applied
    2. Bucket by size, hash the candidates, group by digest
    3. Merge traversal and read warnings into one ScanResult

    Usage:
        params = DeduplicationParams(root_dir="~/Photos", pattern="*.jpg")
        result = DeduplicationCommand().execute(params)
        for group in result.groups:
            print(group.paths)
    """

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ScanResult:
        """
        Execute one scan with the given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            ScanResult with ordered groups, warnings and statistics

        Raises:
            FatalScanError: If the root directory is missing or not a directory
        """
        file_filter = FileFilter.from_pattern(params.pattern)
        logger.info(f"Scanning {params.root_dir} for {file_filter.describe()}")

        walker = FileWalkerImpl(
            root_dir=params.root_dir,
            file_filter=file_filter,
            skip_empty=params.skip_empty,
            follow_symlinks=params.follow_symlinks
        )
        files, traversal_warnings = walker.scan(progress_callback=progress_callback)

        deduplicator = DeduplicatorImpl(
            hasher=HasherImpl(get_algorithm(params.algorithm), chunk_size=params.chunk_size),
            workers=params.workers
        )
        groups, read_warnings, stats = deduplicator.find_duplicates(files, progress_callback=progress_callback)

        return ScanResult(groups=groups, warnings=traversal_warnings + read_warnings, stats=stats)


def find_duplicates(root_dir: str, pattern: Optional[str] = None, **options) -> ScanResult:
    """
    Find groups of byte-identical files under root_dir.

    Args:
        root_dir: Directory to scan recursively
        pattern: Optional exact file name ('report.txt') or extension wildcard ('*.log')
        **options: Any other DeduplicationParams field (algorithm, workers, chunk_size, ...)
    """
    params = DeduplicationParams(root_dir=root_dir, pattern=pattern, **options)
    return DeduplicationCommand().execute(params)
