"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Resolves scanned files into duplicate groups with a two-stage pipeline:
    size: bucket by exact byte size, drop sizes seen only once
    hash: stream-hash every member of the remaining buckets, split by digest

Hashing runs sequentially by default. With more than one worker, per-file jobs
go to a bounded thread pool; each job returns its (entry, digest, error) result
to this module, which alone builds the digest table and the final groups.
"""
import os
import time
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Tuple

from dupfinder.core.errors import FileReadError
from dupfinder.core.grouper import FileGrouperImpl
from dupfinder.core.hasher import HasherImpl
from dupfinder.core.interfaces import Deduplicator, FileGrouper, Hasher, ProgressCallback
from dupfinder.core.models import (
    DeduplicationStats,
    DuplicateGroup,
    FileEntry,
    ScanWarning,
    Stage,
    WarningKind,
)

logger = logging.getLogger(__name__)

HashOutcome = Tuple[FileEntry, Optional[bytes], Optional[FileReadError]]


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Implements size-then-content duplicate detection and collects statistics.
    """
    def __init__(self, grouper: FileGrouper = None, hasher: Hasher = None, workers: int = 1):
        self.grouper = grouper or FileGrouperImpl()
        self.hasher = hasher or HasherImpl()
        self.workers = workers

    def find_duplicates(
        self,
        files: List[FileEntry],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[DuplicateGroup], List[ScanWarning], DeduplicationStats]:
        """
        Main resolution pipeline.
        Args:
            files: Scanned entries in discovery order
            progress_callback: Reports hashing progress (stage, current, total)
        Returns:
            Tuple of (ordered duplicate groups, file read warnings, statistics)
        """
        stats = DeduplicationStats()
        stats.files_scanned = len(files)
        total_start_time = time.time()

        # Stage 1: group by size
        start_time = time.time()
        size_groups = self.grouper.group_by_size(files)
        candidates = [f for group in size_groups.values() for f in group]
        stats.update_stage(Stage.SIZE.value, len(size_groups), len(candidates), time.time() - start_time)
        logger.info(f"Size grouping: {len(candidates)} candidates in {len(size_groups)} size groups")

        # Stage 2: hash candidates, then split every size group by digest
        start_time = time.time()
        digests, warnings = self._compute_digests(candidates, progress_callback)
        stats.files_hashed = len(candidates)

        groups: List[DuplicateGroup] = []
        for size, group in size_groups.items():
            for digest, members in self.grouper.group_by_digest(group, digests).items():
                groups.append(DuplicateGroup(size=size, digest=digest, files=members))

        discovery_index = {f.path: i for i, f in enumerate(files)}
        groups.sort(key=lambda g: (-g.duplicate_count, -g.size, discovery_index[g.files[0].path]))

        stats.update_stage(
            Stage.HASH.value,
            len(groups),
            sum(g.duplicate_count for g in groups),
            time.time() - start_time
        )
        logger.info(f"Content hashing: {len(groups)} duplicate groups, {len(warnings)} unreadable files")

        stats.total_time = time.time() - total_start_time
        return groups, warnings, stats

    def _compute_digests(
        self,
        candidates: List[FileEntry],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[Dict[str, bytes], List[ScanWarning]]:
        """
        Hash every candidate. Unreadable files are left out of the digest table
        and reported as warnings in candidate order.
        """
        digests: Dict[str, bytes] = {}
        errors: Dict[str, FileReadError] = {}
        total = len(candidates)

        for processed, (entry, digest, error) in enumerate(self._iter_hash_outcomes(candidates), 1):
            if error is not None:
                errors[entry.path] = error
            else:
                digests[entry.path] = digest
            if progress_callback:
                progress_callback(Stage.HASH.label, processed, total)

        warnings = []
        for entry in candidates:
            error = errors.get(entry.path)
            if error is not None:
                logger.warning(f"Could not hash {entry.path}: {error.cause}")
                warnings.append(ScanWarning(kind=WarningKind.FILE_READ, path=entry.path, message=str(error.cause)))
        return digests, warnings

    def _iter_hash_outcomes(self, candidates: List[FileEntry]):
        """Yield one HashOutcome per candidate, in completion order."""
        workers = self._resolve_workers()
        if workers <= 1 or len(candidates) < 2:
            for entry in candidates:
                yield self._hash_one(entry)
            return

        logger.debug(f"Hashing {len(candidates)} files with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self._hash_one, entry) for entry in candidates]
            for future in as_completed(futures):
                yield future.result()

    def _hash_one(self, entry: FileEntry) -> HashOutcome:
        try:
            return entry, self.hasher.compute_digest(entry.path), None
        except FileReadError as e:
            return entry, None, e

    def _resolve_workers(self) -> int:
        if self.workers == 0:
            return os.cpu_count() or 1
        return self.workers
