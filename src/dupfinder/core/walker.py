"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Implements directory traversal for duplicate detection.
Features:
- Recursively walks the root with os.walk (sorted, so discovery order is stable)
- Emits only regular files; sockets, FIFOs, devices and broken links are skipped
- Applies the name/extension FileFilter
- Walks the real tree first, then followed directory links, tracking visited
  (device, inode) pairs so cycles and aliases are entered only once
- Unreadable subdirectories become warnings, only a bad root is fatal
"""

import os
import stat
import time
import logging
from pathlib import Path
from typing import List, Optional, Set, Tuple

from dupfinder.core.errors import FatalScanError
from dupfinder.core.filters import FileFilter
from dupfinder.core.interfaces import FileWalker, ProgressCallback
from dupfinder.core.models import DeduplicationConfig, FileEntry, ScanWarning, Stage, WarningKind

logger = logging.getLogger(__name__)


class FileWalkerImpl(FileWalker):
    """
    Walks a directory tree and collects FileEntry records for regular files.

    Attributes:
        root_dir: Root directory to scan
        file_filter: Name/extension filter applied to every regular file
        skip_empty: Drop zero-byte files
        follow_symlinks: Follow symbolic links to files and directories
    """

    def __init__(
        self,
        root_dir: str,
        file_filter: Optional[FileFilter] = None,
        skip_empty: bool = False,
        follow_symlinks: bool = True
    ):
        self.root_dir = root_dir
        self.file_filter = file_filter or FileFilter()
        self.skip_empty = skip_empty
        self.follow_symlinks = follow_symlinks

    def scan(
        self,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[List[FileEntry], List[ScanWarning]]:
        """
        Walk the root and return (entries in discovery order, warnings).

        Raises:
            FatalScanError: root does not exist or is not a directory
        """
        root_path = Path(self.root_dir)
        if not root_path.exists():
            logger.error(f"Directory does not exist: {self.root_dir}")
            raise FatalScanError(self.root_dir, "Directory does not exist")
        if not root_path.is_dir():
            logger.error(f"Not a directory: {self.root_dir}")
            raise FatalScanError(self.root_dir, "Not a directory")

        root = os.path.abspath(self.root_dir)
        logger.debug(f"Root directory: {root}")
        logger.debug(f"Filter: {self.file_filter.describe()}, skip_empty={self.skip_empty}, "
                     f"follow_symlinks={self.follow_symlinks}")

        found_files: List[FileEntry] = []
        warnings: List[ScanWarning] = []
        visited: Set[Tuple[int, int]] = set()
        # Symlinked subdirectories, walked only after the real tree
        deferred_links: List[str] = []
        processed_files = 0
        start_time = time.time()

        def on_walk_error(error: OSError) -> None:
            self._warn(warnings, WarningKind.TRAVERSAL, error.filename or root,
                       error.strerror or str(error))

        top: Optional[str] = root
        while top is not None:
            for dirpath, dirnames, filenames in os.walk(top, onerror=on_walk_error):
                if not self._mark_visited(dirpath, visited, warnings):
                    dirnames[:] = []
                    continue

                # Prune subdirectories BEFORE os.walk enters them
                dirnames.sort()
                dirnames[:] = [d for d in dirnames if not self._defer_link(os.path.join(dirpath, d), deferred_links)]

                for filename in sorted(filenames):
                    processed_files += 1
                    if progress_callback and processed_files % DeduplicationConfig.PROGRESS_INTERVAL == 0:
                        progress_callback(Stage.SCAN.label, processed_files, None)

                    if not self.file_filter.matches(filename):
                        continue
                    entry = self._process_file(os.path.join(dirpath, filename), warnings)
                    if entry is not None:
                        found_files.append(entry)

            top = self._next_link(deferred_links, visited, warnings)

        if progress_callback:
            progress_callback(Stage.SCAN.label, processed_files, None)

        logger.info(f"Scan completed in {time.time() - start_time:.2f}s. "
                    f"Found {len(found_files)} matching files out of {processed_files}.")
        return found_files, warnings

    def _mark_visited(self, path: str, visited: Set[Tuple[int, int]], warnings: List[ScanWarning]) -> bool:
        """Record the identity of a directory os.walk is about to list. False if already walked."""
        try:
            st = os.stat(path)
        except OSError as e:
            self._warn(warnings, WarningKind.TRAVERSAL, path, e.strerror or str(e))
            return False

        identity = (st.st_dev, st.st_ino)
        if identity in visited:
            # Only reachable through bind mounts; symlinks are checked in _next_link
            logger.debug(f"Directory already walked, skipping: {path}")
            return False
        visited.add(identity)
        return True

    def _defer_link(self, path: str, deferred_links: List[str]) -> bool:
        """True if the subdirectory is a symbolic link and must not be entered now."""
        if not os.path.islink(path):
            return False
        if self.follow_symlinks:
            deferred_links.append(path)
        else:
            logger.debug(f"Skipping symbolic link to directory: {path}")
        return True

    def _next_link(
        self,
        deferred_links: List[str],
        visited: Set[Tuple[int, int]],
        warnings: List[ScanWarning]
    ) -> Optional[str]:
        """Pop deferred directory links until one points at a directory not yet walked."""
        while deferred_links:
            link = deferred_links.pop(0)
            try:
                st = os.stat(link)
            except OSError as e:
                self._warn(warnings, WarningKind.TRAVERSAL, link, e.strerror or str(e))
                continue

            if (st.st_dev, st.st_ino) not in visited:
                return link

            target = os.path.realpath(link)
            parent = os.path.realpath(os.path.dirname(link))
            if parent == target or parent.startswith(target.rstrip(os.sep) + os.sep):
                self._warn(warnings, WarningKind.SYMLINK_CYCLE, link,
                           "Symbolic link points to one of its parent directories, skipping")
            else:
                self._warn(warnings, WarningKind.SYMLINK_ALIAS, link,
                           f"Symbolic link target already scanned as {target}, skipping")
        return None

    def _process_file(self, path: str, warnings: List[ScanWarning]) -> Optional[FileEntry]:
        """
        Stat a single file that passed the name filter.
        Returns a FileEntry for regular files, None otherwise.
        """
        if os.path.islink(path) and not self.follow_symlinks:
            logger.debug(f"Skipping symbolic link: {path}")
            return None

        try:
            st = os.stat(path)
        except FileNotFoundError:
            # Broken symlink or file removed while walking
            logger.debug(f"Skipping missing file: {path}")
            return None
        except OSError as e:
            self._warn(warnings, WarningKind.TRAVERSAL, path, e.strerror or str(e))
            return None

        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        if self.skip_empty and st.st_size == 0:
            logger.debug(f"Skipping zero-byte file: {path}")
            return None

        return FileEntry(path=path, size=st.st_size)

    @staticmethod
    def _warn(warnings: List[ScanWarning], kind: WarningKind, path: str, message: str) -> None:
        logger.warning(f"{message}: {path}")
        warnings.append(ScanWarning(kind=kind, path=str(path), message=message))
