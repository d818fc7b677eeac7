"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements file grouping strategies over FileEntry lists.
Every grouping drops groups with fewer than 2 members (they cannot hold duplicates)
and keeps members in their original discovery order.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List

from dupfinder.core.interfaces import FileGrouper
from dupfinder.core.models import FileEntry


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Hashing happens elsewhere; digest grouping works on precomputed values.
    """

    def group_by_size(self, files: List[FileEntry]) -> Dict[int, List[FileEntry]]:
        """Groups files by their exact byte size."""
        return self.group_by(files, lambda f: f.size)

    def group_by_digest(
        self,
        files: List[FileEntry],
        digests: Dict[str, bytes]
    ) -> Dict[bytes, List[FileEntry]]:
        """
        Groups files by content digest.
        Files missing from `digests` (failed to hash) are left out.
        """
        return self.group_by(files, lambda f: digests.get(f.path))

    @staticmethod
    def group_by(files: List[FileEntry], key_func: Callable[[FileEntry], Any]) -> Dict[Any, List[FileEntry]]:
        """
        Helper method to group files by any computed key.
        Args:
            files: List of files to group
            key_func: Function that computes a hashable key from a FileEntry, or None to skip it
        Returns:
            Dict[key, List[FileEntry]] holding only groups of 2+ files
        """
        groups = defaultdict(list)
        for file in files:
            key = key_func(file)
            if key is not None:
                groups[key].append(file)

        return {key: group for key, group in groups.items() if len(group) >= 2}
