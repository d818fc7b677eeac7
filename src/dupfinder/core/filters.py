"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
File name filtering for the walker.

A pattern string is parsed once into a FileFilter, a small tagged variant:
    MATCH_ALL   no pattern given
    EXACT_NAME  'report.txt'  -> file name equals the pattern
    EXTENSION   '*.log'       -> file name ends with '.log' (case-sensitive)
Any other pattern shape (e.g. '*', 'a*b', '*.t*t') is an exact-name match.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

WILDCARD_PREFIX = "*."


class FilterMode(Enum):
    MATCH_ALL = "all"
    EXACT_NAME = "name"
    EXTENSION = "extension"


@dataclass(frozen=True)
class FileFilter:
    mode: FilterMode = FilterMode.MATCH_ALL
    value: Optional[str] = None

    @classmethod
    def from_pattern(cls, pattern: Optional[str]) -> 'FileFilter':
        """Parse a user-supplied pattern into a filter."""
        if not pattern:
            return cls()

        suffix = pattern[1:]  # '.log' for '*.log'
        if pattern.startswith(WILDCARD_PREFIX) and len(pattern) > len(WILDCARD_PREFIX) and "*" not in suffix:
            return cls(FilterMode.EXTENSION, suffix)

        return cls(FilterMode.EXACT_NAME, pattern)

    def matches(self, file_name: str) -> bool:
        """
        Check whether a file name (not a full path) is eligible for comparison.
        """
        if self.mode == FilterMode.MATCH_ALL:
            return True
        if self.mode == FilterMode.EXACT_NAME:
            return file_name == self.value
        return file_name.endswith(self.value)

    def describe(self) -> str:
        if self.mode == FilterMode.EXACT_NAME:
            return f"files named '{self.value}'"
        if self.mode == FilterMode.EXTENSION:
            return f"files ending with '{self.value}'"
        return "all files"
