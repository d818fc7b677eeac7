"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and configuration for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content hash used to fingerprint candidate files.
    """
    SHA256 = "sha256"
    XXHASH = "xxhash"

    @property
    def display_name(self) -> str:
        """Human-readable name for CLI output."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.XXHASH: "xxHash XXH3-128",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class WarningKind(str, Enum):
    TRAVERSAL = "traversal"
    SYMLINK_CYCLE = "symlink-cycle"
    SYMLINK_ALIAS = "symlink-alias"
    FILE_READ = "file-read"


class Stage(str, Enum):
    SCAN = "scan"
    SIZE = "size"
    HASH = "hash"

    @property
    def label(self) -> str:
        mapping = {
            Stage.SCAN: "Scanning",
            Stage.SIZE: "Size grouping",
            Stage.HASH: "Content hashing",
        }
        return mapping[self]


# =============================
# Configuration
# =============================

class DeduplicationConfig:
    DEFAULT_CHUNK_SIZE = 64 * 1024  # Streaming read size for content hashing
    MIN_CHUNK_SIZE = 4 * 1024
    MAX_CHUNK_SIZE = 16 * 1024 * 1024
    PROGRESS_INTERVAL = 1000  # Report walker progress every N files


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileEntry:
    """
    A regular file discovered during traversal.
    Size comes from filesystem metadata, never from reading content.
    """
    path: str  # absolute
    size: int  # in bytes

    def __repr__(self):
        return f"<FileEntry path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing the same size AND the same content digest.
    Members are kept in discovery order.
    """
    size: int
    digest: bytes
    files: List[FileEntry] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    @property
    def wasted_bytes(self) -> int:
        """Bytes that would be reclaimed by keeping a single copy."""
        return self.size * (self.duplicate_count - 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "digest": self.digest.hex(),
            "files": self.paths,
        }

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.files)}>"


@dataclass(frozen=True)
class ScanWarning:
    """A non-fatal problem absorbed during a scan."""
    kind: WarningKind
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "path": self.path, "message": self.message}

    def __str__(self):
        return f"[{self.kind.value}] {self.path}: {self.message}"


class DeduplicationStats:
    """
    Statistics collected during one scan.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_scanned: int = 0
        self.files_hashed: int = 0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_time": round(self.total_time, 6),
            "files_scanned": self.files_scanned,
            "files_hashed": self.files_hashed,
            "stages": self.stage_stats,
        }

    def print_summary(self) -> str:
        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files scanned: {self.files_scanned} / Files hashed: {self.files_hashed}\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            try:
                label = Stage(stage).label
            except ValueError:
                label = stage.title()
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


@dataclass
class ScanResult:
    """Outcome of one scan: ordered groups, absorbed warnings, statistics."""
    groups: List[DuplicateGroup]
    warnings: List[ScanWarning] = field(default_factory=list)
    stats: DeduplicationStats = field(default_factory=DeduplicationStats)

    @property
    def total_duplicate_files(self) -> int:
        return sum(g.duplicate_count for g in self.groups)

    @property
    def total_wasted_bytes(self) -> int:
        return sum(g.wasted_bytes for g in self.groups)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groups": [g.to_dict() for g in self.groups],
            "warnings": [w.to_dict() for w in self.warnings],
            "stats": self.stats.to_dict(),
        }


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — used by the library entry point and the CLI.
"""

@dataclass
class DeduplicationParams:
    """Parameters for one duplicate scan, validated on creation."""
    root_dir: str
    pattern: Optional[str] = None
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    workers: int = 1
    chunk_size: int = DeduplicationConfig.DEFAULT_CHUNK_SIZE
    skip_empty: bool = False
    follow_symlinks: bool = True

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if isinstance(self.algorithm, str):
            try:
                self.algorithm = HashAlgorithmName(self.algorithm.lower())
            except ValueError:
                choices = ", ".join(a.value for a in HashAlgorithmName)
                raise ValueError(f"Unknown hash algorithm '{self.algorithm}' (choose from: {choices})")

        if self.workers < 0:
            raise ValueError("Worker count cannot be negative")

        if not DeduplicationConfig.MIN_CHUNK_SIZE <= self.chunk_size <= DeduplicationConfig.MAX_CHUNK_SIZE:
            raise ValueError(
                f"Chunk size must be between {DeduplicationConfig.MIN_CHUNK_SIZE} "
                f"and {DeduplicationConfig.MAX_CHUNK_SIZE} bytes"
            )

        # Empty pattern means "no filter"
        if self.pattern is not None and not self.pattern.strip():
            self.pattern = None
