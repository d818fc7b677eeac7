#!/usr/bin/env python3
"""
dupfinder CLI — command line interface for duplicate file detection.
Finds files with identical content under a folder and reports them in groups.
Read-only: nothing is moved or deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import json
import os
import sys
import time
import logging
from typing import List, NoReturn, Optional

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupfinder import __version__
from dupfinder.commands import DeduplicationCommand
from dupfinder.core.errors import FatalScanError
from dupfinder.core.filters import FileFilter
from dupfinder.core.models import DeduplicationParams, HashAlgorithmName, ScanResult, ScanWarning
from dupfinder.utils.convert_utils import ConvertUtils

HASH_CHOICES = [a.value for a in HashAlgorithmName]

HASH_HELP_TEXT = (
    "Content hash algorithm:\n"
    "  sha256 : SHA-256, cryptographic (default)\n"
    "  xxhash : xxHash XXH3-128, faster, non-cryptographic\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates of every file under Downloads
  %(prog)s -r ~/Downloads

  Only compare files named report.txt
  %(prog)s -r ~/Documents -f report.txt

  Only compare .jpg files, hash with 4 workers
  %(prog)s -r ~/Photos -f "*.jpg" -w 4

  Machine-readable output for scripts
  %(prog)s -r ~/Downloads --json > duplicates.json
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupfinder",
            description="dupfinder — find files with identical content in a folder tree",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--root-folder", "-r",
            required=True,
            type=str,
            metavar="FOLDER_PATH",
            help="Root folder to search recursively"
        )

        # Filtering options
        parser.add_argument(
            "--file-filter", "-f",
            default=None,
            type=str,
            metavar="FILENAME_PATTERN",
            help="Only compare files with this exact name (e.g. report.txt)\n"
                 "or with this extension (e.g. \"*.log\")"
        )
        parser.add_argument(
            "--skip-empty",
            action="store_true",
            help="Ignore zero-byte files"
        )
        parser.add_argument(
            "--no-follow-symlinks",
            action="store_false",
            dest="follow_symlinks",
            help="Do not follow symbolic links to files or directories"
        )

        # Hashing options
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default=HashAlgorithmName.SHA256.value,
            type=str,
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--workers", "-w",
            default=1,
            type=int,
            metavar="N",
            help="Parallel hashing workers (0 = one per CPU). Default: 1"
        )
        parser.add_argument(
            "--chunk-size",
            default="64KB",
            type=str,
            metavar="SIZE",
            help="Read size for streaming hashes (e.g. 64KB, 1MB). Default: 64KB"
        )

        # Output options
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print groups, warnings and statistics as JSON"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics and progress"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            return DeduplicationParams(
                root_dir=os.path.abspath(os.path.expanduser(args.root_folder)),
                pattern=args.file_filter,
                algorithm=HashAlgorithmName(args.hash),
                workers=args.workers,
                chunk_size=ConvertUtils.human_to_bytes(args.chunk_size),
                skip_empty=args.skip_empty,
                follow_symlinks=args.follow_symlinks
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def print_search_info(self, params: DeduplicationParams) -> None:
        if self.quiet:
            return
        file_filter = FileFilter.from_pattern(params.pattern)
        print(f"🔍 Searching '{params.root_dir}' for duplicates among {file_filter.describe()}...")

    def run_scan(self, params: DeduplicationParams) -> ScanResult:
        """Execute the scan, turning a bad root into a clean exit."""
        command = DeduplicationCommand()
        if self.verbose:
            print(f"Hash algorithm: {params.algorithm.display_name}, workers: {params.workers}")

        try:
            result = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except FatalScanError as e:
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
        return result

    def output_results(self, result: ScanResult) -> None:
        """Output duplicate groups as plain text in engine order."""
        if self.quiet:
            return

        if not result.groups:
            print("✅ No duplicate files found.")
            return

        wasted = ConvertUtils.bytes_to_human(result.total_wasted_bytes)
        print(f"\n✨ Found {len(result.groups)} duplicate groups "
              f"({result.total_duplicate_files} files, {wasted} reclaimable):")

        for idx, group in enumerate(result.groups, 1):
            size_str = ConvertUtils.bytes_to_human(group.size)
            print(f"\n--- Group {idx} | Files: {group.duplicate_count} | Size: {size_str} each ---")
            for path in group.paths:
                print(f"  - {path}")

    @staticmethod
    def output_json(result: ScanResult) -> None:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

    def output_warnings(self, warnings: List[ScanWarning]) -> None:
        for item in warnings:
            self.warning(str(item))

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose and not args.json
        self.quiet = args.quiet
        logging.getLogger("dupfinder").setLevel(logging.INFO if self.verbose else logging.ERROR)

        if args.workers < 0:
            self.error_exit("--workers cannot be negative")

        params = self.create_params(args)

        if args.json:
            result = self.run_scan(params)
            self.output_json(result)
            return

        self.print_search_info(params)
        result = self.run_scan(params)
        self.output_warnings(result.warnings)
        self.output_results(result)

        if self.verbose:
            print()
            print(result.stats.print_summary())
            elapsed = time.time() - self.start_time
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
