"""
Unit tests for FileFilter.
Verifies pattern parsing into the tagged variant and name matching rules.
"""
import pytest
from dupfinder.core import FileFilter, FilterMode


class TestFilterParsing:
    """Test that patterns are classified once, up front."""

    @pytest.mark.parametrize("pattern", [None, ""])
    def test_missing_pattern_matches_all(self, pattern):
        file_filter = FileFilter.from_pattern(pattern)
        assert file_filter.mode == FilterMode.MATCH_ALL
        assert file_filter.matches("anything.bin")

    def test_plain_name_is_exact_match(self):
        file_filter = FileFilter.from_pattern("report.txt")
        assert file_filter.mode == FilterMode.EXACT_NAME
        assert file_filter.value == "report.txt"

    def test_wildcard_extension(self):
        file_filter = FileFilter.from_pattern("*.log")
        assert file_filter.mode == FilterMode.EXTENSION
        assert file_filter.value == ".log"

    @pytest.mark.parametrize("pattern", ["*", "*.", "a*b", "*.t*t", "*log"])
    def test_other_shapes_fall_back_to_exact_name(self, pattern):
        """Only the single '*.ext' wildcard is special, everything else is a literal name."""
        file_filter = FileFilter.from_pattern(pattern)
        assert file_filter.mode == FilterMode.EXACT_NAME
        assert file_filter.value == pattern


class TestFilterMatching:
    """Test the matching predicate itself."""

    def test_exact_name_compares_name_only(self):
        file_filter = FileFilter.from_pattern("report.txt")
        assert file_filter.matches("report.txt")
        assert not file_filter.matches("report.txt.bak")
        assert not file_filter.matches("old_report.txt")
        assert not file_filter.matches("Report.txt")

    def test_extension_is_literal_suffix(self):
        file_filter = FileFilter.from_pattern("*.log")
        assert file_filter.matches("app.log")
        assert file_filter.matches("archive.2024.log")
        assert not file_filter.matches("app.log.gz")
        assert not file_filter.matches("catalog")

    def test_extension_is_case_sensitive(self):
        file_filter = FileFilter.from_pattern("*.log")
        assert not file_filter.matches("APP.LOG")
        assert not file_filter.matches("app.Log")

    def test_star_alone_matches_only_literal_star(self):
        file_filter = FileFilter.from_pattern("*")
        assert file_filter.matches("*")
        assert not file_filter.matches("file.txt")

    def test_describe(self):
        assert FileFilter.from_pattern(None).describe() == "all files"
        assert "report.txt" in FileFilter.from_pattern("report.txt").describe()
        assert ".log" in FileFilter.from_pattern("*.log").describe()
