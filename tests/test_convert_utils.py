"""
Unit tests for ConvertUtils size conversions used by the CLI.
"""
import pytest
from dupfinder.utils.convert_utils import ConvertUtils


class TestBytesToHuman:

    @pytest.mark.parametrize("size, expected", [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (5 * 1024 ** 2, "5.00 MB"),
        (3 * 1024 ** 3, "3.00 GB"),
    ])
    def test_formats(self, size, expected):
        assert ConvertUtils.bytes_to_human(size) == expected

    def test_negative_clamped(self):
        assert ConvertUtils.bytes_to_human(-5) == "0 B"


class TestHumanToBytes:

    @pytest.mark.parametrize("text, expected", [
        ("4096", 4096),
        ("64KB", 64 * 1024),
        ("64k", 64 * 1024),
        ("1M", 1024 ** 2),
        ("1.5MB", int(1.5 * 1024 ** 2)),
        (" 2 GB ", 2 * 1024 ** 3),
        ("10B", 10),
    ])
    def test_parses(self, text, expected):
        assert ConvertUtils.human_to_bytes(text) == expected

    @pytest.mark.parametrize("text", ["", "lots", "KB", "-1KB", "1.2.3MB", "inf", "-inf", "nan", "1e308GB"])
    def test_rejects_invalid(self, text):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes(text)
