"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""

import math

SIZE_UNITS = {
    'GB': 1024 ** 3, 'G': 1024 ** 3,
    'MB': 1024 ** 2, 'M': 1024 ** 2,
    'KB': 1024, 'K': 1024,
    'B': 1,
}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to a short readable string: 512 B, 1.50 KB, 3.20 MB.
        """
        if size_bytes < 1024:
            return f"{max(size_bytes, 0)} B"

        value = float(size_bytes)
        for unit in ("KB", "MB", "GB", "TB"):
            value /= 1024
            if value < 1024:
                return f"{value:.2f} {unit}"
        return f"{value:.2f} TB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert a size string such as '64KB', '1M' or '4096' to bytes.
        Raises ValueError for negative sizes or invalid formats.
        """
        text = size_str.strip().upper()

        # Longest suffix first so 'KB' is not read as 'K' + 'B'
        for unit in sorted(SIZE_UNITS, key=len, reverse=True):
            if text.endswith(unit):
                number = text[:-len(unit)].strip()
                multiplier = SIZE_UNITS[unit]
                break
        else:
            number, multiplier = text, 1

        try:
            value = float(number)
        except ValueError:
            raise ValueError(f"Invalid size format: '{size_str}'. Supported formats: 64KB, 1M, 4096, etc.")

        if not math.isfinite(value * multiplier):
            raise ValueError(f"Size must be a finite number: '{size_str}'")
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return int(value * multiplier)
