"""
Helper Utilities Module.

This module provides common utility functions used throughout the
scorecard system. Functions here should be generic and reusable
across different modules.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - generate_timestamp: Generate formatted timestamps
    - parse_int: Read an integer out of a noisy OCR token
    - in_range: Inclusive range check against a [low, high] pair
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Union

# A token that is a number, possibly wrapped in OCR punctuation: "4", "(12)", "7,"
_NUMERIC_TOKEN = re.compile(r'^\W*(\d+)\W*$')


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Example:
        >>> ensure_directory("outputs/events")
        PosixPath('outputs/events')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def generate_timestamp(format_str: str = "%Y%m%d_%H%M%S") -> str:
    """
    Generate a formatted timestamp string.

    Example:
        >>> generate_timestamp()
        "20260121_143022"
    """
    return datetime.now().strftime(format_str)


def parse_int(text: str) -> Optional[int]:
    """
    Parse a whole OCR token as a non-negative integer.

    Surrounding punctuation is tolerated, embedded letters are not.

    Args:
        text: Token text.

    Returns:
        The integer value, or None if the token is not numeric.

    Example:
        >>> parse_int("12,")
        12
        >>> parse_int("4b")
        None
    """
    if not text:
        return None
    match = _NUMERIC_TOKEN.match(text.strip())
    if not match:
        return None
    return int(match.group(1))


def in_range(value: Optional[int], bounds: Sequence[int]) -> bool:
    """Check ``low <= value <= high`` for a ``[low, high]`` pair."""
    if value is None:
        return False
    low, high = bounds
    return low <= value <= high
