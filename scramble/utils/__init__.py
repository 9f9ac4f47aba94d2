"""
Utility Module for the Scramble Scorecard System.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exception hierarchy
    - Numeric token and filesystem helpers
"""

from .logger import setup_logger, get_logger, set_level
from .helpers import ensure_directory, generate_timestamp, parse_int, in_range

__all__ = [
    'setup_logger',
    'get_logger',
    'set_level',
    'ensure_directory',
    'generate_timestamp',
    'parse_int',
    'in_range'
]
