"""
Post-Processing Module for the Scramble Scorecard System.

This module provides functionality for:
    - Roster validation and repair ahead of scoring
    - Single-scorecard processing from OCR payload to team record
    - Team records for storage and export
"""

from .processor import ScorecardProcessor
from .team_record import TeamRecord
from .validators import RosterValidator, ValidationResult

__all__ = [
    'ScorecardProcessor',
    'TeamRecord',
    'RosterValidator',
    'ValidationResult'
]
