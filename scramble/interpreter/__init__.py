"""
Scorecard Interpretation Module.

This module turns OCR text from a photographed scramble scorecard into
a structured roster:
    - Hole-count detection from header rows
    - Name, handicap and score extraction per player
    - Orchestration with deduplication and a confidence estimate
    - Rotating default team labels
"""

from .extraction_result import InterpretationResult, ParsedPlayer
from .field_extractor import FieldExtractor, PlayerFields, fit_scores
from .hole_count import HoleCountDetector
from .interpreter import ScorecardInterpreter
from .team_names import TeamNameSequence

__all__ = [
    'InterpretationResult',
    'ParsedPlayer',
    'FieldExtractor',
    'PlayerFields',
    'fit_scores',
    'HoleCountDetector',
    'ScorecardInterpreter',
    'TeamNameSequence'
]
