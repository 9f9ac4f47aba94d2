"""
Scramble Scorecard System - Source Package.

Turns OCR output of golf scramble scorecard photos into team rosters,
scores the teams and ranks an event.

Modules:
    - ocr_engine: OCR payload types and row grouping
    - interpreter: Hole count, name, handicap and score extraction
    - scoring: Straight and champagne scoring, tie-break and ranking
    - postprocessor: Roster repair and single-scorecard processing
    - output_handler: JSON and Excel output

Architecture:
    OCR payload → Interpreter → Repair → Scoring → Ranking → Output
"""

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'ocr_engine',
    'interpreter',
    'scoring',
    'postprocessor',
    'output_handler',
    'utils'
]
