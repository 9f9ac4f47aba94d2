"""
Scoring Module for the Scramble Scorecard System.

This module provides:
    - Team handicap, straight and champagne scramble scoring
    - Tie-breaking between teams level on their primary result
    - Ranking of teams within each format
"""

from .team_score import ScrambleFormat, TeamCard, TeamScore, HoleResult
from .engine import ScoringEngine, break_tie, calculate_team_score
from .ranking import RankingEntry, RankedTeam, rank_teams, apply_rankings, format_rank

__all__ = [
    'ScrambleFormat',
    'TeamCard',
    'TeamScore',
    'HoleResult',
    'ScoringEngine',
    'break_tie',
    'calculate_team_score',
    'RankingEntry',
    'RankedTeam',
    'rank_teams',
    'apply_rankings',
    'format_rank'
]
