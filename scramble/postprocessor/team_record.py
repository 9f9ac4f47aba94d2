"""
Team Record Data Class.

A team record is what the system hands to whatever stores teams: the
roster as interpreted, the team score, and (once the whole event has
been scored) the rank.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Union
import json

from scramble.interpreter.extraction_result import ParsedPlayer
from scramble.scoring.team_score import ScrambleFormat, TeamScore


@dataclass
class TeamRecord:
    """
    Roster plus score for one team.

    Attributes:
        team_id: Team identifier within the event
        team_name: Display label
        scramble_format: Format the team was scored under
        hole_count: Holes played
        players: Players in scorecard order
        score: Computed team score
        confidence: Interpretation confidence (1.0 for manual entry)
        source: Payload the roster came from
        warnings: Repairs made before scoring
    """
    team_id: Union[int, str]
    team_name: str
    scramble_format: ScrambleFormat
    hole_count: int
    players: List[ParsedPlayer]
    score: TeamScore
    confidence: float = 1.0
    source: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def player_names(self) -> List[str]:
        return [p.name for p in self.players]

    @property
    def player_handicaps(self) -> List[int]:
        return [p.handicap for p in self.players]

    @property
    def hole_scores(self) -> List[List[int]]:
        return [list(p.hole_scores) for p in self.players]

    def to_dict(self, rank: Optional[int] = None) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Args:
            rank: Rank to include; left as None until the event is ranked.
        """
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'scramble_format': self.scramble_format.value,
            'hole_count': self.hole_count,
            'player_names': self.player_names,
            'player_handicaps': self.player_handicaps,
            'hole_scores': self.hole_scores,
            'gross_total': self.score.gross_total,
            'team_handicap': self.score.team_handicap,
            'net_score': self.score.net_score,
            'points_total': self.score.points_total,
            'breakdown': self.score.breakdown,
            'rank': rank,
            'confidence': self.confidence,
            'source': self.source,
            'warnings': list(self.warnings)
        }

    def to_json(self, indent: int = 2, rank: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(rank), indent=indent)
