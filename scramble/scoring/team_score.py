"""
Scoring Data Classes.

This module defines the scoring input (a team card of players) and the
scoring output (a team score with an optional per-hole breakdown).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional, Union
import json

from scramble.interpreter.extraction_result import ParsedPlayer
from scramble.utils.exceptions import UnknownFormatError


class ScrambleFormat(str, Enum):
    """The two competition formats an event can be played under."""
    STRAIGHT = "straight"
    CHAMPAGNE = "champagne"

    @classmethod
    def parse(cls, value: Union[str, 'ScrambleFormat']) -> 'ScrambleFormat':
        """
        Read a format tag.

        Raises:
            UnknownFormatError: If the tag is not a known format.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownFormatError(str(value), [f.value for f in cls]) from None


@dataclass
class TeamCard:
    """
    Scoring input for one team.

    Attributes:
        team_id: Identifier the ranking results are keyed by
        team_name: Display label
        scramble_format: Format the team is scored under
        players: Players with handicaps and gross hole scores
        hole_count: Number of holes played
    """
    team_id: Union[int, str]
    team_name: str
    scramble_format: ScrambleFormat
    players: List[ParsedPlayer] = field(default_factory=list)
    hole_count: int = 18


@dataclass
class HoleResult:
    """Best-ball Stableford result for one hole."""
    hole: int
    stroke_index: int
    player_points: Dict[str, int] = field(default_factory=dict)
    best_points: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hole': self.hole,
            'stroke_index': self.stroke_index,
            'player_points': dict(self.player_points),
            'best_points': self.best_points
        }


@dataclass
class TeamScore:
    """
    Scored result for one team.

    Exactly one of ``net_score`` (straight) and ``points_total``
    (champagne) is set.

    Attributes:
        team_id: Team identifier
        team_name: Display label
        scramble_format: Format the team was scored under
        gross_total: First player's gross total
        team_handicap: Rounded team handicap allowance
        net_score: Gross total less team handicap (straight)
        points_total: Best-ball Stableford points (champagne)
        breakdown: Human-readable summary
        holes: Per-hole results (champagne)
    """
    team_id: Union[int, str]
    team_name: str
    scramble_format: ScrambleFormat
    gross_total: int
    team_handicap: int
    net_score: Optional[int] = None
    points_total: Optional[int] = None
    breakdown: str = ""
    holes: List[HoleResult] = field(default_factory=list)

    @property
    def metric(self) -> Optional[int]:
        """The value teams of this format are ranked on."""
        if self.scramble_format == ScrambleFormat.STRAIGHT:
            return self.net_score
        return self.points_total

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'scramble_format': self.scramble_format.value,
            'gross_total': self.gross_total,
            'team_handicap': self.team_handicap,
            'net_score': self.net_score,
            'points_total': self.points_total,
            'breakdown': self.breakdown,
            'holes': [h.to_dict() for h in self.holes]
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"TeamScore({self.team_name}, {self.scramble_format.value}, "
            f"gross={self.gross_total}, hcp={self.team_handicap}, metric={self.metric})"
        )
