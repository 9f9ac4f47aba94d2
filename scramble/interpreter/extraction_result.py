"""
Interpretation Result Data Classes.

This module defines the structured roster recovered from one scorecard:
the players in discovery order, the detected hole count, a team label
and a confidence estimate.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
import json


@dataclass
class ParsedPlayer:
    """
    One player recovered from a scorecard.

    A hole score of 0 means the score could not be read, not zero strokes.

    Attributes:
        player_id: Stable identifier assigned in discovery order ("p1", "p2", ...)
        name: Normalized, uppercased name, or the placeholder
        handicap: Playing handicap, 0 when unrecoverable
        hole_scores: Gross strokes per hole, one entry per detected hole

    Example:
        >>> player = ParsedPlayer("p1", "JOHN SMITH", 12, [4, 5, 3])
        >>> player.gross_total
        12
    """
    player_id: str
    name: str
    handicap: int = 0
    hole_scores: List[int] = field(default_factory=list)

    @property
    def gross_total(self) -> int:
        """Sum of the recorded hole scores."""
        return sum(self.hole_scores)

    @property
    def has_scores(self) -> bool:
        """True if at least one hole score was recovered."""
        return any(score > 0 for score in self.hole_scores)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'player_id': self.player_id,
            'name': self.name,
            'handicap': self.handicap,
            'hole_scores': list(self.hole_scores)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParsedPlayer':
        """Create a ParsedPlayer from its dictionary form."""
        return cls(
            player_id=data['player_id'],
            name=data.get('name', ''),
            handicap=int(data.get('handicap', 0)),
            hole_scores=[int(s) for s in data.get('hole_scores', [])]
        )


@dataclass
class InterpretationResult:
    """
    Structured roster interpreted from one scorecard payload.

    Attributes:
        players: Players in order of discovery
        detected_hole_count: 9, 13, 16 or 18 (0 when nothing was found)
        team_name: Suggested team label, None for an empty result
        confidence: Heuristic extraction quality in [0, 1]
        mode: "spatial", "text" or "empty"
        source: Payload source, for logging and reports

    Example:
        >>> result = interpreter.interpret(payload)
        >>> if result.is_empty:
        ...     escalate_to_manual_entry(payload)
    """
    players: List[ParsedPlayer] = field(default_factory=list)
    detected_hole_count: int = 0
    team_name: Optional[str] = None
    confidence: float = 0.0
    mode: str = "empty"
    source: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True when no players were recovered."""
        return not self.players

    @property
    def player_names(self) -> List[str]:
        return [p.name for p in self.players]

    @property
    def player_handicaps(self) -> List[int]:
        return [p.handicap for p in self.players]

    @property
    def hole_scores(self) -> List[List[int]]:
        return [list(p.hole_scores) for p in self.players]

    @property
    def has_scores(self) -> bool:
        """True if any player has at least one recovered score."""
        return any(p.has_scores for p in self.players)

    @classmethod
    def empty(cls, confidence: float, source: Optional[str] = None) -> 'InterpretationResult':
        """The result for a scorecard where no players could be found."""
        return cls(
            players=[],
            detected_hole_count=0,
            team_name=None,
            confidence=confidence,
            mode="empty",
            source=source
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for serialization."""
        return {
            'players': [p.to_dict() for p in self.players],
            'detected_hole_count': self.detected_hole_count,
            'team_name': self.team_name,
            'confidence': self.confidence,
            'mode': self.mode,
            'source': self.source
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"InterpretationResult(players={len(self.players)}, "
            f"holes={self.detected_hole_count}, team={self.team_name}, "
            f"confidence={self.confidence:.2f})"
        )
