"""
Roster Validators Module.

This module checks an interpreted roster before it is scored and
repairs what can be repaired. Scoring must always be computable, so a
short handicap list, a missing hole count or a ragged score row is
padded and reported as a warning rather than rejected.

Author: ML Engineering Team
"""

from dataclasses import replace
from typing import Optional, List, Dict, Any, Sequence, Tuple

from config import get_config
from scramble.utils.logger import get_logger
from scramble.interpreter.extraction_result import InterpretationResult, ParsedPlayer
from scramble.interpreter.field_extractor import fit_scores

logger = get_logger(__name__)


class ValidationResult:
    """
    Contains the result of validation checks.

    Attributes:
        is_valid: Overall validation result
        errors: List of error messages
        warnings: List of warning messages
    """

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, message: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_valid': self.is_valid,
            'errors': self.errors,
            'warnings': self.warnings
        }


class RosterValidator:
    """
    Validates and repairs rosters ahead of scoring.

    Example:
        >>> validator = RosterValidator()
        >>> repaired, report = validator.repair(result, default_hole_count=18)
        >>> report.warnings
        ['Hole count missing, using 18']
    """

    def __init__(self) -> None:
        self.max_handicap = get_config("postprocessing.max_handicap", 54)
        self.default_hole_count = get_config("interpreter.default_hole_count", 18)
        self.default_team_name = get_config("postprocessing.default_team_name", "Team")
        self.placeholder = get_config("interpreter.placeholder_name", "PLAYER")
        logger.debug("RosterValidator initialized")

    def validate(self, result: InterpretationResult) -> ValidationResult:
        """
        Check a roster without modifying it.

        Args:
            result: Interpreted roster.

        Returns:
            ValidationResult. A roster with no players is invalid.
        """
        validation = ValidationResult()

        if result.is_empty:
            validation.add_error("No players detected")
            return validation

        if result.detected_hole_count <= 0:
            validation.add_warning("Hole count missing")

        for player in result.players:
            if player.name == self.placeholder:
                validation.add_warning(f"{player.player_id}: name not recovered")
            if not 0 <= player.handicap <= self.max_handicap:
                validation.add_warning(
                    f"{player.player_id}: handicap {player.handicap} out of range"
                )
            if len(player.hole_scores) != result.detected_hole_count:
                validation.add_warning(
                    f"{player.player_id}: {len(player.hole_scores)} scores "
                    f"for {result.detected_hole_count} holes"
                )
            if not player.has_scores:
                validation.add_warning(f"{player.player_id}: no hole scores recovered")

        return validation

    def repair(
        self,
        result: InterpretationResult,
        default_hole_count: Optional[int] = None
    ) -> Tuple[InterpretationResult, ValidationResult]:
        """
        Return a scoreable copy of a roster and a report of what was fixed.

        Args:
            result: Interpreted roster. It is not modified.
            default_hole_count: Event hole count used when none was detected.

        Returns:
            Tuple of (repaired result, validation report).
        """
        validation = self.validate(result)
        if result.is_empty:
            return result, validation

        hole_count = result.detected_hole_count
        if hole_count <= 0:
            hole_count = default_hole_count or self.default_hole_count
            validation.add_warning(f"Hole count missing, using {hole_count}")

        team_name = result.team_name or self.default_team_name

        players = [
            replace(
                player,
                handicap=self.clamp_handicap(player.handicap),
                hole_scores=fit_scores(player.hole_scores, hole_count)
            )
            for player in result.players
        ]

        repaired = replace(
            result,
            players=players,
            detected_hole_count=hole_count,
            team_name=team_name
        )
        return repaired, validation

    def clamp_handicap(self, handicap: int) -> int:
        return max(0, min(self.max_handicap, int(handicap)))

    def players_from_lists(
        self,
        names: Sequence[str],
        handicaps: Sequence[int],
        hole_scores: Sequence[Sequence[int]],
        hole_count: int,
        validation: Optional[ValidationResult] = None
    ) -> List[ParsedPlayer]:
        """
        Build players from parallel lists, padding the shorter ones.

        Missing handicaps become 0 and missing score rows become all-zero
        rows, so the names list alone decides the roster size.
        """
        if len(handicaps) < len(names):
            message = (
                f"Only {len(handicaps)} handicaps found for {len(names)} players. "
                "Padding missing with 0."
            )
            logger.warning(message)
            if validation is not None:
                validation.add_warning(message)

        players = []
        for idx, name in enumerate(names):
            handicap = handicaps[idx] if idx < len(handicaps) else 0
            scores = hole_scores[idx] if idx < len(hole_scores) else []
            players.append(ParsedPlayer(
                player_id=f"p{idx + 1}",
                name=name,
                handicap=self.clamp_handicap(handicap),
                hole_scores=fit_scores(list(scores), hole_count)
            ))
        return players
