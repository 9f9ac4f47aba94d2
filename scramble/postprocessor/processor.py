"""
Scorecard Processor Module.

This module provides the ScorecardProcessor class that takes one
scorecard from OCR payload to team record:

    1. Interpret the payload into a roster
    2. Reject an empty roster (escalate to manual entry)
    3. Repair the roster so it can always be scored
    4. Score the team under the event's format

Ranking is not done here: it needs every team of the event.

Author: ML Engineering Team
"""

from typing import Optional, Sequence, Union

from scramble.utils.exceptions import NoPlayersDetectedError
from scramble.utils.logger import get_logger
from scramble.ocr_engine.ocr_result import OCRPayload
from scramble.interpreter.interpreter import ScorecardInterpreter
from scramble.scoring.engine import ScoringEngine
from scramble.scoring.team_score import ScrambleFormat, TeamCard
from .team_record import TeamRecord
from .validators import RosterValidator, ValidationResult

logger = get_logger(__name__)


class ScorecardProcessor:
    """
    Runs interpretation, repair and scoring for single scorecards.

    Attributes:
        interpreter: ScorecardInterpreter instance
        engine: ScoringEngine instance
        validator: RosterValidator instance

    Example:
        >>> processor = ScorecardProcessor()
        >>> record = processor.process(payload, "straight", team_id=1)
        >>> record.score.net_score
        72
    """

    def __init__(
        self,
        interpreter: Optional[ScorecardInterpreter] = None,
        engine: Optional[ScoringEngine] = None,
        validator: Optional[RosterValidator] = None
    ) -> None:
        self.interpreter = interpreter or ScorecardInterpreter()
        self.engine = engine or ScoringEngine()
        self.validator = validator or RosterValidator()
        logger.info("ScorecardProcessor initialized")

    def process(
        self,
        payload: OCRPayload,
        scramble_format: Union[str, ScrambleFormat],
        team_id: Union[int, str],
        default_hole_count: Optional[int] = None,
        team_name: Optional[str] = None
    ) -> TeamRecord:
        """
        Interpret and score one scorecard.

        Args:
            payload: OCR output for the scorecard photo.
            scramble_format: Event format, "straight" or "champagne".
            team_id: Identifier for the resulting team.
            default_hole_count: Event hole count, used when none is detected.
            team_name: Overrides the default rotating team label.

        Returns:
            TeamRecord with its score; rank is assigned later.

        Raises:
            UnknownFormatError: If the format tag is not recognised.
            NoPlayersDetectedError: If the scorecard yielded no players.
        """
        scramble_format = ScrambleFormat.parse(scramble_format)
        logger.info(f"Processing scorecard: {payload.source or team_id}")

        result = self.interpreter.interpret(
            payload,
            team_name=team_name,
            default_hole_count=default_hole_count
        )
        if result.is_empty:
            raise NoPlayersDetectedError(payload.source, result.confidence)

        repaired, validation = self.validator.repair(result, default_hole_count)
        for warning in validation.warnings:
            logger.warning(f"{repaired.team_name}: {warning}")

        card = TeamCard(
            team_id=team_id,
            team_name=repaired.team_name,
            scramble_format=scramble_format,
            players=repaired.players,
            hole_count=repaired.detected_hole_count
        )
        score = self.engine.score(card)

        unit = "net" if scramble_format == ScrambleFormat.STRAIGHT else "points"
        logger.info(
            f"Scored {card.team_name}: gross {score.gross_total}, "
            f"hcp {score.team_handicap}, {unit} {score.metric}"
        )

        return TeamRecord(
            team_id=team_id,
            team_name=card.team_name,
            scramble_format=scramble_format,
            hole_count=card.hole_count,
            players=card.players,
            score=score,
            confidence=result.confidence,
            source=payload.source,
            warnings=list(validation.warnings)
        )

    def process_roster(
        self,
        team_id: Union[int, str],
        team_name: str,
        scramble_format: Union[str, ScrambleFormat],
        names: Sequence[str],
        handicaps: Sequence[int],
        hole_scores: Sequence[Sequence[int]],
        hole_count: int
    ) -> TeamRecord:
        """
        Score a manually entered roster given as parallel lists.

        Short handicap or score lists are padded rather than rejected.
        """
        scramble_format = ScrambleFormat.parse(scramble_format)
        validation = ValidationResult()
        players = self.validator.players_from_lists(
            names, handicaps, hole_scores, hole_count, validation
        )

        card = TeamCard(
            team_id=team_id,
            team_name=team_name or self.validator.default_team_name,
            scramble_format=scramble_format,
            players=players,
            hole_count=hole_count
        )
        score = self.engine.score(card)

        return TeamRecord(
            team_id=team_id,
            team_name=card.team_name,
            scramble_format=scramble_format,
            hole_count=hole_count,
            players=players,
            score=score,
            confidence=1.0,
            warnings=list(validation.warnings)
        )
