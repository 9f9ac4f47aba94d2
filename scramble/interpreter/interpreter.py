"""
Scorecard Interpreter Module.

This module provides the ScorecardInterpreter class that turns one OCR
payload into a structured roster. When the payload carries token
geometry the interpreter works row by row; otherwise it falls back to
scanning plain text lines for "Name" anchors.

An unreadable scorecard is not an error: the interpreter returns an
empty result with a low confidence and leaves escalation to the caller.
"""

import re
from typing import List, Optional

from config import get_config
from scramble.utils.logger import get_logger
from scramble.ocr_engine.ocr_result import OCRPayload, TextRow
from scramble.ocr_engine.row_grouper import RowGrouper
from .extraction_result import InterpretationResult, ParsedPlayer
from .field_extractor import FieldExtractor, PlayerFields
from .hole_count import HoleCountDetector
from .team_names import TeamNameSequence

logger = get_logger(__name__)


class ScorecardInterpreter:
    """
    Interprets OCR output from a photographed scramble scorecard.

    Attributes:
        grouper: RowGrouper used when geometry is present
        detector: HoleCountDetector
        extractor: FieldExtractor
        team_names: Source of default team labels

    Example:
        >>> interpreter = ScorecardInterpreter(team_names=TeamNameSequence())
        >>> result = interpreter.interpret(payload)
        >>> print(result.player_names, result.detected_hole_count)
        ['JOHN SMITH', 'MARY KELLY'] 18
    """

    def __init__(
        self,
        team_names: Optional[TeamNameSequence] = None,
        grouper: Optional[RowGrouper] = None,
        detector: Optional[HoleCountDetector] = None,
        extractor: Optional[FieldExtractor] = None
    ) -> None:
        self.team_names = team_names or TeamNameSequence()
        self.grouper = grouper or RowGrouper()
        self.detector = detector or HoleCountDetector()
        self.extractor = extractor or FieldExtractor()

        header = '|'.join(map(re.escape, get_config(
            "interpreter.anchors.header", ["hole", "par", "index", "yard"]
        )))
        name_anchors = get_config("interpreter.anchors.name", ["name"])
        names = '|'.join(map(re.escape, name_anchors))
        self._header_row = re.compile(rf"\b(?:{header})s?\b", re.IGNORECASE)
        self._name_marker = re.compile(rf"\b(?:{names})\b", re.IGNORECASE)

        # Total/points rows: labels that never introduce a player
        player_labels = {a.lower() for a in name_anchors + get_config(
            "interpreter.anchors.handicap", ["hcap", "cap", "heap"]
        )}
        summary = '|'.join(
            re.escape(label) for label in get_config(
                "interpreter.anchors.non_score_labels",
                ["name", "par", "index", "total", "points", "hcap", "heap"]
            )
            if label.lower() not in player_labels
        )
        self._summary_row = re.compile(rf"^\W*(?:{summary})s?\b", re.IGNORECASE) if summary else None
        self._letters = re.compile(r"[A-Za-z]{2,}")

        self.confidence_levels = {
            'many_players': get_config("interpreter.confidence.many_players", 0.7),
            'two_players': get_config("interpreter.confidence.two_players", 0.5),
            'few_players': get_config("interpreter.confidence.few_players", 0.3),
            'score_bonus': get_config("interpreter.confidence.score_bonus", 0.1),
            'empty': get_config("interpreter.confidence.empty", 0.2),
        }
        self.placeholder = get_config("interpreter.placeholder_name", "PLAYER")

        logger.debug("ScorecardInterpreter initialized")

    def interpret(
        self,
        payload: OCRPayload,
        team_name: Optional[str] = None,
        default_hole_count: Optional[int] = None
    ) -> InterpretationResult:
        """
        Interpret a scorecard payload.

        Args:
            payload: Text and optional token geometry from the OCR provider.
            team_name: Label to use instead of the rotating default.
            default_hole_count: Hole count when no header row is found.

        Returns:
            InterpretationResult. Empty, with hole count 0, when no
            players could be found.
        """
        if payload.has_geometry:
            mode = "spatial"
            fields, hole_count = self._interpret_rows(payload, default_hole_count)
        else:
            mode = "text"
            fields, hole_count = self._interpret_lines(payload, default_hole_count)

        players = self._build_players(fields)

        if not players:
            logger.warning(f"No players found in scorecard ({payload.source or 'payload'})")
            return InterpretationResult.empty(self.confidence_levels['empty'], payload.source)

        result = InterpretationResult(
            players=players,
            detected_hole_count=hole_count,
            team_name=team_name or self.team_names.next(),
            confidence=self._confidence(players),
            mode=mode,
            source=payload.source
        )

        logger.info(
            f"Interpreted {len(players)} players over {hole_count} holes "
            f"({mode}, confidence {result.confidence:.2f})"
        )
        return result

    def interpret_text(self, text: str, **kwargs) -> InterpretationResult:
        """Interpret a plain text payload."""
        return self.interpret(OCRPayload(text=text), **kwargs)

    def _interpret_rows(self, payload: OCRPayload, default_hole_count: Optional[int]):
        rows = self.grouper.group(payload.tokens)
        hole_count = self.detector.detect((row.texts for row in rows), default_hole_count)

        player_rows = [row for row in rows if self.is_player_row(row)]
        logger.debug(f"{len(player_rows)} of {len(rows)} rows hold player data")

        fields = [self.extractor.extract_from_row(row, hole_count) for row in player_rows]
        return fields, hole_count

    def _interpret_lines(self, payload: OCRPayload, default_hole_count: Optional[int]):
        lines = payload.lines
        hole_count = self.detector.detect((line.split() for line in lines), default_hole_count)

        anchors = [i for i, line in enumerate(lines) if self._name_marker.search(line)]
        logger.debug(f"Found {len(anchors)} name anchors in {len(lines)} lines")

        fields = []
        for k, anchor in enumerate(anchors):
            end = anchors[k + 1] if k + 1 < len(anchors) else len(lines)
            fields.append(self.extractor.extract_from_lines(lines, anchor, end, hole_count))
        return fields, hole_count

    def is_player_row(self, row: TextRow) -> bool:
        """
        A row holds player data if it has letters or a name marker and is
        neither a header nor a total/points row.
        """
        text = row.text
        if self._header_row.search(text):
            return False
        if self._summary_row is not None and self._summary_row.match(text):
            return False
        return bool(self._letters.search(text) or self._name_marker.search(text))

    def _build_players(self, fields: List[PlayerFields]) -> List[ParsedPlayer]:
        """Drop repeated names and assign ids in discovery order."""
        players: List[ParsedPlayer] = []
        seen = set()

        for item in fields:
            if item.name != self.placeholder:
                if item.name in seen:
                    logger.debug(f"Skipping repeated player {item.name}")
                    continue
                seen.add(item.name)

            players.append(ParsedPlayer(
                player_id=f"p{len(players) + 1}",
                name=item.name,
                handicap=item.handicap,
                hole_scores=item.hole_scores
            ))

        return players

    def _confidence(self, players: List[ParsedPlayer]) -> float:
        levels = self.confidence_levels
        if len(players) >= 3:
            confidence = levels['many_players']
        elif len(players) == 2:
            confidence = levels['two_players']
        else:
            confidence = levels['few_players']

        if any(p.has_scores for p in players):
            confidence += levels['score_bonus']

        return round(min(confidence, 1.0), 2)
