"""
Field Extractor Module.

This module recovers a player's name, handicap and hole-by-hole gross
scores from a piece of OCR text. It works in two modes:

    - Row mode: one spatial row of tokens, ordered left to right.
      Used whenever the OCR provider returned token geometry.
    - Line mode: a block of plain text lines between one "Name" anchor
      and the next. Used for providers that return text only.

Both modes apply the same keyword anchors and numeric ranges, which are
read from configuration so the policy can be audited in one place.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from config import get_config
from scramble.utils.helpers import parse_int, in_range
from scramble.utils.logger import get_logger
from scramble.ocr_engine.ocr_result import TextRow

logger = get_logger(__name__)

# Letters, apostrophe, period and spaces only
NAME_CHARS = re.compile(r"^[A-Za-z.'\s]+$")
NAME_LINE = re.compile(r"^[A-Za-z.'\s]{2,}$")


@dataclass
class PlayerFields:
    """Raw fields extracted for one player, before an id is assigned."""
    name: str
    handicap: int = 0
    hole_scores: List[int] = field(default_factory=list)


def fit_scores(scores: Sequence[int], hole_count: int) -> List[int]:
    """
    Pad with 0 (unrecovered) or truncate a score list to ``hole_count``.

    Example:
        >>> fit_scores([4, 5], 4)
        [4, 5, 0, 0]
    """
    fitted = list(scores[:hole_count])
    fitted.extend([0] * (hole_count - len(fitted)))
    return fitted


class FieldExtractor:
    """
    Extracts name, handicap and scores for a single player.

    Attributes:
        name_anchors: Keywords labelling the name field
        handicap_anchors: Keywords labelling the handicap field
        non_score_labels: Line labels never read as scores
        score_range: Plausible gross strokes for one hole
        handicap_range: Accepted range for a labelled handicap
        standalone_range: Accepted range for an unlabelled handicap
        handicap_window: Lines after a name anchor searched for a handicap

    Example:
        >>> extractor = FieldExtractor()
        >>> fields = extractor.extract_from_row(row, hole_count=18)
        >>> fields.name, fields.handicap
        ('JOHN SMITH', 12)
    """

    def __init__(self) -> None:
        self.name_anchors = [a.lower() for a in get_config("interpreter.anchors.name", ["name"])]
        self.handicap_anchors = [
            a.lower() for a in get_config("interpreter.anchors.handicap", ["hcap", "cap", "heap"])
        ]
        self.header_keywords = [
            a.lower() for a in get_config("interpreter.anchors.header", ["hole", "par", "index", "yard"])
        ]
        self.non_score_labels = [
            a.lower() for a in get_config(
                "interpreter.anchors.non_score_labels",
                ["name", "par", "index", "total", "points", "hcap", "heap"]
            )
        ]
        self.score_range = get_config("interpreter.ranges.score", [2, 12])
        self.handicap_range = get_config("interpreter.ranges.handicap", [0, 54])
        self.standalone_range = get_config("interpreter.ranges.standalone_handicap", [0, 36])
        self.handicap_window = get_config("interpreter.handicap_window", 8)
        self.max_name_parts = get_config("interpreter.max_name_parts", 3)
        self.placeholder = get_config("interpreter.placeholder_name", "PLAYER")

        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Build the anchor regexes from the configured keyword lists."""
        names = '|'.join(map(re.escape, self.name_anchors))
        caps = '|'.join(map(re.escape, self.handicap_anchors))
        keywords = '|'.join(map(re.escape, self.name_anchors + self.handicap_anchors))
        labels = '|'.join(map(re.escape, sorted(
            set(self.non_score_labels + self.handicap_anchors + self.header_keywords)
        )))

        self.name_token = re.compile(rf"^\W*(?:{names})\W*$", re.IGNORECASE)
        self.name_word = re.compile(rf"\b(?:{names})\b", re.IGNORECASE)
        self.handicap_token = re.compile(rf"^\W*(?:{caps})\W*$", re.IGNORECASE)
        self.keyword_word = re.compile(rf"\b(?:{keywords})\b", re.IGNORECASE)
        self.label_word = re.compile(rf"\b(?:{labels})s?\b", re.IGNORECASE)
        self.number_before_handicap = re.compile(rf"\b(\d{{1,2}})\s*(?:{caps})\b", re.IGNORECASE)
        self.number_after_handicap = re.compile(rf"\b(?:{caps})\b\W*(\d{{1,2}})\b", re.IGNORECASE)
        self.number_before_name = re.compile(rf"\b(\d{{1,2}})\s+(?:{names})\b", re.IGNORECASE)

    # ------------------------------------------------------------------
    # Name cleanup
    # ------------------------------------------------------------------

    def clean_name(self, raw: str) -> str:
        """
        Normalize a raw name.

        Strips digits, anchor keywords and surrounding punctuation, collapses
        whitespace and uppercases. An empty result, or the bare word
        "NAME", becomes the placeholder. Cleaning a cleaned name is a
        no-op.

        Example:
            >>> extractor.clean_name("Name: john smith 12,")
            'JOHN SMITH'
        """
        name = re.sub(r'\d+', '', raw or '')
        name = self.keyword_word.sub(' ', name)
        name = ' '.join(name.split())
        name = re.sub(r"^[^A-Za-z.']+", '', name)
        name = re.sub(r"[^A-Za-z.']+$", '', name)
        name = ' '.join(name.split()).upper()

        if not name or name == 'NAME':
            return self.placeholder
        return name

    def _is_keyword(self, text: str) -> bool:
        return bool(self.name_token.match(text) or self.handicap_token.match(text))

    # ------------------------------------------------------------------
    # Row mode
    # ------------------------------------------------------------------

    def extract_from_row(self, row: TextRow, hole_count: int) -> PlayerFields:
        """
        Extract one player's fields from a spatial row.

        Args:
            row: Tokens of one row, ordered left to right.
            hole_count: Number of holes to fill.

        Returns:
            PlayerFields with exactly ``hole_count`` scores.
        """
        texts = row.texts
        name_idx = next((i for i, t in enumerate(texts) if self.name_token.match(t)), None)

        name = self.clean_name(' '.join(self._row_name_parts(texts, name_idx)))
        handicap, used_idx, labelled = self._row_handicap(texts, name_idx)

        candidates = [
            (i, value) for i, value in enumerate(parse_int(t) for t in texts)
            if in_range(value, self.score_range)
        ]
        if labelled or len(candidates) > hole_count:
            candidates = [(i, value) for i, value in candidates if i != used_idx]
        scores = [value for _, value in candidates]

        logger.debug(f"Row {row.row_index}: {name} hcap={handicap} scores={len(scores)}")
        return PlayerFields(name, handicap, fit_scores(scores, hole_count))

    def _row_name_parts(self, texts: List[str], name_idx: Optional[int]) -> List[str]:
        if name_idx is not None:
            candidates = [
                t for t in texts[name_idx + 1:]
                if NAME_CHARS.match(t) and not self._is_keyword(t)
            ]
        else:
            candidates = [
                t for t in texts
                if NAME_CHARS.match(t) and len(t.strip()) > 1 and not self._is_keyword(t)
            ]
        return candidates[:self.max_name_parts]

    def _row_handicap(
        self,
        texts: List[str],
        name_idx: Optional[int]
    ) -> Tuple[int, Optional[int], bool]:
        """
        Return (handicap, index of the token it was read from, labelled).

        An unlabelled number may be a first-hole score, so the caller only
        drops it from the scores when the row holds more numbers than holes.
        """
        values = [parse_int(t) for t in texts]

        # Labelled: the token after the label, else the token before it
        hcap_idx = next((i for i, t in enumerate(texts) if self.handicap_token.match(t)), None)
        if hcap_idx is not None:
            for j in (hcap_idx + 1, hcap_idx - 1):
                if 0 <= j < len(values) and in_range(values[j], self.handicap_range):
                    return values[j], j, True

        # "<number> Name"
        if name_idx is not None and name_idx > 0:
            j = name_idx - 1
            if in_range(values[j], self.handicap_range):
                return values[j], j, True

        for j, value in enumerate(values):
            if in_range(value, self.standalone_range):
                return value, j, False

        return 0, None, False

    # ------------------------------------------------------------------
    # Line mode
    # ------------------------------------------------------------------

    def is_label_line(self, line: str) -> bool:
        """True for lines carrying a known non-score label."""
        return bool(self.label_word.search(line))

    def extract_from_lines(
        self,
        lines: Sequence[str],
        anchor: int,
        end: int,
        hole_count: int
    ) -> PlayerFields:
        """
        Extract one player's fields from a block of text lines.

        Args:
            lines: All non-empty text lines of the scorecard.
            anchor: Index of the line holding this player's name anchor.
            end: Index of the next player's anchor, or ``len(lines)``.
            hole_count: Number of holes to fill.

        Returns:
            PlayerFields with exactly ``hole_count`` scores.
        """
        end = min(end, len(lines))
        consumed_lines: Set[int] = {anchor}

        name_parts = self._line_name_parts(lines, anchor, end, consumed_lines)
        name = self.clean_name(' '.join(name_parts))

        handicap, guessed = self._line_handicap(lines, anchor, end, consumed_lines)

        candidates = []
        for j in range(anchor + 1, end):
            if j in consumed_lines or self.is_label_line(lines[j]):
                continue
            for k, token in enumerate(lines[j].split()):
                value = parse_int(token)
                if in_range(value, self.score_range):
                    candidates.append(((j, k), value))

        if len(candidates) > hole_count:
            candidates = [(pos, value) for pos, value in candidates if pos != guessed]
        scores = [value for _, value in candidates]

        logger.debug(f"Line {anchor}: {name} hcap={handicap} scores={len(scores)}")
        return PlayerFields(name, handicap, fit_scores(scores, hole_count))

    def _line_name_parts(
        self,
        lines: Sequence[str],
        anchor: int,
        end: int,
        consumed_lines: Set[int]
    ) -> List[str]:
        parts: List[str] = []

        # Text on the anchor line itself, e.g. "Name: John Smith"
        match = self.name_word.search(lines[anchor])
        rest = lines[anchor][match.end():] if match else ''
        words = [w for w in rest.split() if NAME_CHARS.match(w) and not self._is_keyword(w)]
        if words:
            parts.append(' '.join(words))

        j = anchor + 1
        while len(parts) < self.max_name_parts and j < end:
            line = lines[j]
            if self.is_label_line(line) or not NAME_LINE.match(line):
                break
            parts.append(line)
            consumed_lines.add(j)
            j += 1

        return parts

    def _line_handicap(
        self,
        lines: Sequence[str],
        anchor: int,
        end: int,
        consumed_lines: Set[int]
    ) -> Tuple[int, Optional[Tuple[int, int]]]:
        """
        Return (handicap, position of an unlabelled handicap token).

        A labelled handicap on its own line is taken out of the block
        through ``consumed_lines``. An unlabelled one is only reported by
        its (line, token) position, since it may be a first-hole score.
        """
        window = range(anchor, min(anchor + self.handicap_window, end))

        for j in window:
            line = lines[j]
            for pattern in (self.number_after_handicap, self.number_before_handicap):
                match = pattern.search(line)
                if match and in_range(int(match.group(1)), self.handicap_range):
                    return int(match.group(1)), None

            # A bare label with its number on the neighbouring line
            if self.handicap_token.match(line):
                for k in (j + 1, j - 1):
                    if anchor <= k < end and k not in consumed_lines:
                        value = parse_int(lines[k])
                        if in_range(value, self.handicap_range):
                            consumed_lines.add(k)
                            return value, None

        match = self.number_before_name.search(lines[anchor])
        if match and in_range(int(match.group(1)), self.handicap_range):
            return int(match.group(1)), None

        for j in window:
            if j != anchor and (j in consumed_lines or self.is_label_line(lines[j])):
                continue
            for k, token in enumerate(lines[j].split()):
                value = parse_int(token)
                if in_range(value, self.standalone_range):
                    return value, (j, k)

        return 0, None
