"""
Hole-Count Detector Module.

Scorecards print the hole numbers in ascending order across a header
row, so the largest hole label in a row made mostly of small numbers
tells us how many holes the event was played over.
"""

from typing import Iterable, Optional, Sequence

from config import get_config
from scramble.utils.helpers import parse_int, in_range
from scramble.utils.logger import get_logger

logger = get_logger(__name__)


class HoleCountDetector:
    """
    Infers the hole count (9, 13, 16 or 18) from header-like rows.

    A row qualifies when it holds at least ``min_numbers`` tokens in
    ``label_range``. The first qualifying row whose maximum is a
    canonical count decides immediately; otherwise the first maximum
    between the smallest canonical count and the top of the label range
    is kept as a fallback.

    Example:
        >>> detector = HoleCountDetector()
        >>> detector.detect([["Hole", "1", "2", "3", "4", "5", "6", "7", "8", "9"]])
        9
    """

    def __init__(self) -> None:
        self.canonical_counts = sorted(
            get_config("interpreter.canonical_hole_counts", [9, 13, 16, 18])
        )
        self.min_numbers = get_config("interpreter.min_header_numbers", 6)
        self.label_range = get_config("interpreter.hole_label_range", [1, 18])
        self.default_count = get_config("interpreter.default_hole_count", 18)

    def detect(
        self,
        rows: Iterable[Sequence[str]],
        default: Optional[int] = None
    ) -> int:
        """
        Detect the hole count from rows of token texts.

        Args:
            rows: Each row as a sequence of token strings.
            default: Count to return when nothing qualifies.

        Returns:
            Detected hole count.
        """
        if default is None:
            default = self.default_count

        fallback_range = (self.canonical_counts[0], self.label_range[1])
        fallback: Optional[int] = None

        for texts in rows:
            numbers = [
                n for n in (parse_int(t) for t in texts)
                if in_range(n, self.label_range)
            ]
            if len(numbers) < self.min_numbers:
                continue

            top = max(numbers)
            if top in self.canonical_counts:
                logger.debug(f"Hole count {top} read from header row")
                return top
            if fallback is None and in_range(top, fallback_range):
                fallback = top

        if fallback is not None:
            logger.debug(f"No canonical hole count found, using {fallback}")
            return fallback

        return default
