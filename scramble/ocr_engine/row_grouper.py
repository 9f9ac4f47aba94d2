"""
Row Grouper Module.

Clusters OCR tokens into horizontal rows by their vertical position.
Photographed scorecards are rarely level, so tokens are accepted into
the current row while each one stays within a fixed tolerance of the
previous token's top edge.
"""

from typing import Iterable, List, Optional

from config import get_config
from scramble.utils.logger import get_logger
from .ocr_result import RecognizedToken, TextRow

logger = get_logger(__name__)


class RowGrouper:
    """
    Groups recognized tokens into top-to-bottom text rows.

    Attributes:
        tolerance: Maximum vertical gap between consecutive tokens of a row

    Example:
        >>> grouper = RowGrouper(tolerance=20)
        >>> rows = grouper.group(payload.tokens)
        >>> rows[0].text
        'Hole 1 2 3 4 5 6 7 8 9'
    """

    def __init__(self, tolerance: Optional[int] = None) -> None:
        if tolerance is None:
            tolerance = get_config("interpreter.row_tolerance", 20)
        self.tolerance = tolerance

    def group(self, tokens: Iterable[RecognizedToken]) -> List[TextRow]:
        """
        Group tokens into rows.

        Single pass over the tokens sorted by top edge; a token joins the
        current row when it lies within ``tolerance`` of the last token
        placed there, otherwise it starts a new row.

        Args:
            tokens: Tokens with geometry.

        Returns:
            Rows ordered top to bottom, tokens within a row left to right.
        """
        ordered = sorted(tokens, key=lambda t: t.top)
        rows: List[TextRow] = []
        current: List[RecognizedToken] = []
        row_top = 0
        last_y: Optional[int] = None

        for token in ordered:
            y = token.top
            if last_y is None or abs(y - last_y) <= self.tolerance:
                if not current:
                    row_top = y
                current.append(token)
            else:
                rows.append(self._make_row(current, row_top, len(rows)))
                current = [token]
                row_top = y
            last_y = y

        if current:
            rows.append(self._make_row(current, row_top, len(rows)))

        logger.debug(f"Grouped {len(ordered)} tokens into {len(rows)} rows")
        return rows

    @staticmethod
    def _make_row(tokens: List[RecognizedToken], top: int, index: int) -> TextRow:
        return TextRow(
            tokens=sorted(tokens, key=lambda t: t.left),
            top=top,
            row_index=index
        )


def group_rows(tokens: Iterable[RecognizedToken], tolerance: Optional[int] = None) -> List[TextRow]:
    """Convenience wrapper around :class:`RowGrouper`."""
    return RowGrouper(tolerance).group(tokens)
