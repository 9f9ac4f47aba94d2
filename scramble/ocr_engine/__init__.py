"""
OCR Payload Module for the Scramble Scorecard System.

This module holds what the system receives from the external OCR
provider and the first spatial step over it:
    - Recognized tokens with four-corner bounding polygons
    - Full-text payloads, with or without geometry
    - Grouping of tokens into horizontal rows

Character recognition itself is done by the provider.
"""

from .ocr_result import OCRPayload, RecognizedToken, TextRow
from .row_grouper import RowGrouper, group_rows

__all__ = ['OCRPayload', 'RecognizedToken', 'TextRow', 'RowGrouper', 'group_rows']
