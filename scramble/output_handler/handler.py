"""
Main Output Handler Module.

This module provides the OutputHandler class that writes an event's
ranked team records as JSON or as an Excel workbook, chosen by the
output file extension.
"""

import json
from pathlib import Path
from typing import List, Dict, Any, Sequence, Union

from config import get_config
from scramble.utils.logger import get_logger
from scramble.utils.helpers import ensure_directory
from .excel_exporter import ExcelExporter, RankedRecord

logger = get_logger(__name__)


class OutputHandler:
    """
    Writes ranked team records.

    Example:
        >>> handler = OutputHandler()
        >>> handler.save(ranked, "outputs/event.json")
        >>> handler.save(ranked, "outputs/event.xlsx")
    """

    def __init__(self) -> None:
        self.indent = get_config("output.json.indent", 2)
        self._excel_exporter = None

    @property
    def excel_exporter(self) -> ExcelExporter:
        """Get or create the Excel exporter."""
        if self._excel_exporter is None:
            self._excel_exporter = ExcelExporter()
        return self._excel_exporter

    @staticmethod
    def to_dicts(ranked: Sequence[RankedRecord]) -> List[Dict[str, Any]]:
        return [record.to_dict(rank=rank) for record, rank in ranked]

    def to_json(self, ranked: Sequence[RankedRecord]) -> str:
        return json.dumps({'teams': self.to_dicts(ranked)}, indent=self.indent)

    def save(self, ranked: Sequence[RankedRecord], output_path: Union[str, Path]) -> str:
        """
        Save ranked records, as Excel for ``.xlsx`` paths and JSON otherwise.

        Returns:
            Path of the written file.
        """
        path = Path(output_path)
        if path.suffix.lower() == '.xlsx':
            return self.excel_exporter.export(ranked, path)

        ensure_directory(path.parent)
        path.write_text(self.to_json(ranked), encoding='utf-8')
        logger.info(f"JSON results saved: {path} ({len(ranked)} teams)")
        return str(path)
