"""
Excel Exporter Module.

This module writes scored and ranked teams of an event to an Excel
workbook using openpyxl.

Sheets:
    - Results: one row per team, ranked within its format
    - Scorecards: one row per player with hole-by-hole gross scores

Author: ML Engineering Team
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from config import get_config
from scramble.utils.logger import get_logger
from scramble.utils.helpers import ensure_directory, generate_timestamp
from scramble.utils.exceptions import ExcelExportError
from scramble.postprocessor.team_record import TeamRecord
from scramble.scoring.ranking import format_rank
from scramble.scoring.team_score import ScrambleFormat

logger = get_logger(__name__)

RankedRecord = Tuple[TeamRecord, int]


class ExcelExporter:
    """
    Exports ranked team records to Excel format.

    Example:
        >>> exporter = ExcelExporter()
        >>> path = exporter.export(ranked_records, "event.xlsx")
    """

    COLUMNS = [
        'Format',
        'Position',
        'Team',
        'Players',
        'Holes',
        'Gross',
        'Team HCP',
        'Net',
        'Points',
        'Confidence',
    ]

    def __init__(self) -> None:
        self.output_dir = Path(get_config("paths.output_dir", "outputs"))
        self.results_sheet = get_config("output.excel.results_sheet", "Results")
        self.scorecards_sheet = get_config("output.excel.scorecards_sheet", "Scorecards")
        logger.debug(f"ExcelExporter initialized (output_dir: {self.output_dir})")

    def export(
        self,
        ranked: Sequence[RankedRecord],
        filename: Optional[Union[str, Path]] = None
    ) -> str:
        """
        Export ranked team records to an Excel file.

        Args:
            ranked: (record, rank) pairs.
            filename: Output path. Relative names go under the output
                directory; None generates a timestamped name.

        Returns:
            Path to the created Excel file.

        Raises:
            ExcelExportError: If export fails.
        """
        if filename is None:
            filename = f"scramble_results_{generate_timestamp()}.xlsx"

        filepath = Path(filename)
        if not filepath.is_absolute() and filepath.parent == Path('.'):
            filepath = self.output_dir / filepath

        if not ranked:
            raise ExcelExportError(str(filepath), "No results to export")

        ensure_directory(filepath.parent)

        try:
            workbook = openpyxl.Workbook()
            self._create_results_sheet(workbook, ranked)
            self._create_scorecards_sheet(workbook, ranked)
            workbook.save(filepath)
        except (OSError, ValueError) as e:
            logger.error(f"Excel export failed: {e}")
            raise ExcelExportError(str(filepath), str(e)) from e

        logger.info(f"Excel file saved: {filepath} ({len(ranked)} teams)")
        return str(filepath)

    @staticmethod
    def _style_header(sheet, headers: List[str], color: str) -> None:
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color=color, end_color=color, fill_type="solid")
        thin = Side(style='thin')

        for col, header in enumerate(headers, 1):
            cell = sheet.cell(row=1, column=col, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = Border(left=thin, right=thin, top=thin, bottom=thin)

        sheet.freeze_panes = 'A2'

    @staticmethod
    def _fit_columns(sheet, width_cap: int = 40) -> None:
        for col in range(1, sheet.max_column + 1):
            letter = get_column_letter(col)
            longest = max(
                (len(str(cell.value)) for cell in sheet[letter] if cell.value is not None),
                default=0
            )
            sheet.column_dimensions[letter].width = min(longest + 2, width_cap)

    def _create_results_sheet(self, workbook, ranked: Sequence[RankedRecord]) -> None:
        sheet = workbook.active
        sheet.title = self.results_sheet
        self._style_header(sheet, self.COLUMNS, "4472C4")

        formats = list(ScrambleFormat)
        ordered = sorted(ranked, key=lambda item: (formats.index(item[0].scramble_format), item[1]))
        for row_num, (record, rank) in enumerate(ordered, 2):
            values = [
                record.scramble_format.value.title(),
                format_rank(rank) if rank else '',
                record.team_name,
                ', '.join(record.player_names),
                record.hole_count,
                record.score.gross_total,
                record.score.team_handicap,
                record.score.net_score,
                record.score.points_total,
                round(record.confidence, 2),
            ]
            for col, value in enumerate(values, 1):
                sheet.cell(row=row_num, column=col, value=value)

        self._fit_columns(sheet)

    def _create_scorecards_sheet(self, workbook, ranked: Sequence[RankedRecord]) -> None:
        sheet = workbook.create_sheet(title=self.scorecards_sheet)
        max_holes = max(record.hole_count for record, _ in ranked)
        headers = ['Team', 'Player', 'HCP'] + [str(h) for h in range(1, max_holes + 1)] + ['Gross']
        self._style_header(sheet, headers, "548235")

        row_num = 2
        for record, _ in ranked:
            for player in record.players:
                values = [record.team_name, player.name, player.handicap]
                values += [score or None for score in player.hole_scores]
                values += [None] * (max_holes - len(player.hole_scores))
                values.append(player.gross_total)
                for col, value in enumerate(values, 1):
                    sheet.cell(row=row_num, column=col, value=value)
                row_num += 1

        self._fit_columns(sheet, width_cap=24)
