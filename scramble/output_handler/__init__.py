"""
Output Module for the Scramble Scorecard System.

Writes scored, ranked teams of an event to JSON or Excel.
"""

from .handler import OutputHandler
from .excel_exporter import ExcelExporter

__all__ = ['OutputHandler', 'ExcelExporter']
