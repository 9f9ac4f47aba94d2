"""
Team Label Sequence.

Default team labels rotate through a fixed list of 32 county names.
The rotation position is explicit state owned by the caller, so two
interpreters never share a counter and tests get reproducible labels.
"""

import time
from typing import List, Optional

from config import get_config

DEFAULT_TEAM_NAMES = [
    "ANTRIM", "ARMAGH", "CARLOW", "CAVAN", "CLARE", "CORK",
    "DERRY", "DONEGAL", "DOWN", "DUBLIN", "FERMANAGH", "GALWAY",
    "KERRY", "KILDARE", "KILKENNY", "LAOIS", "LEITRIM", "LIMERICK",
    "LONGFORD", "LOUTH", "MAYO", "MEATH", "MONAGHAN", "OFFALY",
    "ROSCOMMON", "SLIGO", "TIPPERARY", "TYRONE", "WATERFORD",
    "WESTMEATH", "WEXFORD", "WICKLOW",
]


class TeamNameSequence:
    """
    Rotating source of default team labels.

    Example:
        >>> names = TeamNameSequence()
        >>> names.next(), names.next()
        ('ANTRIM', 'ARMAGH')
        >>> TeamNameSequence(start=31).next()
        'WICKLOW'
    """

    def __init__(self, names: Optional[List[str]] = None, start: int = 0) -> None:
        if names is None:
            names = get_config("interpreter.team_names", DEFAULT_TEAM_NAMES)
        if not names:
            raise ValueError("TeamNameSequence needs at least one name")
        self.names = list(names)
        self.position = start

    @classmethod
    def from_clock(cls, names: Optional[List[str]] = None) -> 'TeamNameSequence':
        """Start the rotation at a position taken from the wall clock."""
        sequence = cls(names)
        sequence.position = int(time.time() * 1000) % len(sequence.names)
        return sequence

    def peek(self) -> str:
        """The label the next call to :meth:`next` will return."""
        return self.names[self.position % len(self.names)]

    def next(self) -> str:
        label = self.peek()
        self.position += 1
        return label
