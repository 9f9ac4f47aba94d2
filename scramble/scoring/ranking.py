"""
Ranking Engine Module.

Orders scored teams into positions. Straight and champagne teams are
ranked as two separate groups, each starting again at 1:

    - Straight: ascending net score (lower wins)
    - Champagne: descending points total (higher wins)

Exact ties on the primary metric fall back to the tie-break (lower
gross, then lower team handicap). Teams still level keep their input
order (the sort is stable), and every team is ranked by its sorted
position, so a group of N teams is ranked 1..N.

Ranking is a global ordering, so it runs only after every team of an
event has been scored.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List, Union

from scramble.utils.logger import get_logger
from .engine import break_tie
from .team_score import ScrambleFormat, TeamScore

logger = get_logger(__name__)


@dataclass(frozen=True)
class RankingEntry:
    """Rank of one team within its format group."""
    team_id: Union[int, str]
    rank: int


@dataclass(frozen=True)
class RankedTeam:
    """A team score with its rank layered on top."""
    team: TeamScore
    rank: int

    @property
    def display_rank(self) -> str:
        return format_rank(self.rank)


def _compare(team1: TeamScore, team2: TeamScore, higher_wins: bool) -> int:
    m1, m2 = team1.metric, team2.metric
    if m1 != m2:
        # Teams without a result go to the bottom
        if m1 is None:
            return 1
        if m2 is None:
            return -1
        if higher_wins:
            return -1 if m1 > m2 else 1
        return -1 if m1 < m2 else 1
    return break_tie(team1, team2)


def _rank_group(teams: List[TeamScore], higher_wins: bool) -> List[RankingEntry]:
    ordered = sorted(
        teams,
        key=cmp_to_key(lambda a, b: _compare(a, b, higher_wins))
    )

    return [
        RankingEntry(team_id=team.team_id, rank=position)
        for position, team in enumerate(ordered, 1)
    ]


def rank_teams(teams: Iterable[TeamScore]) -> List[RankingEntry]:
    """
    Rank teams within their format groups.

    Args:
        teams: Scored teams of one event, any mix of formats.

    Returns:
        Straight-format entries in rank order, followed by
        champagne-format entries in rank order.

    Example:
        >>> [(e.team_id, e.rank) for e in rank_teams(scores)]
        [(3, 1), (1, 2), (2, 1)]
    """
    teams = list(teams)
    straight = [t for t in teams if t.scramble_format == ScrambleFormat.STRAIGHT]
    champagne = [t for t in teams if t.scramble_format == ScrambleFormat.CHAMPAGNE]

    rankings = _rank_group(straight, higher_wins=False)
    rankings.extend(_rank_group(champagne, higher_wins=True))

    logger.info(f"Ranked {len(straight)} straight and {len(champagne)} champagne teams")
    return rankings


def apply_rankings(teams: Iterable[TeamScore]) -> List[RankedTeam]:
    """
    Attach ranks to teams, keeping the input order.

    The team scores themselves are not modified.
    """
    teams = list(teams)
    if not teams:
        return []

    ranks = {entry.team_id: entry.rank for entry in rank_teams(teams)}
    return [RankedTeam(team=team, rank=ranks.get(team.team_id, 0)) for team in teams]


def ordinal_suffix(number: int) -> str:
    """English ordinal suffix: 1 -> "st", 12 -> "th", 22 -> "nd"."""
    if 11 <= number % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def format_rank(rank: int) -> str:
    """
    Format a rank for display.

    Example:
        >>> format_rank(1), format_rank(12), format_rank(23)
        ('1st', '12th', '23rd')
    """
    return f"{rank}{ordinal_suffix(rank)}"
