"""
Scoring Engine Module.

Converts a team card into a team score under one of two formats:

    Straight scramble:
        net score = gross total - team handicap (lower wins)

    Champagne scramble (best-ball Stableford):
        1. Allocate handicap strokes to each hole for each player
        2. Net score per hole per player
        3. Net score to Stableford points against par
        4. The best points of any teammate count for the hole
        5. Sum of the best points over all holes (higher wins)

The team gross total is always the first player's gross total, and the
team handicap is 10% of the summed player handicaps, rounded half up.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence

from config import get_config
from scramble.utils.exceptions import EmptyRosterError
from scramble.utils.logger import get_logger
from .team_score import HoleResult, ScrambleFormat, TeamCard, TeamScore

logger = get_logger(__name__)

# Standard stroke index (1 = hardest hole)
STROKE_INDEX_18 = [10, 4, 14, 2, 16, 8, 12, 6, 18, 11, 1, 15, 7, 17, 5, 13, 3, 9]

# Stableford points keyed by net strokes relative to par
STABLEFORD_POINTS = {1: 1, 0: 2, -1: 3, -2: 4, -3: 5, -4: 6}


def break_tie(team1, team2) -> int:
    """
    Compare two tied teams.

    Lower gross total wins, then lower team handicap. Returns -1 if
    ``team1`` wins, 1 if ``team2`` wins and 0 when they share the position.
    """
    if team1.gross_total != team2.gross_total:
        return -1 if team1.gross_total < team2.gross_total else 1

    if team1.team_handicap != team2.team_handicap:
        return -1 if team1.team_handicap < team2.team_handicap else 1

    return 0


class ScoringEngine:
    """
    Computes straight and champagne scramble scores.

    Attributes:
        handicap_allowance: Fraction of summed handicaps given to the team
        par: Par assumed for every hole
        stroke_index: 18-value hole difficulty table
        stableford_points: Points by net score relative to par

    Example:
        >>> engine = ScoringEngine()
        >>> score = engine.score(team_card)
        >>> score.net_score
        72
    """

    def __init__(self) -> None:
        self.handicap_allowance = Decimal(str(get_config("scoring.handicap_allowance", 0.10)))
        self.par = get_config("scoring.par", 4)
        self.stroke_index = list(get_config("scoring.stroke_index", STROKE_INDEX_18))
        self.stableford_points = {
            int(k): int(v)
            for k, v in get_config("scoring.stableford", STABLEFORD_POINTS).items()
        }
        logger.debug(f"ScoringEngine initialized (allowance {self.handicap_allowance})")

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    def team_handicap(self, handicaps: Sequence[int]) -> int:
        """
        Team handicap: summed handicaps times the allowance, rounded half up.

        Example:
            >>> engine.team_handicap([8, 12, 6])
            3
        """
        total = Decimal(sum(handicaps)) * self.handicap_allowance
        return int(total.quantize(Decimal('1'), rounding=ROUND_HALF_UP))

    @staticmethod
    def gross_total(hole_scores: Sequence[int]) -> int:
        return sum(hole_scores)

    def stroke_index_for(self, hole_number: int, hole_count: int) -> int:
        """
        Stroke index of a hole.

        Events shorter than 18 holes map each hole proportionally onto
        the 18-slot table.
        """
        if hole_count == len(self.stroke_index):
            return self.stroke_index[hole_number - 1]
        scaled = (hole_number - 1) * len(self.stroke_index) // hole_count
        return self.stroke_index[scaled]

    @staticmethod
    def handicap_strokes(handicap: int, stroke_index: int) -> int:
        """Strokes a player receives on a hole of the given stroke index."""
        if handicap >= stroke_index + 18:
            return 2
        if handicap >= stroke_index:
            return 1
        return 0

    def stableford(self, net_score: int, par: Optional[int] = None) -> int:
        """
        Stableford points for a net score.

        Double bogey or worse scores 0, as does anything better than a
        condor.
        """
        if par is None:
            par = self.par
        return self.stableford_points.get(net_score - par, 0)

    # ------------------------------------------------------------------
    # Formats
    # ------------------------------------------------------------------

    def score(self, team: TeamCard) -> TeamScore:
        """
        Score a team under its format.

        Raises:
            EmptyRosterError: If the team has no players.
        """
        if not team.players:
            raise EmptyRosterError(team.team_name)

        if ScrambleFormat.parse(team.scramble_format) == ScrambleFormat.STRAIGHT:
            return self.straight(team)
        return self.champagne(team)

    def straight(self, team: TeamCard) -> TeamScore:
        """Straight scramble: gross total less team handicap."""
        if not team.players:
            raise EmptyRosterError(team.team_name)

        team_handicap = self.team_handicap([p.handicap for p in team.players])
        gross = self.gross_total(team.players[0].hole_scores)
        net = gross - team_handicap

        logger.debug(f"{team.team_name}: gross {gross}, hcp {team_handicap}, net {net}")
        return TeamScore(
            team_id=team.team_id,
            team_name=team.team_name,
            scramble_format=ScrambleFormat.STRAIGHT,
            gross_total=gross,
            team_handicap=team_handicap,
            net_score=net,
            breakdown=f"Gross: {gross}, Team HCP: {team_handicap}, Net: {net}"
        )

    def champagne(self, team: TeamCard) -> TeamScore:
        """
        Champagne scramble: best-ball Stableford points.

        A gross score of 0 means the score was not recovered, so that
        player earns nothing on the hole.
        """
        if not team.players:
            raise EmptyRosterError(team.team_name)

        team_handicap = self.team_handicap([p.handicap for p in team.players])
        gross = self.gross_total(team.players[0].hole_scores)

        holes: List[HoleResult] = []
        for hole_number in range(1, team.hole_count + 1):
            stroke_index = self.stroke_index_for(hole_number, team.hole_count)
            player_points: Dict[str, int] = {}

            for player in team.players:
                scores = player.hole_scores
                gross_score = scores[hole_number - 1] if hole_number <= len(scores) else 0
                if gross_score <= 0:
                    player_points[player.player_id] = 0
                    continue
                net_score = gross_score - self.handicap_strokes(player.handicap, stroke_index)
                player_points[player.player_id] = self.stableford(net_score)

            holes.append(HoleResult(
                hole=hole_number,
                stroke_index=stroke_index,
                player_points=player_points,
                best_points=max(player_points.values(), default=0)
            ))

        total = sum(h.best_points for h in holes)
        per_hole = ', '.join(f"H{h.hole}: {h.best_points}pts" for h in holes)

        logger.debug(f"{team.team_name}: {total} points over {team.hole_count} holes")
        return TeamScore(
            team_id=team.team_id,
            team_name=team.team_name,
            scramble_format=ScrambleFormat.CHAMPAGNE,
            gross_total=gross,
            team_handicap=team_handicap,
            points_total=total,
            breakdown=f"Total Points: {total} ({per_hole})",
            holes=holes
        )


def calculate_team_score(team: TeamCard) -> TeamScore:
    """Score a team with a default-configured engine."""
    return ScoringEngine().score(team)
