import pytest

from scramble.scoring import (
    ScrambleFormat,
    TeamScore,
    apply_rankings,
    format_rank,
    rank_teams,
)

STRAIGHT = ScrambleFormat.STRAIGHT
CHAMPAGNE = ScrambleFormat.CHAMPAGNE


def straight(team_id, net, gross=None, hcp=3):
    gross = net + hcp if gross is None else gross
    return TeamScore(team_id=team_id, team_name=f"T{team_id}", scramble_format=STRAIGHT,
                     gross_total=gross, team_handicap=hcp, net_score=net)


def champagne(team_id, points, gross=80, hcp=3):
    return TeamScore(team_id=team_id, team_name=f"T{team_id}", scramble_format=CHAMPAGNE,
                     gross_total=gross, team_handicap=hcp, points_total=points)


def as_pairs(entries):
    return [(e.team_id, e.rank) for e in entries]


def test_formats_ranked_separately():
    teams = [straight(1, 72), champagne(4, 30), straight(2, 70), champagne(5, 36), straight(3, 75)]

    assert as_pairs(rank_teams(teams)) == [(2, 1), (1, 2), (3, 3), (5, 1), (4, 2)]


def test_empty_event():
    assert rank_teams([]) == []
    assert apply_rankings([]) == []


def test_straight_tie_broken_on_gross():
    teams = [straight(1, 70, gross=80, hcp=10), straight(2, 70, gross=78, hcp=8)]

    assert as_pairs(rank_teams(teams)) == [(2, 1), (1, 2)]


def test_champagne_tie_broken_on_gross_then_handicap():
    teams = [
        champagne(1, 36, gross=80, hcp=5),
        champagne(2, 36, gross=80, hcp=4),
        champagne(3, 36, gross=78, hcp=9),
    ]

    assert as_pairs(rank_teams(teams)) == [(3, 1), (2, 2), (1, 3)]


def test_full_ties_ranked_by_position_in_input_order():
    teams = [straight(2, 70), straight(1, 70), straight(3, 72)]

    assert as_pairs(rank_teams(teams)) == [(2, 1), (1, 2), (3, 3)]


def test_group_of_n_teams_ranked_one_to_n():
    teams = [straight(i, net) for i, net in enumerate([73, 70, 80, 71, 70, 73, 70])]
    teams += [champagne(10 + i, pts) for i, pts in enumerate([30, 30, 28])]

    entries = rank_teams(teams)

    assert [e.rank for e in entries[:7]] == list(range(1, 8))
    assert [e.rank for e in entries[7:]] == [1, 2, 3]


def test_team_without_result_ranks_last():
    teams = [straight(1, None, gross=90), straight(2, 75)]

    assert as_pairs(rank_teams(teams)) == [(2, 1), (1, 2)]


def test_apply_rankings_keeps_input_order():
    teams = [straight(1, 72), champagne(2, 30), straight(3, 68)]

    ranked = apply_rankings(teams)

    assert [r.team.team_id for r in ranked] == [1, 2, 3]
    assert [r.rank for r in ranked] == [2, 1, 1]
    assert ranked[0].display_rank == "2nd"
    assert teams[0].net_score == 72


@pytest.mark.parametrize("rank, expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (101, "101st"), (111, "111th"),
])
def test_format_rank(rank, expected):
    assert format_rank(rank) == expected
