import pytest

from scramble.interpreter import ScorecardInterpreter, TeamNameSequence, team_names
from scramble.ocr_engine import OCRPayload

from conftest import make_row


@pytest.fixture
def interpreter():
    return ScorecardInterpreter(team_names=TeamNameSequence())


def test_empty_text_yields_empty_result(interpreter):
    result = interpreter.interpret_text("")

    assert result.players == []
    assert result.detected_hole_count == 0
    assert result.team_name is None
    assert result.confidence == 0.2
    assert result.is_empty
    assert interpreter.team_names.peek() == "ANTRIM"


def test_text_mode(interpreter, nine_hole_text):
    result = interpreter.interpret_text(nine_hole_text)

    assert result.mode == "text"
    assert result.detected_hole_count == 9
    assert result.player_names == ["JOHN SMITH", "MARY KELLY", "PAT DOYLE"]
    assert result.player_handicaps == [12, 8, 4]
    assert result.hole_scores[0] == [4, 5, 3, 4, 4, 5, 3, 4, 6]
    assert result.hole_scores[1] == [5, 5, 4, 4, 6, 4, 3, 5, 5]
    assert result.hole_scores[2] == [4, 4, 3, 5, 4, 4, 3, 4, 4]
    assert [p.player_id for p in result.players] == ["p1", "p2", "p3"]
    assert result.confidence == 0.8


def test_spatial_mode(interpreter, spatial_payload):
    result = interpreter.interpret(spatial_payload)

    assert result.mode == "spatial"
    assert result.detected_hole_count == 9
    assert result.player_names == ["JOHN SMITH", "MARY KELLY"]
    assert result.player_handicaps == [12, 8]
    assert result.hole_scores == [
        [4, 5, 3, 4, 4, 5, 3, 4, 6],
        [5, 5, 4, 4, 6, 4, 3, 5, 5],
    ]
    assert result.confidence == 0.6
    assert result.source == "card.json"


def test_every_player_has_one_score_per_hole(interpreter, nine_hole_text):
    result = interpreter.interpret_text(nine_hole_text, default_hole_count=18)

    assert all(len(scores) == result.detected_hole_count for scores in result.hole_scores)


def test_default_hole_count_used_without_header(interpreter):
    result = interpreter.interpret_text("Name\nJoe Bloggs\nHcap 3\n5 5 4", default_hole_count=9)

    assert result.detected_hole_count == 9
    assert result.hole_scores == [[5, 5, 4, 0, 0, 0, 0, 0, 0]]
    assert result.confidence == 0.4


def test_repeated_names_are_dropped(interpreter):
    text = "Name\nJohn Smith\nHcap 12\n4 5\nName\nJohn Smith\nHcap 12\n4 5\n"

    result = interpreter.interpret_text(text)

    assert result.player_names == ["JOHN SMITH"]


def test_placeholder_names_are_not_deduplicated(interpreter):
    text = "Name\nHcap 10\n4 4\nName\nHcap 11\n5 5\n"

    result = interpreter.interpret_text(text)

    assert result.player_names == ["PLAYER", "PLAYER"]
    assert [p.player_id for p in result.players] == ["p1", "p2"]


def test_team_labels_rotate_deterministically(nine_hole_text):
    interpreter = ScorecardInterpreter(team_names=TeamNameSequence())

    first = interpreter.interpret_text(nine_hole_text)
    second = interpreter.interpret_text(nine_hole_text)

    assert (first.team_name, second.team_name) == ("ANTRIM", "ARMAGH")


def test_team_name_override_does_not_advance_rotation(interpreter, nine_hole_text):
    result = interpreter.interpret_text(nine_hole_text, team_name="EAGLES")

    assert result.team_name == "EAGLES"
    assert interpreter.team_names.peek() == "ANTRIM"


def test_header_rows_are_not_players(interpreter, spatial_payload):
    rows = interpreter.grouper.group(spatial_payload.tokens)

    assert [interpreter.is_player_row(row) for row in rows] == [False, False, True, True]


def test_team_name_sequence_wraps():
    names = TeamNameSequence(["A", "B"], start=1)

    assert [names.next() for _ in range(3)] == ["B", "A", "B"]


def test_team_name_sequence_needs_names():
    with pytest.raises(ValueError):
        TeamNameSequence([])


def test_result_serializes(interpreter, nine_hole_text):
    data = interpreter.interpret(OCRPayload(text=nine_hole_text, source="x")).to_dict()

    assert data["team_name"] == "ANTRIM"
    assert data["players"][0] == {
        "player_id": "p1",
        "name": "JOHN SMITH",
        "handicap": 12,
        "hole_scores": [4, 5, 3, 4, 4, 5, 3, 4, 6],
    }


def test_total_and_points_rows_are_not_players(interpreter, spatial_payload):
    spatial_payload.tokens += make_row(["Total", "36"], y=200)
    spatial_payload.tokens += make_row(["Points", "18"], y=250)

    result = interpreter.interpret(spatial_payload)

    assert result.player_names == ["JOHN SMITH", "MARY KELLY"]


def test_card_without_handicaps_keeps_first_hole(interpreter):
    result = interpreter.interpret_text("Hole 1 2 3 4 5 6 7 8 9\nName\nJOHN SMITH\n4 5 3 4 4 5 3 4 4")

    assert result.hole_scores == [[4, 5, 3, 4, 4, 5, 3, 4, 4]]


def test_team_name_sequence_from_clock(monkeypatch):
    monkeypatch.setattr(team_names.time, "time", lambda: 65.0)

    names = TeamNameSequence.from_clock()

    assert names.position == 65000 % 32
    assert names.next() == "DOWN"


def test_team_name_sequence_from_clock_stays_in_range():
    names = TeamNameSequence.from_clock(["A", "B", "C"])

    assert 0 <= names.position < 3
