import pytest

from scramble.interpreter import InterpretationResult, ParsedPlayer, ScorecardInterpreter, TeamNameSequence
from scramble.ocr_engine import OCRPayload
from scramble.postprocessor import RosterValidator, ScorecardProcessor
from scramble.scoring import ScrambleFormat
from scramble.utils.exceptions import NoPlayersDetectedError, UnknownFormatError


@pytest.fixture
def processor():
    return ScorecardProcessor(interpreter=ScorecardInterpreter(team_names=TeamNameSequence()))


def test_empty_scorecard_escalates(processor):
    with pytest.raises(NoPlayersDetectedError) as exc_info:
        processor.process(OCRPayload(text="", source="blank.json"), "straight", team_id=1)

    assert exc_info.value.details["confidence"] == 0.2


def test_straight_scorecard(processor, nine_hole_text):
    record = processor.process(OCRPayload(text=nine_hole_text), "straight", team_id=7)

    assert record.team_id == 7
    assert record.team_name == "ANTRIM"
    assert record.hole_count == 9
    assert record.score.gross_total == 38
    assert record.score.team_handicap == 2
    assert record.score.net_score == 36
    assert record.confidence == 0.8
    assert record.warnings == []


def test_champagne_scorecard(processor, nine_hole_text):
    record = processor.process(OCRPayload(text=nine_hole_text), ScrambleFormat.CHAMPAGNE, team_id=1)

    assert record.scramble_format is ScrambleFormat.CHAMPAGNE
    assert len(record.score.holes) == 9
    assert record.score.points_total == sum(h.best_points for h in record.score.holes)
    assert record.to_dict(rank=1)["rank"] == 1


def test_unknown_format(processor, nine_hole_text):
    with pytest.raises(UnknownFormatError):
        processor.process(OCRPayload(text=nine_hole_text), "texas", team_id=1)


def test_repair_fills_gaps_without_touching_input():
    original = InterpretationResult(
        players=[ParsedPlayer("p1", "JOHN SMITH", 60, [4, 5])],
        detected_hole_count=0,
        team_name=None,
        confidence=0.4,
        mode="text",
    )

    repaired, report = RosterValidator().repair(original, default_hole_count=9)

    assert repaired.detected_hole_count == 9
    assert repaired.team_name == "Team"
    assert repaired.players[0].handicap == 54
    assert repaired.players[0].hole_scores == [4, 5, 0, 0, 0, 0, 0, 0, 0]
    assert "Hole count missing, using 9" in report.warnings
    assert report.is_valid
    assert original.players[0].handicap == 60
    assert original.players[0].hole_scores == [4, 5]


def test_validate_empty_roster():
    report = RosterValidator().validate(InterpretationResult.empty(0.2))

    assert not report.is_valid
    assert report.errors == ["No players detected"]


def test_process_roster_pads_short_handicaps(processor):
    record = processor.process_roster(
        team_id=3,
        team_name="EAGLES",
        scramble_format="straight",
        names=["A", "B", "C"],
        handicaps=[10],
        hole_scores=[[4] * 18],
        hole_count=18,
    )

    assert record.player_handicaps == [10, 0, 0]
    assert record.hole_scores[1] == [0] * 18
    assert record.score.team_handicap == 1
    assert record.score.net_score == 71
    assert record.warnings == ["Only 1 handicaps found for 3 players. Padding missing with 0."]
