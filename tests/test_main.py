import json

from main import main, run_event

from conftest import NINE_HOLE_CARD


def write_payload(path, text):
    path.write_text(json.dumps({"text": text}), encoding="utf-8")


def test_run_event_ranks_all_cards(tmp_path):
    cards = tmp_path / "cards"
    cards.mkdir()
    write_payload(cards / "a.json", NINE_HOLE_CARD)
    write_payload(cards / "b.json", NINE_HOLE_CARD.replace("Hcap 12", "Hcap 30"))
    write_payload(cards / "c.json", "")
    (cards / "d.json").write_text(json.dumps({"ok": False, "error": "quota"}), encoding="utf-8")
    (cards / "notes.txt").write_text("ignored", encoding="utf-8")

    output = tmp_path / "results.json"
    results = run_event(str(cards), "straight", output_path=str(output))

    assert [r["source"].endswith(name) for r, name in zip(results, ["a.json", "b.json"])] == [True, True]
    assert [r["rank"] for r in results] == [2, 1]
    assert [r["team_id"] for r in results] == [1, 2]
    assert len(json.loads(output.read_text(encoding="utf-8"))["teams"]) == 2


def test_main_missing_input(tmp_path):
    assert main(["--input", str(tmp_path / "nope"), "--quiet"]) == 1


def test_main_scores_single_card(tmp_path):
    card = tmp_path / "card.json"
    write_payload(card, NINE_HOLE_CARD)
    output = tmp_path / "out.xlsx"

    code = main(["--input", str(card), "--format", "champagne", "--output", str(output), "--quiet"])

    assert code == 0
    assert output.exists()
