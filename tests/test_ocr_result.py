import json

import pytest

from scramble.ocr_engine import OCRPayload, RecognizedToken
from scramble.utils.exceptions import OCRProcessingError, PayloadError, ScrambleError


def annotation(text, x, y):
    return {
        "description": text,
        "boundingPoly": {"vertices": [
            {"x": x, "y": y}, {"x": x + 30, "y": y},
            {"x": x + 30, "y": y + 20}, {"x": x, "y": y + 20},
        ]},
    }


def test_from_annotation_reads_missing_coordinates_as_zero():
    token = RecognizedToken.from_annotation({
        "description": "Hcap",
        "boundingPoly": {"vertices": [{"y": 50}, {"x": 60, "y": 50}, {"x": 60, "y": 80}, {"y": 80}]},
    })

    assert token.text == "Hcap"
    assert token.left == 0
    assert token.top == 50
    assert token.bbox == (0, 50, 60, 80)


def test_from_dict_drops_full_text_annotation():
    text = "Name\nJOHN SMITH"
    payload = OCRPayload.from_dict({
        "text": text,
        "annotations": [annotation(text, 0, 0), annotation("Name", 0, 0), annotation("JOHN", 0, 40)],
    })

    assert [t.text for t in payload.tokens] == ["Name", "JOHN"]
    assert payload.has_geometry


def test_text_only_payload_has_no_geometry():
    payload = OCRPayload.from_dict({"text": "Name\r\n\r\n  JOHN SMITH  \n"})

    assert not payload.has_geometry
    assert payload.lines == ["Name", "JOHN SMITH"]


@pytest.mark.parametrize("data", [
    "not an object",
    {"text": 42},
    {"text": "Name", "annotations": {"description": "Name"}},
    {"text": "Name", "annotations": ["Name"]},
])
def test_from_dict_rejects_malformed_payloads(data):
    with pytest.raises(PayloadError):
        OCRPayload.from_dict(data)


def test_load_reads_json_file(tmp_path):
    path = tmp_path / "card.json"
    path.write_text(json.dumps({"text": "Name\nMARY KELLY"}), encoding="utf-8")

    payload = OCRPayload.load(path)

    assert payload.source == str(path)
    assert payload.lines == ["Name", "MARY KELLY"]


def test_load_missing_file(tmp_path):
    with pytest.raises(ScrambleError):
        OCRPayload.load(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PayloadError):
        OCRPayload.load(path)


@pytest.mark.parametrize("data", [
    {"ok": False, "message": "quota exceeded"},
    {"error": "Vision API error"},
])
def test_provider_failure(data):
    with pytest.raises(OCRProcessingError) as exc_info:
        OCRPayload.from_dict(data, source="card.json")

    assert exc_info.value.details["source"] == "card.json"
