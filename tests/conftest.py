import pytest

from config import ConfigurationManager
from scramble.ocr_engine import OCRPayload, RecognizedToken


NINE_HOLE_CARD = """SCRAMBLE SCORECARD
Hole 1 2 3 4 5 6 7 8 9
Par 4 4 3 5 4 4 3 4 5
Name
John Smith
Hcap 12
4 5 3 4 4 5 3 4 6
Name
Mary Kelly
8
5 5 4 4 6 4 3 5 5
Name
Pat Doyle
Hcap 4
4 4 3 5 4 4 3 4 4
"""


@pytest.fixture(autouse=True)
def fresh_config():
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


def make_token(text, x, y, width=30, height=20):
    return RecognizedToken(
        text=text,
        vertices=((x, y), (x + width, y), (x + width, y + height), (x, y + height))
    )


def make_row(texts, y, x0=0, step=40):
    return [make_token(text, x0 + i * step, y) for i, text in enumerate(texts)]


@pytest.fixture
def nine_hole_text():
    return NINE_HOLE_CARD


@pytest.fixture
def spatial_payload():
    tokens = []
    tokens += make_row(["Hole"] + [str(h) for h in range(1, 10)], y=10)
    tokens += make_row(["Par", "4", "4", "3", "5", "4", "4", "3", "4", "5"], y=50)
    tokens += make_row(
        ["Name", "John", "Smith", "Hcap", "12", "4", "5", "3", "4", "4", "5", "3", "4", "6"],
        y=100
    )
    tokens += make_row(["Mary", "Kelly", "8", "5", "5", "4", "4", "6", "4", "3", "5", "5"], y=150)
    return OCRPayload(text="", tokens=tokens, source="card.json")
