from scramble.ocr_engine import RowGrouper, group_rows

from conftest import make_token


def test_empty_input_gives_no_rows():
    assert RowGrouper().group([]) == []


def test_tokens_within_tolerance_share_a_row():
    tokens = [
        make_token("Smith", 60, 105),
        make_token("John", 10, 100),
        make_token("12", 120, 112),
        make_token("Mary", 10, 140),
    ]

    rows = RowGrouper(tolerance=10).group(tokens)

    assert [row.texts for row in rows] == [["John", "Smith", "12"], ["Mary"]]
    assert [row.row_index for row in rows] == [0, 1]
    assert rows[0].top == 100


def test_every_token_lands_in_exactly_one_row():
    tokens = [make_token(str(i), i * 10, y) for i, y in enumerate([0, 5, 30, 33, 70, 90, 91])]

    rows = group_rows(tokens, tolerance=20)

    assert sum(len(row) for row in rows) == len(tokens)
    assert sorted(t for row in rows for t in row.texts) == sorted(t.text for t in tokens)


def test_default_tolerance_comes_from_config():
    assert RowGrouper().tolerance == 20
