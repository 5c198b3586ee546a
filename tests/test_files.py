import pytest

from spacexplorer.files import append_score, create_default, parse


def test_missing_difficulty_file_gets_defaults(tmp_path):
    path = tmp_path / "difficulty.txt"
    rows = parse(path)
    assert path.exists()
    assert rows == [
        ["Easy", "5", "5", "5", "20", "5"],
        ["Medium", "5", "3", "3", "10", "10"],
        ["Hard", "3", "2", "2", "10", "20"],
    ]


def test_missing_highscore_file_is_created_empty(tmp_path):
    path = tmp_path / "highscore.txt"
    assert parse(path) == []
    assert path.read_text() == ""


def test_unknown_file_name_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        create_default(tmp_path / "other.txt")


def test_append_then_parse_round_trip(tmp_path):
    path = tmp_path / "highscore.txt"
    append_score(path, "Ann", "Easy", 7)
    append_score(path, "!Bob!", "Hard", 12)
    assert parse(path) == [["Ann", "Easy", "7"], ["!Bob!", "Hard", "12"]]


def test_fields_are_truncated(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("abcdefghijkl,Medium,3\r\n")
    rows = parse(path)
    assert rows == [["abcdefghi", "Medium", "3"]]


def test_row_limit(tmp_path):
    path = tmp_path / "highscore.txt"
    for n in range(15):
        append_score(path, f"p{n}", "Easy", n)
    rows = parse(path)
    assert len(rows) == 10
    assert rows[-1] == ["p9", "Easy", "9"]


def test_field_limit(tmp_path):
    path = tmp_path / "highscore.txt"
    values = [str(n) for n in range(12)]
    path.write_text(",".join(values) + "\n")
    assert parse(path) == [values[:10]]