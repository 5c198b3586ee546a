import pytest

from spacexplorer.cli import choose_difficulty, final_name

ROWS = [
    ["Easy", "5", "5", "5", "20", "5"],
    ["Medium", "5", "3", "3", "10", "10"],
    ["Hard", "3", "2", "2", "10", "20"],
]


def test_choose_difficulty_first_valid_key():
    assert choose_difficulty(ROWS, iter("1")) == ROWS[0]


def test_choose_difficulty_last_entry():
    assert choose_difficulty(ROWS, ["3"]) == ROWS[2]


def test_choose_difficulty_skips_invalid_keys(capsys):
    result = choose_difficulty(ROWS, iter("0x92"))
    assert result == ROWS[1]
    out = capsys.readouterr().out
    assert out.count("Invalid input. Please try again.") == 3
    assert out.count("Enter: ") == 3


def test_choose_difficulty_out_of_range_exhausts():
    with pytest.raises(ValueError):
        choose_difficulty(ROWS, iter("4"))


def test_choose_difficulty_empty_list_rejects_everything():
    with pytest.raises(ValueError):
        choose_difficulty([], iter("123"))


def test_final_name_loss_keeps_name():
    assert final_name("Ace", False) == "Ace"


def test_final_name_win_wraps_name():
    assert final_name("Ace", True) == "!Ace!"


def test_final_name_takes_first_word():
    assert final_name("  Ace Pilot  ", False) == "Ace"
    assert final_name("Ace Pilot", True) == "!Ace!"


def test_final_name_empty():
    assert final_name("", False) == ""
    assert final_name("   ", True) == "!!"