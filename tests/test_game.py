import io
import random

import pytest

from spacexplorer.game import (
    FOOTER,
    HEADER,
    create_map,
    hide_cursor,
    move_cursor_top_left,
    render_map,
    spawn_asteroid,
)
from spacexplorer.world import PLAYER_SYM, Direction, GameMap


class FakeRng:
    def __init__(self, randint_value, randrange_values):
        self.randint_value = randint_value
        self.randrange_values = list(randrange_values)

    def randint(self, a, b):
        return self.randint_value

    def randrange(self, stop):
        return self.randrange_values.pop(0)


def make_map(**overrides):
    settings = dict(
        fuel_per_scrap=5,
        start_fuel=5,
        start_health=5,
        scrap_count=20,
        asteroid_count=5,
        difficulty="Easy",
    )
    settings.update(overrides)
    return GameMap(**settings)


def count_scrap(game_map):
    size = game_map.world_size
    return sum(game_map.has_scrap(i, j) for i in range(size) for j in range(size))


def test_create_map_full_scrap_except_centre():
    game_map = make_map(scrap_count=100)
    create_map(game_map, random.Random(1))
    size = game_map.world_size
    assert count_scrap(game_map) == size * size - 1
    centre = size // 2
    assert game_map.has_player(centre, centre)
    assert not game_map.has_scrap(centre, centre)


def test_create_map_is_deterministic_for_seed():
    first = make_map()
    second = make_map()
    create_map(first, random.Random(42))
    create_map(second, random.Random(42))
    assert [[s.contains for s in col] for col in first.world] == [
        [s.contains for s in col] for col in second.world
    ]


def test_create_map_low_roll_places_no_scrap():
    game_map = make_map(scrap_count=10)
    create_map(game_map, FakeRng(0, []))
    assert count_scrap(game_map) == 0
    assert game_map.has_player(9, 9)


@pytest.mark.parametrize(
    "direction, pos, expected",
    [
        (0, 5, (5, 17)),
        (2, 5, (5, 0)),
        (1, 7, (0, 7)),
        (3, 7, (17, 7)),
    ],
)
def test_spawn_asteroid_edges(direction, pos, expected):
    game_map = make_map()
    spawned = spawn_asteroid(game_map, FakeRng(50, [direction, pos]))
    assert spawned == [(expected[0], expected[1], Direction(direction))]
    assert game_map.has_asteroid_dir(expected[0], expected[1], direction)


def test_spawn_asteroid_high_roll_spawns_two():
    game_map = make_map()
    spawned = spawn_asteroid(game_map, FakeRng(95, [0, 1, 1, 2]))
    assert len(spawned) == 2
    assert game_map.has_asteroid_dir(1, 17, Direction.UP)
    assert game_map.has_asteroid_dir(0, 2, Direction.RIGHT)


def test_render_map_includes_report_and_overlaps():
    game_map = make_map()
    game_map.add_player(3, 4)
    game_map.add_scrap(3, 4)
    text = render_map(game_map, "None", True)
    assert "None1: X P \n" in text
    assert game_map.symbol_at(3, 4) == "1"
    render_map(game_map, "", False)
    assert game_map.symbol_at(3, 4) == " "


def test_cursor_sequences_are_escape_codes():
    hidden = io.StringIO()
    home = io.StringIO()
    hide_cursor(hidden)
    move_cursor_top_left(home)
    assert hidden.getvalue().startswith("\x1b[")
    assert home.getvalue().startswith("\x1b[")
    assert hidden.getvalue() != home.getvalue()