"""Map generation, asteroid spawning and drawing of the playing field."""

from __future__ import annotations

import random
import sys
from itertools import product
from typing import Protocol, TextIO

from .world import Direction, GameMap

HEADER = "||====================================|| L F S ||\n"
FOOTER = "||====================================||=======||\n"
_PADDING = " " * 20 + "\n"

HIDE_CURSOR = "\x1b[?25l"
CURSOR_HOME = "\x1b[H"


class _Random(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def randrange(self, stop: int) -> int: ...


def create_map(game_map: GameMap, rng: _Random | None = None) -> None:
    """Scatter scrap over the map and place the player in the centre."""
    rng = rng if rng is not None else random
    size = game_map.world_size
    threshold = 100 - game_map.scrap_count
    for i, j in product(range(size), repeat=2):
        if rng.randint(0, 100) >= threshold:
            game_map.add_scrap(i, j)
    centre = size // 2
    game_map.clear_space(centre, centre)
    game_map.add_player(centre, centre)


def render_map(game_map: GameMap, report: str = "", show_overlaps: bool = True) -> str:
    """Return the whole screen: grid, status columns and the overlap report."""
    overlaps = game_map.update_symbols(show_overlaps)
    size = game_map.world_size
    player = game_map.player
    gauges = (("# ", player.lives), ("* ", player.fuel), ("@ ", player.scrap))
    lines = [HEADER]
    for j in range(size):
        cells = "".join(f"{game_map.symbol_at(i, j)} " for i in range(size))
        status = "".join(mark if value > j else "  " for mark, value in gauges)
        lines.append(f"||{cells}|| {status}||\n")
    lines.append(FOOTER)
    lines.append(report)
    lines.append(overlaps)
    lines.append(_PADDING * 4)
    return "".join(lines)


def spawn_asteroid(
    game_map: GameMap, rng: _Random | None = None
) -> list[tuple[int, int, Direction]]:
    """Launch one asteroid (rarely two) from an edge; return where they appeared."""
    rng = rng if rng is not None else random
    size = game_map.world_size
    amount = 1 if rng.randint(0, 100) < 90 else 2
    spawned = []
    for _ in range(amount):
        direction = Direction(rng.randrange(4))
        pos = rng.randrange(size)
        if direction is Direction.UP:
            i, j = pos, size - 1
        elif direction is Direction.DOWN:
            i, j = pos, 0
        elif direction is Direction.RIGHT:
            i, j = 0, pos
        else:
            i, j = size - 1, pos
        game_map.add_asteroid(i, j, direction)
        spawned.append((i, j, direction))
    return spawned


def hide_cursor(stream: TextIO | None = None) -> None:
    """Make the terminal cursor invisible."""
    stream = stream if stream is not None else sys.stdout
    stream.write(HIDE_CURSOR)
    stream.flush()


def move_cursor_top_left(stream: TextIO | None = None) -> None:
    """Put the terminal cursor in the top left corner."""
    stream = stream if stream is not None else sys.stdout
    stream.write(CURSOR_HOME)
    stream.flush()