"""Interactive terminal front end: menus, the game loop and high scores."""

from __future__ import annotations

import argparse
import os
import random
import re
import select
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .files import DIFFICULTY_FILE, HIGHSCORE_FILE, append_score, parse
from .game import create_map, hide_cursor, move_cursor_top_left, render_map, spawn_asteroid
from .world import WORLD_SIZE, GameMap

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_TICK = 0.01


class _Keyboard:
    """Unbuffered, non-echoing single-key input for the duration of a block."""

    def __init__(self) -> None:
        self._fd: int | None = None
        self._saved = None

    def __enter__(self) -> _Keyboard:
        if msvcrt is None:
            self._fd = sys.stdin.fileno()
            if termios is not None and os.isatty(self._fd):
                self._saved = termios.tcgetattr(self._fd)
                tty.setcbreak(self._fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def hit(self) -> bool:
        if msvcrt is not None:
            return bool(msvcrt.kbhit())
        ready, _, _ = select.select([self._fd], [], [], 0)
        return bool(ready)

    def get(self) -> str:
        if msvcrt is not None:
            return msvcrt.getwch()
        data = os.read(self._fd, 1)
        if not data:
            raise EOFError("input closed")
        return data.decode("utf-8", errors="replace")

    def keys(self) -> Iterator[str]:
        while True:
            yield self.get()


def read_key() -> str:
    """Wait for a single key press and return it without needing Enter."""
    with _Keyboard() as keyboard:
        return keyboard.get()


def _say(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def choose_difficulty(difficulties: Sequence[list[str]], keys: Iterable[str]) -> list[str]:
    """Return the difficulty row picked by the first valid digit key."""
    for key in keys:
        choice = ord(key[0]) - ord("0") if key else -1
        if 1 <= choice <= len(difficulties):
            return difficulties[choice - 1]
        _say("Invalid input. Please try again.\nEnter: ")
    raise ValueError("no valid difficulty was chosen")


def final_name(name: str, won: bool) -> str:
    """Return the name to store: its first word, wrapped in '!' for a win."""
    words = name.split()
    word = words[0] if words else ""
    return f"!{word}!" if won else word


def _atoi(value: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", value)
    return int(match.group(1)) if match else 0


def _field(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _map_from_row(row: list[str]) -> GameMap:
    numbers = [_atoi(_field(row, index)) for index in range(1, 6)]
    return GameMap(*numbers, difficulty=_field(row, 0))


def _start_game(keyboard: _Keyboard, data_dir: Path) -> GameMap:
    difficulties = parse(data_dir / DIFFICULTY_FILE)
    _say(_CLEAR_SCREEN)
    for number, row in enumerate(difficulties, start=1):
        _say(f"{number}. {_field(row, 0)}\n")
    _say("Enter: ")
    row = choose_difficulty(difficulties, keyboard.keys())
    game_map = _map_from_row(row)
    _say(
        "\n"
        f"World size: {WORLD_SIZE}\n"
        f"fuelPerScrap: {game_map.fuel_per_scrap}\n"
        f"startFuel: {game_map.start_fuel}\n"
        f"startHealth: {game_map.start_health}\n"
        f"scrapCount: {game_map.scrap_count}\n"
        f"asteroidCount: {game_map.asteroid_count}\n"
        f"Difficulty: {game_map.difficulty}\n"
        "Starting game...\n"
    )
    return game_map


def _show_highscores(keyboard: _Keyboard, data_dir: Path) -> None:
    rows = parse(data_dir / HIGHSCORE_FILE)
    _say(_CLEAR_SCREEN)
    for number, row in enumerate(rows, start=1):
        _say(f"{number}. {_field(row, 0)} - {_field(row, 1)} - {_field(row, 2)}\n")
    _say("\nEnter any to continue: ")
    keyboard.get()


def _menu(keyboard: _Keyboard, data_dir: Path) -> GameMap | None:
    while True:
        _say(_CLEAR_SCREEN)
        _say("1. Start game\n2. View Highscores\n3. Exit\nEnter: ")
        key = keyboard.get()
        if key == "1":
            return _start_game(keyboard, data_dir)
        if key == "2":
            _show_highscores(keyboard, data_dir)
        elif key == "3":
            return None


def _draw(game_map: GameMap, report: str, show_overlaps: bool) -> None:
    move_cursor_top_left()
    _say(render_map(game_map, report, show_overlaps))


def _play(game_map: GameMap, keyboard: _Keyboard, rng: random.Random) -> None:
    create_map(game_map, rng)
    _draw(game_map, "None", True)
    spawn_asteroid(game_map, rng)
    while game_map.player.lives > 0 and game_map.player.fuel > 0 and game_map.has_scrap_left():
        while keyboard.hit():
            keyboard.get()
        while not keyboard.hit():
            time.sleep(_TICK)
            _draw(game_map, "", int(time.time()) % 2 != 0)
        action = keyboard.get()

        spawn_asteroid(game_map, rng)
        game_map.move(action)
        game_map.check_collision()

        _draw(game_map, "", True)
        time.sleep(_TICK)


def _finish(game_map: GameMap, data_dir: Path) -> None:
    player = game_map.player
    won = player.lives > 0 and player.fuel > 0
    _say(_CLEAR_SCREEN)
    _say("Game Over\n")
    if won:
        _say("You Win!\n")
    _say(f"Your score: {player.scrap}\n")
    _say("Enter name to save: ")
    try:
        entered = input()
    except EOFError:
        entered = ""
    _say("Saving...\n")
    append_score(
        data_dir / HIGHSCORE_FILE, final_name(entered, won), game_map.difficulty, player.scrap
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the player picks Exit from the menu."""
    parser = argparse.ArgumentParser(prog="spacexplorer", description="Collect scrap, dodge asteroids.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding difficulty.txt and highscore.txt",
    )
    args = parser.parse_args(argv)
    rng = random.Random()
    hide_cursor()
    while True:
        with _Keyboard() as keyboard:
            game_map = _menu(keyboard, args.data_dir)
            if game_map is None:
                return 0
            _play(game_map, keyboard, rng)
        _finish(game_map, args.data_dir)


if __name__ == "__main__":
    sys.exit(main())