"""Game world: a square grid of spaces holding asteroids, scrap and the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from itertools import product

WORLD_SIZE = 18

SCRAP_BIT = 1 << 4
PLAYER_BIT = 1 << 5
ASTEROID_MASK = 0b001111

SCRAP_SYM = "X"
PLAYER_SYM = "\u2588"
CLEAR = " "


class Direction(IntEnum):
    """Direction an asteroid travels in; the value is its bit in a space."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def bit(self) -> int:
        return 1 << self.value

    @property
    def step(self) -> tuple[int, int]:
        return _DIRECTION_STEPS[self]

    @property
    def symbol(self) -> str:
        return _DIRECTION_SYMBOLS[self]


_DIRECTION_STEPS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_DIRECTION_SYMBOLS = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}

_PLAYER_STEPS = {
    "w": (0, -1),
    "a": (-1, 0),
    "s": (0, 1),
    "d": (1, 0),
}


@dataclass
class Player:
    """The player's lives, fuel and collected scrap."""

    lives: int
    fuel: int
    scrap: int = 0


@dataclass
class Space:
    """One cell of the world: a bit set of its contents and its drawn symbol."""

    contains: int = 0
    symbol: str = CLEAR


@dataclass
class GameMap:
    """The world grid, the player and the difficulty settings."""

    fuel_per_scrap: int
    start_fuel: int
    start_health: int
    scrap_count: int
    asteroid_count: int
    difficulty: str = ""
    world_size: int = field(default=WORLD_SIZE, init=False)
    player: Player = field(init=False)
    world: list[list[Space]] = field(init=False)

    def __post_init__(self) -> None:
        self.player = Player(lives=self.start_health, fuel=self.start_fuel)
        self.world = [
            [Space() for _ in range(self.world_size)] for _ in range(self.world_size)
        ]

    def _cells(self):
        return product(range(self.world_size), repeat=2)

    def in_map(self, i: int, j: int) -> bool:
        return 0 <= i < self.world_size and 0 <= j < self.world_size

    def _space(self, i: int, j: int) -> Space | None:
        return self.world[i][j] if self.in_map(i, j) else None

    def clear_space(self, i: int, j: int) -> None:
        if not self.in_map(i, j):
            raise IndexError(f"space ({i}, {j}) is outside the map")
        self.world[i][j].contains = 0

    def _set(self, i: int, j: int, bits: int) -> None:
        space = self._space(i, j)
        if space is not None:
            space.contains |= bits

    def _unset(self, i: int, j: int, bits: int) -> None:
        space = self._space(i, j)
        if space is not None:
            space.contains &= ~bits

    def _test(self, i: int, j: int, bits: int) -> bool:
        space = self._space(i, j)
        return space is not None and bool(space.contains & bits)

    def add_asteroid(self, i: int, j: int, direction: int) -> None:
        self._set(i, j, 1 << int(direction))

    def add_scrap(self, i: int, j: int) -> None:
        self._set(i, j, SCRAP_BIT)

    def add_player(self, i: int, j: int) -> None:
        self._set(i, j, PLAYER_BIT)

    def remove_asteroid(self, i: int, j: int, direction: int) -> None:
        self._unset(i, j, 1 << int(direction))

    def remove_asteroid_all(self, i: int, j: int) -> None:
        self._unset(i, j, ASTEROID_MASK)

    def remove_scrap(self, i: int, j: int) -> None:
        self._unset(i, j, SCRAP_BIT)

    def remove_player(self, i: int, j: int) -> None:
        self._unset(i, j, PLAYER_BIT)

    def has_asteroid_dir(self, i: int, j: int, direction: int) -> bool:
        return self._test(i, j, 1 << int(direction))

    def has_asteroid(self, i: int, j: int) -> bool:
        return self._test(i, j, ASTEROID_MASK)

    def has_scrap(self, i: int, j: int) -> bool:
        return self._test(i, j, SCRAP_BIT)

    def has_player(self, i: int, j: int) -> bool:
        return self._test(i, j, PLAYER_BIT)

    def symbol_at(self, i: int, j: int) -> str | None:
        """Return the drawn symbol of a space, or None outside the map."""
        space = self._space(i, j)
        return space.symbol if space is not None else None

    def has_scrap_left(self) -> bool:
        return any(self.has_scrap(i, j) for i, j in self._cells())

    def collect_scrap(self) -> None:
        self.player.fuel += self.fuel_per_scrap
        self.player.scrap += 1

    def burn_fuel(self) -> None:
        self.player.fuel -= 1

    def _asteroid_hits(self, i: int, j: int) -> int:
        return sum(self.has_asteroid_dir(i, j, d) for d in Direction)

    def update_map(self) -> None:
        """Resolve hits and pickups; a player with no health left is removed."""
        for i, j in self._cells():
            if self.has_asteroid(i, j) and self.has_player(i, j):
                damage = self._asteroid_hits(i, j)
                self.remove_asteroid_all(i, j)
                self.player.lives -= damage
                if self.player.lives <= 0:
                    self.remove_player(i, j)
            if self.has_scrap(i, j) and self.has_player(i, j):
                self.collect_scrap()
                self.remove_scrap(i, j)

    def show_overlap(self, i: int, j: int, count: int) -> tuple[str, str]:
        """Return the marker for an overlap and its line for the report."""
        parts = [f"{count}: "]
        parts.extend(f"{d.symbol} " for d in Direction if self.has_asteroid_dir(i, j, d))
        if self.has_scrap(i, j):
            parts.append(f"{SCRAP_SYM} ")
        if self.has_player(i, j):
            parts.append(f"{PLAYER_SYM[0] and 'P'} ")
        parts.append("\n")
        return chr(ord("0") + count), "".join(parts)

    def update_symbols(self, show_overlaps: bool) -> str:
        """Refresh every space's symbol and return the overlap report."""
        report = []
        count = 0
        for i, j in self._cells():
            space = self.world[i][j]
            contents = space.contains
            if contents & (contents - 1):
                count += 1
                marker, line = self.show_overlap(i, j, count)
                report.append(line)
                space.symbol = marker if show_overlaps else CLEAR
            elif contents & ASTEROID_MASK:
                space.symbol = next(d.symbol for d in Direction if contents & d.bit)
            elif contents & SCRAP_BIT:
                space.symbol = SCRAP_SYM
            elif contents & PLAYER_BIT:
                space.symbol = PLAYER_SYM
            else:
                space.symbol = CLEAR
        return "".join(report)

    def move(self, action: str) -> None:
        """Move the player by a w/a/s/d key and every asteroid one step."""
        snapshot = [[space.contains for space in column] for column in self.world]
        player_step = _PLAYER_STEPS.get(action)
        for i, j in self._cells():
            contents = snapshot[i][j]
            if contents & PLAYER_BIT and player_step is not None:
                di, dj = player_step
                self.add_player(i + di, j + dj)
                self.remove_player(i, j)
                self.burn_fuel()
            for direction in Direction:
                if contents & direction.bit:
                    di, dj = direction.step
                    self.add_asteroid(i + di, j + dj, direction)
                    self.remove_asteroid(i, j, direction)

    def check_collision(self) -> None:
        """Apply asteroid damage and scrap pickups where the player stands."""
        for i, j in self._cells():
            if not self.has_player(i, j):
                continue
            if self.has_asteroid(i, j):
                damage = self._asteroid_hits(i, j)
                self.remove_asteroid_all(i, j)
                self.player.lives -= damage
            if self.has_scrap(i, j):
                self.collect_scrap()
                self.remove_scrap(i, j)