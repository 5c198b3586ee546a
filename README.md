# spacexplorer

A small arcade game that runs in your terminal. You pilot a ship across an
18×18 field of space. You gather scrap for fuel while asteroids fly in from the
edges of the map.

## Installing

```
pip install .
```

## Playing

```
spacexplorer
```

By default the game reads and writes its data files in the current directory.
To use another directory, pass `--data-dir`:

```
spacexplorer --data-dir ~/games/spacexplorer
```

The main menu has three choices. Press a single key to pick one:

1. **Start game**: pick a difficulty by its number, then play.
2. **View Highscores**: list the saved scores, then press any key.
3. **Exit**

In the game, move with `w` (up), `a` (left), `s` (down) and `d` (right).
Each move uses one unit of fuel. Any other key lets time pass without moving
the ship. Each key you press brings in a new asteroid, or now and then two.
Every asteroid then moves one space.

- Scrap (`X`): picking it up adds fuel and one point to your score. The amount
  of fuel depends on the difficulty.
- Asteroids (`^`, `>`, `v`, `<`): each one points the way it travels. Every
  asteroid that hits your ship costs one point of health.

The panel on the right of the map has three columns, with one mark per unit:
health (`#`), fuel (`*`) and scrap collected (`@`). A cell that holds more than
one thing shows a number, which blinks while the game waits for a key. The
lines under the map say what each numbered cell holds.

The game ends when you run out of health or fuel, or when no scrap is left on
the map. If you clear the map with health and fuel to spare, you win. The game
then asks for a name to save with your score. Only the first word you type is
kept. A winner's name is saved with `!` marks around it.

Keyboard input needs a real terminal. On Windows the game uses `msvcrt`.
Elsewhere it puts the terminal in cbreak mode with `termios` while you play.

## Data files

The game keeps two comma-separated files in the data directory. It creates
them the first time it reads them.

- `difficulty.txt` has one difficulty per line, in the form
  `name,fuel per scrap,start fuel,start health,scrap percentage,asteroid count`.
  The defaults are:

  ```
  Easy,5,5,5,20,5
  Medium,5,3,3,10,10
  Hard,3,2,2,10,20
  ```

  Edit this file to add your own difficulties. Only the first ten lines are
  read, and each field is cut to nine characters. The asteroid count is shown
  when a game starts, but it does not change how many asteroids appear.

- `highscore.txt` has one saved score per line, in the form
  `name,difficulty,score`.

## Using it as a library

The game logic in `spacexplorer.world.GameMap` does not depend on the
terminal:

```python
import random

from spacexplorer.world import GameMap
from spacexplorer.game import create_map, spawn_asteroid, render_map

game_map = GameMap(5, 5, 5, 20, 5, "Easy")
rng = random.Random(1)
create_map(game_map, rng)
spawn_asteroid(game_map, rng)
game_map.move("d")
game_map.check_collision()
print(render_map(game_map, "", True))
```

- `spacexplorer.world`: `GameMap`, `Player`, `Space` and `Direction`.
  `GameMap` has methods to add, remove and test asteroids, scrap and the
  player on each space. It also has `move`, `check_collision`, `update_map`,
  `update_symbols` (which returns the overlap report) and `has_scrap_left`.
- `spacexplorer.game`:
  - `create_map`, `spawn_asteroid` (which returns where asteroids appeared)
    and `render_map` (which returns the whole screen as a string).
  - `hide_cursor` and `move_cursor_top_left`, which write ANSI escape codes to
    a stream.
- `spacexplorer.files`: `parse`, `create_default` and `append_score` read and
  write the data files.
- `spacexplorer.cli`: `main`, the command above, and the helpers
  `choose_difficulty`, `final_name` and `read_key`.