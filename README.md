# estacion

A small grid puzzle game set in a space station. You steer a robot from the
top-left corner of a level to the finish cell before its battery runs out.
You can also watch a bot find its own way through each level.

## Install

    pip install .

## Play

    estacion

A window opens with a menu. Use the Up and Down arrows to pick an option and
press Enter.

- **Jugar - Facil / Medio / Dificil**: play one of three levels. The battery
  starts at 50, 40 or 35.
- **Bot Demo - Facil / Medio / Dificil**: an A* bot plans a route to the
  finish and walks it one step every half second. When it reaches the finish
  or runs out of battery, the result shows for three seconds before the game
  goes back to the menu.
- **Salir**: quit.

The on-screen text is in Spanish. The game uses the first font it finds among
a few macOS system fonts. If none is found, it uses pygame's built-in font.

## Rules

| Cell | Meaning |
|------|---------|
| `#`  | wall |
| `.`  | floor |
| `A`, `B` | atmosphere tanks |
| `D`  | closed door |
| `O`  | open door |
| `F`  | finish |

- `W`, `A`, `S` and `D` move the robot up, left, down and right. Each step
  uses one unit of battery and adds one unit of energy, up to 5.
- Walls and closed doors block the way.
- Stepping onto tank `A` opens every door. Stepping onto tank `B` closes them
  all again.
- Once energy reaches 5, the robot can break a wall. Move towards the wall,
  then press `E`. Breaking a wall sets energy back to 0.
- You win when you reach `F`. You lose when the battery reaches 0. In both
  cases a message shows for three seconds, then the game returns to the menu.
- `Escape` leaves a game in progress and goes back to the menu.

## Using the pieces

The game logic does not need a window:

```python
from estacion.maps import MapManager
from estacion.aibot import AIBot

maps = MapManager()
maps.load_level(1)
path = AIBot().find_path(1, 1, 1, 8, maps)
```

- `MapManager.load_level(difficulty)` loads level 1, 2 or 3. Cells are
  addressed as `(row, column)`. `get_cell` returns `"#"` for positions
  outside the grid, and `set_cell` ignores them.
- `AIBot.find_path` returns a list of `(row, column)` pairs from the start to
  the end, both included. It returns an empty list when there is no route.
- `Player.move(dx, dy, grid, rows, cols)` applies one step of the rules above
  to a grid such as `maps.grid`.

`estacion.game.Game` accepts a `surface` to draw on and a `clock` function
that returns seconds. If you give no surface, it opens its own window.

## Limits

The three levels are built in. There is no way to load your own level files.
Scores are not kept between games.

## Tests

    pip install .[test]
    pytest