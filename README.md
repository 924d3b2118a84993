# cellularity

A small cellular automaton simulator. The engine keeps a rectangular grid of
cells and advances it one generation at a time. At each step it applies a rule
to every cell, using the number of that cell's neighbours that are alive. The
rule, the shape of the neighbourhood and the behaviour at the grid's edges are
separate objects, and each one can be swapped independently.

The package provides:

- **Rules** (`cellularity.rules`): `ConwayRule` (B3/S23, Conway's Game of Life).
  To write your own rule, subclass `Rule` and implement `apply` and `name`.
  You can also override `description`.
- **Neighbourhoods** (`cellularity.neighborhood`):
  - `MooreNeighborhood`: the 8 surrounding cells.
  - `VonNeumannNeighborhood`: the 4 orthogonal cells.
- **Boundaries** (`cellularity.boundary`):
  - `ToroidalBoundary`: edges wrap around to the opposite side.
  - `WalledBoundary`: coordinates past the right or bottom edge are clamped to
    the last column or row. Negative coordinates count as outside the grid, so
    they contribute no neighbour.
- **Grid** (`cellularity.grid`): `DenseGrid` is a flat, row-major grid of
  `CellState` values. It can be resized, and existing cells are kept where they
  still fit. `DenseGrid.new_random(width, height, alive_probability, rng=None)`
  creates a grid with a random initial population. To make it reproducible,
  pass a `random.Random` as `rng`.
- **Engine** (`cellularity.automata`): `Automata` ties a grid, a rule, a
  boundary and a neighbourhood together.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the viewer

```
cellularity
```

The viewer needs Tkinter. It opens a window with a 50 × 30 toroidal Game of Life
board, seeded with a blinker. The buttons along the top work as follows:

- **Play** / **Pause** starts and stops the simulation. While it is playing, the
  board advances one generation every 0.1 seconds.
- **Step** advances the board by one generation.
- **Reset** clears the board, pauses the simulation and sets the generation
  counter back to 0.

The current generation number is shown next to the buttons.

`cellularity.ui.app.CellularityApp` also works without a window.
`CellularityApp()` builds the same automaton and controls. You drive it with
`handle_action(ControlAction...)`, and you call `tick(now)` to advance the board
when it is playing and the update interval has passed.

The toolkit-independent pieces are in their own modules:

- `cellularity.ui.control_panel` has `ControlPanel`, `ControlButton` and
  `ControlAction`.
- `cellularity.ui.grid_view` has `grid_to_rect`, `state_to_color` and
  `cell_rects`, which handle cell geometry and colours. `draw_grid` renders a
  grid onto a Tk canvas.

## Using the engine

```python
from cellularity.automata import Automata
from cellularity.boundary import ToroidalBoundary
from cellularity.cell import CellState, Position
from cellularity.neighborhood import MooreNeighborhood
from cellularity.rules import ConwayRule

automata = Automata(5, 5, ConwayRule(), ToroidalBoundary(), MooreNeighborhood())

# A vertical blinker
for y in (1, 2, 3):
    automata.grid().set(Position(2, y), CellState.ALIVE)

automata.step()
print(automata.generation())          # 1
print(automata.grid().count_alive())  # 3, now lying horizontally

automata.step_n(10)
print(automata.generation())          # 11

automata.reset()                      # clears the grid, generation back to 0
```

Iterating over a `DenseGrid` yields `(Position, CellState)` pairs in row-major
order:

```python
alive = [pos for pos, state in automata.grid() if state.is_alive()]
```

## Errors

All errors raised by the package derive from
`cellularity.errors.CellularityError`:

- `InvalidDimensionsError` (also a `ValueError`) is raised when a grid is
  created or resized with a width or height of zero or less.
- `OutOfBoundsError` (also an `IndexError`) is raised when a position outside
  the grid is read or written.

## What it does not do

The package cannot load or save patterns and has no parser for rule strings
such as `B3/S23`. The only rule it ships is `ConwayRule`. In the viewer you
cannot edit cells with the mouse, and you cannot change the board size, rule,
boundary or neighbourhood from the window.

## Running the tests

```
pytest
```