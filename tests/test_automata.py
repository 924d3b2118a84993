import pytest

from cellularity.automata import Automata
from cellularity.boundary import ToroidalBoundary, WalledBoundary
from cellularity.cell import CellState, Position
from cellularity.errors import InvalidDimensionsError
from cellularity.neighborhood import MooreNeighborhood, VonNeumannNeighborhood
from cellularity.rules import ConwayRule


def make_automata(width, height):
    return Automata(
        width, height, ConwayRule(), ToroidalBoundary(), MooreNeighborhood()
    )


def set_alive(automata, *coords):
    for x, y in coords:
        automata.grid().set(Position(x, y), CellState.ALIVE)


def test_automata_creation():
    automata = make_automata(10, 10)
    assert automata.grid().width() == 10
    assert automata.grid().height() == 10
    assert automata.generation() == 0


def test_automata_invalid_dimensions():
    with pytest.raises(InvalidDimensionsError):
        make_automata(0, 5)


def test_automata_reset():
    automata = make_automata(5, 5)
    set_alive(automata, (2, 2))
    automata.step()
    assert automata.generation() == 1
    automata.reset()
    assert automata.generation() == 0
    assert automata.grid().count_alive() == 0


def test_automata_step():
    automata = make_automata(5, 5)
    assert automata.generation() == 0
    automata.step()
    assert automata.generation() == 1
    automata.step()
    assert automata.generation() == 2


def test_automata_step_n():
    automata = make_automata(5, 5)
    automata.step_n(10)
    assert automata.generation() == 10


def test_blinker_pattern():
    automata = make_automata(5, 5)
    set_alive(automata, (2, 1), (2, 2), (2, 3))
    assert automata.grid().count_alive() == 3

    automata.step()
    assert automata.grid().count_alive() == 3
    for x, y in [(1, 2), (2, 2), (3, 2)]:
        assert automata.grid().get(Position(x, y)) is CellState.ALIVE

    automata.step()
    assert automata.grid().count_alive() == 3
    for x, y in [(2, 1), (2, 2), (2, 3)]:
        assert automata.grid().get(Position(x, y)) is CellState.ALIVE


def test_block_pattern():
    automata = make_automata(5, 5)
    block = [(1, 1), (2, 1), (1, 2), (2, 2)]
    set_alive(automata, *block)
    assert automata.grid().count_alive() == 4
    automata.step()
    assert automata.grid().count_alive() == 4
    for x, y in block:
        assert automata.grid().get(Position(x, y)) is CellState.ALIVE
    automata.step_n(10)
    assert automata.grid().count_alive() == 4


def test_plus_neighbors_behavior():
    automata = make_automata(5, 5)
    set_alive(automata, (2, 1), (1, 2), (3, 2), (2, 3))
    automata.step()
    assert automata.grid().get(Position(2, 2)) is CellState.DEAD


def test_empty_grid_stays_empty():
    automata = make_automata(5, 5)
    assert automata.grid().count_alive() == 0
    automata.step_n(10)
    assert automata.grid().count_alive() == 0


def test_step_n_zero_leaves_state():
    automata = make_automata(5, 5)
    set_alive(automata, (2, 1), (2, 2), (2, 3))
    automata.step_n(0)
    assert automata.generation() == 0
    assert automata.grid().get(Position(2, 1)) is CellState.ALIVE


def test_von_neumann_blinker_dies_differently_than_moore():
    automata = Automata(
        5, 5, ConwayRule(), WalledBoundary(), VonNeumannNeighborhood()
    )
    set_alive(automata, (2, 1), (2, 2), (2, 3))
    automata.step()
    # The end cells see only one orthogonal neighbour and die.
    assert automata.grid().get(Position(2, 1)) is CellState.DEAD
    assert automata.grid().get(Position(2, 3)) is CellState.DEAD


def test_step_after_resize_uses_new_dimensions():
    automata = make_automata(5, 5)
    automata.grid().resize(7, 6)
    automata.step()
    assert automata.grid().width() == 7
    assert automata.grid().height() == 6