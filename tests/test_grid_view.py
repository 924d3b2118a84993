from cellularity.cell import CellState, Position
from cellularity.grid import DenseGrid
from cellularity.ui.grid_view import (
    Color,
    Point,
    cell_rects,
    draw_grid,
    grid_to_rect,
    state_to_color,
)


class RecordingCanvas:
    def __init__(self):
        self.deleted = []
        self.rectangles = []
        self.config = {}

    def delete(self, tag):
        self.deleted.append(tag)

    def create_rectangle(self, x0, y0, x1, y1, **options):
        self.rectangles.append(((x0, y0, x1, y1), options))

    def configure(self, **options):
        self.config.update(options)


def test_grid_to_rect_maps_cells_correctly():
    origin = Point(2.5, 3.5)
    cell_size = 8.0

    r00 = grid_to_rect(0.0, 0.0, cell_size, origin)
    assert r00.min.x == 2.5
    assert r00.min.y == 3.5
    assert r00.max.x == 10.5
    assert r00.max.y == 11.5

    r12 = grid_to_rect(1.0, 2.0, cell_size, origin)
    assert r12.min.x == 2.5 + 1.0 * cell_size
    assert r12.min.y == 3.5 + 2.0 * cell_size
    assert r12.max.x == r12.min.x + cell_size
    assert r12.max.y == r12.min.y + cell_size


def test_state_to_color_matches_mapping():
    alive = Color(1, 2, 3)
    dead = Color(4, 5, 6)
    assert state_to_color(CellState.ALIVE, alive, dead) == alive
    assert state_to_color(CellState.DEAD, alive, dead) == dead


def test_smoke_helpers():
    rect = grid_to_rect(0.0, 0.0, 10.0, Point(5.0, 7.0))
    assert rect.min.x == 5.0
    assert rect.min.y == 7.0
    assert state_to_color(CellState.ALIVE, Color.WHITE, Color.BLACK) == Color.WHITE
    assert state_to_color(CellState.DEAD, Color.WHITE, Color.BLACK) == Color.BLACK


def test_cell_rects_cover_every_cell():
    grid = DenseGrid(3, 2)
    grid.set(Position(1, 1), CellState.ALIVE)
    alive, dead = Color(9, 9, 9), Color(1, 1, 1)
    cells = list(cell_rects(grid, 4.0, Point(0.0, 0.0), alive, dead))
    assert len(cells) == grid.size()
    colors = [color for _, color in cells]
    assert colors.count(alive) == 1
    rect, color = cells[4]
    assert color == alive
    assert rect == grid_to_rect(1, 1, 4.0, Point(0.0, 0.0))


def test_draw_grid_paints_onto_canvas():
    grid = DenseGrid(2, 1)
    grid.set(Position(0, 0), CellState.ALIVE)
    canvas = RecordingCanvas()
    draw_grid(canvas, grid, 10.0, Color(255, 0, 0), Color.BLACK)
    assert canvas.deleted == ["cell"]
    assert len(canvas.rectangles) == 2
    first_coords, first_options = canvas.rectangles[0]
    assert first_coords == (0.0, 0.0, 10.0, 10.0)
    assert first_options["fill"] == "#ff0000"
    assert canvas.rectangles[1][1]["fill"] == "#000000"
    assert canvas.config == {"width": 20.0, "height": 10.0}