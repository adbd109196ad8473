"""Tests for the geometry traversal."""

import pytest

from rectiling.engine.config import TilingConfig
from rectiling.engine.errors import EmptyResult, MissingCenterDimensions
from rectiling.engine.grid import HEIGHT, WIDTH, Bounds, Cell, SeedRect, create_grid, seed
from rectiling.engine.presets import get_preset, preset_names
from rectiling.engine.propagation import propagate
from rectiling.engine.traversal import NEIGHBORS, TYPE_1, TYPE_2, traverse
from rectiling.engine.validation import find_overlaps, total_area, union_area


def _tile(config, seeds):
    grid = create_grid(config)
    seed(grid, config, seeds)
    propagate(grid, config)
    return grid, traverse(grid, config)


def test_center_is_anchored_at_origin(config, classic_seeds):
    _, rects = _tile(config, classic_seeds)
    first = rects[0]
    assert (first.left, first.right, first.bottom, first.top) == (0, 9, 0, 14)
    assert (first.width, first.height) == (9, 14)


def test_every_rectangle_has_positive_extent(config, classic_seeds):
    _, rects = _tile(config, classic_seeds)
    for r in rects:
        assert r.right > r.left
        assert r.top > r.bottom
        assert r.right - r.left == r.width
        assert r.top - r.bottom == r.height


def test_uniform_seeds_give_square_grid(config, uniform_seeds):
    _, rects = _tile(config, uniform_seeds)
    assert len(rects) == 49
    assert all((r.width, r.height) == (5, 5) for r in rects)
    assert min(r.left for r in rects) == -15
    assert max(r.right for r in rects) == 20
    assert min(r.bottom for r in rects) == -15
    assert max(r.top for r in rects) == 20
    assert find_overlaps(rects) == []
    assert union_area(rects) == pytest.approx(35 * 35)


def test_pinwheel_tiles_without_overlap(config, pinwheel_seeds):
    _, rects = _tile(config, pinwheel_seeds)
    assert len(rects) == 49
    assert {(r.width, r.height) for r in rects} == {(4, 2), (2, 4)}
    assert find_overlaps(rects) == []
    assert union_area(rects) == pytest.approx(total_area(rects))
    assert total_area(rects) == pytest.approx(49 * 8)


@pytest.mark.parametrize("grid_width", [4, 8, 16, 24])
@pytest.mark.parametrize("name", preset_names())
def test_presets_tile_exactly(name, grid_width):
    config = TilingConfig(cx=32, grid_width=grid_width)
    _, rects = _tile(config, get_preset(name))
    assert find_overlaps(rects) == []
    assert union_area(rects) == pytest.approx(total_area(rects))


def test_first_neighbour_visited_is_east(config, uniform_seeds):
    _, rects = _tile(config, uniform_seeds)
    assert (rects[1].left, rects[1].bottom) == (5, 0)
    assert (rects[2].left, rects[2].bottom) == (10, 0)


def test_cells_are_drawn_once(config, classic_seeds):
    grid, rects = _tile(config, classic_seeds)
    drawn = [c for c in grid.cells if c.drawn]
    assert len(drawn) == len(rects)
    assert all(c.discovered for c in drawn)


def test_traversal_stays_inside_window(config, uniform_seeds):
    grid, _ = _tile(config, uniform_seeds)
    t = config.travel_half_width
    outside = grid.at_offset(t + 1, 0)
    assert outside.width_known
    assert not outside.drawn
    assert outside.bounds is None


def test_smallest_window_draws_center_only(uniform_seeds):
    config = TilingConfig(cx=8, grid_width=2)
    _, rects = _tile(config, uniform_seeds)
    assert len(rects) == 1


def test_missing_center_dimensions(config):
    grid = create_grid(config)
    seed(grid, config, [SeedRect(1, 1, 4, 4)])
    propagate(grid, config)
    with pytest.raises(MissingCenterDimensions):
        traverse(grid, config)


def test_empty_result_when_nothing_drawable(config):
    grid = create_grid(config)
    grid.center.learn(WIDTH, -3)
    grid.center.learn(HEIGHT, 4)
    with pytest.raises(EmptyResult):
        traverse(grid, config)


def test_colour_off_gives_white(uniform_seeds):
    config = TilingConfig(cx=32, grid_width=8, colorize=False)
    _, rects = _tile(config, uniform_seeds)
    assert {r.fill for r in rects} == {"#ffffff"}


@pytest.mark.parametrize("parity", [TYPE_1, TYPE_2])
def test_every_step_keeps_neighbour_size(parity):
    source = Bounds(top=10, right=20, bottom=4, left=11)
    neighbour = Cell(width=3, height=7, width_known=True, height_known=True)
    for step in NEIGHBORS[parity]:
        b = step.place(neighbour, source)
        assert b.right - b.left == 3
        assert b.top - b.bottom == 7
        assert step.next_parity != parity


def test_type1_steps_share_an_edge_with_source():
    source = Bounds(top=10, right=20, bottom=4, left=11)
    neighbour = Cell(width=3, height=7)
    east, north, south, west = (s.place(neighbour, source) for s in NEIGHBORS[TYPE_1])
    assert east.left == source.right and east.top == source.top
    assert north.bottom == source.top and north.left == source.left
    assert south.top == source.bottom and south.right == source.right
    assert west.right == source.left and west.bottom == source.bottom
