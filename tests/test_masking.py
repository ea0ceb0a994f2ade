import pytest

from oraquadra.bitbuffer import BitGrid
from oraquadra.masking import apply_mask, mask_inverts, penalty_score


def _pattern_grid(size, pattern):
    grid = BitGrid(size)
    for y in range(size):
        for x in range(size):
            grid.set(x, y, pattern(x, y))
    return grid


def _snapshot(grid):
    return [[grid.get(x, y) for x in range(grid.size)] for y in range(grid.size)]


def _transpose(grid):
    return _pattern_grid(grid.size, lambda x, y: grid.get(y, x))


def _irregular(x, y):
    return (x * 7 + y * 13 + x * y) % 5 < 2


@pytest.mark.parametrize("mask", range(8))
def test_every_mask_flips_origin(mask):
    assert mask_inverts(mask, 0, 0) is True


def test_mask_one_depends_on_row_only():
    assert mask_inverts(1, 5, 2) is True
    assert mask_inverts(1, 5, 3) is False


def test_mask_two_depends_on_column_only():
    assert mask_inverts(2, 3, 7) is True
    assert mask_inverts(2, 4, 7) is False


@pytest.mark.parametrize("mask", [-1, 8])
def test_mask_inverts_rejects_unknown_mask(mask):
    with pytest.raises(ValueError):
        mask_inverts(mask, 0, 0)


@pytest.mark.parametrize("mask", range(8))
def test_apply_mask_twice_restores_grid(mask):
    modules = _pattern_grid(21, _irregular)
    before = _snapshot(modules)
    is_function = BitGrid(21)
    apply_mask(modules, is_function, mask)
    apply_mask(modules, is_function, mask)
    assert _snapshot(modules) == before


@pytest.mark.parametrize("mask", range(8))
def test_apply_mask_follows_mask_pattern(mask):
    modules = BitGrid(21)
    apply_mask(modules, BitGrid(21), mask)
    assert all(
        modules.get(x, y) == mask_inverts(mask, x, y)
        for y in range(21)
        for x in range(21)
    )


def test_apply_mask_leaves_function_modules_alone():
    modules = _pattern_grid(21, _irregular)
    before = _snapshot(modules)
    is_function = _pattern_grid(21, lambda x, y: x < 9)
    apply_mask(modules, is_function, 0)
    after = _snapshot(modules)
    assert all(after[y][x] == before[y][x] for y in range(21) for x in range(9))
    assert after != before


def test_apply_mask_rejects_unknown_mask():
    with pytest.raises(ValueError):
        apply_mask(BitGrid(21), BitGrid(21), 8)


def test_apply_mask_rejects_mismatched_grids():
    with pytest.raises(ValueError):
        apply_mask(BitGrid(21), BitGrid(25), 0)


def test_checkerboard_has_no_penalty():
    grid = _pattern_grid(8, lambda x, y: (x + y) % 2 == 0)
    assert penalty_score(grid) == 0


def test_all_light_small_grid_penalty():
    assert penalty_score(BitGrid(5)) == 168


@pytest.mark.parametrize("size", [5, 12, 21])
def test_penalty_is_transpose_invariant(size):
    grid = _pattern_grid(size, _irregular)
    assert penalty_score(grid) == penalty_score(_transpose(grid))


def test_finder_like_row_raises_penalty():
    base = _pattern_grid(21, lambda x, y: (x + y) % 2 == 0)
    finder = _pattern_grid(21, lambda x, y: (x + y) % 2 == 0)
    row_bits = [False] * 4 + [True, False, True, True, True, False, True]
    for x, on in enumerate(row_bits):
        finder.set(x, 10, on)
    assert penalty_score(finder) > penalty_score(base)