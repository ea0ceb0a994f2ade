"""QR data masks and the penalty score used to choose between them."""

from __future__ import annotations

from oraquadra.bitbuffer import BitGrid

MASK_COUNT = 8

_PENALTY_N1 = 3
_PENALTY_N2 = 3
_PENALTY_N3 = 40
_PENALTY_N4 = 10

_FINDER_LIKE = (0x05D, 0x5D0)


def mask_inverts(mask: int, x: int, y: int) -> bool:
    """Return whether data mask ``mask`` flips the module at ``(x, y)``."""
    if mask == 0:
        return (x + y) % 2 == 0
    if mask == 1:
        return y % 2 == 0
    if mask == 2:
        return x % 3 == 0
    if mask == 3:
        return (x + y) % 3 == 0
    if mask == 4:
        return (x // 3 + y // 2) % 2 == 0
    if mask == 5:
        return x * y % 2 + x * y % 3 == 0
    if mask == 6:
        return (x * y % 2 + x * y % 3) % 2 == 0
    if mask == 7:
        return ((x + y) % 2 + x * y % 3) % 2 == 0
    raise ValueError(f"mask must be in 0..{MASK_COUNT - 1}, got {mask}")


def apply_mask(modules: BitGrid, is_function: BitGrid, mask: int) -> None:
    """XOR the data modules of ``modules`` with mask pattern ``mask``.

    Function modules are left alone. Applying the same mask twice undoes it.
    """
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"mask must be in 0..{MASK_COUNT - 1}, got {mask}")
    if modules.size != is_function.size:
        raise ValueError(
            f"grid sizes differ: {modules.size} and {is_function.size}"
        )
    size = modules.size
    for y in range(size):
        for x in range(size):
            if not is_function.get(x, y):
                modules.invert(x, y, mask_inverts(mask, x, y))


def _run_penalty(line: list[bool]) -> int:
    """Penalty for runs of five or more equal modules in one line."""
    result = 0
    run = 1
    for previous, current in zip(line, line[1:]):
        if current != previous:
            run = 1
            continue
        run += 1
        if run == 5:
            result += _PENALTY_N1
        elif run > 5:
            result += 1
    return result


def _finder_penalty(line: list[bool]) -> int:
    """Penalty for finder-like 1:1:3:1:1 patterns with a light border."""
    result = 0
    bits = 0
    for position, on in enumerate(line):
        bits = ((bits << 1) & 0x7FF) | int(on)
        if position >= 10 and bits in _FINDER_LIKE:
            result += _PENALTY_N3
    return result


def penalty_score(grid: BitGrid) -> int:
    """Return the mask-selection penalty of the modules in ``grid``."""
    size = grid.size
    rows = [[grid.get(x, y) for x in range(size)] for y in range(size)]
    columns = [list(column) for column in zip(*rows)]

    result = sum(_run_penalty(row) for row in rows)
    result += sum(_run_penalty(column) for column in columns)

    for upper, lower in zip(rows, rows[1:]):
        for x in range(1, size):
            if upper[x - 1] == upper[x] == lower[x - 1] == lower[x]:
                result += _PENALTY_N2

    result += sum(_finder_penalty(row) for row in rows)
    result += sum(_finder_penalty(column) for column in columns)

    dark = sum(sum(row) for row in rows)
    total = size * size
    k = 0
    while dark * 20 < (9 - k) * total or dark * 20 > (11 + k) * total:
        result += _PENALTY_N4
        k += 1
    return result