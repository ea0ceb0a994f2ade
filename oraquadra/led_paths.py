"""Orders in which the 256 LEDs of the serpentine-wired face are swept."""

from __future__ import annotations

from enum import Enum

_SIZE = 16
_COUNT = _SIZE * _SIZE


class LedPath(Enum):
    """The sweep orders available for LED animations."""

    HORIZ_LEFT_TO_RIGHT_TOP = 1
    HORIZ_RIGHT_TO_LEFT_TOP = 2
    HORIZ_LEFT_TO_RIGHT_BOTTOM = 3
    HORIZ_RIGHT_TO_LEFT_BOTTOM = 4
    VERT_TOP_TO_BOTTOM_LEFT = 5
    VERT_BOTTOM_TO_TOP_LEFT = 6
    VERT_TOP_TO_BOTTOM_RIGHT = 7
    VERT_BOTTOM_TO_TOP_RIGHT = 8


def _led(row: int, column: int) -> int:
    """LED index of the cell ``column`` places from the left on ``row``."""
    if row % 2 == 0:
        return row * _SIZE + _SIZE - 1 - column
    return row * _SIZE + column


def _vertical(columns, first_downwards: bool) -> tuple[int, ...]:
    order = []
    for step, column in enumerate(columns):
        downwards = (step % 2 == 0) == first_downwards
        rows = range(_SIZE) if downwards else reversed(range(_SIZE))
        order.extend(_led(row, column) for row in rows)
    return tuple(order)


def _left_to_right_top() -> tuple[int, ...]:
    rows = [
        [row * _SIZE + offset for offset in reversed(range(_SIZE))]
        for row in range(_SIZE)
    ]
    # The firmware table repeats 92 in row 5 and lacks 211 in row 13,
    # leaving its final slot zero-filled.
    rows[5][1] = 92
    rows[13].remove(211)
    flat = [index for row in rows for index in row]
    return tuple(flat + [0] * (_COUNT - len(flat)))


def _build() -> dict[LedPath, tuple[int, ...]]:
    ascending = tuple(range(_COUNT))
    left_to_right = range(_SIZE)
    right_to_left = reversed(range(_SIZE))
    return {
        LedPath.HORIZ_LEFT_TO_RIGHT_TOP: _left_to_right_top(),
        LedPath.HORIZ_RIGHT_TO_LEFT_TOP: ascending,
        LedPath.HORIZ_LEFT_TO_RIGHT_BOTTOM: tuple(
            row * _SIZE + offset
            for row in reversed(range(_SIZE))
            for offset in range(_SIZE)
        ),
        LedPath.HORIZ_RIGHT_TO_LEFT_BOTTOM: ascending[::-1],
        LedPath.VERT_TOP_TO_BOTTOM_LEFT: _vertical(left_to_right, True),
        LedPath.VERT_BOTTOM_TO_TOP_LEFT: _vertical(range(_SIZE), False),
        LedPath.VERT_TOP_TO_BOTTOM_RIGHT: _vertical(right_to_left, True),
        LedPath.VERT_BOTTOM_TO_TOP_RIGHT: _vertical(reversed(range(_SIZE)), False),
    }


_PATHS = _build()


def led_path(path: LedPath | int) -> tuple[int, ...]:
    """Return the 256 LED indices of ``path`` in sweep order."""
    return _PATHS[LedPath(path)]