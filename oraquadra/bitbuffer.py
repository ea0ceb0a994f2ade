"""Bit-level containers: an append-only bit buffer and a square bit grid."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain


def _pack_bits(bits: Iterable[bool], byte_count: int) -> bytes:
    """Pack booleans most-significant-bit first into ``byte_count`` bytes."""
    out = bytearray(byte_count)
    for offset, on in enumerate(bits):
        if on:
            out[offset >> 3] |= 0x80 >> (offset & 7)
    return bytes(out)


class BitBuffer:
    """A growable sequence of bits, written most significant bit first."""

    def __init__(self) -> None:
        self._bits: list[bool] = []

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self):
        return iter(self._bits)

    def append_bits(self, value: int, length: int) -> None:
        """Append the lowest ``length`` bits of ``value``, high bit first."""
        if length < 0:
            raise ValueError(f"bit length must not be negative, got {length}")
        self._bits.extend(
            bool((value >> shift) & 1) for shift in reversed(range(length))
        )

    def bit(self, index: int) -> bool:
        """Return the bit at ``index``."""
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bit index {index} out of range")
        return self._bits[index]

    def to_bytes(self) -> bytes:
        """Return the bits packed into bytes, the last byte padded with zeros."""
        return _pack_bits(self._bits, (len(self._bits) + 7) // 8)


class BitGrid:
    """A square grid of bits addressed by ``(x, y)``."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        self._rows: list[list[bool]] = [[False] * size for _ in range(size)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"position ({x}, {y}) outside a {self.size}x{self.size} grid")

    def get(self, x: int, y: int) -> bool:
        """Return the bit at column ``x``, row ``y``."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, on: bool) -> None:
        """Set the bit at column ``x``, row ``y``."""
        self._check(x, y)
        self._rows[y][x] = bool(on)

    def invert(self, x: int, y: int, invert: bool) -> None:
        """Flip the bit at ``(x, y)`` when ``invert`` is true."""
        self._check(x, y)
        if invert:
            self._rows[y][x] = not self._rows[y][x]

    def to_bytes(self) -> bytes:
        """Return the grid packed row by row, most significant bit first."""
        return _pack_bits(
            chain.from_iterable(self._rows), (self.size * self.size + 7) // 8
        )