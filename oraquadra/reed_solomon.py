"""Reed-Solomon error correction over GF(2^8) with the QR reducing polynomial 0x11D."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_REDUCING_POLYNOMIAL = 0x11D


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be a byte value 0..255, got {value}")


def multiply(x: int, y: int) -> int:
    """Return the product of two field elements in GF(2^8/0x11D)."""
    _check_byte("x", x)
    _check_byte("y", y)
    z = 0
    for shift in reversed(range(8)):
        z = (z << 1) ^ ((z >> 7) * _REDUCING_POLYNOMIAL)
        z ^= ((y >> shift) & 1) * x
    return z


def generator_polynomial(degree: int) -> list[int]:
    """Return the generator polynomial of ``degree`` without its leading term.

    The result holds the coefficients of (x - r^0)(x - r^1)...(x - r^{degree-1})
    in order of descending powers, with r = 0x02.
    """
    if degree < 1:
        raise ValueError(f"degree must be at least 1, got {degree}")
    coefficients = [0] * (degree - 1) + [1]
    root = 1
    for _ in range(degree):
        following = coefficients[1:] + [0]
        coefficients = [
            multiply(coefficient, root) ^ nxt
            for coefficient, nxt in zip(coefficients, following)
        ]
        root = multiply(root, 0x02)
    return coefficients


def remainder(coefficients: Sequence[int], data: Iterable[int]) -> bytes:
    """Return the error correction bytes of ``data`` for the given generator."""
    if not coefficients:
        raise ValueError("generator coefficients must not be empty")
    result = [0] * len(coefficients)
    for byte in data:
        _check_byte("data byte", byte)
        factor = byte ^ result[0]
        shifted = result[1:] + [0]
        result = [
            value ^ multiply(coefficient, factor)
            for value, coefficient in zip(shifted, coefficients)
        ]
    return bytes(result)