"""QR Code symbol generation for the clock's Wi-Fi setup screen."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from oraquadra.bitbuffer import BitBuffer, BitGrid
from oraquadra.masking import MASK_COUNT, apply_mask, penalty_score
from oraquadra.reed_solomon import generator_polynomial, remainder

MIN_VERSION = 1
MAX_VERSION = 40


class Mode(IntEnum):
    """Data encoding modes."""

    NUMERIC = 0
    ALPHANUMERIC = 1
    BYTE = 2


class ErrorCorrection(IntEnum):
    """Error correction levels."""

    LOW = 0
    MEDIUM = 1
    QUARTILE = 2
    HIGH = 3


# The two-bit value each level is written as in the format information.
_FORMAT_BITS = {
    ErrorCorrection.LOW: 1,
    ErrorCorrection.MEDIUM: 0,
    ErrorCorrection.QUARTILE: 3,
    ErrorCorrection.HIGH: 2,
}

_ECC_CODEWORDS = {
    ErrorCorrection.MEDIUM: (
        10, 16, 26, 36, 48, 64, 72, 88, 110, 130, 150, 176, 198, 216, 240, 280,
        308, 338, 364, 416, 442, 476, 504, 560, 588, 644, 700, 728, 784, 812,
        868, 924, 980, 1036, 1064, 1120, 1204, 1260, 1316, 1372,
    ),
    ErrorCorrection.LOW: (
        7, 10, 15, 20, 26, 36, 40, 48, 60, 72, 80, 96, 104, 120, 132, 144,
        168, 180, 196, 224, 224, 252, 270, 300, 312, 336, 360, 390, 420, 450,
        480, 510, 540, 570, 570, 600, 630, 660, 720, 750,
    ),
    ErrorCorrection.HIGH: (
        17, 28, 44, 64, 88, 112, 130, 156, 192, 224, 264, 308, 352, 384, 432,
        480, 532, 588, 650, 700, 750, 816, 900, 960, 1050, 1110, 1200, 1260,
        1350, 1440, 1530, 1620, 1710, 1800, 1890, 1980, 2100, 2220, 2310, 2430,
    ),
    ErrorCorrection.QUARTILE: (
        13, 22, 36, 52, 72, 96, 108, 132, 160, 192, 224, 260, 288, 320, 360,
        408, 448, 504, 546, 600, 644, 690, 750, 810, 870, 952, 1020, 1050,
        1140, 1200, 1290, 1350, 1440, 1530, 1590, 1680, 1770, 1860, 1950, 2040,
    ),
}

_ECC_BLOCKS = {
    ErrorCorrection.MEDIUM: (
        1, 1, 1, 2, 2, 4, 4, 4, 5, 5, 5, 8, 9, 9, 10, 10, 11, 13, 14, 16,
        17, 17, 18, 20, 21, 23, 25, 26, 28, 29, 31, 33, 35, 37, 38, 40, 43, 45, 47, 49,
    ),
    ErrorCorrection.LOW: (
        1, 1, 1, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 4, 6, 6, 6, 6, 7, 8,
        8, 9, 9, 10, 12, 12, 12, 13, 14, 15, 16, 17, 18, 19, 19, 20, 21, 22, 24, 25,
    ),
    ErrorCorrection.HIGH: (
        1, 1, 2, 4, 4, 4, 5, 6, 8, 8, 11, 11, 16, 16, 18, 16, 19, 21, 25, 25,
        25, 34, 30, 32, 35, 37, 40, 42, 45, 48, 51, 54, 57, 60, 63, 66, 70, 74, 77, 81,
    ),
    ErrorCorrection.QUARTILE: (
        1, 1, 2, 2, 4, 4, 6, 6, 8, 8, 8, 10, 12, 16, 12, 17, 16, 18, 21, 20,
        23, 23, 25, 27, 29, 34, 34, 35, 38, 40, 43, 45, 48, 51, 53, 56, 59, 62, 65, 68,
    ),
}

_RAW_DATA_MODULES = (
    208, 359, 567, 807, 1079, 1383, 1568, 1936, 2336, 2768, 3232, 3728, 4256,
    4651, 5243, 5867, 6523, 7211, 7931, 8683, 9252, 10068, 10916, 11796,
    12708, 13652, 14628, 15371, 16411, 17483, 18587, 19723, 20891, 22091,
    23008, 24272, 25568, 26896, 28256, 29648,
)

# Character count field widths for versions 1-9, 10-26 and 27-40.
_COUNT_BITS = {
    Mode.NUMERIC: (10, 12, 14),
    Mode.ALPHANUMERIC: (9, 11, 13),
    Mode.BYTE: (8, 16, 16),
}

_ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_ALPHANUMERIC_VALUES = {ord(c): value for value, c in enumerate(_ALPHANUMERIC)}
_DIGITS = frozenset(b"0123456789")


def _check_version(version: int) -> None:
    if not MIN_VERSION <= version <= MAX_VERSION:
        raise ValueError(
            f"version must be in {MIN_VERSION}..{MAX_VERSION}, got {version}"
        )


def _size_of(version: int) -> int:
    return version * 4 + 17


def buffer_size(version: int) -> int:
    """Return the number of bytes that hold the modules of a ``version`` symbol."""
    _check_version(version)
    size = _size_of(version)
    return (size * size + 7) // 8


def mode_bits(version: int, mode: Mode | int) -> int:
    """Return the width of the character count field for ``mode`` at ``version``."""
    _check_version(version)
    widths = _COUNT_BITS[Mode(mode)]
    if version <= 9:
        return widths[0]
    if version <= 26:
        return widths[1]
    return widths[2]


def _encode(data: bytes, version: int) -> tuple[Mode, BitBuffer]:
    """Encode ``data`` in the densest mode that can hold it."""
    buffer = BitBuffer()
    length = len(data)
    if all(byte in _DIGITS for byte in data):
        mode = Mode.NUMERIC
        buffer.append_bits(1 << mode, 4)
        buffer.append_bits(length, mode_bits(version, mode))
        for start in range(0, length, 3):
            group = data[start:start + 3]
            buffer.append_bits(int(group.decode("ascii")), len(group) * 3 + 1)
    elif all(byte in _ALPHANUMERIC_VALUES for byte in data):
        mode = Mode.ALPHANUMERIC
        buffer.append_bits(1 << mode, 4)
        buffer.append_bits(length, mode_bits(version, mode))
        for start in range(0, length, 2):
            pair = data[start:start + 2]
            if len(pair) == 2:
                value = (_ALPHANUMERIC_VALUES[pair[0]] * 45
                         + _ALPHANUMERIC_VALUES[pair[1]])
                buffer.append_bits(value, 11)
            else:
                buffer.append_bits(_ALPHANUMERIC_VALUES[pair[0]], 6)
    else:
        mode = Mode.BYTE
        buffer.append_bits(1 << mode, 4)
        buffer.append_bits(length, mode_bits(version, mode))
        for byte in data:
            buffer.append_bits(byte, 8)
    return mode, buffer


def _add_error_correction(version: int, ecc: ErrorCorrection, data: bytes) -> bytes:
    """Split ``data`` into blocks, add error correction and interleave."""
    num_blocks = _ECC_BLOCKS[ecc][version - 1]
    block_ecc_len = _ECC_CODEWORDS[ecc][version - 1] // num_blocks
    raw_codewords = _RAW_DATA_MODULES[version - 1] // 8
    num_short = num_blocks - raw_codewords % num_blocks
    short_data_len = raw_codewords // num_blocks - block_ecc_len

    blocks = []
    start = 0
    for index in range(num_blocks):
        length = short_data_len + (1 if index >= num_short else 0)
        blocks.append(data[start:start + length])
        start += length

    generator = generator_polynomial(block_ecc_len)
    ecc_blocks = [remainder(generator, block) for block in blocks]

    out = bytearray()
    for column in range(short_data_len + 1):
        out.extend(block[column] for block in blocks if column < len(block))
    for column in range(block_ecc_len):
        out.extend(block[column] for block in ecc_blocks)
    return bytes(out)


def _module_bits(codewords: bytes, count: int) -> Iterator[bool]:
    """Yield ``count`` bits of ``codewords``, zero past their end."""
    for index in range(count):
        byte = index >> 3
        yield byte < len(codewords) and bool((codewords[byte] >> (7 - (index & 7))) & 1)


def _format_word(ecc_bits: int, mask: int) -> int:
    data = ecc_bits << 3 | mask
    rem = data
    for _ in range(10):
        rem = (rem << 1) ^ ((rem >> 9) * 0x537)
    return (data << 10 | rem) ^ 0x5412


def _version_word(version: int) -> int:
    rem = version
    for _ in range(12):
        rem = (rem << 1) ^ ((rem >> 11) * 0x1F25)
    return version << 12 | rem


def _alignment_positions(version: int) -> list[int]:
    count = version // 7 + 2
    size = _size_of(version)
    if version == 32:
        step = 26
    else:
        step = (version * 4 + count * 2 + 1) // (2 * count - 2) * 2
    descending = [size - 7 - step * index for index in range(count - 1)]
    return [6] + descending[::-1]


class _Symbol:
    """The module grid of a symbol under construction, with its function map."""

    def __init__(self, version: int) -> None:
        self.version = version
        self.size = _size_of(version)
        self.modules = BitGrid(self.size)
        self.is_function = BitGrid(self.size)

    def set_function(self, x: int, y: int, on: bool) -> None:
        self.modules.set(x, y, on)
        self.is_function.set(x, y, True)

    def draw_finder(self, cx: int, cy: int) -> None:
        for dy in range(-4, 5):
            for dx in range(-4, 5):
                x, y = cx + dx, cy + dy
                if 0 <= x < self.size and 0 <= y < self.size:
                    dist = max(abs(dx), abs(dy))
                    self.set_function(x, y, dist not in (2, 4))

    def draw_alignment(self, cx: int, cy: int) -> None:
        for dy in range(-2, 3):
            for dx in range(-2, 3):
                self.set_function(cx + dx, cy + dy, max(abs(dx), abs(dy)) != 1)

    def draw_format(self, ecc_bits: int, mask: int) -> None:
        word = _format_word(ecc_bits, mask)
        size = self.size

        def bit(index: int) -> bool:
            return bool((word >> index) & 1)

        for i in range(6):
            self.set_function(8, i, bit(i))
        self.set_function(8, 7, bit(6))
        self.set_function(8, 8, bit(7))
        self.set_function(7, 8, bit(8))
        for i in range(9, 15):
            self.set_function(14 - i, 8, bit(i))

        for i in range(8):
            self.set_function(size - 1 - i, 8, bit(i))
        for i in range(8, 15):
            self.set_function(8, size - 15 + i, bit(i))
        self.set_function(8, size - 8, True)

    def draw_version(self) -> None:
        if self.version < 7:
            return
        word = _version_word(self.version)
        for i in range(18):
            on = bool((word >> i) & 1)
            a, b = self.size - 11 + i % 3, i // 3
            self.set_function(a, b, on)
            self.set_function(b, a, on)

    def draw_function_patterns(self, ecc_bits: int) -> None:
        for i in range(self.size):
            self.set_function(6, i, i % 2 == 0)
            self.set_function(i, 6, i % 2 == 0)

        self.draw_finder(3, 3)
        self.draw_finder(self.size - 4, 3)
        self.draw_finder(3, self.size - 4)

        if self.version > 1:
            positions = _alignment_positions(self.version)
            last = len(positions) - 1
            for i, x in enumerate(positions):
                for j, y in enumerate(positions):
                    if (i, j) in ((0, 0), (0, last), (last, 0)):
                        continue
                    self.draw_alignment(x, y)

        self.draw_format(ecc_bits, 0)
        self.draw_version()

    def draw_codewords(self, bits: Iterator[bool]) -> None:
        size = self.size
        right = size - 1
        while right >= 1:
            if right == 6:
                right = 5
            for vert in range(size):
                for x in (right, right - 1):
                    upwards = ((right & 2) == 0) ^ (x < 6)
                    y = size - 1 - vert if upwards else vert
                    if not self.is_function.get(x, y):
                        on = next(bits, None)
                        if on is not None:
                            self.modules.set(x, y, on)
            right -= 2


@dataclass(frozen=True)
class QRCode:
    """A generated QR Code symbol; ``modules`` are packed row by row, MSB first."""

    version: int
    ecc: ErrorCorrection
    mode: Mode
    mask: int
    modules: bytes

    @property
    def size(self) -> int:
        """Width and height of the symbol in modules."""
        return _size_of(self.version)

    @classmethod
    def from_text(cls, version: int, ecc: ErrorCorrection | int, text: str) -> QRCode:
        """Build a symbol holding ``text`` encoded as UTF-8."""
        return cls.from_bytes(version, ecc, text.encode("utf-8"))

    @classmethod
    def from_bytes(cls, version: int, ecc: ErrorCorrection | int, data: bytes) -> QRCode:
        """Build a symbol of ``version`` and error correction ``ecc`` holding ``data``."""
        _check_version(version)
        ecc = ErrorCorrection(ecc)
        data = bytes(data)
        ecc_bits = _FORMAT_BITS[ecc]

        module_count = _RAW_DATA_MODULES[version - 1]
        capacity_bits = (module_count // 8 - _ECC_CODEWORDS[ecc][version - 1]) * 8

        mode, buffer = _encode(data, version)
        if len(buffer) > capacity_bits:
            raise ValueError(
                f"{len(data)} bytes need {len(buffer)} bits, but version {version} "
                f"at level {ecc.name} holds {capacity_bits}"
            )

        buffer.append_bits(0, min(4, capacity_bits - len(buffer)))
        buffer.append_bits(0, (8 - len(buffer) % 8) % 8)
        pad_byte = 0xEC
        while len(buffer) < capacity_bits:
            buffer.append_bits(pad_byte, 8)
            pad_byte ^= 0xEC ^ 0x11

        symbol = _Symbol(version)
        symbol.draw_function_patterns(ecc_bits)
        codewords = _add_error_correction(version, ecc, buffer.to_bytes())
        symbol.draw_codewords(_module_bits(codewords, module_count))

        best_mask = 0
        best_penalty = None
        for mask in range(MASK_COUNT):
            symbol.draw_format(ecc_bits, mask)
            apply_mask(symbol.modules, symbol.is_function, mask)
            penalty = penalty_score(symbol.modules)
            if best_penalty is None or penalty < best_penalty:
                best_mask, best_penalty = mask, penalty
            apply_mask(symbol.modules, symbol.is_function, mask)

        symbol.draw_format(ecc_bits, best_mask)
        apply_mask(symbol.modules, symbol.is_function, best_mask)

        return cls(
            version=version,
            ecc=ecc,
            mode=mode,
            mask=best_mask,
            modules=symbol.modules.to_bytes(),
        )

    def get_module(self, x: int, y: int) -> bool:
        """Return whether the module at ``(x, y)`` is dark; False outside the symbol."""
        size = self.size
        if not (0 <= x < size and 0 <= y < size):
            return False
        offset = y * size + x
        return bool(self.modules[offset >> 3] & (0x80 >> (offset & 7)))

    def rows(self) -> list[tuple[bool, ...]]:
        """Return the modules as a list of rows, top to bottom."""
        size = self.size
        return [tuple(self.get_module(x, y) for x in range(size)) for y in range(size)]