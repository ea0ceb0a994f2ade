# oraquadra

Pieces for a 16 × 16 LED word clock: the orders in which the 256 LEDs
are swept for animations, and a small QR code generator for showing
connection details on the clock face, together with the bit containers,
Reed-Solomon arithmetic and mask scoring it is built from.

No third-party packages are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## LED paths

The LEDs are wired as a serpentine: even rows run right to left, odd
rows left to right. `oraquadra.led_paths` gives eight sweeps over them,
selected with the `LedPath` enumeration (or its number, 1 to 8):

```python
from oraquadra.led_paths import LedPath, led_path

order = led_path(LedPath.VERT_TOP_TO_BOTTOM_LEFT)   # 256 LED indices
len(order)                                          # 256
led_path(2)                                         # 0, 1, 2, ... 255
```

The paths are `HORIZ_LEFT_TO_RIGHT_TOP`, `HORIZ_RIGHT_TO_LEFT_TOP`,
`HORIZ_LEFT_TO_RIGHT_BOTTOM`, `HORIZ_RIGHT_TO_LEFT_BOTTOM`,
`VERT_TOP_TO_BOTTOM_LEFT`, `VERT_BOTTOM_TO_TOP_LEFT`,
`VERT_TOP_TO_BOTTOM_RIGHT` and `VERT_BOTTOM_TO_TOP_RIGHT`. The
`HORIZ_LEFT_TO_RIGHT_TOP` table is kept exactly as the clock uses it:
it repeats index 92 in its sixth row, lacks 211, and ends with a 0.

## QR codes

`oraquadra.qrcode` builds QR codes of versions 1 to 40. The data is
encoded in numeric mode if it is all digits, otherwise in alphanumeric
mode if every character allows it, otherwise in byte mode; of the eight
masks the one with the lowest penalty is chosen.

```python
from oraquadra.qrcode import QRCode, ErrorCorrection, buffer_size

code = QRCode.from_text(3, ErrorCorrection.LOW, "HELLO WORLD")
code.size      # 29
code.mode      # Mode.ALPHANUMERIC
code.mask      # the chosen mask, 0..7
for row in code.rows():
    print("".join("##" if dark else "  " for dark in row))
```

- `QRCode.from_text(version, ecc, text)` encodes `text` as UTF-8;
  `QRCode.from_bytes(version, ecc, data)` takes bytes.
- `ecc` is an `ErrorCorrection` (`LOW`, `MEDIUM`, `QUARTILE`, `HIGH`) or
  its number 0 to 3.
- A version outside 1..40 raises `ValueError`, and so does data that does
  not fit the chosen version and level.
- `code.get_module(x, y)` tells whether one module is dark, and is
  `False` outside the symbol. `code.modules` holds the grid packed row by
  row, most significant bit first.
- `buffer_size(version)` gives the number of bytes of that packed grid,
  and `mode_bits(version, mode)` the width of the character count field.

## Building blocks

- `oraquadra.bitbuffer`: `BitBuffer`, an append-only bit sequence
  (`append_bits`, `bit`, `to_bytes`), and `BitGrid`, a square bit grid
  (`get`, `set`, `invert`, `to_bytes`).
- `oraquadra.reed_solomon`: `multiply` in GF(2^8) with polynomial 0x11D,
  `generator_polynomial(degree)` and `remainder(coefficients, data)`,
  which returns the error correction bytes.
- `oraquadra.masking`: `mask_inverts(mask, x, y)`, `apply_mask(modules,
  is_function, mask)`, which skips function modules and undoes itself
  when applied twice, and `penalty_score(grid)`.

## What this package does not do

It does not hold the clock's letter grid, the cells that spell the hours
and minutes, or their screen coordinates, and it draws nothing: there is
no display, LED driver or command-line tool. It supplies the LED orders
and QR module grids for other code to show.