"""LED sweep paths and a compact QR code generator for a 16x16 word clock."""

__version__ = "0.1.0"