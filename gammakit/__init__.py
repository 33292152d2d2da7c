"""Constant-product pool math, instruction and event decoding, and a decoding command line."""

__version__ = "0.2.0"

__all__ = [
    "base58",
    "cli",
    "config",
    "curve",
    "errors",
    "instructions",
    "logs",
    "utils",
]