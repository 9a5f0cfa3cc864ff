"""Utilities for buffers, bitmaps, binary records, strings and file I/O."""

__version__ = "0.1.0"

__all__ = [
    "allocation",
    "arrays",
    "bitmap",
    "debug",
    "records",
    "sstring",
    "structures",
    "sysprog",
]