"""File reads and writes at offsets, file metadata and byte-order swapping."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

_UINT32_MAX = 0xFFFFFFFF


def bulk_read(input_filename: str | Path, offset: int, size: int) -> bytes:
    """Read up to ``size`` bytes from ``input_filename`` starting at ``offset``.

    Raises ``EOFError`` when nothing can be read at that offset.
    """
    if input_filename is None:
        raise ValueError("input file name must not be None")
    if size <= 0:
        raise ValueError("size must be positive")
    fd = os.open(input_filename, os.O_RDONLY)
    try:
        os.lseek(fd, offset, os.SEEK_SET)
        data = os.read(fd, size)
    finally:
        os.close(fd)
    if not data:
        raise EOFError(f"no data at offset {offset}")
    return data


def bulk_write(data: bytes, output_filename: str | Path, offset: int) -> int:
    """Write ``data`` into an existing file at ``offset`` and return the byte count.

    The file is not created or truncated; writing past its end extends it.
    """
    if data is None:
        raise ValueError("data must not be None")
    if output_filename is None:
        raise ValueError("output file name must not be None")
    if len(data) == 0:
        raise ValueError("data must not be empty")
    fd = os.open(output_filename, os.O_WRONLY)
    try:
        os.lseek(fd, offset, os.SEEK_SET)
        return os.write(fd, data)
    finally:
        os.close(fd)


def file_stat(query_filename: str | Path) -> os.stat_result:
    """Return the metadata of ``query_filename``."""
    if query_filename is None:
        raise ValueError("query file name must not be None")
    return os.stat(query_filename)


def endianess_converter(values: Iterable[int]) -> list[int]:
    """Return each 32-bit unsigned value with its byte order reversed."""
    if values is None:
        raise ValueError("values must not be None")
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    if any(not 0 <= value <= _UINT32_MAX for value in items):
        raise ValueError("every value must be an unsigned 32-bit integer")
    return [int.from_bytes(value.to_bytes(4, "little"), "big") for value in items]