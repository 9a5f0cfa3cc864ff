"""Copying, comparing, searching and storing arrays of fixed-size elements."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def _bytes_view(obj: Any, name: str) -> memoryview:
    if obj is None:
        raise ValueError(f"{name} must not be None")
    return memoryview(obj).cast("B")


def _check_sizes(elem_size: int, elem_count: int) -> int:
    if elem_size <= 0 or elem_count <= 0:
        raise ValueError("element size and element count must be positive")
    return elem_size * elem_count


def _check_filename(filename: str | Path | None) -> None:
    if filename is None:
        raise ValueError("file name must not be None")
    if "\n" in str(filename):
        raise ValueError("file name must not contain a newline")


def array_copy(src: Any, dst: Any, elem_size: int, elem_count: int) -> None:
    """Copy ``elem_count`` elements of ``elem_size`` bytes from ``src`` into ``dst``.

    Both arguments are buffer objects; ``dst`` must be writable.
    """
    src_view = _bytes_view(src, "src")
    dst_view = _bytes_view(dst, "dst")
    nbytes = _check_sizes(elem_size, elem_count)
    if len(src_view) < nbytes or len(dst_view) < nbytes:
        raise ValueError("buffers are smaller than the requested copy")
    dst_view[:nbytes] = src_view[:nbytes]


def array_is_equal(array_a: Any, array_b: Any, elem_size: int, elem_count: int) -> bool:
    """Return whether the first ``elem_count`` elements of both arrays match byte for byte."""
    view_a = _bytes_view(array_a, "array_a")
    view_b = _bytes_view(array_b, "array_b")
    nbytes = _check_sizes(elem_size, elem_count)
    return view_a[:nbytes] == view_b[:nbytes]


def array_locate(data: Any, target: Any, elem_size: int, elem_count: int) -> int:
    """Return the index of the first element equal to ``target``, or -1 if absent."""
    data_view = _bytes_view(data, "data")
    target_view = _bytes_view(target, "target")
    if elem_size <= 0:
        raise ValueError("element size must be positive")
    if len(target_view) < elem_size:
        raise ValueError("target is smaller than one element")
    wanted = target_view[:elem_size]
    count = min(elem_count, len(data_view) // elem_size)
    return next(
        (
            index
            for index in range(count)
            if data_view[index * elem_size:(index + 1) * elem_size] == wanted
        ),
        -1,
    )


def array_serialize(src_data: Any, dst_file: str | Path, elem_size: int, elem_count: int) -> None:
    """Write ``elem_count`` elements of ``src_data`` to ``dst_file`` as raw bytes."""
    view = _bytes_view(src_data, "src_data")
    _check_filename(dst_file)
    nbytes = _check_sizes(elem_size, elem_count)
    with open(dst_file, "wb") as handle:
        handle.write(view[:nbytes])


def array_deserialize(src_file: str | Path, elem_size: int, elem_count: int) -> bytes:
    """Read up to ``elem_count`` elements of ``elem_size`` bytes from ``src_file``."""
    _check_filename(src_file)
    nbytes = _check_sizes(elem_size, elem_count)
    with open(src_file, "rb") as handle:
        return handle.read(nbytes)