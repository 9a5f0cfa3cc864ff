"""Byte-buffer allocation helpers and a one-line file reader."""

from __future__ import annotations

from pathlib import Path

LINE_BUFFER_SIZE = 1096


def allocate_array(member_size: int, nmember: int, clear: bool) -> bytearray:
    """Return a buffer large enough for ``nmember`` items of ``member_size`` bytes.

    Python always hands out initialised memory, so the buffer is zero-filled
    whether or not ``clear`` is set.
    """
    if nmember <= 0 or member_size <= 0:
        raise ValueError("member size and member count must be positive")
    return bytearray(member_size * nmember)


def reallocate_array(buffer: bytearray, size: int) -> bytearray | None:
    """Resize ``buffer`` in place to ``size`` bytes, keeping its contents.

    Growing pads with zero bytes. A size of zero releases the buffer and
    returns ``None``, like resizing to nothing frees the memory.
    """
    if buffer is None:
        raise ValueError("buffer must not be None")
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        buffer.clear()
        return None
    if size < len(buffer):
        del buffer[size:]
    else:
        buffer.extend(bytes(size - len(buffer)))
    return buffer


def deallocate_array(buffer: bytearray | None) -> None:
    """Release the contents of ``buffer``; ``None`` is accepted and ignored.

    Always returns ``None`` so callers can write ``buf = deallocate_array(buf)``.
    """
    if buffer is not None:
        buffer.clear()
    return None


def read_line_to_buffer(filename: str | Path) -> str:
    """Read the first line of ``filename``, at most one buffer's worth of text.

    Raises ``OSError`` when the file cannot be opened.
    """
    with open(filename, "r", encoding="utf-8", errors="replace") as handle:
        return handle.readline(LINE_BUFFER_SIZE - 1)