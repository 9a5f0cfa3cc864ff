"""Helpers for NUL-terminated byte strings.

Byte-like arguments are used as they are; ``str`` arguments are encoded as
UTF-8 and given a terminating NUL, as a literal string would carry one.
"""

from __future__ import annotations

import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _as_bytes(data: bytes | bytearray | str | None, name: str) -> bytes:
    if data is None:
        raise ValueError(f"{name} must not be None")
    if isinstance(data, str):
        return data.encode("utf-8") + b"\0"
    return bytes(data)


def _check_length(length: int) -> None:
    if length <= 0:
        raise ValueError("length must be positive")


def string_valid(data: bytes | str, length: int) -> bool:
    """Return whether the ``length``-byte buffer ends in a NUL terminator."""
    raw = _as_bytes(data, "data")
    _check_length(length)
    return length <= len(raw) and raw[length - 1] == 0


def string_duplicate(data: bytes | str, length: int) -> bytes:
    """Return a copy of the first ``length`` bytes of ``data``."""
    raw = _as_bytes(data, "data")
    _check_length(length)
    return raw[:length]


def string_equal(str_a: bytes | str, str_b: bytes | str, length: int) -> bool:
    """Return whether the first ``length`` bytes of both strings match."""
    raw_a = _as_bytes(str_a, "str_a")
    raw_b = _as_bytes(str_b, "str_b")
    _check_length(length)
    return raw_a[:length] == raw_b[:length]


def string_length(data: bytes | str, length: int) -> int:
    """Return the number of bytes before the first NUL."""
    raw = _as_bytes(data, "data")
    _check_length(length)
    end = raw.find(b"\0")
    return len(raw) if end < 0 else end


def string_tokenize(
    text: str, delims: str, max_token_length: int, requested_tokens: int
) -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty tokens.

    Each token must fit in ``max_token_length`` bytes including a terminator,
    and at most ``requested_tokens`` tokens may be produced.
    """
    if text is None or delims is None:
        raise ValueError("text and delimiters must not be None")
    if max_token_length <= 0 or requested_tokens <= 0:
        raise ValueError("token length and token count must be positive")
    if delims:
        pattern = "[" + "".join(re.escape(ch) for ch in delims) + "]"
        tokens = [token for token in re.split(pattern, text) if token]
    else:
        tokens = [text] if text else []
    if len(tokens) > requested_tokens:
        raise ValueError(f"found {len(tokens)} tokens but room for only {requested_tokens}")
    for token in tokens:
        if len(token.encode("utf-8")) >= max_token_length:
            raise ValueError(f"token {token!r} does not fit in {max_token_length} bytes")
    return tokens


def string_to_int(text: str) -> int:
    """Parse the leading decimal integer of ``text``, as a 32-bit signed int.

    Leading whitespace is skipped and parsing stops at the first non-digit;
    text with no leading digits yields 0.
    """
    if text is None:
        raise ValueError("text must not be None")
    match = _LEADING_INT.match(text)
    value = int(match.group(1)) if match else 0
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{value} does not fit in a 32-bit signed integer")
    return value