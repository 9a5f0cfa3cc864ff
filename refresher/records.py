"""Fixed-size person records and their binary form."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

MAX_NAME_LEN = 28
MAX_INPUT_NAME_LEN = 50
MIN_AGE = 1
MAX_AGE = 200

_RECORD = struct.Struct(f"<I{MAX_NAME_LEN}s")
RECORD_SIZE = _RECORD.size


@dataclass
class Record:
    """A person's age and a name of at most ``MAX_NAME_LEN - 1`` bytes."""

    age: int = 0
    name: str = ""

    def to_bytes(self) -> bytes:
        """Return the record's fixed-size binary form."""
        encoded = self.name.encode("utf-8")[: MAX_NAME_LEN - 1]
        return _RECORD.pack(self.age, encoded)


def parse_record(data: bytes) -> Record:
    """Build a record from its binary form."""
    if len(data) < RECORD_SIZE:
        raise ValueError(f"a record needs {RECORD_SIZE} bytes, got {len(data)}")
    age, raw_name = _RECORD.unpack_from(data)
    name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Record(age=age, name=name)


def create_blank_records(num_records: int) -> list[Record]:
    """Return ``num_records`` zeroed records."""
    if num_records == 0:
        raise ValueError("at least one record must be requested")
    if num_records < 0:
        raise MemoryError("cannot allocate a negative number of records")
    return [Record() for _ in range(num_records)]


def read_records(input_filename: str | Path, num_records: int) -> list[Record]:
    """Read ``num_records`` records from a binary file.

    Raises ``OSError`` if the file cannot be opened and ``EOFError`` if it
    runs out before every record has been read.
    """
    if input_filename is None:
        raise ValueError("input file name must not be None")
    if num_records <= 0:
        raise ValueError("at least one record must be requested")
    records = []
    with open(input_filename, "rb") as handle:
        for index in range(num_records):
            chunk = handle.read(RECORD_SIZE)
            if not chunk:
                raise EOFError(f"file ended before record {index}")
            records.append(parse_record(chunk.ljust(RECORD_SIZE, b"\0")))
    return records


def create_record(name: str, age: int) -> Record:
    """Return a new record, truncating the name to fit its fixed field."""
    if name is None:
        raise ValueError("name must not be None")
    encoded = name.encode("utf-8")
    if encoded.startswith(b"\n"):
        raise ValueError("name must not start with a newline")
    if len(encoded) >= MAX_INPUT_NAME_LEN:
        raise ValueError(f"name must be shorter than {MAX_INPUT_NAME_LEN} bytes")
    if not MIN_AGE <= age <= MAX_AGE:
        raise ValueError(f"age must be between {MIN_AGE} and {MAX_AGE}")
    stored = encoded[: MAX_NAME_LEN - 1].decode("utf-8", errors="ignore")
    return Record(age=age, name=stored)