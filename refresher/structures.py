"""Fruit records, a sample record type and native alignment facts."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum


class FruitType(IntEnum):
    """Kinds of fruit."""

    APPLE = 1
    ORANGE = 2


@dataclass
class Sample:
    """Two integers and a character."""

    a: int = 0
    b: int = 0
    c: str = "\0"


@dataclass
class Fruit:
    """A piece of fruit of a given kind."""

    type: FruitType


@dataclass
class Orange(Fruit):
    """An orange, which may be peeled."""

    type: FruitType = FruitType.ORANGE
    weight: int = 0
    peeled: int = 0


@dataclass
class Apple(Fruit):
    """An apple, which may have worms."""

    type: FruitType = FruitType.APPLE
    weight: int = 0
    worms: int = 0


def _native_alignment(code: str) -> int:
    return struct.calcsize("c" + code) - struct.calcsize(code)


def alignments() -> dict[str, int]:
    """Return the native alignment in bytes of common C types and of a fruit record."""
    return {
        "int": _native_alignment("i"),
        "double": _native_alignment("d"),
        "float": _native_alignment("f"),
        "char": _native_alignment("c"),
        "long long": _native_alignment("q"),
        "short": _native_alignment("h"),
        # A fruit record holds an int followed by characters, so it aligns like an int.
        "structs": _native_alignment("i"),
    }


def print_alignments() -> None:
    """Print the alignment of each type on standard output."""
    table = alignments()
    for name, value in table.items():
        if name == "structs":
            print(f"Alignment of structs are {value} bytes")
        else:
            print(f"Alignment of {name} is {value} bytes")


def compare_structs(a: Sample, b: Sample) -> bool:
    """Return whether two samples match member by member."""
    return a.a == b.a and a.b == b.b and a.c == b.c


def sort_fruit(fruits: list[Fruit]) -> tuple[int, int]:
    """Count the apples and oranges in ``fruits``.

    Anything that is not an apple is counted as an orange.
    """
    apples = sum(1 for fruit in fruits if fruit.type == FruitType.APPLE)
    return apples, len(fruits) - apples


def initialize_array(apples: int, oranges: int) -> list[Fruit]:
    """Return ``apples`` apples followed by ``oranges`` oranges."""
    if apples < 0 or oranges < 0:
        raise ValueError("fruit counts must not be negative")
    return [Fruit(FruitType.APPLE) for _ in range(apples)] + [
        Fruit(FruitType.ORANGE) for _ in range(oranges)
    ]


def initialize_orange() -> Orange:
    """Return a new, unpeeled orange of zero weight."""
    return Orange()


def initialize_apple() -> Apple:
    """Return a new, worm-free apple of zero weight."""
    return Apple()