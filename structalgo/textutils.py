"""Small character, string and array helpers."""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

TABLE_MAX = 10

_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

_DIGIT_NAMES = {
    "1": "C'est un",
    "2": "C'est deux",
    "3": "C'est trois",
}


def is_ascii(char: str) -> bool:
    """True if the character has a code between 0 and 127."""
    return 0 <= ord(char) <= 127


def upper_ascii(text: str) -> str:
    """Upper-case the ASCII letters a-z, leaving every other character alone."""
    return text.translate(_UPPER_TABLE)


def min_value(values: Iterable[int]) -> int:
    """Smallest value of a non-empty collection."""
    items = list(values)
    if not items:
        raise ValueError("min_value() of an empty collection")
    return min(items)


def in_domain(value: int, low: int, high: int) -> bool:
    """True if ``low <= value <= high``."""
    return low <= value <= high


def describe_digit(char: str) -> str:
    """Name the characters '1', '2' and '3'; anything else is 'autre chose'."""
    return _DIGIT_NAMES.get(char, "C'est autre chose...")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_table(stream: TextIO) -> list[int]:
    """Read a count (retried until within 0..10) then that many integers."""
    tokens = _tokens(stream)

    def take() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    count = take()
    while not 0 <= count <= TABLE_MAX:
        count = take()
    return [take() for _ in range(count)]