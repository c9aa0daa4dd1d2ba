"""Reading and splitting lines of hospital files."""

from __future__ import annotations

from typing import Iterable, Iterator, List

FIELD_SEPARATOR = ";"


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on every occurrence of the single character ``separator``.

    Empty fields are kept, so an empty string gives one empty field.
    """
    if text is None:
        raise TypeError("text must be a string")
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return text.split(separator)


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield each line of ``stream`` with its trailing newline removed."""
    for line in stream:
        yield line.removesuffix("\n")


def parse_record(line: str) -> List[str]:
    """Split one hospital file line into its semicolon separated fields."""
    return split(line, FIELD_SEPARATOR)