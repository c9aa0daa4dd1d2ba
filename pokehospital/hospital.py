"""Hospital holding trainers and the pokemon they bring for treatment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, List, Sequence, Union

from .bst import BinarySearchTree, Traversal
from .parsing import parse_record, read_lines


@dataclass(frozen=True, slots=True)
class Pokemon:
    """A pokemon with its name and level."""

    name: str
    level: int


@dataclass(frozen=True, slots=True)
class Trainer:
    """A trainer and how many pokemon they brought."""

    id: int
    name: str
    pokemon_count: int = 0


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, none gives 0."""
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isascii() or not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def _compare_by_name(a: Pokemon, b: Pokemon) -> int:
    return (a.name > b.name) - (a.name < b.name)


class Hospital:
    """Trainers in arrival order and their pokemon, by arrival and by name.

    Each record line has the form ``id;trainer;pokemon;level;pokemon;level...``.
    """

    def __init__(self) -> None:
        self._trainers: List[Trainer] = []
        self._pokemon_by_arrival: List[Pokemon] = []
        self._pokemon_by_name: BinarySearchTree[Pokemon] = BinarySearchTree(_compare_by_name)

    def read_file(self, path: Union[str, os.PathLike]) -> int:
        """Load every record of the file at ``path``.

        Reading stops quietly at the first invalid record; the records before
        it stay loaded. Returns how many records were added. Raises OSError if
        the file cannot be opened.
        """
        added = 0
        with open(path, "r", encoding="utf-8") as stream:
            for line in read_lines(stream):
                try:
                    self.add_record(line)
                except ValueError:
                    break
                added += 1
        return added

    def add_record(self, line: str) -> Trainer:
        """Add the trainer and pokemon described by one record line.

        Raises ValueError if the line has no trainer name or a pokemon
        without a level; nothing is added in that case.
        """
        fields = parse_record(line)
        if len(fields) < 2:
            raise ValueError(f"record has no trainer name: {line!r}")
        pokemon_fields = fields[2:]
        if len(pokemon_fields) % 2:
            raise ValueError(f"pokemon without a level in record: {line!r}")

        pokemon = [
            Pokemon(name=name, level=_to_int(level))
            for name, level in zip(pokemon_fields[::2], pokemon_fields[1::2])
        ]
        trainer = Trainer(id=_to_int(fields[0]), name=fields[1], pokemon_count=len(pokemon))

        for patient in pokemon:
            self._pokemon_by_arrival.append(patient)
            self._pokemon_by_name.insert(patient)
        self._trainers.append(trainer)
        return trainer

    def trainer_count(self) -> int:
        return len(self._trainers)

    def pokemon_count(self) -> int:
        return len(self._pokemon_by_name)

    def for_each_pokemon(self, function: Callable[[Pokemon], bool]) -> int:
        """Call ``function`` on each pokemon in alphabetical order until it returns False.

        Returns how many times the function was called.
        """
        if function is None:
            return 0
        return self._pokemon_by_name.for_each(Traversal.INORDER, function)

    def trainers(self) -> Sequence[Trainer]:
        """The trainers in the order they arrived."""
        return tuple(self._trainers)

    def pokemon_by_arrival(self) -> Sequence[Pokemon]:
        """Every pokemon in the order they arrived, trainer by trainer."""
        return tuple(self._pokemon_by_arrival)