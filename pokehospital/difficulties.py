"""Difficulties for the level guessing game: scoring, checking and hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional

INITIAL_SCORE = 100
MINIMUM_SCORE = 0

EASY_PENALTY = 1
MEDIUM_PENALTY = 5
HARD_PENALTY = 10

CORRECT_HINT = "Adivinaste Crack"

ScoreFunction = Callable[[int], int]
VerifyFunction = Callable[[int, int], int]
HintFunction = Callable[[int], str]


@dataclass(frozen=True)
class Difficulty:
    """How guesses are checked, scored and described for one difficulty.

    ``verify(guessed, actual)`` returns 0 for a correct guess, ``score(attempts)``
    gives the points for a pokemon guessed after that many failed attempts and
    ``hint(result)`` turns the result of ``verify`` into a message.
    """

    name: str
    score: ScoreFunction
    verify: VerifyFunction
    hint: HintFunction


def verify_level(guessed_level: int, pokemon_level: int) -> int:
    """Return how far the guess falls short (positive) or overshoots (negative)."""
    return int(pokemon_level) - int(guessed_level)


def _penalised_score(attempts: int, penalty: int) -> int:
    return max(INITIAL_SCORE - attempts * penalty, MINIMUM_SCORE)


def easy_score(attempts: int) -> int:
    """Initial score minus one point per failed attempt, never below zero."""
    return _penalised_score(attempts, EASY_PENALTY)


def easy_hint(result: int) -> str:
    """Hint with the range of levels the guess was off by."""
    if result >= 50:
        return "Te quedaste corto por mas de 50 niveles"
    if 25 <= result < 50:
        return "Te quedaste corto por entre 25 y 50 niveles"
    if 10 <= result < 25:
        return "Te quedaste corto por entre 10 y 25 niveles"
    if 5 <= result < 10:
        return "Te quedaste corto por entre 5 y 10 niveles"
    if result > 0:
        return "Te quedaste corto por entre 1 y 5 niveles"
    if -50 < result <= -25:
        return "Te pasaste por entre 25 y 50 niveles"
    if -25 < result <= -10:
        return "Te pasaste por entre 10 y 25 niveles"
    if -10 < result <= -5:
        return "Te pasaste por entre 5 y 10 niveles"
    if result < 0:
        return "Te pasaste por mas de 50 niveles"
    return CORRECT_HINT


def medium_score(attempts: int) -> int:
    """Initial score minus five points per failed attempt, never below zero."""
    return _penalised_score(attempts, MEDIUM_PENALTY)


def medium_hint(result: int) -> str:
    """Hint telling only the direction and whether the miss was large."""
    if result >= 50:
        return "Te quedaste corto por bastante"
    if result > 0:
        return "Te quedaste corto por poco"
    if result <= -50:
        return "Te pasaste por bastante"
    if result < 0:
        return "Te pasaste por poco"
    return CORRECT_HINT


def hard_score(attempts: int) -> int:
    """Initial score minus ten points per failed attempt, never below zero."""
    return _penalised_score(attempts, HARD_PENALTY)


def hard_hint(result: int) -> str:
    """Hot-and-cold hint that does not reveal the direction of the miss."""
    distance = abs(result)
    if distance > 50:
        return "Frio"
    if distance > 25:
        return "Tibio"
    if distance > 0:
        return "Caliente"
    return CORRECT_HINT


def default_difficulties() -> List[Difficulty]:
    """The three built-in difficulties, in id order: easy, medium, hard."""
    return [
        Difficulty("Facil", easy_score, verify_level, easy_hint),
        Difficulty("Media", medium_score, verify_level, medium_hint),
        Difficulty("Dificil", hard_score, verify_level, hard_hint),
    ]


class DifficultyRegistry:
    """Difficulties indexed by id; ids are given in the order they are added."""

    def __init__(self, difficulties: Optional[Iterable[Difficulty]] = None) -> None:
        self._by_id: Dict[int, Difficulty] = {}
        for difficulty in default_difficulties() if difficulties is None else difficulties:
            self.add(difficulty)

    def add(self, difficulty: Difficulty) -> int:
        """Register a difficulty and return its id.

        Raises ValueError if its name or any of its functions is missing, or
        if a difficulty with the same name is already registered.
        """
        if difficulty is None:
            raise ValueError("a difficulty is required")
        if difficulty.name is None:
            raise ValueError("a difficulty needs a name")
        if not all(callable(f) for f in (difficulty.score, difficulty.verify, difficulty.hint)):
            raise ValueError(f"difficulty {difficulty.name!r} is missing a function")
        if any(existing.name == difficulty.name for existing in self._by_id.values()):
            raise ValueError(f"a difficulty named {difficulty.name!r} already exists")
        difficulty_id = len(self._by_id)
        self._by_id[difficulty_id] = difficulty
        return difficulty_id

    def get(self, difficulty_id: int) -> Difficulty:
        """Return the difficulty with this id; raise KeyError if there is none."""
        try:
            return self._by_id[difficulty_id]
        except KeyError:
            raise KeyError(difficulty_id) from None

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Difficulty]:
        return iter(self._by_id.values())