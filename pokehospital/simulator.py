"""Simulation of a pokemon hospital where the player guesses patients' levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .difficulties import Difficulty, DifficultyRegistry
from .heap import MinHeap
from .hospital import Hospital, Pokemon, Trainer

CORRECT_RESULT = 0


class SimulationError(Exception):
    """Raised when an event cannot be simulated."""


@dataclass(frozen=True)
class Statistics:
    """A snapshot of the simulation's counters."""

    trainers_attended: int = 0
    trainers_total: int = 0
    pokemon_attended: int = 0
    pokemon_waiting: int = 0
    pokemon_total: int = 0
    points: int = 0
    events_simulated: int = 0


@dataclass(frozen=True)
class PokemonInfo:
    """The pokemon in treatment and the trainer who brought it."""

    pokemon_name: str
    trainer_name: str


@dataclass(frozen=True)
class Attempt:
    """The outcome of one guess at the level of the pokemon in treatment."""

    guessed_level: int
    correct: bool
    hint: str


@dataclass(frozen=True)
class DifficultyInfo:
    """A registered difficulty's id, name and whether it is in use."""

    id: int
    name: str
    in_use: bool


@dataclass(frozen=True)
class _Patient:
    pokemon_name: str
    trainer_name: str
    level: int


def _compare_by_level(a: _Patient, b: _Patient) -> int:
    return (a.level > b.level) - (a.level < b.level)


class Simulator:
    """Runs the events of a hospital simulation.

    Every event counts towards ``events_simulated``, whether it succeeds or
    fails, as long as the simulation has not been finished. Once finished,
    every event raises SimulationError.
    """

    def __init__(self, hospital: Hospital) -> None:
        if hospital is None:
            raise ValueError("a hospital is required")
        self._hospital = hospital
        self._trainers_attended = 0
        self._trainers_total = hospital.trainer_count()
        self._pokemon_attended = 0
        self._pokemon_total = hospital.pokemon_count()
        self._points = 0
        self._events = 0

        self._reception: MinHeap[_Patient] = MinHeap(_compare_by_level)
        self._waiting_trainers: Iterator[Trainer] = iter(hospital.trainers())
        self._waiting_pokemon: Iterator[Pokemon] = iter(hospital.pokemon_by_arrival())
        self._in_treatment: Optional[_Patient] = None

        self._difficulties = DifficultyRegistry()
        self._difficulty_id = 0
        self._difficulty: Difficulty = self._difficulties.get(0)
        self._attempts = 0

        self._running = True

    def _begin_event(self) -> None:
        if not self._running:
            raise SimulationError("the simulation has finished")
        self._events += 1

    def _treat_lowest_level(self) -> None:
        self._in_treatment = self._reception.pop() if len(self._reception) else None

    def statistics(self) -> Statistics:
        """Return the current counters, this event included."""
        self._begin_event()
        return Statistics(
            trainers_attended=self._trainers_attended,
            trainers_total=self._trainers_total,
            pokemon_attended=self._pokemon_attended,
            pokemon_waiting=len(self._reception),
            pokemon_total=self._pokemon_total,
            points=self._points,
            events_simulated=self._events,
        )

    def attend_next_trainer(self) -> Trainer:
        """Move the next waiting trainer's pokemon into reception.

        If no pokemon is in treatment, the lowest level one starts treatment.
        Raises SimulationError when no trainer is left waiting.
        """
        self._begin_event()
        trainer = next(self._waiting_trainers, None)
        if trainer is None:
            raise SimulationError("no trainers left to attend")
        for _ in range(trainer.pokemon_count):
            pokemon = next(self._waiting_pokemon, None)
            if pokemon is not None:
                self._reception.push(_Patient(pokemon.name, trainer.name, pokemon.level))
        if self._in_treatment is None:
            self._treat_lowest_level()
        self._trainers_attended += 1
        return trainer

    def pokemon_in_treatment(self) -> PokemonInfo:
        """Return the pokemon in treatment; raise SimulationError if there is none."""
        self._begin_event()
        if self._in_treatment is None:
            raise SimulationError("no pokemon in treatment")
        return PokemonInfo(self._in_treatment.pokemon_name, self._in_treatment.trainer_name)

    def guess_level(self, level: int) -> Attempt:
        """Guess the level of the pokemon in treatment with the current difficulty.

        A correct guess scores points and moves the next lowest level pokemon
        into treatment. Raises SimulationError if no pokemon is in treatment.
        """
        self._begin_event()
        patient = self._in_treatment
        if patient is None:
            raise SimulationError("no pokemon in treatment")
        difficulty = self._difficulty
        result = difficulty.verify(level, patient.level)
        correct = result == CORRECT_RESULT
        if correct:
            self._treat_lowest_level()
            self._points += difficulty.score(self._attempts)
            self._attempts = 0
            self._pokemon_attended += 1
        else:
            self._attempts += 1
        return Attempt(guessed_level=level, correct=correct, hint=difficulty.hint(result))

    def add_difficulty(self, difficulty: Difficulty) -> int:
        """Register a new difficulty and return its id.

        Raises SimulationError if the difficulty is incomplete or its name
        is already taken.
        """
        self._begin_event()
        try:
            return self._difficulties.add(difficulty)
        except ValueError as error:
            raise SimulationError(str(error)) from error

    def select_difficulty(self, difficulty_id: int) -> DifficultyInfo:
        """Put the difficulty with this id in use; raise SimulationError if unknown."""
        self._begin_event()
        try:
            difficulty = self._difficulties.get(difficulty_id)
        except KeyError:
            raise SimulationError(f"no difficulty with id {difficulty_id}") from None
        self._difficulty = difficulty
        self._difficulty_id = difficulty_id
        return DifficultyInfo(difficulty_id, difficulty.name, True)

    def difficulty_info(self, difficulty_id: int) -> DifficultyInfo:
        """Describe the difficulty with this id; raise SimulationError if unknown."""
        self._begin_event()
        try:
            difficulty = self._difficulties.get(difficulty_id)
        except KeyError:
            raise SimulationError(f"no difficulty with id {difficulty_id}") from None
        return DifficultyInfo(difficulty_id, difficulty.name, difficulty_id == self._difficulty_id)

    def finish(self) -> None:
        """End the simulation; raise SimulationError if it had already ended."""
        self._begin_event()
        self._running = False