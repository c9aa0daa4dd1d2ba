# pokehospital

A small Pokemon hospital simulator with an interactive terminal game on top.

Trainers arrive at the hospital with their Pokemon. When a trainer is
attended, all of their Pokemon move into reception, where they wait in order
of level: the lowest-level Pokemon is always the next one taken into
treatment. To finish treating a Pokemon you have to guess its level. Each
difficulty gives different hints after a wrong guess and scores the number of
failed attempts differently.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Hospital files

A hospital file has one trainer per line, with fields separated by `;`:

```
<trainer id>;<trainer name>;<pokemon>;<level>;<pokemon>;<level>;...
```

For example:

```
1;lucas;charizard;43;toxicroak;20;rampardos;10
2;ash;pikachu;85
```

Trainers are attended in the order they appear in the file. Ids and levels
are read as a leading integer (anything after the digits is ignored, no digits
gives 0). Reading stops quietly at the first line that has no trainer name or
a Pokemon without a level; the lines before it stay loaded.

## Playing

```
pokehospital path/to/trainers.hospital
```

Without an argument the game loads `ejemplos/varios_entrenadores.hospital`
from the current directory. If the file cannot be opened the game starts with
an empty hospital.

Commands are single letters typed at the `>` prompt (leading spaces and case
are ignored; unknown letters do nothing):

| Key | Action |
| --- | ------ |
| `e` | Show statistics |
| `p` | Attend the next trainer |
| `i` | Show the Pokemon in treatment (`(null)` if there is none) |
| `a` | Guess the level of the Pokemon in treatment, asking until it is right |
| `o` | List the available difficulties and the one in use |
| `d` | Change difficulty by ID |
| `h` | Help |
| `q` | Quit |

The game also ends when input runs out. Numbers may be written in decimal,
hexadecimal (`0x1f`) or octal (`017`).

Five difficulties are available in the game: `Facil` (0), `Media` (1),
`Dificil` (2), `Nightmare` (3) and `Ultra Nightmare` (4). `Facil` is selected
at the start.

## Using the library

```python
from pokehospital.hospital import Hospital
from pokehospital.simulator import Simulator

hospital = Hospital()
hospital.read_file("trainers.hospital")

simulator = Simulator(hospital)
simulator.attend_next_trainer()

info = simulator.pokemon_in_treatment()
print(info.pokemon_name, info.trainer_name)

attempt = simulator.guess_level(10)
print(attempt.correct, attempt.hint)

print(simulator.statistics())
```

`Hospital.add_record` adds a single line; `trainer_count`, `pokemon_count`,
`trainers`, `pokemon_by_arrival` and `for_each_pokemon` (alphabetical order)
inspect what was loaded.

Every simulator call counts as an event in `Statistics.events_simulated`,
whether it succeeds or not. Operations the simulator cannot carry out, such as
attending a trainer when none is left waiting, asking for or guessing the
Pokemon in treatment when there is none, selecting an unknown difficulty, or
any call after `finish()`, raise `SimulationError`.

Custom difficulties can be added with `Simulator.add_difficulty`, passing a
`pokehospital.difficulties.Difficulty` (a name plus `score`, `verify` and
`hint` functions); names must be unique, and the new difficulty gets the next
free ID, which is returned. `Simulator.difficulty_info` and
`Simulator.select_difficulty` look difficulties up by that ID.

The building blocks are usable on their own as well:
`pokehospital.heap.MinHeap`, `pokehospital.bst.BinarySearchTree` (with
`pokehospital.bst.Traversal` orders), `pokehospital.difficulties.DifficultyRegistry`
and `pokehospital.parsing.split`.

## What it does not do

The package only reads hospital files; it cannot write a hospital back to a
file. Game progress and scores are not saved between runs.