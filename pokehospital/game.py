"""Interactive level guessing game played over a hospital simulation."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from .difficulties import CORRECT_HINT, Difficulty, verify_level
from .hospital import Hospital
from .simulator import SimulationError, Simulator

INITIAL_SCORE = 100
DEFAULT_HOSPITAL_FILE = "ejemplos/varios_entrenadores.hospital"
MISSING = "(null)"

_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

_INTEGER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")

_ULTRA_NIGHTMARE_HINTS = ("Diego Eterno", "F", "Casi")
_ULTRA_NIGHTMARE_FALLBACK = "Grande Boca"

_MENU = (
    (" • [e] Mostrar Estadisticas"),
    (" • [p] Atender Proximo Entrenador"),
    (" • [i] Mostrar Pokemon en Tratamiento"),
    (" • [a] Adivinar Nivel Pokemon"),
    (" • [o] Mostrar Dificultades Disponibles"),
    (" • [d] Cambiar Dificultad"),
    (" • [h] Ayuda"),
    (" • [q] Salir"),
)

_HELP = (
    ("[e] Mostrar Estadisticas", "Echa un vistazo al estado actual de la partida y los datos sobre entrenadores y pokemones disponibles."),
    ("[p] Atender Proximo Entrenador", "Agrega los pokemones del siguiente entrenador en espera al consultorio."),
    ("[i] Mostrar Pokemon en Tratamiento", "Muestra los datos del pokemon que esta en tratamiento actualmente."),
    ("[a] Adivinar Nivel Pokemon", "Intenta ver si puedes adivinar el nivel del pokemon en tratamiento con la dificultad actual."),
    ("[o] Mostrar Dificultades Disponibles", "Muestra un listado de todas las dificultades disponibles con sus IDs, y cual es la dificultad activa."),
    ("[d] Cambiar Dificultad", "¿Te parece muy facil la dificultad actual? Prueba a ver si aun puedes con otras dificultades."),
    ("[h] Ayuda", "Muestra este menu de ayuda."),
    ("[q] Salir", "Termina el juego."),
)


def nightmare_score(attempts: int) -> int:
    """Initial score divided by the failed attempts, plus one.

    No failed attempts counts as one.
    """
    return INITIAL_SCORE // max(attempts, 1) + 1


def nightmare_hint(result: int) -> str:
    """Tell only whether the guess was right."""
    if result == 0:
        return CORRECT_HINT
    return "No Adivinaste Crack"


def ultra_nightmare_score(attempts: int) -> int:
    """Initial score minus attempts over attempts, plus one.

    No failed attempts counts as one.
    """
    attempts = max(attempts, 1)
    return INITIAL_SCORE - attempts // attempts + 1


def ultra_nightmare_hint(result: int) -> str:
    """A random, unhelpful hint for a wrong guess."""
    if result == 0:
        return CORRECT_HINT
    pick = random.randrange(5)
    if pick < len(_ULTRA_NIGHTMARE_HINTS):
        return _ULTRA_NIGHTMARE_HINTS[pick]
    return _ULTRA_NIGHTMARE_FALLBACK


def title(text: str) -> str:
    """A highlighted title line."""
    return f"\x1b[38;5;0m\x1b[48;5;42m{_BOLD} {text} {_RESET}\n"


def success_message(prompt: str, message: str) -> str:
    """A line reporting a success."""
    return f"\x1b[38;5;42m{_BOLD}{prompt}{_RESET}: {message}\n"


def error_message(prompt: str, message: str) -> str:
    """A line reporting a failure."""
    return f"\x1b[38;5;9m{_BOLD}{prompt}{_RESET}: {message}\n"


def _input_prompt(prompt: str) -> str:
    return f"{_BOLD}{prompt}:{_RESET} "


def _parse_integer(text: str) -> Optional[int]:
    """Read a leading integer, detecting hex (0x) and octal (0) prefixes."""
    match = _INTEGER.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


class Game:
    """The interactive game: reads commands from ``stdin`` and writes to ``stdout``.

    On start the simulator gets two extra difficulties, "Nightmare" and
    "Ultra Nightmare".
    """

    def __init__(
        self,
        hospital: Hospital,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        if hospital is None:
            raise ValueError("a hospital is required")
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.simulator = Simulator(hospital)
        self.playing = True
        self.simulator.add_difficulty(
            Difficulty("Nightmare", nightmare_score, verify_level, nightmare_hint)
        )
        self.simulator.add_difficulty(
            Difficulty("Ultra Nightmare", ultra_nightmare_score, verify_level, ultra_nightmare_hint)
        )
        self._commands: Dict[str, Callable[[], None]] = {
            "e": self.show_statistics,
            "p": self._attend_next_trainer,
            "i": self.show_pokemon_in_treatment,
            "a": self.guess_level,
            "d": self.select_difficulty,
            "o": self.show_difficulties,
            "h": self.show_help,
            "q": self.quit,
        }

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_command(self) -> Optional[str]:
        line = self.stdin.readline()
        if not line:
            return None
        return line.lstrip(" ")[:1].lower()

    def _read_integer(self, prompt: str) -> Optional[int]:
        """Prompt until an integer is entered; None at end of input."""
        while True:
            self._write(_input_prompt(prompt))
            line = self.stdin.readline()
            while line and not line.strip():
                line = self.stdin.readline()
            if not line:
                return None
            value = _parse_integer(line)
            if value is not None:
                return value

    def run(self) -> None:
        """Show the menu and execute commands until the player quits or input ends."""
        self.show_menu()
        while self.playing:
            self._write("> ")
            command = self._read_command()
            if command is None:
                self.quit()
                break
            self.execute(command)

    def execute(self, command: str) -> None:
        """Execute one command letter; unknown commands are ignored."""
        action = self._commands.get(command)
        if action is not None:
            action()

    def show_menu(self) -> None:
        self._write(title("Menu") + "".join(f"{line}\n" for line in _MENU))

    def show_help(self) -> None:
        lines: List[str] = [title("Ayuda")]
        lines.extend(f" • {_BOLD}{name}:{_RESET} {text}\n" for name, text in _HELP)
        self._write("".join(lines))

    def show_statistics(self) -> None:
        """Show the simulation's counters; nothing is shown on error."""
        try:
            stats = self.simulator.statistics()
        except SimulationError:
            return
        rows = (
            ("Entrenadores Atendidos", stats.trainers_attended),
            ("Entrenadores Totales", stats.trainers_total),
            ("Pokemon Atendidos", stats.pokemon_attended),
            ("Pokemon En Espera", stats.pokemon_waiting),
            ("Pokemon Totales", stats.pokemon_total),
            ("Puntos", stats.points),
            ("Cantidad Eventos Simulados", stats.events_simulated),
        )
        self._write(title("Estadisticas") + "".join(f" • {k}: {v}\n" for k, v in rows))

    def _attend_next_trainer(self) -> None:
        try:
            self.simulator.attend_next_trainer()
        except SimulationError:
            pass

    def show_pokemon_in_treatment(self) -> None:
        try:
            info = self.simulator.pokemon_in_treatment()
            pokemon, trainer = info.pokemon_name, info.trainer_name
        except SimulationError:
            pokemon = trainer = MISSING
        self._write(
            title("Pokemon en Tratamiento")
            + f" • Pokemon: {pokemon}\n"
            + f" • Entrenador: {trainer}\n"
        )

    def guess_level(self) -> None:
        """Ask for levels until the pokemon in treatment is guessed."""
        while True:
            level = self._read_integer("Nivel Pokemon")
            if level is None:
                return
            try:
                attempt = self.simulator.guess_level(level)
            except SimulationError:
                return
            if attempt.correct:
                self._write(success_message("Correcto", attempt.hint))
                return
            self._write(error_message("Incorrecto", attempt.hint))

    def select_difficulty(self) -> None:
        difficulty_id = self._read_integer("ID Dificultad")
        if difficulty_id is None:
            return
        try:
            self.simulator.select_difficulty(difficulty_id)
            info = self.simulator.difficulty_info(difficulty_id)
        except SimulationError:
            return
        self._write(success_message("Dificultad Seleccionada", info.name))

    def show_difficulties(self) -> None:
        """List every difficulty by id, marking the one in use."""
        difficulty_id = 0
        try:
            info = self.simulator.difficulty_info(difficulty_id)
        except SimulationError:
            return
        self._write(title("Dificultades"))
        while True:
            if info.in_use:
                self._write(
                    f" • \x1b[38;5;42m{_BOLD}\x1b[4m[{info.id}] {info.name} (en uso){_RESET}\n"
                )
            else:
                self._write(f" • [{info.id}] {info.name}\n")
            difficulty_id += 1
            try:
                info = self.simulator.difficulty_info(difficulty_id)
            except SimulationError:
                return

    def quit(self) -> None:
        self.playing = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Guess the levels of the hospital's pokemon.")
    parser.add_argument("file", nargs="?", default=DEFAULT_HOSPITAL_FILE, help="hospital file to load")
    args = parser.parse_args(argv)

    hospital = Hospital()
    try:
        hospital.read_file(args.file)
    except OSError:
        pass

    random.seed()
    Game(hospital, sys.stdin, sys.stdout).run()
    return 0