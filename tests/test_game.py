import io
from unittest import mock

import pytest

from pokehospital.difficulties import CORRECT_HINT
from pokehospital.game import (
    Game,
    error_message,
    main,
    nightmare_hint,
    nightmare_score,
    success_message,
    title,
    ultra_nightmare_hint,
    ultra_nightmare_score,
)
from pokehospital.hospital import Hospital


def make_hospital():
    hospital = Hospital()
    hospital.add_record("1;ash;pikachu;10;charmander;20")
    return hospital


def play(commands, hospital=None):
    out = io.StringIO()
    game = Game(hospital or make_hospital(), io.StringIO(commands), out)
    game.run()
    return game, out.getvalue()


def test_title_format():
    assert title("Menu") == "\x1b[38;5;0m\x1b[48;5;42m\x1b[1m Menu \x1b[0m\n"


def test_messages_contain_prompt_and_text():
    assert success_message("Correcto", "bien").endswith("Correcto\x1b[0m: bien\n")
    assert error_message("Incorrecto", "mal").endswith("Incorrecto\x1b[0m: mal\n")
    assert success_message("a", "b") != error_message("a", "b")


def test_nightmare_hints():
    assert nightmare_hint(0) == "Adivinaste Crack"
    assert nightmare_hint(3) == "No Adivinaste Crack"
    assert nightmare_hint(-3) == "No Adivinaste Crack"


def test_nightmare_score_decreases_with_attempts():
    assert nightmare_score(1) == 101
    assert nightmare_score(0) == nightmare_score(1)
    assert nightmare_score(2) < nightmare_score(1)


def test_ultra_nightmare_score_is_constant():
    assert ultra_nightmare_score(5) == 100
    assert ultra_nightmare_score(1) == ultra_nightmare_score(7)


def test_ultra_nightmare_hint_correct():
    assert ultra_nightmare_hint(0) == CORRECT_HINT


@pytest.mark.parametrize(
    "pick, expected",
    [(0, "Diego Eterno"), (1, "F"), (2, "Casi"), (3, "Grande Boca"), (4, "Grande Boca")],
)
def test_ultra_nightmare_hint_random(pick, expected):
    with mock.patch("random.randrange", return_value=pick):
        assert ultra_nightmare_hint(12) == expected


def test_game_adds_extra_difficulties():
    game = Game(make_hospital(), io.StringIO(), io.StringIO())
    assert game.simulator.difficulty_info(3).name == "Nightmare"
    assert game.simulator.difficulty_info(4).name == "Ultra Nightmare"


def test_quit_stops_game_and_shows_menu():
    game, output = play("q\n")
    assert game.playing is False
    assert "[q] Salir" in output


def test_end_of_input_ends_game():
    game, _ = play("")
    assert game.playing is False


def test_command_is_case_insensitive_and_ignores_spaces():
    game, _ = play("   Q\n")
    assert game.playing is False


def test_unknown_command_is_ignored():
    out = io.StringIO()
    game = Game(make_hospital(), io.StringIO(), out)
    game.execute("z")
    assert game.playing is True
    assert out.getvalue() == ""


def test_guess_flow():
    game, output = play("p\na\n5\n10\nq\n")
    assert error_message("Incorrecto", "Te quedaste corto por entre 5 y 10 niveles") in output
    assert success_message("Correcto", "Adivinaste Crack") in output
    assert game.simulator.statistics().pokemon_attended == 1


def test_guess_without_pokemon_returns():
    game, output = play("a\n5\nq\n")
    assert "Correcto" not in output
    assert game.playing is False


def test_show_pokemon_in_treatment():
    _, output = play("p\ni\nq\n")
    assert " • Pokemon: pikachu\n" in output
    assert " • Entrenador: ash\n" in output


def test_show_pokemon_in_treatment_without_pokemon():
    _, output = play("i\nq\n")
    assert " • Pokemon: (null)\n" in output


def test_show_statistics():
    _, output = play("p\ne\nq\n")
    assert " • Entrenadores Totales: 1\n" in output
    assert " • Entrenadores Atendidos: 1\n" in output


def test_select_difficulty():
    game, output = play("d\n3\nq\n")
    assert success_message("Dificultad Seleccionada", "Nightmare") in output
    assert game.simulator.difficulty_info(3).in_use is True
    assert game.simulator.difficulty_info(0).in_use is False


def test_select_unknown_difficulty():
    game, output = play("d\n69\nq\n")
    assert "Dificultad Seleccionada" not in output
    assert game.simulator.difficulty_info(0).in_use is True


def test_show_difficulties():
    _, output = play("o\nq\n")
    assert "[0] Facil (en uso)" in output
    assert " • [1] Media\n" in output
    assert " • [4] Ultra Nightmare\n" in output


def test_help_lists_commands():
    _, output = play("h\nq\n")
    assert title("Ayuda") in output
    assert "[o] Mostrar Dificultades Disponibles:" in output


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "h.hospital"
    path.write_text("1;ash;pikachu;10\n", encoding="utf-8")
    with mock.patch("sys.stdin", io.StringIO("e\nq\n")):
        assert main([str(path)]) == 0
    assert " • Pokemon Totales: 1\n" in capsys.readouterr().out


def test_main_with_missing_file(tmp_path, capsys):
    with mock.patch("sys.stdin", io.StringIO("e\nq\n")):
        assert main([str(tmp_path / "missing.hospital")]) == 0
    assert " • Pokemon Totales: 0\n" in capsys.readouterr().out