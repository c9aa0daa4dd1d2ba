import pytest

from pokehospital.difficulties import Difficulty, easy_score, verify_level
from pokehospital.hospital import Hospital
from pokehospital.simulator import SimulationError, Simulator


def make_hospital():
    hospital = Hospital()
    hospital.add_record("1;ash;pikachu;30;charizard;12;squirtle;45")
    hospital.add_record("2;misty;staryu;8;psyduck;50")
    hospital.add_record("3;brock;onix;20")
    return hospital


def new_score(attempts):
    return 100 // attempts + 1


def new_hint(result):
    return "Adivinaste Crack" if result == 0 else "No Adivinaste Crack"


def test_creating_without_hospital_fails():
    with pytest.raises(ValueError):
        Simulator(None)


def test_statistics_of_empty_hospital():
    stats = Simulator(Hospital()).statistics()
    assert stats.events_simulated == 1
    assert stats.trainers_total == 0
    assert stats.pokemon_total == 0


def test_statistics_match_hospital_counts():
    hospital = make_hospital()
    stats = Simulator(hospital).statistics()
    assert stats.trainers_total == hospital.trainer_count()
    assert stats.pokemon_total == hospital.pokemon_count()


def test_failed_events_still_count():
    simulator = Simulator(Hospital())
    with pytest.raises(SimulationError):
        simulator.attend_next_trainer()
    assert simulator.statistics().events_simulated == 2


def test_finish_stops_simulation():
    simulator = Simulator(Hospital())
    simulator.finish()
    with pytest.raises(SimulationError):
        simulator.finish()
    with pytest.raises(SimulationError):
        simulator.attend_next_trainer()
    with pytest.raises(SimulationError):
        simulator.statistics()


def test_attending_empty_hospital_fails():
    with pytest.raises(SimulationError):
        Simulator(Hospital()).attend_next_trainer()


def test_attending_all_trainers():
    hospital = make_hospital()
    simulator = Simulator(hospital)
    assert simulator.attend_next_trainer().name == "ash"
    simulator.attend_next_trainer()
    assert simulator.statistics().trainers_attended == 2
    simulator.attend_next_trainer()
    stats = simulator.statistics()
    assert stats.pokemon_waiting == hospital.pokemon_count() - 1
    with pytest.raises(SimulationError):
        simulator.attend_next_trainer()
    assert simulator.statistics().trainers_attended == 3


def test_no_pokemon_in_treatment_fails():
    with pytest.raises(SimulationError):
        Simulator(Hospital()).pokemon_in_treatment()


def test_pokemon_are_treated_by_lowest_level():
    simulator = Simulator(make_hospital())
    simulator.attend_next_trainer()
    info = simulator.pokemon_in_treatment()
    assert info.pokemon_name == "charizard"
    assert info.trainer_name == "ash"

    simulator.attend_next_trainer()
    assert simulator.pokemon_in_treatment().pokemon_name == "charizard"

    assert simulator.guess_level(12).correct
    info = simulator.pokemon_in_treatment()
    assert info.pokemon_name == "staryu"
    assert info.trainer_name == "misty"

    simulator.guess_level(8)
    assert simulator.pokemon_in_treatment().pokemon_name == "pikachu"


def test_guessing_without_pokemon_fails():
    with pytest.raises(SimulationError):
        Simulator(Hospital()).guess_level(10)


def test_wrong_then_right_guess():
    simulator = Simulator(make_hospital())
    simulator.attend_next_trainer()

    attempt = simulator.guess_level(0)
    assert attempt.correct is False
    assert attempt.hint == "Te quedaste corto por entre 10 y 25 niveles"
    assert attempt.guessed_level == 0

    attempt = simulator.guess_level(12)
    assert attempt.correct is True
    assert attempt.hint == "Adivinaste Crack"

    stats = simulator.statistics()
    assert stats.pokemon_attended == 1
    assert stats.points == easy_score(1)


def test_guessing_every_pokemon():
    simulator = Simulator(make_hospital())
    simulator.attend_next_trainer()
    for level in (12, 30, 45):
        assert simulator.guess_level(level).correct
    with pytest.raises(SimulationError):
        simulator.guess_level(69)
    stats = simulator.statistics()
    assert stats.pokemon_attended == 3
    assert stats.pokemon_waiting == 0


def test_points_reset_attempts_after_success():
    simulator = Simulator(make_hospital())
    simulator.attend_next_trainer()
    simulator.guess_level(1)
    simulator.guess_level(12)
    simulator.guess_level(30)
    assert simulator.statistics().points == easy_score(1) + easy_score(0)


def test_default_difficulties():
    simulator = Simulator(make_hospital())
    info = simulator.difficulty_info(0)
    assert info.name == "Facil"
    assert info.in_use is True
    assert simulator.difficulty_info(1).name == "Media"
    assert simulator.difficulty_info(2).name == "Dificil"
    with pytest.raises(SimulationError):
        simulator.difficulty_info(69)


def test_selecting_difficulty():
    simulator = Simulator(make_hospital())
    with pytest.raises(SimulationError):
        simulator.select_difficulty(69)
    simulator.select_difficulty(1)
    assert simulator.difficulty_info(1).in_use is True
    assert simulator.difficulty_info(0).in_use is False


def test_selected_difficulty_changes_hints():
    simulator = Simulator(make_hospital())
    simulator.attend_next_trainer()
    simulator.select_difficulty(1)
    assert simulator.guess_level(10).hint == "Te quedaste corto por poco"
    simulator.select_difficulty(2)
    assert simulator.guess_level(10).hint == "Caliente"


def test_adding_difficulties():
    simulator = Simulator(make_hospital())
    with pytest.raises(SimulationError):
        simulator.add_difficulty(None)
    with pytest.raises(SimulationError):
        simulator.add_difficulty(Difficulty(None, None, None, None))
    with pytest.raises(SimulationError):
        simulator.add_difficulty(Difficulty("Facil", new_score, verify_level, new_hint))

    new_id = simulator.add_difficulty(
        Difficulty("Nueva Dificultad", new_score, verify_level, new_hint)
    )
    assert new_id == 3
    info = simulator.difficulty_info(3)
    assert info.name == "Nueva Dificultad"
    assert info.in_use is False


def test_added_difficulty_can_be_used():
    simulator = Simulator(make_hospital())
    simulator.add_difficulty(Difficulty("Nueva Dificultad", new_score, verify_level, new_hint))
    simulator.select_difficulty(3)
    simulator.attend_next_trainer()
    assert simulator.guess_level(1).hint == "No Adivinaste Crack"
    assert simulator.guess_level(12).correct
    assert simulator.statistics().points == new_score(1)