"""
Tests for the console front end and the entry point helpers.
"""

import json

import pytest
from random_sources import AlwaysRandom
from skirmish.combat.battle import Battle
from skirmish.core.constants import DATA_DIR
from skirmish.core.error_handling import BattleConfigurationError
from skirmish.main import load_matcher, main, parse_encounter
from skirmish.ui.cli_interface import BattleConsole


def scripted_input(lines):
    remaining = list(lines)

    def read_line(prompt):
        return remaining.pop(0)

    return read_line


def test_console_plays_until_victory(repository, narration):
    battle = Battle(repository, {"goblin": 1}, 5, rng=AlwaysRandom(0.0))
    console = BattleConsole(
        battle,
        repository,
        read_line=scripted_input(["look", "wave", "attack goblin", "attack goblin"]),
        respond=narration.append,
    )
    assert console.run() is True
    assert "Goblin (HP: 2/2)" in narration
    assert "Try attacking an enemy by name, or dodging." in narration
    assert narration[-1] == "successfully hit Goblin. you killed Goblin!"


def test_console_quit_ends_the_battle(repository, narration):
    battle = Battle(repository, {"goblin": 1})
    console = BattleConsole(
        battle, repository, read_line=scripted_input(["quit"]), respond=narration.append
    )
    assert console.run() is False
    assert len(battle.monsters) == 1


def test_console_stops_when_party_falls(repository, alice, bob, narration):
    alice.hp = 0
    bob.hp = 0
    battle = Battle(repository, {"goblin": 1})
    console = BattleConsole(
        battle, repository, read_line=scripted_input([]), respond=narration.append
    )
    assert console.run() is False


def test_parse_encounter():
    assert parse_encounter(["goblin=2", "orc", "goblin"]) == {"goblin": 3, "orc": 1}


@pytest.mark.parametrize("entry", ["goblin=0", "goblin=many"])
def test_parse_encounter_rejects_bad_counts(entry):
    with pytest.raises(BattleConfigurationError):
        parse_encounter([entry])


def test_load_matcher_prefers_data_dir_commands(tmp_path):
    (tmp_path / "commands.json").write_text(
        json.dumps({"attack": ["smite"], "dodge": ["flinch"]}), encoding="utf-8"
    )
    matcher = load_matcher(tmp_path)
    assert matcher.is_attack("smite goblin")
    assert not matcher.is_attack("attack goblin")
    assert matcher.is_dodge("flinch")


def test_load_matcher_falls_back_to_bundled_commands(tmp_path):
    matcher = load_matcher(tmp_path)
    assert matcher.is_attack("attack goblin")


@pytest.mark.parametrize("monsters", [["dragon"], ["goblin=0"]])
def test_main_reports_bad_encounter(monsters):
    assert main([*monsters, "--data-dir", str(DATA_DIR)]) == 2


def test_main_reports_missing_data(tmp_path):
    assert main(["--data-dir", str(tmp_path)]) == 2
