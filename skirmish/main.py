"""
Main entry point for the battle engine.

Loads the bundled monsters and players and runs a battle on the console.

Usage:
    skirmish [MONSTER=COUNT ...] [--interval N] [--data-dir DIR] [--seed N]
"""

import argparse
import logging
import random
from pathlib import Path

from skirmish.combat.battle import Battle
from skirmish.core.commands import CommandMatcher
from skirmish.core.constants import DATA_DIR
from skirmish.core.content import ContentRepository
from skirmish.core.error_handling import BattleConfigurationError
from skirmish.core.logging import setup_logging
from skirmish.core.utils import cprint, crule
from skirmish.ui.cli_interface import BattleConsole

DEFAULT_ENCOUNTER = {"goblin": 2, "kobold": 1}


def parse_encounter(entries: list[str]) -> dict[str, int]:
    """
    Parses "template=count" pairs; a bare template id means one monster.

    Raises:
        BattleConfigurationError: If a count is not a positive integer.

    """
    encounter: dict[str, int] = {}
    for entry in entries:
        template_id, _, count = entry.partition("=")
        try:
            amount = int(count) if count else 1
        except ValueError as e:
            raise BattleConfigurationError(f"Invalid monster count in '{entry}'") from e
        if amount < 1:
            raise BattleConfigurationError(f"Invalid monster count in '{entry}'")
        encounter[template_id] = encounter.get(template_id, 0) + amount
    return encounter


def load_matcher(data_dir: Path) -> CommandMatcher:
    """
    Builds the command matcher for a data directory.

    Uses the directory's own `commands.json` when it has one, and the bundled
    command words otherwise.

    """
    commands_file = data_dir / "commands.json"
    if commands_file.is_file():
        return CommandMatcher.from_file(commands_file)
    return CommandMatcher.default()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fight a text battle.")
    parser.add_argument("monsters", nargs="*", help="monsters as TEMPLATE=COUNT")
    parser.add_argument("--interval", type=int, default=None, help="actions between monster strikes")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help="directory with the JSON data")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible battles")
    parser.add_argument("--verbose", action="store_true", help="show debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    crule("Skirmish", style="bold green")
    try:
        repository = ContentRepository(args.data_dir)
        encounter = parse_encounter(args.monsters) if args.monsters else DEFAULT_ENCOUNTER
        battle = Battle(
            repository,
            encounter,
            args.interval,
            matcher=load_matcher(args.data_dir),
            rng=random.Random(args.seed),
        )
    except BattleConfigurationError as e:
        cprint(f"Cannot start the battle: {e}", style="bold red", markup=False)
        return 2
    cprint(
        "Type 'attack <enemy>' to strike, 'dodge' to evade the next blow, "
        "'look' to see the enemies and 'quit' to flee.",
        style="bold blue",
    )
    won = BattleConsole(battle, repository).run()
    return 0 if won else 1


if __name__ == "__main__":
    raise SystemExit(main())
