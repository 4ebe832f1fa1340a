"""
Content repository holding monster templates and live player state.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_debug, log_warning
from pydantic import ValidationError

from skirmish.core.error_handling import BattleConfigurationError
from skirmish.entities.monster import MonsterTemplate
from skirmish.entities.player import Player, PlayerTemplate


class ContentRepository:
    """
    One-stop registry for monster templates and the players currently in the
    game, with by-id access.
    """

    monster_templates: dict[str, MonsterTemplate]
    players: dict[str, Player]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing data files to load. When omitted the
                repository starts empty and is filled programmatically.

        """
        self.monster_templates = {}
        self.players = {}
        if data_dir:
            self.reload(data_dir)

    def reload(self, root: Path) -> None:
        """
        (Re)load monster templates and players from disk.

        Args:
            root (Path):
                The directory containing `monsters.json` and `players.json`.

        """
        self.monster_templates = _load_json_file(
            root / "monsters.json",
            self._load_monster_templates,
            "monster templates",
        )
        self.players = _load_json_file(
            root / "players.json",
            self._load_players,
            "players",
        )

    def add_monster_template(self, template: MonsterTemplate) -> None:
        self.monster_templates[template.id] = template

    def get_monster_template(self, template_id: str) -> MonsterTemplate | None:
        """Get a monster template by id, or None if not found."""
        template = self.monster_templates.get(template_id)
        if template is None:
            log_warning(
                f"Monster template '{template_id}' not found in ContentRepository.",
                {"template_id": template_id},
            )
        return template

    def add_player(self, player: Player) -> None:
        self.players[player.id] = player

    def get_player(self, player_id: str) -> Player | None:
        """Get a player by id, or None if not found."""
        player = self.players.get(player_id)
        if player is None:
            log_warning(
                f"Player '{player_id}' not found in ContentRepository.",
                {"player_id": player_id},
            )
        return player

    def remove_player(self, player_id: str) -> Player | None:
        return self.players.pop(player_id, None)

    def living_players(self) -> list[Player]:
        """Returns the players that still have hit points, in insertion order."""
        return [player for player in self.players.values() if player.is_alive()]

    @staticmethod
    def _load_monster_templates(data: list[dict]) -> dict[str, MonsterTemplate]:
        """
        Load monster templates from JSON data.

        Args:
            data (list[dict]): List of monster template data dictionaries.

        Returns:
            dict[str, MonsterTemplate]: Dictionary mapping ids to templates.

        Raises:
            ValueError: If duplicate template ids are found.

        """
        templates: dict[str, MonsterTemplate] = {}
        for template_data in data:
            template = MonsterTemplate.model_validate(template_data)
            if template.id in templates:
                raise ValueError(f"Duplicate monster id: {template.id}")
            templates[template.id] = template
        return templates

    @staticmethod
    def _load_players(data: list[dict]) -> dict[str, Player]:
        """
        Load players from JSON data.

        Raises:
            ValueError: If duplicate player ids are found.

        """
        players: dict[str, Player] = {}
        for player_data in data:
            player = Player.from_template(PlayerTemplate.model_validate(player_data))
            if player.id in players:
                raise ValueError(f"Duplicate player id: {player.id}")
            players[player.id] = player
        return players


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(
            f"Loading {description} using {loader_func.__name__}...",
            {"filepath": str(filepath)},
        )
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValidationError, ValueError) as e:
        raise BattleConfigurationError(
            f"File {filepath} raised an error: {e}", {"filepath": str(filepath)}
        ) from e
