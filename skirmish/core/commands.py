"""
Command matching for free-text player input.

Word lists loaded from JSON are compiled into two regular expressions: one for
attacks, capturing the name of the enemy being attacked, and one for dodges.
"""

import json
import re
from pathlib import Path

from pydantic import BaseModel, Field

from skirmish.core.constants import DATA_DIR, CommandKind
from skirmish.core.error_handling import (
    BattleConfigurationError,
    require_non_empty_string,
)


class Command(BaseModel):
    """A player command recognised in free-text input."""

    kind: CommandKind = Field(
        description="Whether the player is attacking or dodging.",
    )
    target: str | None = Field(
        default=None,
        description="The free-text name of the enemy being attacked, if any.",
    )


def create_regex(words: list[str], capture: bool) -> re.Pattern[str]:
    """
    Compiles a list of command words into a case-insensitive pattern.

    Args:
        words (list[str]):
            The words that trigger the command (e.g. "attack", "hit").
        capture (bool):
            When True the pattern requires and captures a trailing argument.

    Returns:
        re.Pattern[str]:
            The compiled pattern. Longer words are tried first so that
            multi-word commands win over their prefixes.

    Raises:
        BattleConfigurationError: If the list is empty or holds blank words.

    """
    if not words:
        raise BattleConfigurationError("Command word list cannot be empty")
    cleaned = [require_non_empty_string(word, "command word") for word in words]
    alternatives = "|".join(
        r"\s+".join(re.escape(part) for part in word.split())
        for word in sorted(cleaned, key=len, reverse=True)
    )
    if capture:
        return re.compile(rf"^\s*(?:{alternatives})\s+(.+?)\s*$", re.IGNORECASE)
    return re.compile(rf"^\s*(?:{alternatives})\s*$", re.IGNORECASE)


class CommandMatcher:
    """Turns free text into attack and dodge commands."""

    def __init__(self, attack_words: list[str], dodge_words: list[str]) -> None:
        self.attack_regex = create_regex(attack_words, True)
        self.dodge_regex = create_regex(dodge_words, False)

    @classmethod
    def from_file(cls, filepath: Path) -> "CommandMatcher":
        """
        Builds a matcher from a JSON file with "attack" and "dodge" lists.

        Raises:
            BattleConfigurationError: If the file is missing or malformed.

        """
        try:
            with open(filepath, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise BattleConfigurationError(
                f"File {filepath} raised an error: {e}", {"filepath": str(filepath)}
            ) from e
        if not isinstance(data, dict) or "attack" not in data or "dodge" not in data:
            raise BattleConfigurationError(
                f"Expected 'attack' and 'dodge' word lists in {filepath}",
                {"filepath": str(filepath)},
            )
        return cls(data["attack"], data["dodge"])

    @classmethod
    def default(cls) -> "CommandMatcher":
        """Builds a matcher from the bundled command words."""
        return cls.from_file(DATA_DIR / "commands.json")

    def is_attack(self, text: str) -> bool:
        return self.attack_regex.match(text) is not None

    def is_dodge(self, text: str) -> bool:
        return self.dodge_regex.match(text) is not None

    def parse(self, text: str) -> Command | None:
        """
        Classifies a line of input.

        Attacks are checked before dodges, so a phrase matching both is an
        attack.

        Args:
            text (str): The raw player input.

        Returns:
            Command | None: The recognised command, or None if nothing matched.

        """
        match = self.attack_regex.match(text)
        if match:
            return Command(kind=CommandKind.ATTACK, target=match.group(1))
        if self.dodge_regex.match(text):
            return Command(kind=CommandKind.DODGE)
        return None
