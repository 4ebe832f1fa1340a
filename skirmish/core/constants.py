"""
Constants and enumerations for the battle engine.

Defines the default hit probabilities, the default strike-back interval, the
kinds of commands a player can issue, and the location of the bundled data
files.
"""

from enum import Enum
from pathlib import Path

# Chance that a player's attack lands.
PLAYER_HIT_PROBABILITY = 0.9
# Chance that a monster's attack lands on a player standing still.
MONSTER_HIT_PROBABILITY = 0.9
# Chance that a monster's attack lands on a dodging player.
MONSTER_HIT_WHILE_PLAYER_DODGE_PROBABILITY = 0.1

# Number of player actions between monster retaliations.
DEFAULT_STRIKE_BACK_INTERVAL = 1

# Hit points removed from an entity by a single landed blow.
DEFAULT_WOUND_AMOUNT = 1

# Directory holding the bundled JSON data files.
DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CommandKind(NiceEnum):
    """Defines the kinds of command a player can issue during a battle."""

    ATTACK = "ATTACK"
    DODGE = "DODGE"
