"""
Core system module for the battle engine.

Contains the fundamental components shared by the rest of the package: game
constants, the error hierarchy, console helpers and the command matcher. The
content repository lives in `skirmish.core.content` and is imported from there,
since it depends on the entity models.
"""

from .commands import Command, CommandMatcher, create_regex
from .constants import (
    DATA_DIR,
    DEFAULT_STRIKE_BACK_INTERVAL,
    DEFAULT_WOUND_AMOUNT,
    MONSTER_HIT_PROBABILITY,
    MONSTER_HIT_WHILE_PLAYER_DODGE_PROBABILITY,
    PLAYER_HIT_PROBABILITY,
    CommandKind,
)
from .error_handling import (
    BattleConfigurationError,
    BattlePreconditionError,
    GameException,
)
from .utils import cprint, crule

__all__ = [
    # Import from commands.py
    "Command",
    "CommandMatcher",
    "create_regex",
    # Import from constants.py
    "DATA_DIR",
    "DEFAULT_STRIKE_BACK_INTERVAL",
    "DEFAULT_WOUND_AMOUNT",
    "MONSTER_HIT_PROBABILITY",
    "MONSTER_HIT_WHILE_PLAYER_DODGE_PROBABILITY",
    "PLAYER_HIT_PROBABILITY",
    "CommandKind",
    # Import from error_handling.py
    "BattleConfigurationError",
    "BattlePreconditionError",
    "GameException",
    # Import from utils.py
    "cprint",
    "crule",
]
