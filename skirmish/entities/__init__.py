"""
Entities taking part in a battle: monsters and players.
"""

from .monster import Monster, MonsterTemplate
from .player import Player, PlayerTemplate

__all__ = [
    "Monster",
    "MonsterTemplate",
    "Player",
    "PlayerTemplate",
]
