"""
The monsters' wind-up state.

Before a monster strikes it spends one strike-back turn "looking at" its
target, which gives players a chance to react. The state is either `Unarmed`
(nobody is charging) or `WindingUp` (a monster is charging at a player).
"""

from dataclasses import dataclass

from skirmish.entities.monster import Monster


@dataclass(frozen=True)
class Unarmed:
    """No monster is charging an attack."""


@dataclass(frozen=True)
class WindingUp:
    """A monster is charging an attack at a player."""

    monster: Monster
    target_id: str


WindupState = Unarmed | WindingUp

UNARMED = Unarmed()
