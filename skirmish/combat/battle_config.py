"""
Tunable probabilities for a battle.
"""

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import (
    MONSTER_HIT_PROBABILITY,
    MONSTER_HIT_WHILE_PLAYER_DODGE_PROBABILITY,
    PLAYER_HIT_PROBABILITY,
)


class BattleConfig(BaseModel):
    """
    The hit chances used when resolving attacks.

    Each probability is compared against a uniform draw in [0, 1): an attack
    lands when the draw is strictly below it.
    """

    model_config = ConfigDict(frozen=True)

    player_hit_probability: float = Field(
        default=PLAYER_HIT_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Chance that a player's attack lands.",
    )
    monster_hit_probability: float = Field(
        default=MONSTER_HIT_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Chance that a monster's attack lands on a player standing still.",
    )
    monster_hit_while_dodging_probability: float = Field(
        default=MONSTER_HIT_WHILE_PLAYER_DODGE_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Chance that a monster's attack lands on a dodging player.",
    )

    def monster_hit_chance(self, dodging: bool) -> float:
        if dodging:
            return self.monster_hit_while_dodging_probability
        return self.monster_hit_probability
