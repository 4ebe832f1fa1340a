"""
Players and the templates they are created from.

Player state lives in the content repository; a battle looks players up by id
and mutates their hit points and dodge flag.
"""

from pydantic import BaseModel, Field

from skirmish.core.constants import DEFAULT_WOUND_AMOUNT


class PlayerTemplate(BaseModel):
    """Starting data for a player character."""

    id: str = Field(
        description="The unique identifier of the player",
    )
    name: str = Field(
        description="The display name of the player",
    )
    hp: int = Field(
        gt=0,
        description="The hit points the player starts with",
    )
    wound_amount: int = Field(
        default=DEFAULT_WOUND_AMOUNT,
        gt=0,
        description="The hit points lost each time a monster lands a blow",
    )


class Player:
    """
    A player taking part in a battle.

    Attributes:
        id (str):
            Unique identifier of the player.
        name (str):
            Display name used in narration.
        hp (int):
            The current hit points, never below zero.
        max_hp (int):
            The hit points the player started with.
        wound_amount (int):
            The hit points lost per landed monster blow.
        dodging (bool):
            Whether the player is currently trying to dodge.

    """

    def __init__(
        self,
        id: str,
        name: str,
        hp: int,
        wound_amount: int = DEFAULT_WOUND_AMOUNT,
    ) -> None:
        self.id: str = id
        self.name: str = name
        self.hp: int = hp
        self.max_hp: int = hp
        self.wound_amount: int = wound_amount
        self.dodging: bool = False

    @classmethod
    def from_template(cls, template: PlayerTemplate) -> "Player":
        return cls(
            id=template.id,
            name=template.name,
            hp=template.hp,
            wound_amount=template.wound_amount,
        )

    def get_hp(self) -> int:
        return self.hp

    def is_alive(self) -> bool:
        return self.hp > 0

    def wound(self) -> int:
        """Applies one landed blow and returns the hit points removed."""
        new_hp = max(0, self.hp - self.wound_amount)
        removed = self.hp - new_hp
        self.hp = new_hp
        return removed

    def get_dodge(self) -> bool:
        return self.dodging

    def set_dodge(self, dodging: bool) -> None:
        self.dodging = dodging

    def describe(self) -> str:
        text = f"{self.name} (HP: {self.hp}/{self.max_hp})"
        if self.dodging:
            text += " [dodging]"
        return text

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Player(id={self.id!r}, name={self.name!r}, hp={self.hp})"
