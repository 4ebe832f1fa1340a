"""
Monster templates and the live monsters spawned from them.
"""

import itertools

from pydantic import BaseModel, Field

from skirmish.core.constants import DEFAULT_WOUND_AMOUNT

_instance_counter = itertools.count(1)


class MonsterTemplate(BaseModel):
    """
    Immutable description of a kind of monster, as loaded from the game
    content.
    """

    id: str = Field(
        description="The unique identifier of the template",
    )
    name: str = Field(
        description="The display name of the monster",
    )
    hp: int = Field(
        gt=0,
        description="The hit points a freshly spawned monster starts with",
    )
    wound_amount: int = Field(
        default=DEFAULT_WOUND_AMOUNT,
        gt=0,
        description="The hit points lost each time the monster is hit",
    )
    aliases: list[str] = Field(
        default_factory=list,
        description="Other names players may use to refer to the monster",
    )
    description: str = Field(
        default="",
        description="Flavour text shown when the battle is described",
    )

    def __hash__(self) -> int:
        return hash(self.id)


class Monster:
    """
    A live monster taking part in a battle.

    Every instance owns its own hit points, so several monsters spawned from
    the same template can be wounded independently.

    Attributes:
        id (str):
            Unique identifier of this instance.
        template (MonsterTemplate):
            The template this monster was spawned from.
        hp (int):
            The current hit points, never below zero.

    """

    def __init__(self, template: MonsterTemplate) -> None:
        self.id: str = f"{template.id}#{next(_instance_counter)}"
        self.template: MonsterTemplate = template
        self.hp: int = template.hp

    @property
    def name(self) -> str:
        return self.template.name

    @property
    def max_hp(self) -> int:
        return self.template.hp

    def get_hp(self) -> int:
        return self.hp

    def is_alive(self) -> bool:
        return self.hp > 0

    def wound(self) -> int:
        """
        Applies one landed blow to the monster.

        Returns:
            int:
                The hit points actually removed (less than the wound amount
                when the monster had fewer hit points left).

        """
        new_hp = max(0, self.hp - self.template.wound_amount)
        removed = self.hp - new_hp
        self.hp = new_hp
        return removed

    def match(self, name: str) -> bool:
        """
        Checks whether a free-text name refers to this monster.

        Args:
            name (str): The name typed by the player.

        Returns:
            bool: True if it equals the monster's name or one of its aliases,
            ignoring case and surrounding whitespace.

        """
        wanted = " ".join(name.lower().split())
        if not wanted:
            return False
        candidates = [self.template.name, *self.template.aliases]
        return any(wanted == " ".join(c.lower().split()) for c in candidates)

    def describe(self) -> str:
        """Returns a one-line description of the monster and its health."""
        text = f"{self.name} (HP: {self.hp}/{self.max_hp})"
        if self.template.description:
            text += f" - {self.template.description}"
        return text

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Monster(id={self.id!r}, name={self.name!r}, hp={self.hp})"
