"""
Shared fixtures for the battle engine tests.
"""

import pytest
from skirmish.core.content import ContentRepository
from skirmish.entities.monster import MonsterTemplate
from skirmish.entities.player import Player


@pytest.fixture
def goblin_template():
    return MonsterTemplate(id="goblin", name="Goblin", hp=2, aliases=["gob"])


@pytest.fixture
def orc_template():
    return MonsterTemplate(id="orc", name="Orc", hp=3, description="A scarred orc.")


@pytest.fixture
def alice():
    return Player(id="alice", name="Alice", hp=3)


@pytest.fixture
def bob():
    return Player(id="bob", name="Bob", hp=1)


@pytest.fixture
def repository(goblin_template, orc_template, alice, bob):
    repo = ContentRepository()
    repo.add_monster_template(goblin_template)
    repo.add_monster_template(orc_template)
    repo.add_player(alice)
    repo.add_player(bob)
    return repo


@pytest.fixture
def narration():
    """Collects every string a battle narrates."""
    return []
