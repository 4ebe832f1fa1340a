"""
The battle engine.

A battle pits one or more players against a group of monsters. Players drive
it by typing commands; every `strike_back_interval` actions the monsters
retaliate. A retaliation takes two steps: first a monster picks a target and
winds up ("X is looking at Y"), then on the next retaliation the blow lands or
misses. Players who attack more often are more likely to be picked.
"""

import random
from collections.abc import Callable

from catchery import log_debug

from skirmish.combat.attack_tally import AttackTally
from skirmish.combat.battle_config import BattleConfig
from skirmish.combat.windup import UNARMED, WindingUp, WindupState
from skirmish.core.commands import CommandMatcher
from skirmish.core.constants import DEFAULT_STRIKE_BACK_INTERVAL, CommandKind
from skirmish.core.content import ContentRepository
from skirmish.core.error_handling import (
    BattleConfigurationError,
    BattlePreconditionError,
)
from skirmish.entities.monster import Monster
from skirmish.entities.player import Player

Responder = Callable[[str], None]


class Battle:
    """Maintains the state of a single battle and resolves player turns.

    Attributes:
        repository (ContentRepository):
            Where monster templates and live players are looked up.
        strike_back_interval (int):
            Number of player actions between monster retaliations.
        action_counter (int):
            Player actions since the last retaliation.
        monsters (list[Monster]):
            The living monsters; the battle is won when this is empty.
        attack_tally (AttackTally):
            Attack attempts per player, used to weight monster targeting.
        windup (WindupState):
            Whether a monster is currently charging an attack, and at whom.

    """

    def __init__(
        self,
        repository: ContentRepository,
        monsters: dict[str, int],
        strike_back_interval: int | None = None,
        *,
        config: BattleConfig | None = None,
        matcher: CommandMatcher | None = None,
        rng: random.Random | None = None,
    ):
        """Spawn the monsters and reset every counter.

        Args:
            repository (ContentRepository):
                Source of monster templates and player state.
            monsters (dict[str, int]):
                How many monsters of each template id to spawn.
            strike_back_interval (int | None):
                Player actions between retaliations. Falsy values mean 1.
            config (BattleConfig | None):
                Hit probabilities; the defaults when omitted.
            matcher (CommandMatcher | None):
                Command recogniser; the bundled word lists when omitted.
            rng (random.Random | None):
                Random source, anything offering `random()` and `choice()`.

        Raises:
            BattleConfigurationError:
                If a template id is unknown or the interval is negative.

        """
        self.repository: ContentRepository = repository
        self.config: BattleConfig = config or BattleConfig()
        self.matcher: CommandMatcher = matcher or CommandMatcher.default()
        self.rng = rng or random.Random()

        interval = strike_back_interval or DEFAULT_STRIKE_BACK_INTERVAL
        if interval < 1:
            raise BattleConfigurationError(
                f"Strike-back interval must be positive, got {interval}",
                {"strike_back_interval": interval},
            )
        self.strike_back_interval: int = interval
        self.action_counter: int = 0

        self.attack_tally: AttackTally = AttackTally()
        self.windup: WindupState = UNARMED

        self.monsters: list[Monster] = []
        for template_id, count in monsters.items():
            template = self.repository.get_monster_template(template_id)
            if template is None:
                raise BattleConfigurationError(
                    f"Unknown monster template '{template_id}'",
                    {"template_id": template_id},
                )
            self.monsters.extend(Monster(template) for _ in range(count))

        log_debug(
            f"Battle started with {len(self.monsters)} monsters, "
            f"strike-back every {self.strike_back_interval} actions",
            {
                "monsters": [monster.id for monster in self.monsters],
                "strike_back_interval": self.strike_back_interval,
            },
        )

    # ============================================================================
    # STATE ACCESSORS
    # ============================================================================

    @property
    def player_hit_counts(self) -> dict[str, int]:
        return self.attack_tally.as_dict()

    @property
    def total_hit_attempts(self) -> int:
        return self.attack_tally.total

    @property
    def windup_monster(self) -> Monster | None:
        if isinstance(self.windup, WindingUp):
            return self.windup.monster
        return None

    @property
    def windup_target(self) -> str | None:
        if isinstance(self.windup, WindingUp):
            return self.windup.target_id
        return None

    def is_over(self) -> bool:
        return not self.monsters

    # ============================================================================
    # TURN RESOLUTION
    # ============================================================================

    def execute(self, input_text: str, respond: Responder, player: Player) -> bool:
        """Handles one line of player input.

        Attacks and dodges count as actions; once enough actions have piled
        up the monsters strike back. Input matching neither is ignored.

        Args:
            input_text (str): What the player typed.
            respond (Responder): Receives the narration.
            player (Player): The acting player.

        Returns:
            bool: True once every monster has been defeated. The caller keeps
            feeding input until then.

        """
        command = self.matcher.parse(input_text)
        if command is None:
            return self.is_over()

        if command.kind == CommandKind.ATTACK:
            self.player_attempt(command.target or "", respond, player)
        else:
            player.set_dodge(True)
            respond(f"{player.name} is attempting to dodge...")

        if self.monsters:
            self.action_counter += 1
            if self.action_counter == self.strike_back_interval:
                self.handle_strike_back(respond)
                self.action_counter = 0

        return self.is_over()

    def player_attempt(self, target_name: str, respond: Responder, player: Player) -> None:
        """Resolves a player's attack against the monster they named.

        Every attempt counts towards the player's targeting weight, whether it
        lands or not. Attacking always ends a dodge.

        Args:
            target_name (str): The free-text name of the monster attacked.
            respond (Responder): Receives the narration, in a single call.
            player (Player): The attacking player.

        """
        self.attack_tally.record(player.id)

        pretty = ""
        if self.rng.random() < self.config.player_hit_probability:
            monster = self._find_monster(target_name)
            if monster is None:
                pretty += f"no enemy goes by {target_name}"
            else:
                monster.wound()
                pretty += f"successfully hit {monster.name}."
                if monster.get_hp() == 0:
                    if self.windup_monster is monster:
                        # A dead monster cannot finish its attack.
                        self.windup = UNARMED
                    self.monsters.remove(monster)
                    pretty += f" you killed {monster.name}!"
                    log_debug(
                        f"{monster.name} was killed by {player.name}",
                        {"monster_id": monster.id, "player_id": player.id},
                    )
                else:
                    pretty += f" HP remaining: {monster.get_hp()}"
        else:
            pretty += "oh noes! you missed!"

        if player.get_dodge():
            pretty += f"\n{player.name} is no longer dodging..."
        player.set_dodge(False)

        respond(pretty)

    def _find_monster(self, name: str) -> Monster | None:
        for monster in self.monsters:
            if monster.match(name):
                return monster
        return None

    # ============================================================================
    # MONSTER RETALIATION
    # ============================================================================

    def select_player(self) -> str:
        """Picks a player id, weighted by how often each player attacked.

        Returns:
            str: The chosen player id.

        Raises:
            BattlePreconditionError: If no player has any recorded attempt.

        """
        probabilities = self.attack_tally.weights()
        if not probabilities:
            raise BattlePreconditionError(
                "Cannot select a target before any player has attacked",
                {"total_hit_attempts": self.attack_tally.total},
            )
        r = self.rng.random()
        total = 0.0
        for player_id, p in probabilities:
            total += p
            if total >= r:
                return player_id
        # Rounding can leave the cumulative mass a hair below r.
        return probabilities[-1][0]

    def handle_strike_back(self, respond: Responder) -> None:
        """Advances the monsters' attack by one step.

        When nobody is charging, a random monster picks a target and winds up.
        When a monster is charging, its blow is resolved and the state resets.

        Args:
            respond (Responder): Receives the narration, in a single call.

        """
        if isinstance(self.windup, WindingUp):
            respond(self._resolve_windup(self.windup))
            return

        if not self.monsters:
            raise BattlePreconditionError("Cannot strike back without monsters")
        if not self.attack_tally:
            log_debug(
                "No player has attacked yet, monsters hold back",
                {"monsters": len(self.monsters)},
            )
            return

        monster = self.rng.choice(self.monsters)
        target = self._get_target(self.select_player())
        self.windup = WindingUp(monster=monster, target_id=target.id)
        log_debug(
            f"{monster.name} winds up against {target.name}",
            {"monster_id": monster.id, "player_id": target.id},
        )
        respond(f"{monster.name} is looking at {target.name}")

    def _resolve_windup(self, windup: WindingUp) -> str:
        player = self._get_target(windup.target_id)
        monster = windup.monster
        dodging = player.get_dodge()

        pretty = ""
        if self.rng.random() < self.config.monster_hit_chance(dodging):
            player.wound()
            pretty += f"{monster.name} strikes {player.name}!"
            if player.get_hp() == 0:
                pretty += f" {player.name} is super dead."
                self.handle_player_death(player.id)
            else:
                pretty += f" HP remaining: {player.get_hp()}"
        else:
            pretty += f"{monster.name} missed!"

        if dodging:
            pretty += f"\n{player.name} is no longer dodging..."
        player.set_dodge(False)

        self.windup = UNARMED
        return pretty

    def _get_target(self, player_id: str) -> Player:
        player = self.repository.get_player(player_id)
        if player is None:
            raise BattlePreconditionError(
                f"Targeted player '{player_id}' does not exist",
                {"player_id": player_id},
            )
        return player

    def handle_player_death(self, player_id: str) -> None:
        """Stops a dead player from being targeted again.

        Args:
            player_id (str): The id of the player whose hit points reached 0.

        """
        removed = self.attack_tally.forget(player_id)
        if self.windup_target == player_id:
            self.windup = UNARMED
        log_debug(
            f"Player {player_id} died, dropping {removed} attack attempts",
            {"player_id": player_id, "attempts": removed},
        )

    # ============================================================================
    # DESCRIPTION
    # ============================================================================

    def describe(self) -> str:
        """Returns one line per living monster."""
        return "\n".join(monster.describe() for monster in self.monsters)
