"""
Console front end for a battle.

Prompts each living player in turn, feeds their input to the battle and prints
whatever the battle narrates.
"""

from collections.abc import Callable

from prompt_toolkit import PromptSession

from skirmish.combat.battle import Battle
from skirmish.core.content import ContentRepository
from skirmish.core.utils import cprint, crule
from skirmish.entities.player import Player

QUIT_WORDS = {"quit", "exit", "flee"}
LOOK_WORDS = {"look", "status"}


def print_narration(text: str) -> None:
    # Narration may echo player input, which must not be read as rich markup.
    cprint(text, markup=False)


class BattleConsole:
    """
    Runs a battle from the command line.

    Players act in the order they were added to the repository. Dead players
    are skipped; the battle ends when every monster is defeated, every player
    has fallen, or someone types "quit".
    """

    def __init__(
        self,
        battle: Battle,
        repository: ContentRepository,
        read_line: Callable[[str], str] | None = None,
        respond: Callable[[str], None] | None = None,
    ) -> None:
        """
        Args:
            battle (Battle): The battle to run.
            repository (ContentRepository): Where the players live.
            read_line (Callable[[str], str] | None):
                Reads one line of input given a prompt. Defaults to a
                prompt_toolkit session, which keeps history.
            respond (Callable[[str], None] | None):
                Prints narration. Defaults to the rich console.

        """
        self.battle = battle
        self.repository = repository
        if read_line is None:
            session: PromptSession = PromptSession()
            read_line = session.prompt
        self.read_line = read_line
        self.respond = respond or print_narration

    def run(self) -> bool:
        """
        Plays the battle to its end.

        Returns:
            bool: True if the players won.

        """
        crule("Battle!", style="bold red")
        self.respond(self.battle.describe())
        while True:
            players = self.repository.living_players()
            if not players:
                crule("The party has fallen", style="bold red")
                return False
            for player in players:
                if not player.is_alive():
                    continue
                outcome = self.take_turn(player)
                if outcome is None:
                    crule("The party flees", style="yellow")
                    return False
                if outcome:
                    crule("Victory!", style="bold green")
                    return True

    def take_turn(self, player: Player) -> bool | None:
        """
        Reads input for one player until they do something.

        Returns:
            bool | None: The battle's "over" flag after the player's action,
            or None if the player chose to quit.

        """
        while True:
            text = self.read_line(f"{player.name} (HP {player.get_hp()}) > ").strip()
            lowered = text.lower()
            if lowered in QUIT_WORDS:
                return None
            if lowered in LOOK_WORDS:
                self.respond(self.battle.describe())
                continue
            if self.battle.matcher.parse(text) is None:
                self.respond("Try attacking an enemy by name, or dodging.")
                continue
            return self.battle.execute(text, self.respond, player)
