"""
Per-player attack attempt bookkeeping.

Monsters prefer to retaliate against the players who attack the most. The
tally records every attack attempt (hit or miss) and exposes each player's
share of the total.
"""


class AttackTally:
    """
    Counts attack attempts per player and keeps the running total in sync.

    Counts only change through `record` and `forget`, so `total` always equals
    the sum of the per-player counts.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._total: int = 0

    @property
    def total(self) -> int:
        return self._total

    def record(self, player_id: str) -> int:
        """
        Records one attack attempt by the given player.

        Returns:
            int: The player's updated number of attempts.

        """
        self._counts[player_id] = self._counts.get(player_id, 0) + 1
        self._total += 1
        return self._counts[player_id]

    def forget(self, player_id: str) -> int:
        """
        Removes a player from the tally entirely.

        Returns:
            int: The number of attempts the player had recorded (0 if none).

        """
        count = self._counts.pop(player_id, 0)
        self._total -= count
        return count

    def count(self, player_id: str) -> int:
        return self._counts.get(player_id, 0)

    def weights(self) -> list[tuple[str, float]]:
        """
        Returns every recorded player with its share of the total attempts.

        Returns:
            list[tuple[str, float]]: (player id, probability) pairs in the
            order players first attacked. Empty if nobody has attacked.

        """
        if not self._total:
            return []
        return [
            (player_id, count / self._total)
            for player_id, count in self._counts.items()
            if count
        ]

    def as_dict(self) -> dict[str, int]:
        return dict(self._counts)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return self._total > 0

    def __repr__(self) -> str:
        return f"AttackTally(counts={self._counts!r}, total={self._total})"
