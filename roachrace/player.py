"""Players who bet on cockroaches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cockroach import Cockroach


@dataclass(eq=False)
class Player:
    """A player with a purse, a win tally, a current bet and a chosen cockroach."""

    name: str
    money: int = 1000
    wins: int = 0
    bet: int = 0
    cockroach: Optional[Cockroach] = None

    def increment_wins(self) -> None:
        self.wins += 1

    def decrement_money(self, amount: int) -> None:
        self.money -= amount

    def increment_money(self, amount: int) -> None:
        self.money += amount

    def reset(self) -> None:
        """Clear the bet and the chosen cockroach."""
        self.bet = 0
        self.cockroach = None