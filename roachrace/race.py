"""Race state: players, their picks and bets, cockroach movement and payouts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

from .cockroach import Cockroach
from .player import Player
from .storage import default_cockroaches

log = logging.getLogger(__name__)

MAX_PLAYERS = 5

SPEED_RANGE = (2, 20)
DRIFT_RANGE = (-5, 5)
BOOST_CHANCE_PERCENT = 10
BOOST_RANGE = (10, 30)
RARE_BET_BONUS = 1.5


class RaceError(ValueError):
    """An action that the rules of the race do not allow."""


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class BetRow:
    """One line of the bet table."""

    name: str
    money: int
    bet: int


@dataclass
class RaceManager:
    """Holds the racers, the players and the pot, and runs the race rules."""

    cockroaches: list[Cockroach] = field(default_factory=default_cockroaches)
    players: list[Player] = field(default_factory=list)
    player_bets: dict[Player, int] = field(default_factory=dict)
    jackpot: int = 0

    def add_player(self, name: str) -> Player:
        """Register a new player with a unique, non-empty name."""
        name = name.strip()
        if not name:
            raise RaceError("Player name cannot be empty")
        if len(self.players) >= MAX_PLAYERS:
            raise RaceError(f"No more than {MAX_PLAYERS} players can take part")
        folded = name.casefold()
        if any(p.name.casefold() == folded for p in self.players):
            raise RaceError(f"A player named {name!r} already exists")
        player = Player(name)
        self.players.append(player)
        return player

    def choose_cockroach(self, player: Player, index: int) -> Cockroach:
        """Give the player the cockroach at the given roster position."""
        if player not in self.players:
            raise RaceError(f"{player.name!r} is not in the game")
        if not 0 <= index < len(self.cockroaches):
            raise RaceError("Invalid cockroach choice")
        cockroach = self.cockroaches[index]
        player.cockroach = cockroach
        log.debug("Player %s chose %s", player.name, cockroach.name)
        return cockroach

    def place_bets(self, bets: Mapping[Player, int]) -> dict[Player, int]:
        """Take a bet from every player; a player left out counts as betting 0.

        Nothing is charged unless every bet is valid.
        """
        collected = {player: bets.get(player, 0) for player in self.players}
        if not collected:
            raise RaceError("Nobody placed a bet")
        for player, amount in collected.items():
            if amount > player.money:
                raise RaceError(f"{player.name} does not have enough money for this bet")
            if amount <= 0:
                raise RaceError(f"{player.name}'s bet cannot be empty or zero")
        self.player_bets = collected
        for player, amount in collected.items():
            player.bet = amount
            player.decrement_money(amount)
        return dict(collected)

    def advance(self, rng: _RandInt, finish_x: int) -> bool:
        """Move every cockroach one step; True once any has reached finish_x."""
        finished = False
        for cockroach in self.cockroaches:
            move_x = rng.randint(*SPEED_RANGE)
            if rng.randint(1, 100) <= BOOST_CHANCE_PERCENT:
                move_x += rng.randint(*BOOST_RANGE)
            new_x = cockroach.x + move_x
            new_y = cockroach.y + rng.randint(*DRIFT_RANGE)
            cockroach.set_position(new_x, new_y)
            if new_x >= finish_x:
                finished = True
        return finished

    def check_winner(self) -> Optional[Cockroach]:
        """Count the race for every cockroach, crown the furthest one and pay out."""
        best_x = 0
        winner: Optional[Cockroach] = None
        for cockroach in self.cockroaches:
            cockroach.increment_race_count()
            if cockroach.x > best_x:
                best_x = cockroach.x
                winner = cockroach
        if winner is None:
            return None
        winner.increment_win_count()
        self.distribute_winnings(winner)
        self.reset_bets()
        return winner

    def distribute_winnings(self, winner: Cockroach) -> dict[Player, int]:
        """Share the pot among those who backed the winner; returns what each received.

        If nobody backed the winner, half the pot becomes the next jackpot and
        nobody is paid.
        """
        total = sum(self.player_bets.values()) + self.jackpot
        self.jackpot = 0

        backers = {p: b for p, b in self.player_bets.items() if p.cockroach is winner}
        backed_sum = sum(backers.values())
        if backed_sum == 0:
            log.debug("Nobody backed the winner; half the pot carries over")
            self.jackpot += total // 2
            return {}

        multiplier = RARE_BET_BONUS if len(backers) == 1 else 1.0
        payouts: dict[Player, int] = {}
        for player, bet in self.player_bets.items():
            if player in backers:
                amount = int(bet / backed_sum * total * multiplier + 0.5)
                player.increment_money(amount)
                player.increment_wins()
            else:
                amount = int(bet / 10)
                player.increment_money(amount)
            payouts[player] = amount
            log.debug("Player %s receives %d", player.name, amount)

        self.player_bets.clear()
        return payouts

    def reset_bets(self) -> None:
        """Set every recorded bet to zero."""
        for player in self.player_bets:
            self.player_bets[player] = 0

    def bet_table(self) -> list[BetRow]:
        """Name, money and current bet of every player, in joining order."""
        return [BetRow(p.name, p.money, self.player_bets.get(p, 0)) for p in self.players]

    def drop_bankrupt_players(self) -> list[Player]:
        """Remove and return the players who have no money left."""
        dropped = [p for p in self.players if p.money <= 0]
        self.players = [p for p in self.players if p.money > 0]
        for player in dropped:
            self.player_bets.pop(player, None)
            log.debug("Player %s leaves the game", player.name)
        return dropped

    def _reset_positions(self) -> None:
        for cockroach in self.cockroaches:
            cockroach.reset_position()

    def reset_race(self) -> None:
        """Prepare another race with the same players."""
        self._reset_positions()
        for player in self.players:
            player.cockroach = None
        self.player_bets.clear()

    def reset_game(self) -> None:
        """Remove all players and put the cockroaches back on the start line."""
        self.players.clear()
        self.player_bets.clear()
        self._reset_positions()