"""Console front end for the cockroach race."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import Optional, TextIO

from .race import MAX_PLAYERS, RaceError, RaceManager, _RandInt
from .storage import DATA_FILE, PathLike, default_cockroaches, load_cockroaches, save_cockroaches

DEFAULT_FINISH_X = 900
MAX_BET_DIGITS = 7

_NAME_RE = re.compile(r"[a-zA-Zа-яА-ЯёЁ]+")
_BET_RE = re.compile(r"\d{0,%d}" % MAX_BET_DIGITS)


class _EndOfInput(Exception):
    """The input stream ran out."""


def format_elapsed(seconds: int) -> str:
    """Render a duration as MM:SS."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class ConsoleGame:
    """Runs the betting game over a pair of text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        data_path: PathLike = DATA_FILE,
        rng: Optional[_RandInt] = None,
        finish_x: int = DEFAULT_FINISH_X,
        manager: Optional[RaceManager] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.data_path = data_path
        self.rng = rng if rng is not None else random.Random()
        self.finish_x = finish_x
        self.manager = manager if manager is not None else RaceManager()
        self.elapsed = 0
        self.manager.cockroaches = load_cockroaches(data_path) or default_cockroaches()
        save_cockroaches(self.manager.cockroaches, data_path)

    def _say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.strip()

    def _ask_choice(self, prompt: str, answers: dict[str, bool]) -> bool:
        while True:
            reply = self._ask(prompt).lower()
            if reply in answers:
                return answers[reply]
            self._say("Please answer with one of: " + ", ".join(sorted(answers)))

    def run(self) -> None:
        """Play games until the user declines to start another or input ends."""
        self._show_race_info()
        yes_no = {"y": True, "yes": True, "n": False, "no": False}
        try:
            while self._ask_choice("Start a new game? [y/n]: ", yes_no):
                self._play_game()
        except _EndOfInput:
            self._say()

    def _show_race_info(self) -> None:
        self._say(f"{'#':>2}  {'Name':<10}{'Races':>7}{'Wins':>7}")
        for number, cockroach in enumerate(self.manager.cockroaches, start=1):
            self._say(
                f"{number:>2}  {cockroach.name:<10}{cockroach.race_count:>7}{cockroach.win_count:>7}"
            )

    def _ask_player_count(self) -> int:
        while True:
            reply = self._ask(f"Number of players (1-{MAX_PLAYERS}): ")
            if reply.isdigit() and 1 <= int(reply) <= MAX_PLAYERS:
                return int(reply)
            self._say(f"Enter a number from 1 to {MAX_PLAYERS}.")

    def _ask_player_name(self, number: int) -> None:
        while True:
            name = self._ask(f"Enter the name of player {number}: ")
            if not name:
                self._say("Error: player name cannot be empty!")
                continue
            if not _NAME_RE.fullmatch(name):
                self._say("Error: the name may contain letters only.")
                continue
            try:
                self.manager.add_player(name)
                return
            except RaceError as exc:
                self._say(f"Error: {exc}")

    def _choose_cockroaches(self) -> None:
        self._show_race_info()
        count = len(self.manager.cockroaches)
        for player in self.manager.players:
            while True:
                reply = self._ask(f"Player {player.name}, choose a cockroach (1-{count}): ")
                if not reply.isdigit():
                    self._say("Error: invalid cockroach choice!")
                    continue
                try:
                    self.manager.choose_cockroach(player, int(reply) - 1)
                    break
                except RaceError as exc:
                    self._say(f"Error: {exc}")
        self._say("All players have chosen their cockroaches. Place your bets!")

    def _ask_bet(self, name: str, money: int) -> int:
        while True:
            reply = self._ask(f"Bet of {name} (has {money}$): ")
            if _BET_RE.fullmatch(reply):
                return int(reply) if reply else 0
            self._say(f"Error: a bet is a whole number of at most {MAX_BET_DIGITS} digits.")

    def _take_bets(self) -> None:
        while True:
            bets = {p: self._ask_bet(p.name, p.money) for p in self.manager.players}
            try:
                placed = self.manager.place_bets(bets)
                break
            except RaceError as exc:
                self._say(f"Error: {exc}")
        self._say("Bets placed:")
        for player, amount in placed.items():
            self._say(f"{player.name}: {amount}$")

    def _show_bet_table(self) -> None:
        self._say(f"{'Player':<12}{'Money':>10}{'Bet':>10}")
        for row in self.manager.bet_table():
            self._say(f"{row.name:<12}{row.money:>10}{row.bet:>10}")

    def _race(self) -> None:
        self.elapsed = 0
        self._say("The race is on!")
        while True:
            self.elapsed += 1
            if self.manager.advance(self.rng, self.finish_x):
                break
        standings = sorted(self.manager.cockroaches, key=lambda c: c.x, reverse=True)
        for cockroach in standings:
            self._say(f"  {cockroach.name:<10} reached {cockroach.x}")
        self._say(f"Race time: {format_elapsed(self.elapsed)}")
        winner = self.manager.check_winner()
        if winner is not None:
            self._say(f"The winner is cockroach {winner.name}!")
        self._show_bet_table()
        save_cockroaches(self.manager.cockroaches, self.data_path)
        self._show_race_info()

    def _play_game(self) -> None:
        for number in range(1, self._ask_player_count() + 1):
            self._ask_player_name(number)
        go_on = {"c": True, "continue": True, "f": False, "finish": False}
        while True:
            self._choose_cockroaches()
            self._take_bets()
            self._race()
            if not self._ask_choice("[c]ontinue or [f]inish? ", go_on):
                self.manager.reset_game()
                self.elapsed = 0
                return
            for player in self.manager.drop_bankrupt_players():
                self._say(f"Player {player.name} is out of the game.")
            if not self.manager.players:
                self._say("Game over: all players are out of the game!")
                self.manager.reset_game()
                self.elapsed = 0
                return
            self.manager.reset_race()
            self.elapsed = 0


def main(argv: Optional[list[str]] = None) -> int:
    """Start the console game."""
    parser = argparse.ArgumentParser(prog="roachrace", description="Cockroach race betting game.")
    parser.add_argument("--data", default=DATA_FILE, help="file holding cockroach statistics")
    parser.add_argument("--seed", type=int, default=None, help="seed for the race randomness")
    parser.add_argument("--finish", type=int, default=DEFAULT_FINISH_X, help="x coordinate of the finish line")
    args = parser.parse_args(argv)
    game = ConsoleGame(data_path=args.data, rng=random.Random(args.seed), finish_x=args.finish)
    game.run()
    return 0