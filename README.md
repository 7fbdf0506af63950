# roachrace

A turn-based cockroach racing game for the terminal. Up to five players
enter their names, each picks one of five cockroaches (Fast, Speed, Storm,
Lord and Leopard), places a bet, and the race is run until one cockroach
crosses the finish line.

## Installing

    pip install .

## Playing

    roachrace

Options:

- `--data PATH` – file holding the cockroach statistics (default
  `cockroaches.json` in the current directory).
- `--seed N` – seed for the race randomness, for repeatable races.
- `--finish X` – x coordinate of the finish line (default 900).

The game first shows each cockroach's race and win counts, then asks
whether to start a new game. A game goes like this:

1. Enter the number of players (1 to 5) and a name for each. Names must be
   letters only (Latin or Cyrillic) and unique, ignoring case.
2. Each player chooses a cockroach by its number in the list.
3. Each player places a bet: a whole number of at most 7 digits, more than
   zero and no more than that player's money. Every player starts with
   1000. If any bet is invalid, nobody is charged and all bets are asked
   for again.
4. The race runs step by step. Each step every cockroach moves forward
   2 to 20 units, with a 10% chance of an extra 10 to 30, and drifts up to
   5 units sideways. When any cockroach reaches the finish line the race
   stops, the final positions and the race time (in steps, as MM:SS) are
   shown, and the cockroach that has run furthest wins.

After each race a table of every player's money is shown, and you choose to
`continue` (`c`) with the players who still have money or `finish` (`f`)
the game. When every player is out of money, the game ends. Ending the
input (Ctrl-D) quits.

## Payouts

- All bets, plus any jackpot carried over, form the pot.
- Players who backed the winner split the pot in proportion to their bets,
  rounded to the nearest whole amount. A lone backer of the winner gets a
  1.5x bonus.
- Everyone else then gets a tenth of their bet back as a consolation prize.
- If nobody backed the winner, nobody is paid and half the pot carries over
  as a jackpot to the next race.

## Statistics

Each cockroach's race and win counts are kept as a JSON array in the data
file. The file is read at start-up (a missing or unreadable file gives the
five standard cockroaches with fresh counts), written back straight away,
and written again after every race.

## Using the game rules from Python

The rules live in `roachrace.race.RaceManager`; the terminal front end is
`roachrace.cli.ConsoleGame`.

```python
import random
from roachrace.race import RaceManager

manager = RaceManager()            # the five standard cockroaches
alice = manager.add_player("Alice")
bob = manager.add_player("Bob")
manager.choose_cockroach(alice, 0)
manager.choose_cockroach(bob, 3)
manager.place_bets({alice: 100, bob: 200})

rng = random.Random(1)
while not manager.advance(rng, 900):
    pass
winner = manager.check_winner()
for row in manager.bet_table():
    print(row.name, row.money, row.bet)
```

Actions the rules forbid (an empty or duplicate name, a sixth player, an
invalid cockroach number, a missing, zero or unaffordable bet) raise
`roachrace.race.RaceError`. `drop_bankrupt_players()`, `reset_race()` and
`reset_game()` prepare the next race or game.

`roachrace.storage` offers `load_cockroaches(path)`,
`save_cockroaches(cockroaches, path)` and `default_cockroaches()`.

## What it does not do

The game is text only: there is no window, no race track drawn on screen
and no animation of the cockroaches while they run. Only the final
positions are printed.

## Running the tests

    pip install ".[test]"
    pytest