import io
import json
import sys

import pytest

from roachrace.cli import ConsoleGame, format_elapsed, main


class MinRng:
    """Always picks the lowest value, so every cockroach moves alike."""

    def randint(self, a, b):
        return a


def make_game(tmp_path, script, finish_x=100):
    out = io.StringIO()
    game = ConsoleGame(
        stdin=io.StringIO(script),
        stdout=out,
        data_path=tmp_path / "roaches.json",
        rng=MinRng(),
        finish_x=finish_x,
    )
    return game, out


def read_records(tmp_path):
    return json.loads((tmp_path / "roaches.json").read_text(encoding="utf-8"))


def test_format_elapsed_zero():
    assert format_elapsed(0) == "00:00"


@pytest.mark.parametrize("seconds", [1, 59, 60, 61, 599, 3599, 5999])
def test_format_elapsed_round_trip(seconds):
    text = format_elapsed(seconds)
    minutes, secs = text.split(":")
    assert len(text) == 5
    assert int(minutes) * 60 + int(secs) == seconds
    assert 0 <= int(secs) < 60


def test_new_game_writes_default_roster(tmp_path):
    game, _ = make_game(tmp_path, "")
    records = read_records(tmp_path)
    assert [r["name"] for r in records] == ["Fast", "Speed", "Storm", "Lord", "Leopard"]
    assert all(r["raceCount"] == 0 and r["winCount"] == 0 for r in records)
    assert len(game.manager.cockroaches) == 5


def test_existing_roster_is_loaded(tmp_path):
    path = tmp_path / "roaches.json"
    path.write_text(json.dumps([{"name": "Fast", "raceCount": 5, "winCount": 2}]), encoding="utf-8")
    game, _ = make_game(tmp_path, "")
    assert [c.name for c in game.manager.cockroaches] == ["Fast"]
    assert game.manager.cockroaches[0].race_count == 5
    assert game.manager.cockroaches[0].win_count == 2


def test_single_race_updates_statistics(tmp_path):
    game, out = make_game(tmp_path, "y\n1\nAlice\n1\n100\nf\nn\n")
    game.run()
    records = read_records(tmp_path)
    assert all(r["raceCount"] == 1 for r in records)
    assert sum(r["winCount"] for r in records) == 1
    storm = next(r for r in records if r["name"] == "Storm")
    assert storm["winCount"] == 1
    assert "The winner is cockroach Storm!" in out.getvalue()
    assert game.manager.players == []


def test_backer_of_winner_gains_money(tmp_path):
    game, _ = make_game(tmp_path, "y\n1\nAlice\n3\n100\nc\n3\n100\n")
    game.run()
    player = game.manager.players[0]
    assert player.wins == 2
    assert player.money > 1000
    assert all(r["raceCount"] == 2 for r in read_records(tmp_path))


def test_invalid_name_is_rejected(tmp_path):
    game, out = make_game(tmp_path, "y\n1\nBob1\nBob\n")
    game.run()
    assert [p.name for p in game.manager.players] == ["Bob"]
    assert "letters only" in out.getvalue()


def test_duplicate_name_is_rejected(tmp_path):
    game, out = make_game(tmp_path, "y\n2\nAnna\nanna\nBen\n")
    game.run()
    assert [p.name for p in game.manager.players] == ["Anna", "Ben"]
    assert "already exists" in out.getvalue()


def test_invalid_player_count_is_asked_again(tmp_path):
    game, _ = make_game(tmp_path, "y\n0\n9\nabc\n2\nAnna\nBen\n")
    game.run()
    assert len(game.manager.players) == 2


def test_bet_above_money_is_rejected(tmp_path):
    game, out = make_game(tmp_path, "y\n1\nAlice\n1\n5000\n100\n")
    game.run()
    player = game.manager.players[0]
    assert "not have enough money" in out.getvalue()
    assert 0 < player.money < 1000
    assert player.wins == 0


def test_invalid_cockroach_choice_is_asked_again(tmp_path):
    game, out = make_game(tmp_path, "y\n1\nAlice\n9\nx\n2\n")
    game.run()
    assert game.manager.players[0].cockroach is game.manager.cockroaches[1]
    assert "Invalid cockroach choice" in out.getvalue()


def test_main_declines_to_start(tmp_path, monkeypatch):
    path = tmp_path / "data.json"
    monkeypatch.setattr(sys, "stdin", io.StringIO("n\n"))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["--data", str(path), "--seed", "1"]) == 0
    records = json.loads(path.read_text(encoding="utf-8"))
    assert len(records) == 5