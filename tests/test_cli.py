import io
import random

from stronghold.cli import handle_load_game, main, multiplayer_game, single_player_game
from stronghold.kingdom import Kingdom, process_month
from stronghold.multiplayer import MultiplayerState
from stronghold.savegame import MULTIPLAYER_SAVE, SINGLEPLAYER_SAVE, load_kingdom, save_kingdom
from stronghold.menus import Console


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out, clear_screen=False), out


def make_state(tmp_path, seed=1):
    state = MultiplayerState(tmp_path, random.Random(seed))
    state.initialize()
    return state


def test_main_exit(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "Thanks for playing Stronghold" in capsys.readouterr().out


def test_main_end_of_input(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "Thanks for playing Stronghold" in capsys.readouterr().out


def test_main_invalid_choice(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n4\n"))
    main(["--directory", str(tmp_path)])
    assert "Invalid choice!" in capsys.readouterr().out


def test_main_new_single_player(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAlfred\n\n1\n\n8\n4\n"))
    main(["--directory", str(tmp_path)])
    out = capsys.readouterr().out
    assert "Game initialized with the following resources:-" in out
    assert "Ruler: Alfred" in out


def test_single_player_save(tmp_path):
    kingdom = Kingdom.new_game("Ada")
    console, out = make_console("7\n1\n8\n")
    single_player_game(console, kingdom, tmp_path)
    assert "Game saved!" in out.getvalue()
    loaded = load_kingdom(Kingdom.new_game(""), tmp_path / SINGLEPLAYER_SAVE)
    assert loaded.army == kingdom.army
    assert loaded.resources == kingdom.resources
    assert loaded.population == kingdom.population


def test_single_player_tax(tmp_path):
    kingdom = Kingdom.new_game("Ada")
    console, _ = make_console("4\n0.3\n8\n")
    single_player_game(console, kingdom, tmp_path)
    assert kingdom.economy.tax_rate == 0.3


def test_single_player_tax_clamped(tmp_path):
    kingdom = Kingdom.new_game("Ada")
    console, _ = make_console("4\n0.9\n8\n")
    single_player_game(console, kingdom, tmp_path)
    assert kingdom.economy.tax_rate == 0.5


def test_single_player_month(tmp_path):
    kingdom = Kingdom.new_game("Ada")
    twin = Kingdom.new_game("Ada")
    process_month(twin)
    console, out = make_console("6\n\n8\n")
    single_player_game(console, kingdom, tmp_path)
    assert kingdom.population == twin.population
    assert kingdom.economy == twin.economy
    assert kingdom.army == twin.army
    assert "=== MONTHLY REPORT ===" in out.getvalue()


def test_single_player_invalid_choice(tmp_path):
    console, out = make_console("0\n8\n")
    single_player_game(console, Kingdom.new_game("Ada"), tmp_path)
    assert "Invalid choice!" in out.getvalue()


def test_event_fires_when_due(tmp_path):
    kingdom = Kingdom.new_game("Ada")
    kingdom.events.last_trigger = 0.0
    console, out = make_console("\n8\n")
    single_player_game(console, kingdom, tmp_path)
    assert "EMERGENCY EVENT ALERT" in out.getvalue()
    assert kingdom.events.last_trigger > 0.0


def test_load_without_save(tmp_path):
    console, out = make_console("")
    assert handle_load_game(console, tmp_path) is False
    assert "No save game found!" in out.getvalue()


def test_load_single_player(tmp_path):
    kingdom = Kingdom.new_game("x")
    kingdom.economy.treasury = 4321.0
    save_kingdom(kingdom, tmp_path / SINGLEPLAYER_SAVE)
    console, out = make_console("Edmund\n1\n\n8\n")
    assert handle_load_game(console, tmp_path) is True
    text = out.getvalue()
    assert "Loaded single player game!" in text
    assert "Treasury: 4321 gold" in text
    assert "Ruler: Edmund" in text


def test_load_damaged_save(tmp_path):
    (tmp_path / SINGLEPLAYER_SAVE).write_text("abc\n")
    console, out = make_console("")
    assert handle_load_game(console, tmp_path) is False
    assert "damaged" in out.getvalue()


def test_load_multiplayer(tmp_path):
    state = make_state(tmp_path)
    state.current_turn = 2
    state.save()
    console, out = make_console("7\n")
    assert handle_load_game(console, tmp_path) is True
    assert "=== PLAYER 3's TURN ===" in out.getvalue()


def test_multiplayer_end_turn_and_save(tmp_path):
    state = make_state(tmp_path)
    console, _ = make_console("6\n7\n")
    multiplayer_game(console, state)
    assert state.current_turn == 1
    assert (tmp_path / MULTIPLAYER_SAVE).read_text().split() == ["1"]


def test_multiplayer_chat(tmp_path):
    state = make_state(tmp_path)
    console, _ = make_console("5\n1\n2\nhello there\n7\n")
    multiplayer_game(console, state)
    assert "[Player1 -> Player2] : hello there" in state.chat.messages(1)
    assert len(state.chat.history(1)) == 1


def test_multiplayer_treaty(tmp_path):
    state = make_state(tmp_path)
    console, _ = make_console("2\n1\n2\n3\n7\n")
    multiplayer_game(console, state)
    assert state.alliances.has_treaty(0, 1)
    assert state.alliances.alliances(0) == [("Player2", "Full Alliance")]


def test_multiplayer_invalid_treaty_type(tmp_path):
    state = make_state(tmp_path)
    console, out = make_console("2\n1\n2\n9\n7\n")
    multiplayer_game(console, state)
    assert "Invalid treaty type!" in out.getvalue()
    assert state.alliances.has_treaty(0, 1) is False


def test_multiplayer_trade_accept(tmp_path):
    state = make_state(tmp_path)
    console, out = make_console("3\n1\n2\n1\n10\n2\n5\n3\n3\n0\n7\n")
    multiplayer_game(console, state)
    history = state.trades.history(0)
    assert len(history) == 1
    assert history[0].endswith("|ACCEPTED")
    assert "Food|10|Wood|5" in history[0]
    assert "Trade accepted!" in out.getvalue()


def test_multiplayer_attack_logged(tmp_path):
    state = make_state(tmp_path)
    console, out = make_console("4\n2\n2\n7\n")
    multiplayer_game(console, state)
    assert len(state.battles.history()) == 1
    assert "Battle outcome:" in out.getvalue()


def test_multiplayer_attack_unknown_player(tmp_path):
    state = make_state(tmp_path)
    console, out = make_console("4\n2\n9\n7\n")
    multiplayer_game(console, state)
    assert "No such player!" in out.getvalue()
    assert state.battles.history() == []


def test_multiplayer_move_claims_tile(tmp_path):
    state = make_state(tmp_path)
    state.players[0].army.trained_soldiers = 60
    console, _ = make_console("4\n1\n0 0\n0 1\n7\n")
    multiplayer_game(console, state)
    assert state.game_map.controllers[0][1] == 0
    assert state.game_map.terrain[0][1] == "K"


def test_multiplayer_move_too_far(tmp_path):
    state = make_state(tmp_path)
    state.players[0].army.trained_soldiers = 60
    console, out = make_console("4\n1\n0 0\n5 5\n7\n")
    multiplayer_game(console, state)
    assert "Can only move adjacent tiles!" in out.getvalue()
    assert state.game_map.controllers[5][5] != 0


def test_multiplayer_move_off_map(tmp_path):
    state = make_state(tmp_path)
    console, out = make_console("4\n1\n0 0\n-1 0\n7\n")
    multiplayer_game(console, state)
    assert "Invalid move:" in out.getvalue()