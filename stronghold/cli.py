"""The interactive kingdom game played at the terminal."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .battle import apply_battle_effects
from .diplomacy import ResourceType, TreatyType
from .kingdom import (
    INITIAL_ARMY_RECRUITS,
    INITIAL_FOOD,
    INITIAL_IRON,
    INITIAL_MERCHANTS,
    INITIAL_NOBLES,
    INITIAL_PEASANTS,
    INITIAL_POPULATION,
    INITIAL_STONE,
    INITIAL_TREASURY,
    INITIAL_WOOD,
    Kingdom,
    process_month,
)
from .menus import Console, army_menu, bank_menu, population_menu
from .multiplayer import MAX_PLAYERS, MultiplayerState
from .savegame import SINGLEPLAYER_SAVE, SaveKind, find_save, load_kingdom, save_kingdom

SINGLE_PLAYER_MENU = "\n".join(
    [
        "",
        "=== StrongHold Kingdom Management ===",
        "[1] View Kingdom Status",
        "[2] Manage Army",
        "[3] Manage Population & Resources",
        "[4] Adjust Taxes",
        "[5] Manage Bank",
        "[6] Process Next Month",
        "[7] Save/Load Game",
        "[8] Exit",
    ]
)

RESOURCE_CHOICES = "1.Food 2.Wood 3.Stone 4.Iron 5.Gold"


def _adjust_taxes(console: Console, kingdom: Kingdom) -> None:
    kingdom.economy.adjust_tax_rate(console.ask_float("Enter new tax rate (0-0.5): "))
    console.say("Tax rate updated!")


def _run_event(console: Console, kingdom: Kingdom) -> None:
    event = kingdom.events.random_event()
    console.clear()
    console.say("\n=== EMERGENCY EVENT ALERT ===\n")
    for line in kingdom.events.apply_effects(
        event,
        kingdom.population,
        kingdom.army,
        kingdom.economy,
        kingdom.resources,
        kingdom.peasants,
        kingdom.merchants,
        kingdom.nobles,
    ):
        console.say(line)
    kingdom.events.last_trigger = time.time()
    console.say()
    console.pause()


def single_player_game(console: Console, kingdom: Kingdom, directory=".") -> Kingdom:
    """Play one kingdom until the player chooses to exit."""
    directory = Path(directory)
    while True:
        if kingdom.events.should_trigger():
            _run_event(console, kingdom)
        console.say(SINGLE_PLAYER_MENU)
        choice = console.ask_int("Choice: ")
        console.clear()

        if choice == 1:
            console.say(kingdom.status_report())
            console.pause()
        elif choice == 2:
            army_menu(kingdom.army, kingdom.resources, console)
        elif choice == 3:
            population_menu(kingdom.population, kingdom.resources, console)
        elif choice == 4:
            _adjust_taxes(console, kingdom)
        elif choice == 5:
            bank_menu(kingdom.bank, kingdom.economy, console)
        elif choice == 6:
            console.say(process_month(kingdom))
            console.pause()
        elif choice == 7:
            console.say("[1] Save")
            if console.ask_int("[2] Load: ") == 1:
                save_kingdom(kingdom, directory / SINGLEPLAYER_SAVE)
                console.say("Game saved!")
            else:
                handle_load_game(console, directory)
        elif choice == 8:
            console.clear()
            return kingdom
        else:
            console.say("Invalid choice!")
            continue
        console.clear()


def _ask_player(console: Console, prompt: str) -> int | None:
    target = console.ask_int(prompt) - 1
    if 0 <= target < MAX_PLAYERS:
        return target
    console.say("No such player!")
    return None


def _show_alliances(console: Console, state: MultiplayerState, player_id: int) -> None:
    console.say(f"\n=== Player{player_id + 1}'s Alliances ===")
    for counterpart, kind in state.alliances.alliances(player_id):
        console.say(f"- {counterpart}: {kind}")


def _kingdom_operations(console: Console, player: Kingdom) -> None:
    while True:
        console.clear()
        console.say("\n=== KINGDOM OPERATIONS ===")
        console.say("[1] View Kingdom Status")
        console.say("[2] Manage Army")
        console.say("[3] Manage Population & Resources")
        console.say("[4] Adjust Taxes")
        console.say("[5] Manage Bank")
        console.say("[6] Process Next Month")
        console.say("[7] Return to Main Menu")
        choice = console.ask_int("Choice: ")
        if choice == 1:
            console.say(player.status_report())
            console.pause()
        elif choice == 2:
            army_menu(player.army, player.resources, console)
        elif choice == 3:
            population_menu(player.population, player.resources, console)
        elif choice == 4:
            _adjust_taxes(console, player)
        elif choice == 5:
            bank_menu(player.bank, player.economy, console)
        elif choice == 6:
            console.clear()
            console.say(process_month(player))
            console.pause()
        elif choice == 7:
            return
        else:
            console.say("Invalid choice!")


def _diplomacy(console: Console, state: MultiplayerState, current: int) -> None:
    console.clear()
    console.say("\n=== DIPLOMACY ===")
    console.say("[1] Propose Treaty")
    console.say("[2] Break Treaty")
    console.say("[3] View Alliances")
    console.say("[4] Back")
    choice = console.ask_int("Choice: ")
    if choice == 1:
        target = _ask_player(console, "Target Player (1-4): ")
        console.say("Treaty Type (1-3):")
        console.say(" [1] Non-Aggression")
        console.say(" [2] Defense Pact")
        console.say(" [3] Full Alliance")
        kind = console.ask_int() - 1
        if target is None:
            return
        try:
            treaty = TreatyType(kind)
        except ValueError:
            console.say("Invalid treaty type!")
            return
        state.alliances.propose(current, target, treaty)
        console.say(f"Treaty proposed between Player{current + 1} and Player{target + 1}!")
    elif choice == 2:
        target = _ask_player(console, "Target Player to Break With: ")
        if target is None:
            return
        if state.alliances.break_treaty(current, target):
            console.say(f"Player{current + 1} broke treaty with Player{target + 1}!")
        else:
            console.say("No treaty existed!")
    elif choice == 3:
        _show_alliances(console, state, current)
        console.pause()


def _ask_resource(console: Console, heading: str) -> tuple[ResourceType | None, int]:
    console.say(f"{heading} (1-5):")
    console.say(RESOURCE_CHOICES)
    kind = console.ask_int("Type: ") - 1
    quantity = console.ask_int("Quantity: ")
    try:
        return ResourceType(kind), quantity
    except ValueError:
        return None, quantity


def _trade(console: Console, state: MultiplayerState, current: int) -> None:
    console.clear()
    console.say("\n=== TRADE ===")
    console.say("[1] Propose Trade")
    console.say("[2] View Trade Offers")
    console.say("[3] Accept Trade")
    console.say("[4] Back")
    choice = console.ask_int("Choice: ")
    if choice == 1:
        target = _ask_player(console, "Target Player: ")
        offer, offer_qty = _ask_resource(console, "Offer")
        request, request_qty = _ask_resource(console, "Request")
        if target is None:
            return
        if offer is None or request is None:
            console.say("Invalid resource type!")
            return
        state.trades.propose(current, target, offer, offer_qty, request, request_qty)
        console.say("Trade proposed!")
    elif choice == 2:
        console.say(f"\n--- Trade History (Player{current + 1}) ---")
        for index, line in enumerate(state.trades.history(current)):
            console.say(f"[{index}] {line}")
        console.pause()
    elif choice == 3:
        if state.trades.accept(console.ask_int("Enter Trade ID to Accept: ")):
            console.say("Trade accepted!")
        else:
            console.say("No pending trade with that ID!")


def _military(console: Console, state: MultiplayerState, current: int) -> None:
    player = state.players[current]
    console.clear()
    console.say("\n=== MILITARY COMMANDS ===")
    console.say("[1] Move Army")
    console.say("[2] Attack Player")
    console.say("[3] View Battle History")
    console.say("[4] Back")
    choice = console.ask_int("Choice: ")
    if choice == 1:
        old_x = console.ask_int("Current Position (X Y): ")
        old_y = console.ask_int()
        new_x = console.ask_int("New Position (X Y): ")
        new_y = console.ask_int()
        try:
            allowed = state.game_map.move_army(current, old_x, old_y, new_x, new_y)
        except ValueError as error:
            console.say(f"Invalid move: {error}")
            return
        if not allowed:
            console.say("Can only move adjacent tiles!")
            return
        if state.game_map.controllers[new_x][new_y] == current:
            console.say("Already controlled!")
        state.game_map.update_control(current, new_x, new_y, player.army)
    elif choice == 2:
        target = _ask_player(console, "Target Player: ")
        if target is None:
            return
        defender = state.players[target]
        outcome = state.battles.resolve(
            player.army, defender.army, player.leadership, defender.leadership
        )
        apply_battle_effects(outcome, player.army, defender.army, player.economy)
        console.say(f"Battle outcome: {outcome.value}")
    elif choice == 3:
        console.say("\n=== Battle History ===")
        for line in state.battles.history():
            console.say(line)
        console.pause()


def _communications(console: Console, state: MultiplayerState, current: int) -> None:
    console.clear()
    console.say("\n=== COMMUNICATIONS ===")
    console.say("[1] Send Message")
    console.say("[2] Read Messages")
    console.say("[3] Back")
    choice = console.ask_int("Choice: ")
    if choice == 1:
        recipient = console.ask_int("Recipient (1-4): ") - 1
        message = console.ask_line("Message: ")
        if not state.chat.send(current, recipient, message):
            console.say("No such player!")
    elif choice == 2:
        console.say(f"\n=== Chat History for Player{current + 1}===")
        for line in state.chat.history(current):
            console.say(line)
        console.pause()


def multiplayer_game(console: Console, state: MultiplayerState) -> MultiplayerState:
    """Play turns in rotation until a player saves and exits."""
    running = True
    while running:
        current = state.current_turn
        player = state.current_player
        state.game_map.process_terrain_bonuses(player.resources, current)
        turn_active = True
        while turn_active:
            console.clear()
            console.say(f"\n=== PLAYER {current + 1}'s TURN ===")
            console.say(state.game_map.render())
            _show_alliances(console, state, current)
            console.say("\n=== KINGDOM MANAGEMENT ===")
            console.say("[1] Kingdom Operations")
            console.say("[2] Diplomacy & Alliances")
            console.say("[3] Trade with Others")
            console.say("[4] Military Actions")
            console.say("[5] View Chat")
            console.say("[6] End Turn")
            console.say("[7] Save & Exit")
            choice = console.ask_int("Choice: ")
            if choice == 1:
                _kingdom_operations(console, player)
            elif choice == 2:
                _diplomacy(console, state, current)
            elif choice == 3:
                _trade(console, state, current)
            elif choice == 4:
                _military(console, state, current)
            elif choice == 5:
                _communications(console, state, current)
            elif choice == 6:
                state.end_turn()
                turn_active = False
            elif choice == 7:
                state.save()
                turn_active = False
                running = False
        state.game_map.process_terrain_bonuses(player.resources, current)
    return state


def handle_load_game(console: Console, directory=".") -> bool:
    """Resume the saved game in the directory; False when there is none."""
    directory = Path(directory)
    found = find_save(directory)
    if found is None:
        console.say("No save game found!")
        return False
    kind, path = found
    try:
        if kind is SaveKind.MULTIPLAYER:
            state = MultiplayerState(directory)
            if not state.load():
                console.say("No save game found!")
                return False
        else:
            kingdom = load_kingdom(Kingdom.new_game(""), path)
    except ValueError as error:
        console.say(f"Save file is damaged: {error}")
        return False

    if kind is SaveKind.MULTIPLAYER:
        multiplayer_game(console, state)
        return True

    kingdom.leadership.ruler_name = console.ask_line("Enter Ruler's name: ")
    console.clear()
    console.say("Loaded single player game!")
    single_player_game(console, kingdom, directory)
    return True


def _new_kingdom(console: Console) -> Kingdom:
    name = console.ask_line("Enter Ruler's name: ")
    console.clear()
    kingdom = Kingdom.new_game(name)
    console.say("Game initialized with the following resources:-\n")
    console.say(f"Peasants: {INITIAL_PEASANTS}")
    console.say(f"Merchants: {INITIAL_MERCHANTS}")
    console.say(f"Nobles: {INITIAL_NOBLES}")
    console.say(f"Total Population: {INITIAL_POPULATION}")
    console.say(f"Army Recruits: {INITIAL_ARMY_RECRUITS}")
    console.say(f"Treasury: {INITIAL_TREASURY:g}")
    console.say("Resources:-")
    console.say(
        f" Food: {INITIAL_FOOD}, Wood: {INITIAL_WOOD}, "
        f"Stone: {INITIAL_STONE}, Iron: {INITIAL_IRON}\n"
    )
    console.pause()
    console.clear()
    return kingdom


def _main_loop(console: Console, directory: Path) -> None:
    while True:
        console.clear()
        console.say("\n=== STRONGHOLD KINGDOM ===")
        console.say("[1] New Single Player Game")
        console.say("[2] New Multiplayer Game")
        console.say("[3] Load Game")
        console.say("[4] Exit")
        choice = console.ask_int("Choice: ")
        if choice == 1:
            single_player_game(console, _new_kingdom(console), directory)
        elif choice == 2:
            state = MultiplayerState(directory)
            state.initialize()
            multiplayer_game(console, state)
        elif choice == 3:
            handle_load_game(console, directory)
        elif choice == 4:
            return
        else:
            console.say("Invalid choice!")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="stronghold", description="Rule a medieval kingdom.")
    parser.add_argument(
        "--directory", default=".", help="where saves and shared records are kept"
    )
    args = parser.parse_args(argv)
    console = Console()
    try:
        _main_loop(console, Path(args.directory))
    except (EOFError, KeyboardInterrupt):
        console.say()
    console.say("\n=== Thanks for playing Stronghold ===")
    return 0