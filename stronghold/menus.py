"""Console input and output, and the management menus shared by every game mode."""

from __future__ import annotations

import os
import subprocess
import sys
from collections import deque
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .army import Army
    from .economy import Bank, Economy
    from .resources import Resources
    from .society import Population

HOUSING_WOOD = 50
HOUSING_STONE = 30
HOUSING_CAPACITY = 100
WOOD_CAP = 500
STONE_CAP = 300
PAUSE_TEXT = "Press Enter to continue..."


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Console:
    """Reads whitespace-separated answers and writes lines of text."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: bool | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        if clear_screen is None:
            isatty = getattr(self.stdout, "isatty", None)
            clear_screen = bool(isatty and isatty())
        self._clear_screen = clear_screen
        self._pending: deque[str] = deque()

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, text: str = "") -> None:
        self._write(text + "\n")

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def _token(self) -> str:
        while not self._pending:
            self._pending.extend(self._read_line().split())
        return self._pending.popleft()

    def _ask_number(self, prompt: str, convert, complaint: str):
        self._write(prompt)
        while True:
            token = self._token()
            try:
                return convert(token)
            except ValueError:
                self._pending.clear()
                self.say(complaint)
                self._write(prompt)

    def ask_int(self, prompt: str = "") -> int:
        """Read one whole number, asking again until one is given."""
        return self._ask_number(prompt, int, "Please enter a whole number.")

    def ask_float(self, prompt: str = "") -> float:
        """Read one number, asking again until one is given."""
        return self._ask_number(prompt, float, "Please enter a number.")

    def ask_line(self, prompt: str = "") -> str:
        """Read the rest of the current line, or a fresh line if none is left."""
        self._write(prompt)
        if self._pending:
            line = " ".join(self._pending)
            self._pending.clear()
            return line
        return self._read_line()

    def pause(self) -> None:
        self._write(PAUSE_TEXT)
        self._pending.clear()
        self._read_line()

    def clear(self) -> None:
        if not self._clear_screen:
            return
        command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
        try:
            subprocess.run(command, check=False)
        except OSError:
            self._write("\033[2J\033[H")


def population_menu(population: Population, resources: Resources, console: Console) -> None:
    """Build housing, gather materials and inspect the population."""
    while True:
        console.say("\n=== Population management ===")
        console.say(f"[1] Build Housing ({HOUSING_WOOD} wood, {HOUSING_STONE} stone)")
        console.say("[2] Gather Resources")
        console.say("[3] View Population Status")
        console.say("[0] Back")
        choice = console.ask_int("Choice: ")
        console.clear()

        if choice == 0:
            return
        if choice == 1:
            if resources.consume_wood(HOUSING_WOOD) and resources.consume_stone(HOUSING_STONE):
                population.shelter += HOUSING_CAPACITY
                console.say(f"Built shelter for {HOUSING_CAPACITY} people!")
            else:
                console.say(f"Need {HOUSING_WOOD} wood and {HOUSING_STONE} stone!")
        elif choice == 2:
            wood = _tdiv(population.total, 10)
            stone = _tdiv(population.total, 20)
            resources.wood = min(resources.wood + wood, WOOD_CAP)
            resources.stone = min(resources.stone + stone, STONE_CAP)
            console.say(f"Gathered {wood} wood and {stone} stone.")
        elif choice == 3:
            console.say(population.report())
            console.say(f"Shelter Capacity: {population.shelter}")
            console.say(f"Homeless: {max(0, population.total - population.shelter)}")

        console.say()
        console.pause()
        console.clear()


def _feed_army(army: Army, resources: Resources, console: Console) -> None:
    console.say("\n=== Army feeding ===")
    console.say(f"Available food: {resources.food}")
    console.say(f"Total soldiers: {army.total}")
    amount = console.ask_int("Enter food amount to use: ")
    if army.feed(resources, amount):
        console.say(f"Fed army with {amount} food units!")
    else:
        console.say("Not enough food!")


def army_menu(army: Army, resources: Resources, console: Console) -> None:
    """Recruit, train, feed, pay and inspect the army."""
    while True:
        console.say("\n=== Army Management Menu ===")
        console.say("[1] Recruit Soldiers")
        console.say("[2] Train Soldiers")
        console.say("[3] Feed Army")
        console.say("[4] Pay Soldiers")
        console.say("[5] View Army Status")
        console.say("[0] Back")
        choice = console.ask_int("Choice: ")
        console.clear()

        if choice == 0:
            return
        if choice == 1:
            army.recruit(console.ask_int("Enter number of soldiers to recruit: "))
        elif choice == 2:
            army.train(console.ask_int("Enter training days: "))
        elif choice == 3:
            _feed_army(army, resources, console)
        elif choice == 4:
            army.pay(console.ask_int("Enter amount: "))
        elif choice == 5:
            console.say(army.report())


def bank_menu(bank: Bank, economy: Economy, console: Console) -> None:
    """Take and repay loans, audit the bank and show its state."""
    while True:
        console.say("\n=== Bank ===")
        console.say("[1] Take Loan")
        console.say("[2] Repay Loan")
        console.say("[3] Conduct Audit")
        console.say("[4] Display Bank Status")
        console.say("[0] Back")
        choice = console.ask_int("Choice: ")
        console.clear()

        if choice == 0:
            return
        if choice == 1:
            amount = console.ask_float("Enter loan amount: ")
            if bank.take_loan(economy, amount):
                console.say("Loan granted!")
            else:
                console.say("Loan refused!")
        elif choice == 2:
            bank.repay_loan(economy, console.ask_float("Enter repayment amount: "))
        elif choice == 3:
            if bank.conduct_audit(economy):
                console.say("Audit conducted!")
            else:
                console.say("No audit needed.")
        elif choice == 4:
            console.say(bank.report())