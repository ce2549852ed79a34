"""Administrator console: credential checks and upkeep of the user and admin files."""

from __future__ import annotations

import random
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from atmbank.accounts import AccountNotFound
from atmbank.store import DATA_FILE, UserRecord, read_lines, verify_info, write_lines

ADMIN_FILE = "Admin.txt"
FIRST_CARD_NUMBER = 10000000
FIRST_ADMIN_ID = 400000

_NEW_ADMIN_PROMPT = "Enter new admin password: "

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _line_key(line: str) -> int | None:
    """Return the integer that starts the first field of ``line``, if any."""
    match = _LEADING_INT.match(line.split(",", 1)[0])
    return int(match.group(1)) if match else None


def _token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _read_int(text: str) -> int | None:
    try:
        return int(_token(text))
    except ValueError:
        return None


class SystemLocked(Exception):
    """Too many failed login attempts; the session must end."""


class ATM(ABC):
    """Common login bookkeeping for the ATM front ends."""

    def __init__(self, max_attempts: int = 3):
        self.max_attempts = max_attempts
        self.failed_attempts = 0

    def handle_failed_attempt(self) -> int:
        """Count a failed attempt; return attempts left or raise ``SystemLocked``."""
        self.failed_attempts += 1
        if self.failed_attempts >= self.max_attempts:
            raise SystemLocked(
                f"you entered the password/id wrong for {self.max_attempts} times. "
                "system is now locked"
            )
        return self.max_attempts - self.failed_attempts

    @abstractmethod
    def show_main_menu(self) -> None:
        """Run the interactive menu."""

    @abstractmethod
    def admin_login(self, admin_id: str, password: str) -> bool:
        """Check administrator credentials."""

    @abstractmethod
    def customer_login(self, card_number: int, pin: str) -> bool:
        """Check customer credentials."""


class Admin(ATM):
    """Administrator: manages user accounts and admin accounts."""

    accepts_customers = False

    def __init__(
        self,
        data_path: str | Path = DATA_FILE,
        admin_path: str | Path = ADMIN_FILE,
        rng: random.Random | None = None,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ):
        super().__init__()
        self.data_path = data_path
        self.admin_path = admin_path
        self.rng = rng if rng is not None else random.Random()
        self.ask = ask
        self.say = say

    def verify_passwords(self, admin_id: str, password: str) -> bool:
        """Tell whether the admin file holds ``admin_id`` with ``password``."""
        for line in read_lines(self.admin_path):
            fields = line.split(",")
            stored_id = fields[0]
            stored_pass = fields[1] if len(fields) > 1 else ""
            if stored_id == admin_id and stored_pass == password:
                return True
        return False

    def admin_login(self, admin_id: str, password: str) -> bool:
        return self.verify_passwords(admin_id, password)

    def customer_login(self, card_number: int, pin: str) -> bool:
        """Customers cannot sign in through the admin console, so this is always False."""
        if not isinstance(card_number, int):
            raise TypeError("card number must be an integer")
        return self.accepts_customers and verify_info(card_number, pin, self.data_path)

    def _card_exists(self, card_number: int) -> bool:
        return any(_line_key(line) == card_number for line in read_lines(self.data_path))

    def add_user(self) -> UserRecord:
        """Create a user with a fresh card number and random PIN and store it."""
        card_number = FIRST_CARD_NUMBER + len(read_lines(self.data_path))
        while self._card_exists(card_number):
            card_number += 1
        pin = 1000 + self.rng.randrange(9000)
        record = UserRecord(str(card_number), str(pin), "0.00", "0.00")
        with open(self.data_path, "a", encoding="utf-8") as out:
            out.write(record.to_line() + "\n")
        return record

    def delete_user(self, card_number: int) -> bool:
        """Remove the user's line; return whether it was there."""
        lines = read_lines(self.data_path)
        kept = [line for line in lines if _line_key(line) != card_number]
        if len(kept) == len(lines):
            return False
        write_lines(self.data_path, kept)
        return True

    def add_admin(self, password: str) -> int:
        """Store a new admin with ``password`` and return the new admin id."""
        admin_id = FIRST_ADMIN_ID + len(read_lines(self.admin_path))
        with open(self.admin_path, "a", encoding="utf-8") as out:
            out.write(f"{admin_id},{password}\n")
        return admin_id

    def delete_admin(self, admin_id: int) -> bool:
        """Remove an admin, refusing to remove the last one."""
        lines = read_lines(self.admin_path)
        kept = [line for line in lines if _line_key(line) != admin_id]
        if len(kept) == len(lines) or not kept:
            return False
        write_lines(self.admin_path, kept)
        return True

    def _find_user(self, card_number: int) -> UserRecord:
        for line in read_lines(self.data_path):
            if _line_key(line) == card_number:
                return UserRecord.parse(line)
        raise AccountNotFound("User not found")

    def user_balance(self, card_number: int) -> tuple[float, float]:
        """Return the checking and savings balances of a user."""
        record = self._find_user(card_number)
        return float(record.checking), float(record.saving)

    def view_user_balance(self, card_number: int) -> None:
        try:
            record = self._find_user(card_number)
        except AccountNotFound as exc:
            self.say(str(exc))
            return
        self.say(
            f"Account Details:  Card number: {record.card}"
            f", Checking account balance: ${float(record.checking):.2f}"
            f", Savings account balance: ${float(record.saving):.2f}"
        )

    def show_main_menu(self) -> None:
        """Run the admin menu until the admin chooses to exit."""
        while True:
            self.say("\n /////////// Admin Menu //////////// ")
            self.say("0. Exit")
            self.say("1. Add User Account")
            self.say("2. Delete User Account")
            self.say("3. Add Admin Account")
            self.say("4. Delete Admin Account")
            self.say("5. View User Checking and Savings balance")
            choice = _read_int(self.ask("Enter your choice: "))
            if choice is None:
                self.say("invalid choice , Enter a number between 0 and 5")
                continue
            if choice == 0:
                return
            if choice == 1:
                record = self.add_user()
                self.say(f"User created, Card number is: {record.card}, Pin is: {record.pin}")
            elif choice == 2:
                card = _read_int(self.ask("Enter user card number that you want to delete: "))
                if card is not None and self.delete_user(card):
                    self.say("User account is deleted.")
                else:
                    self.say("User is not found.")
            elif choice == 3:
                entered = self.ask(_NEW_ADMIN_PROMPT)
                admin_id = self.add_admin(_token(entered))
                self.say(f"Admin created, id is: {admin_id}")
            elif choice == 4:
                admin_id = _read_int(self.ask("Enter admin ID you want to delete: "))
                if admin_id is not None and self.delete_admin(admin_id):
                    self.say("Admin deleted.")
                else:
                    self.say("Can't delete admin.")
            elif choice == 5:
                card = _read_int(self.ask("Enter user card number: "))
                if card is None:
                    self.say("User not found")
                else:
                    self.view_user_balance(card)
            else:
                self.say("Invalid choice, select a number from 0 to 5")