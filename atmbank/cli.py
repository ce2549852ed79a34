"""Interactive ATM front end: chooses admin or customer sessions."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

from atmbank.accounts import CheckingAccount, SavingsAccount
from atmbank.admin import ADMIN_FILE, Admin, SystemLocked
from atmbank.login import attempt_admin_login, attempt_customer_login
from atmbank.store import DATA_FILE


def _read_int(text: str) -> int | None:
    parts = text.split()
    try:
        return int(parts[0]) if parts else None
    except ValueError:
        return None


def _customer_session(card_number, data_path, ask, say) -> None:
    if not attempt_customer_login(card_number, data_path, ask=ask, say=say):
        return
    say("\nSelect Account Type:")
    say("1. Checking Account")
    say("2. Savings Account")
    account_choice = _read_int(ask("Choice: "))
    if account_choice == 1:
        CheckingAccount(card_number, data_path, ask, say).show_menu()
    elif account_choice == 2:
        SavingsAccount(card_number, data_path, ask, say).show_menu()
    else:
        say("Invalid account type.")


def run(
    data_path: str | Path = DATA_FILE,
    admin_path: str | Path = ADMIN_FILE,
    ask: Callable[[str], str] | None = None,
    say: Callable[[str], None] | None = None,
) -> None:
    """Run the main menu until the user exits; ``SystemLocked`` ends it early."""
    ask = ask if ask is not None else input
    say = say if say is not None else print
    while True:
        say("\nwelcome to S_K_L_A Bank ATM")
        say("1. admin login")
        say("2. customer login")
        say("0. exit")
        choice = _read_int(ask("Choice: "))
        if choice == 0:
            say("\nGoodbye!")
            return
        if choice == 1:
            admin = Admin(data_path, admin_path, ask=ask, say=say)
            if attempt_admin_login(admin, ask=ask, say=say):
                admin.show_main_menu()
        elif choice == 2:
            card_number = _read_int(ask("Card Number: "))
            if card_number is None:
                say("Invalid card number.")
                continue
            _customer_session(card_number, data_path, ask, say)
        else:
            say("Please enter 0, 1, or 2.")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="atmbank", description="Bank ATM console.")
    parser.add_argument("--data", default=DATA_FILE, help="user data file")
    parser.add_argument("--admin", default=ADMIN_FILE, help="admin credentials file")
    args = parser.parse_args(argv)
    try:
        run(args.data, args.admin)
    except SystemLocked:
        return 1
    except (EOFError, KeyboardInterrupt):
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())