"""Customer accounts: checking and savings, backed by the user data file."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Callable

from atmbank.store import DATA_FILE, UserRecord, format_amount, read_lines, write_lines


class AccountError(Exception):
    """An account operation could not be carried out."""


class AccountNotFound(AccountError):
    """The card number has no line in the data file."""


class InsufficientFunds(AccountError):
    """The balance does not cover the requested amount."""


def _token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _read_int(text: str) -> int | None:
    try:
        return int(_token(text))
    except ValueError:
        return None


def _read_amount(text: str) -> float | None:
    try:
        return float(_token(text))
    except ValueError:
        return None


class Account:
    """An account identified by its card number in the data file."""

    balance_field = "checking"
    not_found_message = "Account not found"
    pin_not_found_message = "Account not found"
    pin_prompt = "Enter new PIN (4 digits): "
    pin_changed_message = "PIN changed successfully"
    menu_lines: tuple[str, ...] = (
        "\n//////////// ACCOUNT MENU //////////",
        "0. Exit",
        "1. View Balance",
        "2. Deposit",
        "3. Change PIN",
    )
    exit_message = "Returning to the main menu"
    invalid_message = "Invalid choice"

    def __init__(
        self,
        card_number,
        data_path: str | Path = DATA_FILE,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ):
        self.card_number = str(card_number)
        self.data_path = data_path
        self.ask = ask
        self.say = say

    def _rewrite(self, update: Callable[[UserRecord], UserRecord], missing: str) -> UserRecord:
        """Apply ``update`` to this card's lines and save; return the last updated record."""
        lines = []
        updated = None
        for line in read_lines(self.data_path):
            record = UserRecord.parse(line)
            if record.card == self.card_number:
                updated = update(record)
                line = updated.to_line()
            lines.append(line)
        if updated is None:
            raise AccountNotFound(missing)
        write_lines(self.data_path, lines)
        return updated

    def balances(self) -> tuple[str, str]:
        """Return the checking and savings balances as stored."""
        for line in read_lines(self.data_path):
            record = UserRecord.parse(line)
            if record.card == self.card_number:
                return record.checking, record.saving
        raise AccountNotFound(self.not_found_message)

    def view_balance(self) -> None:
        try:
            checking, saving = self.balances()
        except AccountNotFound:
            return
        self.say("\nAccount Balances:")
        self.say(f"Checking account balance: ${checking}")
        self.say(f"Savings account balance: ${saving}")

    def deposit(self, amount: float) -> str:
        """Add ``amount`` to this account's balance and return the new balance."""
        field = self.balance_field

        def add(record: UserRecord) -> UserRecord:
            new_value = float(getattr(record, field)) + amount
            return replace(record, **{field: format_amount(new_value)})

        return getattr(self._rewrite(add, self.not_found_message), field)

    def change_pin(self, new_pin: str) -> None:
        self._rewrite(lambda record: replace(record, pin=new_pin), self.pin_not_found_message)

    def prompt_change_pin(self) -> None:
        new_pin = _token(self.ask(self.pin_prompt))
        try:
            self.change_pin(new_pin)
        except AccountError as exc:
            self.say(str(exc))
        else:
            self.say(self.pin_changed_message)

    def _deposit_dialog(self) -> None:
        amount = _read_amount(self.ask("Enter deposit amount: $"))
        if amount is None:
            self.say("Invalid amount")
            return
        try:
            self.deposit(amount)
        except AccountError as exc:
            self.say(str(exc))
        else:
            self.say(f"Successfully deposited ${amount:.2f}")

    def _run_menu(self, actions: dict[int, Callable[[], None]]) -> None:
        while True:
            for line in self.menu_lines:
                self.say(line)
            choice = _read_int(self.ask("Choice: "))
            if choice == 0:
                self.say(self.exit_message)
                return
            action = actions.get(choice)
            if action is None:
                self.say(self.invalid_message)
            else:
                action()

    def show_menu(self) -> None:
        """Run the menu until the user chooses to exit."""
        self._run_menu(
            {1: self.view_balance, 2: self._deposit_dialog, 3: self.prompt_change_pin}
        )


class CheckingAccount(Account):
    """Checking account: deposits, withdrawals and transfers between cards."""

    balance_field = "checking"
    pin_not_found_message = "/////////Account not found///////////////////"
    pin_prompt = "enter new PIN (4 digits): "
    pin_changed_message = "/////////////////PIN changed successfully///////////////////"
    menu_lines = (
        "\n///////////////CHECKING ACCOUNT MENU////////////////////",
        "1. View Balance",
        "2. Deposit",
        "3. Withdraw",
        "4. Transfer",
        "5. Change PIN",
        "0.Exit",
    )
    exit_message = "/////////////Returned to main menu//////////////////"
    invalid_message = "Invalid choice, enter 1,2,3,4,5, or select 0 to exit"

    def deposit(self, amount: float) -> str:
        """Add ``amount`` to the checking balance and return the new balance."""
        return super().deposit(amount)

    def withdraw(self, amount: float) -> str:
        """Take ``amount`` from the checking balance and return the new balance."""

        def take(record: UserRecord) -> UserRecord:
            current = float(record.checking)
            if current < amount:
                raise InsufficientFunds("Insufficient amount")
            return replace(record, checking=format_amount(current - amount))

        return self._rewrite(take, self.not_found_message).checking

    def transfer(self, receiver, amount: float) -> str:
        """Move ``amount`` from this checking balance to the receiver's; return ours."""
        receiver = str(receiver)
        lines = read_lines(self.data_path)
        records = [UserRecord.parse(line) for line in lines]

        sender_found = receiver_found = sufficient = False
        for record in records:
            if record.card == self.card_number:
                sender_found = True
                if float(record.checking) >= amount:
                    sufficient = True
            elif record.card == receiver:
                receiver_found = True

        if not sender_found:
            raise AccountNotFound(
                "Invalid sender cardnumber was added please check the details again"
            )
        if not receiver_found:
            raise AccountNotFound(
                "Invalid reciver cardnumber was added please check the details again"
            )
        if not sufficient:
            raise InsufficientFunds(
                "your funds for transfer have exceeded the ammount in your account"
            )

        result = ""
        new_lines = []
        for line, record in zip(lines, records):
            if record.card == self.card_number:
                result = format_amount(float(record.checking) - amount)
                line = replace(record, checking=result).to_line()
            elif record.card == receiver:
                credited = format_amount(float(record.checking) + amount)
                line = replace(record, checking=credited).to_line()
            new_lines.append(line)
        write_lines(self.data_path, new_lines)
        return result

    def _withdraw_dialog(self) -> None:
        amount = _read_amount(self.ask("Enter withdrawal amount: $"))
        if amount is None:
            self.say("Invalid amount")
            return
        try:
            self.withdraw(amount)
        except AccountError as exc:
            self.say(str(exc))
        else:
            self.say(f"Successfully withdrew ${amount:.2f}")

    def _transfer_dialog(self) -> None:
        receiver = _token(self.ask("Enter receivers card number: "))
        amount = _read_amount(self.ask("Enter transfer amount: $"))
        if amount is None:
            self.say("Invalid amount")
            return
        try:
            self.transfer(receiver, amount)
        except AccountError as exc:
            self.say(str(exc))
        else:
            self.say(f"Successfully transferred ${amount:.2f}")

    def show_menu(self) -> None:
        """Run the checking menu until the user chooses to exit."""
        self._run_menu(
            {
                1: self.view_balance,
                2: self._deposit_dialog,
                3: self._withdraw_dialog,
                4: self._transfer_dialog,
                5: self.prompt_change_pin,
            }
        )


class SavingsAccount(Account):
    """Savings account: balance view, deposits and PIN changes."""

    balance_field = "saving"
    menu_lines = (
        "\n//////////// SAVINGS ACCOUNT MENU //////////",
        "0. Exit",
        "1. View Balance",
        "2. Deposit",
        "3. Change PIN",
    )

    def deposit(self, amount: float) -> str:
        """Add ``amount`` to the savings balance and return the new balance."""
        return super().deposit(amount)

    def show_menu(self) -> None:
        """Run the savings menu until the user chooses to exit."""
        super().show_menu()