"""Limited-attempt login prompts for administrators and customers."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from atmbank.admin import Admin, SystemLocked
from atmbank.store import DATA_FILE, verify_info

LOCKED_MESSAGE = "\nToo many failed attempts. SYSTEM LOCKED."

_ID_PROMPT = "Admin ID: "
_PHRASE_PROMPT = "Password: "


def _token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _remaining(left: int) -> str:
    return f"{left} attempt{'s' if left > 1 else ''} remaining."


def attempt_admin_login(
    admin: Admin,
    max_attempts: int = 3,
    ask: Callable[[str], str] = input,
    say: Callable[[str], None] = print,
) -> bool:
    """Prompt for admin credentials; return True on success, raise ``SystemLocked`` otherwise."""
    for attempt in range(max_attempts):
        admin_id = _token(ask(_ID_PROMPT))
        entered = ask(_PHRASE_PROMPT)
        if admin.admin_login(admin_id, _token(entered)):
            return True
        left = max_attempts - attempt - 1
        if left > 0:
            say(f"Invalid credentials. {_remaining(left)}")
    say(LOCKED_MESSAGE)
    raise SystemLocked("Too many failed attempts. SYSTEM LOCKED.")


def attempt_customer_login(
    card_number: int,
    data_path: str | Path = DATA_FILE,
    max_attempts: int = 3,
    ask: Callable[[str], str] = input,
    say: Callable[[str], None] = print,
) -> bool:
    """Prompt for a card's PIN; return True on success, raise ``SystemLocked`` otherwise."""
    for attempt in range(max_attempts):
        pin = _token(ask("PIN: "))
        if verify_info(card_number, pin, data_path):
            return True
        left = max_attempts - attempt - 1
        if left > 0:
            say(f"Invalid PIN. {_remaining(left)}")
    say(LOCKED_MESSAGE)
    raise SystemLocked("Too many failed attempts. SYSTEM LOCKED.")