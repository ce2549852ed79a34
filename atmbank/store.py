"""Plain-text storage of user records: one ``card,pin,checking,savings`` line each."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

DATA_FILE = "data.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


def _split_fields(line: str) -> list[str]:
    """Split on commas; a trailing empty field does not count as a field."""
    tokens = line.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


@dataclass(frozen=True)
class UserRecord:
    """One user line: card number, PIN and the two balances, kept as stored text."""

    card: str
    pin: str = ""
    checking: str = ""
    saving: str = ""

    @classmethod
    def parse(cls, line: str) -> "UserRecord":
        """Split a stored line; the savings field takes the rest of the line."""
        fields = line.split(",", 3)
        fields += [""] * (4 - len(fields))
        return cls(*fields)

    def to_line(self) -> str:
        return f"{self.card},{self.pin},{self.checking},{self.saving}"


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of ``path``; a file that cannot be read has none."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(path: str | Path, lines) -> None:
    """Replace the contents of ``path`` with ``lines``, each ended by a newline."""
    Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


def format_amount(value: float) -> str:
    """Format a money amount with two decimals."""
    return f"{value:.2f}"


def verify_info(user_id: int, pin: str, path: str | Path = DATA_FILE) -> bool:
    """Tell whether the data file holds a line for ``user_id`` with ``pin``."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError:
        print(f"error >> can't open {Path(path).name}", file=sys.stderr)
        return False
    for line in content.splitlines():
        tokens = _split_fields(line)
        if len(tokens) < 2:
            continue
        try:
            stored_id = _leading_int(tokens[0])
        except ValueError:
            continue
        if stored_id == user_id and tokens[1] == pin:
            return True
    return False