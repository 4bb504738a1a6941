"""Brazilian postal codes (CEP): formatting, validation and entry."""

from __future__ import annotations

from typing import TextIO

from rubro_negro.console import read_string

_DIGITS = frozenset("0123456789")
_CEP_DIGITS = 8
_HYPHEN_POSITION = 5


def format_cep(cep: str | None) -> str | None:
    """Rebuild a CEP from its digits, putting a hyphen at position 5.

    The character at position 5 is always replaced by the hyphen, and at most
    eight digits are kept.
    """
    if cep is None:
        return None
    parts: list[str] = []
    digits = 0
    for index, char in enumerate(cep):
        if digits >= _CEP_DIGITS:
            break
        if index == _HYPHEN_POSITION:
            parts.append("-")
        elif char in _DIGITS:
            parts.append(char)
            digits += 1
    return "".join(parts)


def validate_cep(cep: str | None) -> bool:
    """Return whether the CEP is ten characters long with a hyphen at position 5
    and digits in the other of its first nine positions."""
    if not cep or len(cep) != 10 or cep[_HYPHEN_POSITION] != "-":
        return False
    return all(
        char in _DIGITS
        for index, char in enumerate(cep[:9])
        if index != _HYPHEN_POSITION
    )


def read_cep(stream: TextIO | None = None) -> str | None:
    """Read a CEP, normalise it and return it, or None if it is not valid."""
    cep = format_cep(read_string(stream))
    return cep if validate_cep(cep) else None


def compare_ceps(cep1: str, cep2: str) -> int:
    """Compare two CEPs: negative, zero or positive."""
    return (cep1 > cep2) - (cep1 < cep2)


def print_cep(cep: str | None) -> None:
    """Print the CEP with its label, or N/A when missing."""
    print(f"CEP: {cep if cep is not None else 'N/A'}")