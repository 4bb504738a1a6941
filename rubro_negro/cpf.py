"""Brazilian taxpayer numbers (CPF): formatting, validation and entry."""

from __future__ import annotations

from typing import TextIO

from rubro_negro.console import read_string

_DIGITS = frozenset("0123456789")
_CPF_DIGITS = 11
_DOT_POSITIONS = (3, 7)
_DASH_POSITION = 11


def format_cpf(cpf: str | None) -> str | None:
    """Rebuild a CPF from its digits, with dots at positions 3 and 7 and a dash
    at position 11; at most eleven digits are kept."""
    if cpf is None:
        return None
    parts: list[str] = []
    digits = 0
    for index, char in enumerate(cpf):
        if digits >= _CPF_DIGITS:
            break
        if char in _DIGITS and index not in _DOT_POSITIONS:
            parts.append(char)
            digits += 1
        elif index in _DOT_POSITIONS:
            parts.append(".")
        elif index == _DASH_POSITION:
            parts.append("-")
    return "".join(parts)


def _cpf_char_ok(index: int, char: str) -> bool:
    if char not in _DIGITS:
        return False
    return not (index in _DOT_POSITIONS and char != ".")


def validate_cpf(cpf: str | None) -> bool:
    """Return whether the CPF is eleven characters, each a digit that also
    satisfies the separator rule for its position."""
    if cpf is None or len(cpf) != _CPF_DIGITS:
        return False
    return all(_cpf_char_ok(index, char) for index, char in enumerate(cpf))


def read_cpf(stream: TextIO | None = None) -> str | None:
    """Read a CPF, normalise it and return it, or None if it is not valid."""
    cpf = format_cpf(read_string(stream))
    return cpf if validate_cpf(cpf) else None


def print_cpf(cpf: str | None) -> None:
    """Print the CPF with its label, or N/A when missing."""
    print(f"CPF: {cpf if cpf is not None else 'N/A'}")