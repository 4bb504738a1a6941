"""Terminal helpers: coloured messages, screen control and line-based input."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import TextIO

_YELLOW = "\033[1;33m"
_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_RESET = "\033[0m"

_SHORT_MIN = -32768
_SHORT_MAX = 32767
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _colored(color: str, message: str) -> None:
    print(f"{color}{message}{_RESET}", end="")


def print_yellow(message: str) -> None:
    """Write a message in bold yellow, without a trailing newline."""
    _colored(_YELLOW, message)


def print_red(message: str) -> None:
    """Write a message in bold red, without a trailing newline."""
    _colored(_RED, message)


def print_green(message: str) -> None:
    """Write a message in bold green, without a trailing newline."""
    _colored(_GREEN, message)


def error_message(message: str) -> None:
    """Write a red error banner followed by the message."""
    print_red("\nERROR: ")
    print_red(message)
    print("\n")


def success_message(message: str) -> None:
    """Write a green success banner followed by the message."""
    print_green("\nSUCESSO: ")
    print_green(message)
    print("\n")


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except FileNotFoundError:
        print("\033[2J\033[H", end="", flush=True)


def _stream_or_stdin(stream: TextIO | None) -> TextIO:
    return sys.stdin if stream is None else stream


def _readline(stream: TextIO | None) -> str:
    line = _stream_or_stdin(stream).readline()
    if line == "":
        raise EOFError("no more input")
    return line


def _parse_short(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _SHORT_MIN <= value <= _SHORT_MAX:
        return None
    return value


def pause_screen(stream: TextIO | None = None) -> str:
    """Prompt the user and wait for one character; return it ('' at end of input)."""
    print("\nPressione qualquer tecla para continuar...", end="", flush=True)
    return _stream_or_stdin(stream).read(1)


def read_string(stream: TextIO | None = None) -> str:
    """Read one line of any length, without its trailing newline."""
    line = _readline(stream)
    return line[:-1] if line.endswith("\n") else line


def read_short_int(stream: TextIO | None = None) -> int:
    """Read a non-negative short integer, asking again until one is given."""
    while True:
        number = _parse_short(_readline(stream))
        if number is not None and number >= 0:
            return number
        error_message("Numero invalido ")
        print("Digite novamente: ", end="")


def read_char(stream: TextIO | None = None) -> str:
    """Read the first character of a line and discard the rest of it."""
    return _readline(stream)[0]


def strip_spaces(text: str) -> str:
    """Remove leading and trailing space characters (other whitespace is kept)."""
    return text.strip(" ")