"""Calendar dates: validation, birth-date checks and interactive entry."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import Callable, TextIO

from rubro_negro.console import read_string

_SHORT_MIN = -32768
_SHORT_MAX = 32767
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Date:
    """A day/month/year triple."""

    day: int
    month: int
    year: int

    def format(self) -> str:
        """Return the date as dd/mm/yyyy."""
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"


def is_leap_year(year: int) -> bool:
    """Return whether the year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in the month of the given year."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def validate_date(date: Date) -> bool:
    """Accept a date whose month is 1-12, or whose day fits the month's length."""
    if 1 <= date.month <= 12:
        return True
    return 1 <= date.day <= days_in_month(date.month, date.year)


def validate_birth_date(date: Date, today: datetime.date | None = None) -> bool:
    """Return whether the date is valid and not later than today."""
    if today is None:
        today = datetime.date.today()
    if not validate_date(date):
        return False
    if date.year < today.year:
        return True
    if date.year == today.year:
        if date.month < today.month:
            return True
        return date.month == today.month and date.day <= today.day
    return False


def _parse_short(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _SHORT_MIN <= value <= _SHORT_MAX:
        return None
    return value


def _read_bounded(stream: TextIO | None, prompt: str, accept: Callable[[int], bool]) -> int:
    print(prompt, end="")
    while True:
        value = _parse_short(read_string(stream))
        if value is not None and accept(value):
            return value
        print("Digite um valor valido: ", end="")


def read_day(stream: TextIO | None = None) -> int:
    """Read a day (1-31), or -1 to go back."""
    return _read_bounded(stream, "Digite o dia: ", lambda n: n == -1 or 1 <= n <= 31)


def read_month(stream: TextIO | None = None) -> int:
    """Read a month (1-12), or -1 to go back."""
    return _read_bounded(stream, "Digite o mes: ", lambda n: n == -1 or 1 <= n <= 12)


def read_year(stream: TextIO | None = None) -> int:
    """Read a positive year, or -1 to go back."""
    return _read_bounded(stream, "Digite o ano: ", lambda n: n == -1 or n >= 1)


def read_birth_date(stream: TextIO | None = None) -> Date | None:
    """Read a birth date interactively.

    Entering -1 for the month returns to the day, -1 for the year returns to
    the month, and -1 for the day cancels. Returns None when cancelled or when
    the date is not a valid birth date.
    """
    day = read_day(stream)
    while day != -1:
        month = read_month(stream)
        if month == -1:
            day = read_day(stream)
            continue
        year = read_year(stream)
        if year == -1:
            continue
        date = Date(day, month, year)
        return date if validate_birth_date(date) else None
    return None


def print_date(date: Date | None) -> None:
    """Print the date with its label; print nothing for None."""
    if date is not None:
        print(f"Data: {date.format()}")