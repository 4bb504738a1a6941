import datetime
import io

import pytest

from rubro_negro.date import (
    Date,
    days_in_month,
    is_leap_year,
    print_date,
    read_birth_date,
    read_day,
    read_month,
    read_year,
    validate_birth_date,
    validate_date,
)

TODAY = datetime.date(2024, 6, 15)


@pytest.mark.parametrize(
    "year, expected", [(2000, True), (1900, False), (2024, True), (2023, False)]
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_days_in_month():
    assert days_in_month(2, 2024) == 29
    assert days_in_month(2, 2023) == 28
    for month in (4, 6, 9, 11):
        assert days_in_month(month, 2023) == 30
    for month in (1, 3, 5, 7, 8, 10, 12):
        assert days_in_month(month, 2023) == 31


def test_validate_date_month_in_range():
    assert validate_date(Date(10, 5, 1990)) is True
    assert validate_date(Date(31, 2, 2023)) is True


def test_validate_date_month_out_of_range_uses_day():
    assert validate_date(Date(15, 13, 2020)) is True
    assert validate_date(Date(40, 13, 2020)) is False
    assert validate_date(Date(0, 0, 0)) is False


def test_validate_birth_date_past():
    assert validate_birth_date(Date(1, 1, 1990), TODAY) is True


def test_validate_birth_date_same_year():
    assert validate_birth_date(Date(31, 5, 2024), TODAY) is True
    assert validate_birth_date(Date(15, 6, 2024), TODAY) is True
    assert validate_birth_date(Date(16, 6, 2024), TODAY) is False
    assert validate_birth_date(Date(1, 7, 2024), TODAY) is False


def test_validate_birth_date_future_year():
    assert validate_birth_date(Date(1, 1, 2025), TODAY) is False


def test_validate_birth_date_default_today():
    assert validate_birth_date(Date(1, 1, 1990)) is True
    assert validate_birth_date(Date(1, 1, 30000)) is False


def test_read_day_retries(capsys):
    assert read_day(io.StringIO("0\n32\nabc\n5\n")) == 5
    out = capsys.readouterr().out
    assert out.startswith("Digite o dia: ")
    assert out.count("Digite um valor valido: ") == 3


def test_read_day_back():
    assert read_day(io.StringIO("-1\n")) == -1


def test_read_month():
    assert read_month(io.StringIO("13\n-2\n12\n")) == 12


def test_read_year():
    assert read_year(io.StringIO("0\n-2\n1990\n")) == 1990


def test_read_year_eof():
    with pytest.raises(EOFError):
        read_year(io.StringIO("0\n"))


def test_read_birth_date_simple():
    assert read_birth_date(io.StringIO("10\n5\n1990\n")) == Date(10, 5, 1990)


def test_read_birth_date_cancel():
    assert read_birth_date(io.StringIO("-1\n")) is None


def test_read_birth_date_month_goes_back_to_day():
    stream = io.StringIO("10\n-1\n11\n3\n2000\n")
    assert read_birth_date(stream) == Date(11, 3, 2000)


def test_read_birth_date_year_goes_back_to_month():
    stream = io.StringIO("10\n5\n-1\n6\n1991\n")
    assert read_birth_date(stream) == Date(10, 6, 1991)


def test_read_birth_date_future_rejected():
    assert read_birth_date(io.StringIO("1\n1\n30000\n")) is None


def test_format_pads():
    assert Date(1, 2, 2003).format() == "01/02/2003"


def test_print_date(capsys):
    print_date(Date(30, 10, 1995))
    assert capsys.readouterr().out == "Data: 30/10/1995\n"


def test_print_date_none(capsys):
    print_date(None)
    assert capsys.readouterr().out == ""