import io
from unittest.mock import patch

import pytest

from rubro_negro.console import (
    clear_screen,
    error_message,
    pause_screen,
    print_green,
    print_red,
    print_yellow,
    read_char,
    read_short_int,
    read_string,
    strip_spaces,
    success_message,
)


def test_print_yellow(capsys):
    print_yellow("oi")
    assert capsys.readouterr().out == "\033[1;33moi\033[0m"


def test_print_red(capsys):
    print_red("oi")
    assert capsys.readouterr().out == "\033[1;31moi\033[0m"


def test_print_green(capsys):
    print_green("oi")
    assert capsys.readouterr().out == "\033[1;32moi\033[0m"


def test_error_message(capsys):
    error_message("falhou")
    out = capsys.readouterr().out
    assert out == "\033[1;31m\nERROR: \033[0m\033[1;31mfalhou\033[0m\n\n"


def test_success_message(capsys):
    success_message("ok")
    out = capsys.readouterr().out
    assert out == "\033[1;32m\nSUCESSO: \033[0m\033[1;32mok\033[0m\n\n"


def test_clear_screen_runs_command():
    with patch("rubro_negro.console.subprocess.run") as run:
        result = clear_screen()
    assert run.call_count == 1
    assert run.call_args.args[0] in (["clear"], ["cmd", "/c", "cls"])
    assert result in (None, run.return_value)


def test_pause_screen_reads_one_char(capsys):
    assert pause_screen(io.StringIO("q\n")) == "q"
    assert "Pressione qualquer tecla" in capsys.readouterr().out


def test_pause_screen_end_of_input():
    assert pause_screen(io.StringIO("")) == ""


def test_read_string_strips_newline():
    stream = io.StringIO("Sao Paulo\nRio de Janeiro\n")
    assert read_string(stream) == "Sao Paulo"
    assert read_string(stream) == "Rio de Janeiro"


def test_read_string_long_line():
    text = "x" * 500
    assert read_string(io.StringIO(text + "\n")) == text


def test_read_string_without_newline():
    assert read_string(io.StringIO("abc")) == "abc"


def test_read_string_eof():
    with pytest.raises(EOFError):
        read_string(io.StringIO(""))


def test_read_short_int_retries(capsys):
    assert read_short_int(io.StringIO("abc\n-3\n42\n")) == 42
    out = capsys.readouterr().out
    assert out.count("Numero invalido") == 2


def test_read_short_int_rejects_overflow():
    assert read_short_int(io.StringIO("40000\n7\n")) == 7


def test_read_short_int_eof():
    with pytest.raises(EOFError):
        read_short_int(io.StringIO("x\n"))


def test_read_char():
    stream = io.StringIO("xyz\nb\n")
    assert read_char(stream) == "x"
    assert read_char(stream) == "b"


def test_read_char_eof():
    with pytest.raises(EOFError):
        read_char(io.StringIO(""))


@pytest.mark.parametrize(
    "text, expected",
    [("  a b  ", "a b"), ("abc", "abc"), ("    ", ""), ("\ta\t", "\ta\t")],
)
def test_strip_spaces(text, expected):
    assert strip_spaces(text) == expected