import io
import logging
import sys

import pytest

from heapperm import _config, get_log_level, set_log_level
from heapperm.cli import InvalidArgument, main, parse_int, run, split_argv


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    monkeypatch.setattr(_config, "_level_override", None)
    monkeypatch.delenv("HEAPPERM_LOG_LEVEL", raising=False)
    yield
    logging.getLogger("heapperm").setLevel(logging.NOTSET)


def _run(*argv):
    out = io.StringIO()
    assert main(list(argv), out=out) == 0
    return out.getvalue()


def test_cli_three():
    assert _run("1", "2", "3") == "1 2 3\n2 1 3\n3 1 2\n1 3 2\n2 3 1\n3 2 1\n"


def test_cli_small():
    assert _run("7") == "7\n"
    assert _run("1", "2") == "1 2\n2 1\n"
    assert _run() == "\n"


def test_cli_negative_values():
    assert _run("-1", "5") == "-1 5\n5 -1\n"


def test_cli_line_count():
    assert len(_run(*"12345").splitlines()) == 120


def test_cli_invalid(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["1", "x"], out=io.StringIO())
    assert exc.value.code == 2
    assert "invalid integer: 'x'" in capsys.readouterr().err


def test_cli_auto_base():
    assert _run("--auto-base", "0x10", "010", "-7").splitlines()[0] == "16 8 -7"
    assert _run("010").splitlines()[0] == "10"


@pytest.mark.parametrize("token, expected", (
    ("42", 42), ("-3", -3), ("+8", 8), (" 5 ", 5), ("007", 7),
))
def test_parse_decimal(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token, expected", (
    ("0x1F", 31), ("-0x10", -16), ("017", 15), ("0", 0), ("19", 19),
))
def test_parse_auto_base(token, expected):
    assert parse_int(token, auto_base=True) == expected


@pytest.mark.parametrize("token", ("", "1.5", "abc", "0x10", "1_000", "--1"))
def test_parse_invalid(token):
    with pytest.raises(InvalidArgument):
        parse_int(token)


def test_parse_invalid_octal():
    with pytest.raises(InvalidArgument):
        parse_int("09", auto_base=True)


def test_cli_verbose_logging(caplog):
    # diagnostics never reach the permutation stream
    assert _run("-vv", "1", "2") == "1 2\n2 1\n"
    assert "permuting 2 values" in caplog.text
    assert "emitted 2 permutations" in caplog.text


def test_log_level_resolution(monkeypatch):
    assert get_log_level() == "WARNING"
    monkeypatch.setenv("HEAPPERM_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
    monkeypatch.setenv("HEAPPERM_LOG_LEVEL", "bogus")
    assert get_log_level() == "WARNING"
    set_log_level("error")
    assert get_log_level() == "ERROR"
    set_log_level("auto")
    assert get_log_level() == "WARNING"
    with pytest.raises(ValueError):
        set_log_level("loud")


def test_configured_level_applies(monkeypatch):
    set_log_level("info")
    _run("1")
    assert logging.getLogger("heapperm").level == logging.INFO


def test_run_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["heapperm", "3", "4"])
    with pytest.raises(SystemExit) as exc:
        run()
    assert exc.value.code == 0
    assert capsys.readouterr().out == "3 4\n4 3\n"


def test_cli_auto_base_negative_prefix():
    assert _run("--auto-base", "-0x10", "5") == "-16 5\n5 -16\n"


def test_cli_options_between_values():
    assert _run("1", "-v", "2") == "1 2\n2 1\n"
    assert _run("3", "--auto-base", "0x4") == "3 4\n4 3\n"


def test_cli_double_dash(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--", "-v"], out=io.StringIO())
    assert exc.value.code == 2
    assert "invalid integer: '-v'" in capsys.readouterr().err


def test_cli_unknown_option(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--loud", "1"], out=io.StringIO())
    assert exc.value.code == 2
    assert "unrecognized arguments: --loud" in capsys.readouterr().err


@pytest.mark.parametrize("argv, options, tokens", (
    (["-v", "-3", "4"], ["-v"], ["-3", "4"]),
    (["-0x1f", "--auto-base"], ["--auto-base"], ["-0x1f"]),
    (["1", "--", "-v", "--"], [], ["1", "-v", "--"]),
    (["-"], [], ["-"]),
))
def test_split_argv(argv, options, tokens):
    assert split_argv(argv) == (options, tokens)
