import logging

import pytest

from growth_calc.calculator import Invocation, UsageError, configure_logging, main, parse_args, run
from growth_calc.session.log import LOGGER_NAME
from growth_calc.utils import Config


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GROWTH_CALC_LOG_LEVEL", raising=False)
    return tmp_path


def test_parse_no_args_uses_default_config_file():
    assert parse_args([]) == Invocation(config_path="config.txt")


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_parse_help(flag):
    assert parse_args([flag]).show_help


def test_parse_config_flag():
    assert parse_args(["--config", "my.txt"]).config_path == "my.txt"


def test_parse_positional_arguments():
    invocation = parse_args(["3", "4", "run.log"])
    assert invocation.config == Config(base=3.0, exponent=4, log_file="run.log")


@pytest.mark.parametrize(
    "args, message",
    [
        (["--config"], "--config requires a file path"),
        (["5"], "Invalid arguments"),
        (["two", "5"], "Expected: <base> <exponent>"),
    ],
)
def test_parse_errors(args, message):
    with pytest.raises(UsageError, match=message):
        parse_args(args)


def test_help_exits_zero(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "Growth Pattern Calculator" in out
    assert "--config FILE" in out


def test_invalid_arguments_print_usage_and_fail(capsys, caplog):
    assert main(["abc", "5"]) == 1
    assert "Usage:" in capsys.readouterr().out
    assert any("Invalid arguments" in m for m in caplog.messages)


def test_run_from_arguments(workdir, capsys, no_sleep):
    assert main(["2", "5"]) == 0

    out = capsys.readouterr().out
    assert "Step 5: 2 × 5 = 10.000000" in out
    assert "Step 5: 2^5 = 32.000000" in out
    assert "Calculation completed!" in out
    assert "Logs saved to: logs/growth_calc.log" in out
    assert len(no_sleep) == 10

    log_text = (workdir / "logs" / "growth_calc.log").read_text(encoding="utf-8")
    assert "NEW CALCULATION SESSION STARTED" in log_text
    assert "Final Exponential Result: 32.000000" in log_text
    assert "=== LINEAR GROWTH" not in log_text


def test_run_from_config_file(workdir, capsys, no_sleep):
    (workdir / "settings.txt").write_text(
        "base=3\nexpo=2\nlogfile=out/calc.log\n", encoding="utf-8"
    )
    assert main(["--config", "settings.txt"]) == 0

    out = capsys.readouterr().out
    assert "Reading configuration from: settings.txt" in out
    assert "Step 2: 3^2 = 9.000000" in out
    assert (workdir / "out" / "calc.log").exists()


def test_logging_disabled_in_config(workdir, capsys, no_sleep):
    (workdir / "config.txt").write_text("exponent=1\nenable_logging=0\n", encoding="utf-8")
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Step 1: 2^1 = 2.000000" in out
    assert "Logs saved to" not in out
    assert not (workdir / "logs").exists()


def test_missing_default_config_uses_defaults(workdir, capsys, caplog, no_sleep):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Final Exponential Result: 32.000000" in out
    assert "Failed to read config file. Using default values." in caplog.messages


def test_malformed_config_file_fails(workdir, caplog):
    (workdir / "config.txt").write_text("base=lots\n", encoding="utf-8")
    assert main([]) == 1
    assert any("Invalid base value" in m for m in caplog.messages)


def test_exponent_below_one_fails(caplog, no_sleep):
    assert main(["2", "0"]) == 1
    assert "Error: Exponent must be at least 1" in caplog.messages
    assert no_sleep == []


def test_unwritable_log_file_continues(workdir, capsys, caplog, no_sleep):
    (workdir / "blocked").mkdir()
    with caplog.at_level(logging.WARNING):
        assert main(["2", "2", "blocked"]) == 0
    out = capsys.readouterr().out
    assert "Calculation completed!" in out
    assert "Logs saved to" not in out
    assert "Continuing without file logging..." in caplog.messages


def test_parse_ignores_trailing_arguments():
    invocation = parse_args(["2", "5", "a.log", "extra"])
    assert invocation.config == Config(base=2.0, exponent=5, log_file="a.log")
    assert parse_args(["--config", "f.txt", "extra"]).config_path == "f.txt"


def test_trailing_arguments_still_run(workdir, capsys, no_sleep):
    assert main(["2", "1", "a.log", "extra"]) == 0
    assert "Calculation completed!" in capsys.readouterr().out
    assert (workdir / "a.log").exists()


def test_config_file_with_latin1_comment_runs(workdir, capsys, no_sleep):
    (workdir / "config.txt").write_bytes(b"# caf\xe9\nbase=3\nexponent=1\nenable_logging=0\n")
    assert main([]) == 0
    assert "Step 1: 3^1 = 3.000000" in capsys.readouterr().out


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("GROWTH_CALC_LOG_LEVEL", "debug")
    assert configure_logging().level == logging.DEBUG


def test_invalid_log_level_falls_back_to_info(monkeypatch, caplog):
    monkeypatch.setenv("GROWTH_CALC_LOG_LEVEL", "LOUD")
    assert configure_logging().level == logging.INFO
    assert "Ignoring invalid GROWTH_CALC_LOG_LEVEL: LOUD" in caplog.messages


def test_large_exponent_warns_and_runs(capsys, caplog, no_sleep):
    assert main(["1", "101", "run.log"]) == 0
    assert "Large exponent (101) may take a long time! Estimated time: 202 seconds" in caplog.messages
    assert "Step 101: 1^101 = 1.000000" in capsys.readouterr().out
    assert len(no_sleep) == 202


def test_interrupt_closes_log_and_exits_130(workdir, capsys, caplog, monkeypatch):
    def interrupt(seconds):
        raise KeyboardInterrupt

    monkeypatch.setattr("growth_calc.growth.runner.time.sleep", interrupt)
    assert main(["2", "3", "run.log"]) == 130

    assert "Calculation interrupted" in caplog.messages
    assert "Calculation completed!" not in capsys.readouterr().out
    assert logging.getLogger(LOGGER_NAME).handlers == []
    assert "NEW CALCULATION SESSION STARTED" in (workdir / "run.log").read_text(encoding="utf-8")


def test_run_leaves_config_untouched(workdir, capsys, no_sleep):
    (workdir / "blocked").mkdir()
    config = Config(exponent=1, log_file="blocked")
    assert run(config) == 0
    assert config.enable_logging is True
    assert "Logs saved to" not in capsys.readouterr().out
