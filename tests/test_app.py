import os
import subprocess
import sys
from pathlib import Path

import pytest

import argkit
from argkit import app, const
from argkit.cli import ArgumentKind, ParsedArgument

ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.delenv(const.ENV_EXTRA_ARGS, raising=False)
    monkeypatch.delenv(const.ENV_LOG_FILE, raising=False)
    monkeypatch.setenv(const.ENV_WINDOWS, "no")


# --- Config ----------------------------------------------------------------- #


def test_windows_mode(monkeypatch):
    monkeypatch.setenv(const.ENV_WINDOWS, "yes")
    assert const.windowsMode() is True

    monkeypatch.setenv(const.ENV_WINDOWS, "0")
    assert const.windowsMode() is False

    monkeypatch.setenv(const.ENV_WINDOWS, "maybe")
    with pytest.raises(RuntimeError):
        const.windowsMode()


def test_extra_args(monkeypatch):
    assert const.extraArgs() == []
    monkeypatch.setenv(const.ENV_EXTRA_ARGS, "-e --example=1")
    assert const.extraArgs() == ["-e", "--example=1"]


# --- Main ------------------------------------------------------------------- #


def test_main_no_arguments(capsys):
    assert argkit.main([]) == const.EXIT_FAILURE
    assert "usage: argkit (arguments)" in capsys.readouterr().err


def test_main_example(capsys):
    assert argkit.main(["-e", "--example", "val", "-x=1"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "-e argument with no value, setting to default",
        "--example val",
    ]
    assert "Unknown argument '-x'" in captured.err


def test_main_invalid_token(capsys):
    assert argkit.main(["-e", "--"]) == const.EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid argument '--'" in captured.err
    assert "usage: argkit" in captured.err


def test_main_windows(monkeypatch, capsys):
    monkeypatch.setenv(const.ENV_WINDOWS, "yes")
    assert argkit.main(["/?", "/example", "foo", "/example"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "/? argument with no value, setting to default",
        "/example foo",
    ]


def test_main_extra_args(monkeypatch, capsys):
    monkeypatch.setenv(const.ENV_EXTRA_ARGS, "--example=1")
    assert argkit.main(["-e", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["--example 1", "-e 2"]


def test_main_extra_args_repeated_spaces(monkeypatch, capsys):
    monkeypatch.setenv(const.ENV_EXTRA_ARGS, " -e  --example ")
    assert const.extraArgs() == ["-e", "--example"]

    assert argkit.main(["x"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "-e argument with no value, setting to default",
        "--example x",
    ]


def test_main_bad_config(monkeypatch, capsys):
    monkeypatch.setenv(const.ENV_WINDOWS, "maybe")
    assert argkit.main(["-e"]) == const.EXIT_FAILURE
    assert "ARGKIT_WINDOWS" in capsys.readouterr().err


def test_main_version(capsys):
    assert argkit.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"argkit v{const.VERSION_STR}"


def test_main_help(capsys):
    assert argkit.main(["-e", "-h"]) == 0
    out = capsys.readouterr().out
    assert "Options" in out
    assert "--example" in out
    assert "/example" not in out


# --- Flag table ------------------------------------------------------------- #


def test_lookup():
    assert app.lookup(ArgumentKind.LONG, "example") is not None
    assert app.lookup(ArgumentKind.SHORT, "example") is None


def test_flag_already_defined():
    with pytest.raises(ValueError):
        app.flag(ArgumentKind.SHORT, "e")(lambda arg: None)


def test_dispatch_every_occurrence(monkeypatch):
    seen: list[ParsedArgument] = []
    monkeypatch.setattr(app, "flags", [])
    app.flag(ArgumentKind.SHORT, "n")(seen.append)

    args = [
        ParsedArgument(ArgumentKind.SHORT, "n", "1", True),
        ParsedArgument(ArgumentKind.SHORT, "n", "2", True),
    ]
    app.dispatch(args)
    assert seen == args


def test_is_verbose():
    assert app.isVerbose(["-e", "--verbose"])
    assert app.isVerbose(["--verbose=1"])
    assert not app.isVerbose(["-verbose"])
    assert not app.isVerbose(["--verbosely"])


# --- Logging ---------------------------------------------------------------- #


def _run(args: list[str], **env: str) -> subprocess.CompletedProcess:
    environ = {
        k: v for k, v in os.environ.items() if not k.startswith("ARGKIT_")
    }
    environ.update(env)
    return subprocess.run(
        [sys.executable, "-c", "import sys, argkit; sys.exit(argkit.main())", *args],
        cwd=ROOT,
        env=environ,
        capture_output=True,
        text=True,
    )


def test_logging_verbose_shows_parser_debug():
    res = _run(["--verbose", "foo", "bar", "-e"], ARGKIT_WINDOWS="no")
    assert res.returncode == 0
    assert "DEBUG" in res.stderr
    assert "Skipping operand 'bar'" in res.stderr
    assert "Parsed 2 argument(s)" in res.stderr


def test_logging_quiet_by_default():
    res = _run(["-e", "foo"], ARGKIT_WINDOWS="no")
    assert res.returncode == 0
    assert res.stdout == "-e foo\n"
    assert res.stderr == ""


def test_logging_to_file(tmp_path):
    logFile = tmp_path / "argkit.log"
    res = _run(["-x"], ARGKIT_WINDOWS="no", ARGKIT_LOG_FILE=str(logFile))
    assert res.returncode == 0
    assert "Unknown argument '-x'" in res.stderr

    log = logFile.read_text()
    assert "INFO argkit.app: No handler for '-x'" in log
    assert "DEBUG" not in log


def test_exit_status_is_minus_one():
    res = _run([])
    assert res.returncode & 0xFF == 255
    assert "usage: argkit (arguments)" in res.stderr
