"""Tests for CLI commands."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from infixcalc.cli import app

_ENV_VARS = ("INFIXCALC_PROMPT", "INFIXCALC_ECHO", "INFIXCALC_STRICT", "INFIXCALC_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("infixcalc ")


def test_eval_success(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["eval", "(10+20)(30+40)"])
    assert result.exit_code == 0
    assert "Result: 2100.0" in result.output


def test_eval_leading_minus(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["eval", "--", "-1"])
    assert result.exit_code == 0
    assert "Result: -1.0" in result.output


def test_eval_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["eval", "(1+2"])
    assert result.exit_code == 1
    assert "Parse error: Balance parenthesis error" in result.output


def test_eval_lenient(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["eval", "--lenient", "1+2)"])
    assert result.exit_code == 0
    assert "Result: 3.0" in result.output


def test_eval_strict_from_env(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["eval", "1+2)"], env={"INFIXCALC_STRICT": "false"})
    assert result.exit_code == 0
    assert "Result: 3.0" in result.output


def test_bad_config_exits(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["eval", "1"], env={"INFIXCALC_ECHO": "maybe"})
    assert result.exit_code == 1
    assert "INFIXCALC_ECHO" in result.output


def test_repl_continues_after_errors(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["repl"], input="1+2\n\n(1\n1/0\nquit\n3\n")
    assert result.exit_code == 0
    assert "Your input: 1+2" in result.output
    assert "Result: 3.0" in result.output
    assert "Parse error: Balance parenthesis error" in result.output
    assert "Result: inf" in result.output
    assert "Your input: 3" not in result.output


def test_repl_ends_at_end_of_input(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["repl", "--no-echo"], input="2^10\n")
    assert result.exit_code == 0
    assert "Result: 1024.0" in result.output
    assert "Your input" not in result.output


def test_repl_prompt_from_env(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["repl"], input="1\n", env={"INFIXCALC_PROMPT": "calc> "})
    assert "calc> " in result.output


def test_tokens(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["tokens", "1 + 2"])
    assert result.exit_code == 0
    for kind in ("number", "plus", "eof"):
        assert kind in result.output


def test_tokens_malformed_number(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["tokens", "1.2.3"])
    assert result.exit_code == 1
    assert "Invalid number" in result.output


def test_tree(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["tree", "3^2*2"])
    assert result.exit_code == 0
    assert "((3.0 ^ 2.0) * 2.0)" in result.output


def test_tree_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["tree", "1 2"])
    assert result.exit_code == 1
    assert "Invalid operator" in result.output


def test_repl_echoes_line_as_typed(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["repl"], input="  1+2  \n")
    assert result.exit_code == 0
    assert "Your input:   1+2  \n" in result.output
    assert "Result: 3.0" in result.output


def test_repl_long_chain_at_debug_level(cli_runner: CliRunner) -> None:
    chain = "+".join(["1"] * 2000)
    result = cli_runner.invoke(
        app,
        ["repl", "--no-echo"],
        input=f"{chain}\n1+2\n",
        env={"INFIXCALC_LOG_LEVEL": "DEBUG"},
    )
    assert result.exit_code == 0
    assert "Result: 2000.0" in result.output
    assert "Result: 3.0" in result.output


def test_tree_long_chain(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["tree", "+".join(["1"] * 5000)])
    assert result.exit_code == 0
    assert "..." in result.output
    assert result.output.rstrip().endswith("+ 1.0)")
