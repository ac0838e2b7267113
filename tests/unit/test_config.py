"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from infixcalc.config import CalcSettings, load_settings
from infixcalc.errors import ConfigError


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings == CalcSettings()
        assert settings.prompt == "> "
        assert settings.echo is True
        assert settings.strict is True
        assert settings.log_level == "WARNING"

    def test_overrides(self) -> None:
        settings = load_settings(
            {
                "INFIXCALC_PROMPT": "calc> ",
                "INFIXCALC_ECHO": "no",
                "INFIXCALC_STRICT": "0",
                "INFIXCALC_LOG_LEVEL": "debug",
            }
        )
        assert settings.prompt == "calc> "
        assert settings.echo is False
        assert settings.strict is False
        assert settings.log_level == "DEBUG"

    def test_unrelated_variables_ignored(self) -> None:
        assert load_settings({"PROMPT": "x", "ECHO": "0"}) == CalcSettings()

    def test_bad_boolean(self) -> None:
        with pytest.raises(ConfigError, match="INFIXCALC_ECHO: Input should be a valid boolean"):
            load_settings({"INFIXCALC_ECHO": "maybe"})

    def test_bad_log_level(self) -> None:
        with pytest.raises(ConfigError, match="unknown log level"):
            load_settings({"INFIXCALC_LOG_LEVEL": "chatty"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INFIXCALC_PROMPT", ">> ")
        assert load_settings().prompt == ">> "

    @pytest.mark.parametrize(
        ("raw", "expected"), [("on", True), ("YES", True), ("off", False), ("F", False)]
    )
    def test_boolean_spellings(self, raw: str, expected: bool) -> None:
        assert load_settings({"INFIXCALC_STRICT": raw}).strict is expected

    def test_prompt_whitespace_kept(self) -> None:
        assert load_settings({"INFIXCALC_PROMPT": "  >>  "}).prompt == "  >>  "
