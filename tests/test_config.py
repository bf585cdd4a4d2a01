import logging

import pytest

from pocketcalc.config import Config
from pocketcalc.errors import DisplayError


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("POCKETCALC_DIV_ZERO_MESSAGE", "POCKETCALC_INVALID_EXPR_MESSAGE", "POCKETCALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config == Config()
    assert config.log_level == logging.WARNING


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETCALC_DIV_ZERO_MESSAGE", "Não é possível dividir por zero")
    monkeypatch.setenv("POCKETCALC_INVALID_EXPR_MESSAGE", "Expressão inválida")
    monkeypatch.setenv("POCKETCALC_LOG_LEVEL", "debug")
    config = Config.from_env()
    assert config.message_for(DisplayError.DIVISION_BY_ZERO) == "Não é possível dividir por zero"
    assert config.message_for(DisplayError.INVALID_EXPRESSION) == "Expressão inválida"
    assert config.log_level == logging.DEBUG


def test_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETCALC_LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError):
        Config.from_env()
