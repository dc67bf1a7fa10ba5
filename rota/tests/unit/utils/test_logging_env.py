from __future__ import annotations

import logging

import pytest

from rota.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_parse_level_accepts_names_and_numbers() -> None:
    assert logging_utils.parse_level("debug") == logging.DEBUG
    assert logging_utils.parse_level(" 30 ") == 30
    assert logging_utils.parse_level("verbose") is None
    assert logging_utils.parse_level("") is None


def test_env_level_prefers_explicit_level() -> None:
    env = {"ROTA_LOG_LEVEL": "warning", "ROTA_DEBUG": "1"}

    assert logging_utils.env_level(env) == logging.WARNING


def test_env_level_debug_flag() -> None:
    assert logging_utils.env_level({"ROTA_DEBUG": "yes"}) == logging.DEBUG
    assert logging_utils.env_level({"ROTA_DEBUG": "0"}) is None


def test_gui_preference_applies_without_env(monkeypatch) -> None:
    monkeypatch.delenv("ROTA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ROTA_DEBUG", raising=False)

    assert logging_utils.apply_gui_preferences(True) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging_utils.apply_gui_preferences(False) == logging.INFO


def test_env_overrides_gui_preference(monkeypatch) -> None:
    monkeypatch.setenv("ROTA_LOG_LEVEL", "ERROR")

    assert logging_utils.apply_gui_preferences(True) == logging.ERROR
    assert logging_utils.env_requests_debug() is False


def test_configure_root_returns_effective_level(monkeypatch) -> None:
    monkeypatch.delenv("ROTA_LOG_LEVEL", raising=False)
    monkeypatch.setenv("ROTA_DEBUG", "true")

    assert logging_utils.configure_root(logging.WARNING) == logging.DEBUG
    assert logging_utils.env_requests_debug() is True
