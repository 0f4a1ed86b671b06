from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_int, env_str
from common.logging import setup_default_logging


def test_env_int_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RTC_TEST_INT", raising=False)
    assert env_int("RTC_TEST_INT", 7) == 7
    monkeypatch.setenv("RTC_TEST_INT", " 42 ")
    assert env_int("RTC_TEST_INT", 7) == 42
    monkeypatch.setenv("RTC_TEST_INT", "-5")
    assert env_int("RTC_TEST_INT", 7, min_value=1) == 1
    monkeypatch.setenv("RTC_TEST_INT", "abc")
    assert env_int("RTC_TEST_INT", 7) == 7


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("true", True), ("Off", False), ("YES", True), ("maybe", False)],
)
def test_env_bool_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("RTC_TEST_BOOL", raw)
    assert env_bool("RTC_TEST_BOOL", False) is expected


def test_env_str_blank_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RTC_TEST_STR", "   ")
    assert env_str("RTC_TEST_STR", "INFO") == "INFO"
    monkeypatch.setenv("RTC_TEST_STR", " debug ")
    assert env_str("RTC_TEST_STR", "INFO") == "debug"


def test_defaults() -> None:
    s = settings.get()
    assert s.PPM_MAX_LINE_LENGTH == 70
    assert s.PPM_DEFAULT_MAX_VALUE == 255
    assert s.CANVAS_MAX_DIMENSION == 16384
    assert s.CANVAS_MAX_PIXELS == 1 << 24
    assert s.DEBUG_CANVAS is False


def test_reload_from_env_and_fallbacks(reload_settings) -> None:
    reload_settings.setenv("RTC_PPM_MAX_LINE_LENGTH", "0")
    reload_settings.setenv("RTC_PPM_DEFAULT_MAX_VALUE", "not-a-number")
    reload_settings.setenv("RTC_CANVAS_MAX_DIMENSION", "128")
    reload_settings.setenv("RTC_DEBUG_CANVAS", "on")
    settings.reload_from_env()
    s = settings.get()
    assert s.PPM_MAX_LINE_LENGTH == 1  # 下限丸め
    assert s.PPM_DEFAULT_MAX_VALUE == 255
    assert s.CANVAS_MAX_DIMENSION == 128
    assert s.DEBUG_CANVAS is True


def test_setup_default_logging_is_noop_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(root, "handlers", [handler])
    try:
        setup_default_logging("DEBUG")
        assert root.handlers == [handler]
        assert root.level == saved_level
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_default_logging_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setenv("RTC_LOG_LEVEL", "warning")
    root.handlers = []
    try:
        setup_default_logging()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
