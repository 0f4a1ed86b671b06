"""
どこで: `common.settings`
何を: 環境変数 `RTC_*` を型付きの設定スナップショットへ読み込む。
なぜ: PPM 出力やキャンバス上限の既定値を 1 箇所で管理し、テストから差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int

DEFAULT_PPM_MAX_LINE_LENGTH = 70
DEFAULT_PPM_MAX_VALUE = 255
DEFAULT_CANVAS_MAX_DIMENSION = 16384
DEFAULT_CANVAS_MAX_PIXELS = 1 << 24


@dataclass
class _Settings:
    # PPM 出力
    PPM_MAX_LINE_LENGTH: int = DEFAULT_PPM_MAX_LINE_LENGTH
    PPM_DEFAULT_MAX_VALUE: int = DEFAULT_PPM_MAX_VALUE

    # Canvas
    CANVAS_MAX_DIMENSION: int = DEFAULT_CANVAS_MAX_DIMENSION
    CANVAS_MAX_PIXELS: int = DEFAULT_CANVAS_MAX_PIXELS
    DEBUG_CANVAS: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 整数は `env_int`（下限 1 に丸め）、真偽は `env_bool` を使用。
    - 未設定/不正値は既定値に戻る。
    """
    _settings.PPM_MAX_LINE_LENGTH = (
        env_int("RTC_PPM_MAX_LINE_LENGTH", DEFAULT_PPM_MAX_LINE_LENGTH, min_value=1)
        or DEFAULT_PPM_MAX_LINE_LENGTH
    )
    _settings.PPM_DEFAULT_MAX_VALUE = (
        env_int("RTC_PPM_DEFAULT_MAX_VALUE", DEFAULT_PPM_MAX_VALUE, min_value=1)
        or DEFAULT_PPM_MAX_VALUE
    )
    _settings.CANVAS_MAX_DIMENSION = (
        env_int("RTC_CANVAS_MAX_DIMENSION", DEFAULT_CANVAS_MAX_DIMENSION, min_value=1)
        or DEFAULT_CANVAS_MAX_DIMENSION
    )
    _settings.CANVAS_MAX_PIXELS = (
        env_int("RTC_CANVAS_MAX_PIXELS", DEFAULT_CANVAS_MAX_PIXELS, min_value=1)
        or DEFAULT_CANVAS_MAX_PIXELS
    )
    _settings.DEBUG_CANVAS = env_bool("RTC_DEBUG_CANVAS", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
