"""
どこで: `common.logging`。
何を: ライブラリ利用側が呼び出す、既定ロギング設定の 1 回適用ヘルパ。
なぜ: 各モジュールは `logging.getLogger(__name__)` だけを使い、設定の責務を上位へ寄せるため。
"""

from __future__ import annotations

import logging

from .env import env_str

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = env_str("RTC_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 未指定時は環境変数 `RTC_LOG_LEVEL`（既定 INFO）を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    """
    lvl = _resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # アプリ側で設定済み
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "setup_default_logging"]
