"""共通フィクスチャ。

- 小さな Canvas 試料（既知の 3 ピクセル）
- 環境変数を変更した後に設定を既定へ戻す
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.canvas import Canvas
from engine.core.tuples import color


@pytest.fixture()
def canvas_5x3() -> Canvas:
    """(0,0)=(1.5,0,0), (2,1)=(0,0.5,0), (4,2)=(-0.5,0,1) の 5x3 キャンバス。"""
    c = Canvas(5, 3)
    c.update_pixel(0, 0, color(1.5, 0.0, 0.0))
    c.update_pixel(2, 1, color(0.0, 0.5, 0.0))
    c.update_pixel(4, 2, color(-0.5, 0.0, 1.0))
    return c


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """env を変更→`settings.reload_from_env()` を呼ぶテスト用。終了時に既定へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
