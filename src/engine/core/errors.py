"""
どこで: `engine.core.errors`。
何を: Tuple/Canvas が送出する例外の分類。
なぜ: 呼び出し側が `except ValueError` 等の汎用型でも、専用型でも捕捉できるようにするため。
"""

from __future__ import annotations

from typing import Any


class TupleError(Exception):
    """Tuple 演算に関する例外の基底。"""


class ZeroMagnitudeError(TupleError, ValueError):
    """大きさ 0 の Tuple を正規化しようとした場合に送出される例外。"""


class IncompatibleTupleError(TupleError, TypeError):
    """strict モードの加減算で、意味を持たない種別の組み合わせが渡された場合の例外。

    属性:
        op: 演算子（"+" または "-"）。
        left: 左辺の種別（未タグは None）。
        right: 右辺の種別（未タグは None）。
    """

    def __init__(self, op: str, left: Any, right: Any) -> None:
        self.op = op
        self.left = left
        self.right = right
        super().__init__(f"unsupported tuple combination: {_kind_name(left)} {op} {_kind_name(right)}")


class CanvasError(Exception):
    """Canvas 操作に関する例外の基底。"""


class InvalidDimensionsError(CanvasError, ValueError):
    """幅/高さが整数でない、1 未満、または上限超過の場合に送出される例外。"""

    def __init__(self, width: object, height: object, reason: str) -> None:
        self.width = width
        self.height = height
        super().__init__(f"invalid canvas dimensions {width!r}x{height!r}: {reason}")


class PixelOutOfBoundsError(CanvasError, IndexError):
    """キャンバス外の座標へアクセスした場合に送出される例外。"""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"pixel ({x}, {y}) is outside the {width}x{height} canvas")


def _kind_name(kind: Any) -> str:
    return "tuple" if kind is None else str(getattr(kind, "value", kind))


__all__ = [
    "TupleError",
    "ZeroMagnitudeError",
    "IncompatibleTupleError",
    "CanvasError",
    "InvalidDimensionsError",
    "PixelOutOfBoundsError",
]
