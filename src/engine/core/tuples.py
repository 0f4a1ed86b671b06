"""
4 成分 Tuple 型（点・ベクトル・色の共通表現）

本モジュールは、レンダリング系の全幾何演算が依存する数値契約 `Tuple` を提供する。

データモデル（不変条件）:
- `x, y, z, w: float64` — 生成時に `float()` へ正規化される。
- `w = 1.0` は点、`w = 0.0` はベクトルまたは色。色は x/y/z を r/g/b として再利用し、
  数値上はベクトルと衝突する。区別は `kind`（`TupleKind`）で行い、`w` には頼らない。
- `kind is None` は未タグの生 Tuple（例: 点 + 点 の結果）。
- インスタンスは不変。演算はすべて純関数で、新しい `Tuple` を返す。

API 方針:
- 加減算は 4 成分すべてを成分ごとに計算し、結果の種別は組み合わせ表で決める
  （点 − 点 → ベクトル、点 − ベクトル → 点 など）。表に無い組み合わせは未タグを返す。
  `strict=True` の場合は `IncompatibleTupleError` を送出する。
- 反転/スカラー倍は、結果の `w` が種別の正準値（点 1.0、ベクトル/色 0.0）に一致する間だけ
  種別を保持する。
- 等価性は成分ごとの許容誤差比較（`EPSILON = 1e-5`、厳密な `<`）。`kind` は比較しない。
  近似等価のためハッシュ不可。
- 大きさ 0 の正規化は `ZeroMagnitudeError`（NaN/Inf は生成しない）。

使用例:
    p = point(3.0, 2.0, 1.0)
    v = point(5.0, 6.0, 7.0) - p      # ベクトル (2, 4, 6)
    n = normalize(v)
    assert equal_float(magnitude(n), 1.0)
"""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real
from typing import Iterator

import numpy as np

from .errors import IncompatibleTupleError, ZeroMagnitudeError

EPSILON = 1e-5


class TupleKind(Enum):
    POINT = "point"
    VECTOR = "vector"
    COLOR = "color"


_CANONICAL_W = {
    TupleKind.POINT: 1.0,
    TupleKind.VECTOR: 0.0,
    TupleKind.COLOR: 0.0,
}

_P, _V, _C = TupleKind.POINT, TupleKind.VECTOR, TupleKind.COLOR

# (左辺, 右辺) -> 結果の種別
_ADD_TABLE = {
    (_P, _V): _P,
    (_V, _P): _P,
    (_V, _V): _V,
    (_C, _C): _C,
}
_SUB_TABLE = {
    (_P, _P): _V,
    (_P, _V): _P,
    (_V, _V): _V,
    (_C, _C): _C,
}


def equal_float(a: float, b: float) -> bool:
    """2 つの浮動小数が `EPSILON` 未満の差で一致するか。"""
    return abs(a - b) < EPSILON


class Tuple:
    """不変の 4 成分 Tuple。

    フィールド:
    - `x, y, z, w`: float64 成分。
    - `kind`: `TupleKind` または None（未タグ）。

    色としての読み出しには `red/green/blue` を使う。
    """

    __slots__ = ("x", "y", "z", "w", "kind")

    x: float
    y: float
    z: float
    w: float
    kind: TupleKind | None

    def __init__(
        self,
        x: float,
        y: float,
        z: float,
        w: float,
        kind: TupleKind | None = None,
    ) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))
        object.__setattr__(self, "kind", kind)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Tuple is immutable (cannot set {name!r})")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Tuple is immutable (cannot delete {name!r})")

    # ── 色アクセサ ───────────────────
    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    @property
    def is_point(self) -> bool:
        return self.kind is TupleKind.POINT

    @property
    def is_vector(self) -> bool:
        return self.kind is TupleKind.VECTOR

    @property
    def is_color(self) -> bool:
        return self.kind is TupleKind.COLOR

    # ── 変換 ───────────────────
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def as_array(self) -> np.ndarray:
        """`(x, y, z, w)` を float64 の 1 次元配列で返す（コピー）。"""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __repr__(self) -> str:
        if self.kind is None:
            return f"Tuple({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"
        return f"{self.kind.value}({self.x!r}, {self.y!r}, {self.z!r})"

    # ── 比較 ───────────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return tuples_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    # ── 演算子（非 strict の糖衣） ────────
    def __add__(self, other: object) -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> "Tuple":
        return negate(self)

    def __mul__(self, factor: object) -> "Tuple":
        if isinstance(factor, Tuple) or not isinstance(factor, Real):
            return NotImplemented
        return scale(self, float(factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Tuple":
        if isinstance(divisor, Tuple) or not isinstance(divisor, Real):
            return NotImplemented
        d = float(divisor)
        w = self.w / d
        return Tuple(self.x / d, self.y / d, self.z / d, w, _keep_kind(self.kind, w))


# ── ファクトリ ───────────────────
def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0, TupleKind.POINT)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0, TupleKind.VECTOR)


def color(red: float, green: float, blue: float) -> Tuple:
    return Tuple(red, green, blue, 0.0, TupleKind.COLOR)


def _keep_kind(kind: TupleKind | None, w: float) -> TupleKind | None:
    if kind is None or w != _CANONICAL_W[kind]:
        return None
    return kind


def _combined_kind(
    table: dict, op: str, a: Tuple, b: Tuple, strict: bool
) -> TupleKind | None:
    kind = table.get((a.kind, b.kind))
    if kind is None and strict:
        raise IncompatibleTupleError(op, a.kind, b.kind)
    return kind


# ── 演算（すべて純粋） ────────
def add(a: Tuple, b: Tuple, *, strict: bool = False) -> Tuple:
    """成分ごとの和（w を含む 4 成分）。

    結果の種別は組み合わせ表（点+ベクトル→点、ベクトル+ベクトル→ベクトル、色+色→色）。
    表に無い組み合わせは未タグ、`strict=True` なら `IncompatibleTupleError`。
    """
    kind = _combined_kind(_ADD_TABLE, "+", a, b, strict)
    return Tuple(a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w, kind)


def subtract(a: Tuple, b: Tuple, *, strict: bool = False) -> Tuple:
    """成分ごとの差（w を含む 4 成分）。

    点−点→ベクトル、点−ベクトル→点、ベクトル−ベクトル→ベクトル、色−色→色。
    """
    kind = _combined_kind(_SUB_TABLE, "-", a, b, strict)
    return Tuple(a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w, kind)


def negate(t: Tuple) -> Tuple:
    w = -t.w
    return Tuple(-t.x, -t.y, -t.z, w, _keep_kind(t.kind, w))


def scale(t: Tuple, factor: float) -> Tuple:
    w = factor * t.w
    return Tuple(factor * t.x, factor * t.y, factor * t.z, w, _keep_kind(t.kind, w))


def magnitude(t: Tuple) -> float:
    """4 成分すべてのユークリッドノルム（極小成分でもアンダーフローしない）。"""
    return math.hypot(t.x, t.y, t.z, t.w)


def normalize(t: Tuple) -> Tuple:
    """大きさで成分ごとに割った Tuple を返す。

    Raises
    ------
    ZeroMagnitudeError
        大きさが 0 の場合。
    """
    m = magnitude(t)
    if m == 0.0:
        raise ZeroMagnitudeError(f"cannot normalize a zero-magnitude tuple: {t!r}")
    w = t.w / m
    return Tuple(t.x / m, t.y / m, t.z / m, w, _keep_kind(t.kind, w))


def dot_product(a: Tuple, b: Tuple) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross_product(a: Tuple, b: Tuple) -> Tuple:
    """x/y/z のみから計算する 3D 外積。結果は常にベクトル（w = 0）。"""
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def hadamard_product(a: Tuple, b: Tuple) -> Tuple:
    """r/g/b の成分積（色の合成）。結果は色。"""
    return color(a.x * b.x, a.y * b.y, a.z * b.z)


def tuples_equal(a: Tuple, b: Tuple) -> bool:
    """4 成分すべてが `equal_float` で一致するか（種別は無視）。"""
    return (
        equal_float(a.x, b.x)
        and equal_float(a.y, b.y)
        and equal_float(a.z, b.z)
        and equal_float(a.w, b.w)
    )


__all__ = [
    "EPSILON",
    "TupleKind",
    "Tuple",
    "equal_float",
    "tuples_equal",
    "point",
    "vector",
    "color",
    "add",
    "subtract",
    "negate",
    "scale",
    "magnitude",
    "normalize",
    "dot_product",
    "cross_product",
    "hadamard_product",
]
