"""
どこで: `engine.core.canvas`。
何を: 固定サイズの色バッファ `Canvas`（平坦リスト + 行優先インデックス）。
なぜ: ピクセル書き込みの境界検査を 1 箇所に集約し、PPM 出力の入力を単純な列挙にするため。

データモデル:
- `_pixels: list[Tuple]` — 長さ `width * height`。`index = row * width + column`。
- 行 = y、列 = x。この対応を入れ替えると出力画像が転置する。
- 生成時はすべて `color(0, 0, 0)`。サイズは以後変わらない。

並行書き込みは想定しない（所有者 1 つ）。
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Iterator

import numpy as np

from common import settings

from .errors import InvalidDimensionsError, PixelOutOfBoundsError
from .tuples import Tuple, color

logger = logging.getLogger(__name__)

BLACK = color(0.0, 0.0, 0.0)


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _validate_dimensions(width: object, height: object) -> tuple[int, int]:
    s = settings.get()
    limit = s.CANVAS_MAX_DIMENSION
    for value in (width, height):
        if not _is_int(value):
            raise InvalidDimensionsError(width, height, "dimensions must be integers")
        if value < 1:
            raise InvalidDimensionsError(width, height, "dimensions must be positive")
        if value > limit:
            raise InvalidDimensionsError(width, height, f"dimensions must not exceed {limit}")
    w, h = int(width), int(height)  # type: ignore[call-overload]
    if w * h > s.CANVAS_MAX_PIXELS:
        raise InvalidDimensionsError(
            width, height, f"pixel count must not exceed {s.CANVAS_MAX_PIXELS}"
        )
    return w, h


class Canvas:
    """幅 x 高さの色グリッド。

    - `update_pixel(x, y, c)` / `pixel_at(x, y)` は範囲外で `PixelOutOfBoundsError`。
    - `to_ppm()` で P3 形式の文字列を返す（ファイル書き出しは呼び出し側の責務）。
    """

    __slots__ = ("width", "height", "_pixels")

    width: int
    height: int

    def __init__(self, width: int, height: int) -> None:
        w, h = _validate_dimensions(width, height)
        self.width = w
        self.height = h
        # Tuple は不変なので同一インスタンスの共有で良い
        self._pixels: list[Tuple] = [BLACK] * (w * h)
        logger.debug("canvas created: %dx%d", w, h)

    def __repr__(self) -> str:
        return f"Canvas({self.width}, {self.height})"

    # ── アクセス ───────────────────
    def _index(self, x: int, y: int) -> int:
        if not (_is_int(x) and _is_int(y)):
            raise TypeError(
                f"pixel coordinates must be integers, got ({type(x).__name__}, {type(y).__name__})"
            )
        x, y = int(x), int(y)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOutOfBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    def update_pixel(self, x: int, y: int, value: Tuple) -> None:
        """列 x・行 y のピクセルを書き換える。

        Raises
        ------
        PixelOutOfBoundsError
            x が `[0, width)`、y が `[0, height)` の外の場合（グリッドは変更しない）。
        TypeError
            `value` が `Tuple` でない場合、または座標が整数でない場合。
        """
        if not isinstance(value, Tuple):
            raise TypeError(f"pixel value must be a Tuple, got {type(value).__name__}")
        self._pixels[self._index(x, y)] = value

    def pixel_at(self, x: int, y: int) -> Tuple:
        return self._pixels[self._index(x, y)]

    def fill(self, value: Tuple) -> None:
        """全ピクセルを `value` で上書きする。"""
        if not isinstance(value, Tuple):
            raise TypeError(f"pixel value must be a Tuple, got {type(value).__name__}")
        self._pixels = [value] * (self.width * self.height)

    def pixels(self) -> Iterator[Tuple]:
        """行優先（行 0 の左から右、次に行 1 ...）でピクセルを列挙する。"""
        return iter(self._pixels)

    # ── 集計/変換 ───────────────────
    def as_array(self) -> np.ndarray:
        """r/g/b を `(height, width, 3)` の float64 配列で返す（コピー）。"""
        flat = np.array([(p.x, p.y, p.z) for p in self._pixels], dtype=np.float64)
        return flat.reshape(self.height, self.width, 3)

    def max_channel_values(self) -> tuple[float, float, float]:
        """チャネルごとの最大値 (r, g, b)。

        初期値 0.0 から走査するため、負の値だけのチャネルは 0.0 を返す。
        """
        # fmax は NaN を無視する
        r, g, b = np.fmax.reduce(self.as_array().reshape(-1, 3), axis=0, initial=0.0)
        return (float(r), float(g), float(b))

    def to_ppm(self, max_value: int | None = None) -> str:
        """P3 形式のテキスト画像を返す（ヘッダ + データ + 末尾改行）。"""
        from engine.export.ppm import encode_ppm

        return encode_ppm(self, max_value)

    to_text_image = to_ppm


__all__ = ["BLACK", "Canvas"]
