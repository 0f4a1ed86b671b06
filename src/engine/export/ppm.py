"""
どこで: `engine.export.ppm`。
何を: `Canvas` を PPM (P3) テキストへ変換する純関数群（ヘッダ/クランプ/数値整形/折り返し）。
なぜ: 出力文字列をバイト単位で固定し、書き出し先（ファイル/ストリーム）を呼び出し側に委ねるため。

出力形式:

    P3
    <width> <height>
    <max_value>
    <チャネル値をスペース区切り、1 行 70 文字以内で折り返し>

- チャネル値: `v > 1.0` → `max_value`、`v < 0.0` → `0`、それ以外は `v * max_value`（丸めない）。
- 数値は最短の往復可能な 10 進表記（指数表記なし、整数値は小数部なし: `0`, `255`, `127.5`）。
- NaN はどちらの境界比較も偽になるため `NaN` として出力される。
- 折り返しはピクセル境界に関係なくトークン列全体に対して 1 トークンずつ判定する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

from common import settings

if TYPE_CHECKING:
    from engine.core.canvas import Canvas

logger = logging.getLogger(__name__)

MAGIC = "P3"


@dataclass(frozen=True)
class PPMParams:
    """PPM 出力パラメータ。

    属性:
        max_value: チャネル最大値（ヘッダ 3 行目、クランプ上限）。
        max_line_length: データ部 1 行の最大文字数。
    """

    max_value: int = 255
    max_line_length: int = 70

    @classmethod
    def from_settings(cls, max_value: int | None = None) -> "PPMParams":
        s = settings.get()
        return cls(
            max_value=s.PPM_DEFAULT_MAX_VALUE if max_value is None else max_value,
            max_line_length=s.PPM_MAX_LINE_LENGTH,
        )

    def __post_init__(self) -> None:
        if isinstance(self.max_value, bool) or not isinstance(self.max_value, Integral):
            raise ValueError(f"max_value must be an integer: {self.max_value!r}")
        if self.max_value < 0:
            raise ValueError(f"max_value must be non-negative: {self.max_value!r}")
        if self.max_line_length < 1:
            raise ValueError(f"max_line_length must be positive: {self.max_line_length!r}")


def ppm_header(width: int, height: int, max_value: int) -> str:
    """3 行のヘッダ（末尾改行なし）。"""
    return f"{MAGIC}\n{width} {height}\n{max_value}"


def clamp_channel(value: float, max_value: int) -> float:
    """1 チャネル値を出力スケールへ写像する（1.0 超は上限値そのもの、負値は 0）。"""
    if value > 1.0:
        return float(max_value)
    if value < 0.0:
        return 0.0
    return value * max_value


def clamp_channels(values: np.ndarray, max_value: int) -> np.ndarray:
    """`clamp_channel` の配列版。"""
    arr = np.asarray(values, dtype=np.float64)
    scaled = arr * float(max_value)
    return np.where(arr > 1.0, float(max_value), np.where(arr < 0.0, 0.0, scaled))


def format_channel(value: float) -> str:
    """最短の往復可能な位置表記。NaN はクランプを素通りするため `NaN` と書く。"""
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def channel_tokens(canvas: "Canvas", max_value: int) -> Iterator[str]:
    """行優先・ピクセルごとに r, g, b の順でクランプ済みトークンを返す。"""
    flat = canvas.as_array().reshape(-1)
    for v in clamp_channels(flat, max_value):
        yield format_channel(v)


def wrap_tokens(tokens: Iterable[str], max_line_length: int = 70) -> str:
    """トークン列を空白区切りで連結し、1 行 `max_line_length` 文字以内で折り返す。

    各トークンの直前に区切り 1 文字（空白または改行）を置き、累積文字数が上限を超える
    場合のみ改行に切り替える。先頭の区切り文字は取り除く。
    """
    parts: list[str] = []
    count = 0
    for tok in tokens:
        n = len(tok)
        if count + n + 1 > max_line_length:
            parts.append("\n")
            count = n
        else:
            parts.append(" ")
            count += n + 1
        parts.append(tok)
    return "".join(parts)[1:]


def encode_ppm_data(canvas: "Canvas", params: PPMParams) -> str:
    return wrap_tokens(channel_tokens(canvas, params.max_value), params.max_line_length)


def encode_ppm(canvas: "Canvas", max_value: int | None = None) -> str:
    """`canvas` 全体を P3 テキストにする（`header + "\\n" + data + "\\n"`）。

    Parameters
    ----------
    canvas : Canvas
        出力対象。
    max_value : int | None
        チャネル最大値。None の場合は設定 `PPM_DEFAULT_MAX_VALUE`。

    Raises
    ------
    ValueError
        `max_value` が非負整数でない場合。
    """
    params = PPMParams.from_settings(max_value)
    logger.debug(
        "encoding %dx%d canvas as %s (max_value=%d)",
        canvas.width,
        canvas.height,
        MAGIC,
        params.max_value,
    )
    if settings.get().DEBUG_CANVAS:
        logger.debug("channel maxima: r=%s g=%s b=%s", *canvas.max_channel_values())
    header = ppm_header(canvas.width, canvas.height, params.max_value)
    return f"{header}\n{encode_ppm_data(canvas, params)}\n"


__all__ = [
    "MAGIC",
    "PPMParams",
    "ppm_header",
    "clamp_channel",
    "clamp_channels",
    "format_channel",
    "channel_tokens",
    "wrap_tokens",
    "encode_ppm_data",
    "encode_ppm",
]
