"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/bool/str）。
なぜ: `common.settings` から `os.getenv` と例外ガードを切り離すため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE = {"true", "t", "yes", "y", "on"}
_FALSE = {"false", "f", "no", "n", "off"}


def env_str(name: str, default: str) -> str:
    """文字列環境変数を取得（未設定/空白のみは既定値）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値。
    min_value : Optional[int]
        下限。指定時、値が下回れば下限に丸める。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/不正時は `default`。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false, yes/no, on/off）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    try:
        return int(s) != 0
    except ValueError:
        pass
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return bool(default)


__all__ = ["env_str", "env_int", "env_bool"]
