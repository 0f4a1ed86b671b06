"""
どこで: `common` パッケージ。
何を: 設定・環境変数・ロギングの共通基盤。
なぜ: `engine` が依存する土台を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
