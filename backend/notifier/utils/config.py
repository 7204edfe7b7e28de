# backend/notifier/utils/config.py

"""
環境変数読み取り用のユーティリティ。
Webhook 設定だけでなく、通知まわりの設定全般で共通利用する想定。
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値
    """
    value = os.getenv(name)

    if value is None or value == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_env_int(name: str, default: int) -> int:
    """
    整数の環境変数を取得する。

    - 未設定の場合は default を返す。
    - パース不能の場合は warning を出して default を返す。
    """
    raw = get_env(name, default=None, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid integer for %s: %r. Falling back to %d.", name, raw, default
        )
        return default


def get_env_bool(name: str, default: bool = False) -> bool:
    """
    真偽値の環境変数を取得する。

    1 / true / yes / on（大文字小文字は区別しない）を True とみなす。
    """
    raw = get_env(name, default=None, required=False)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY_VALUES
