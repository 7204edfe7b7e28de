# backend/notifier/webhook/config.py

"""
Webhook 配信の設定値。

すべて任意項目で、未設定の場合は「Webhook 無効」「URL 空＝送信しない」になる。

- WEBHOOK_ENABLED（デフォルト false）
- WEBHOOK_SLACK_URL（デフォルト 空）
- WEBHOOK_DISCORD_URL（デフォルト 空）
- WEBHOOK_TIMEOUT_SECONDS（デフォルト 10秒）
- WEBHOOK_MAX_WORKERS（デフォルト 10）
"""

from dataclasses import dataclass

from notifier.utils.config import get_env, get_env_bool, get_env_int

DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_MAX_WORKERS = 10


@dataclass(frozen=True)
class WebhookSettings:
    enabled: bool = False
    slack_url: str = ""
    discord_url: str = ""
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    max_workers: int = DEFAULT_MAX_WORKERS


def get_webhook_settings() -> WebhookSettings:
    """
    Webhook 設定値を環境変数から読み出す。
    """
    return WebhookSettings(
        enabled=get_env_bool("WEBHOOK_ENABLED", default=False),
        slack_url=get_env("WEBHOOK_SLACK_URL", default="", required=False) or "",
        discord_url=get_env("WEBHOOK_DISCORD_URL", default="", required=False) or "",
        timeout_seconds=get_env_int("WEBHOOK_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        max_workers=get_env_int("WEBHOOK_MAX_WORKERS", DEFAULT_MAX_WORKERS),
    )
