# backend/notifier/webhook/factory.py

"""
WebhookService の簡易ファクトリ。

設定値から Slack / Discord Sender を組み立て、
アプリ全体で共有する WebhookService を返す。
"""

from __future__ import annotations

from typing import List, Optional

from . import executor as webhook_executor
from .config import WebhookSettings, get_webhook_settings
from .converter import WebhookMessageConverter
from .discord import DiscordWebhookSender
from .routing import WebhookRouter
from .sender import WebhookSender
from .service import WebhookService
from .slack import SlackWebhookSender

_webhook_service: Optional[WebhookService] = None


def build_senders(settings: WebhookSettings) -> List[WebhookSender]:
    """
    登録する Sender の一覧を登録順に組み立てる。

    URL が空の Sender も登録しておき、送信時に warning を出して no-op にする。
    """
    executor = webhook_executor.get_webhook_executor(settings.max_workers)
    http_client = webhook_executor.get_http_client(settings.timeout_seconds)
    return [
        SlackWebhookSender(settings.slack_url, executor=executor, http_client=http_client),
        DiscordWebhookSender(settings.discord_url, executor=executor, http_client=http_client),
    ]


def build_webhook_service(settings: WebhookSettings) -> WebhookService:
    return WebhookService(
        WebhookRouter(build_senders(settings)),
        WebhookMessageConverter(),
        enabled=settings.enabled,
    )


def get_webhook_service() -> WebhookService:
    """
    アプリ全体で共有する WebhookService を返す。

    初回呼び出し時にのみ環境変数から生成し、それ以降は同じインスタンスを返す。
    """
    global _webhook_service
    if _webhook_service is None:
        _webhook_service = build_webhook_service(get_webhook_settings())
    return _webhook_service


def reset_state() -> None:
    """
    WebhookService と送信用リソース（スレッドプール・HTTP クライアント）を破棄する。

    アプリ終了時とテスト後に呼ぶ。次回の get_webhook_service() で作り直される。
    """
    global _webhook_service
    _webhook_service = None
    webhook_executor.reset_state()
