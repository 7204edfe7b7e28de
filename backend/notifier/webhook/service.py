# backend/notifier/webhook/service.py

"""
Webhook 配信のエントリーポイントとなるサービス。

- send_all: 共通メッセージを登録済みの全 Sender にブロードキャストする
- send_slack / send_discord: プラットフォーム固有メッセージを 1 つの送信先に送る

ブロードキャストでは Sender ごとの失敗をその場でログに残して握りつぶし、
残りの Sender への送信を続ける。単一送信先への送信では例外をそのまま呼び出し元に返す。
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .converter import WebhookMessageConverter
from .exceptions import UnsupportedMessageTypeError
from .routing import WebhookRouter
from .schemas import (
    CommonWebhookMessage,
    DiscordEmbed,
    DiscordMessage,
    DiscordWebhookMessage,
    SlackMessage,
    SlackWebhookMessage,
    WebhookMessage,
    WebhookTarget,
)

logger = logging.getLogger(__name__)


class WebhookService:
    def __init__(
        self,
        router: WebhookRouter,
        converter: WebhookMessageConverter,
        *,
        enabled: bool = False,
    ) -> None:
        self._router = router
        self._converter = converter
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def send_all(self, title: str, lines: Sequence[str]) -> None:
        """共通メッセージを全 Sender に送る。"""
        self.send(WebhookTarget.ALL, CommonWebhookMessage(title=title, contents=list(lines)))

    def send_slack(self, title: str, lines: Sequence[str]) -> None:
        self.send(
            WebhookTarget.SLACK,
            SlackWebhookMessage(slack_messages=[SlackMessage(title=title, messages=list(lines))]),
        )

    def send_discord(
        self,
        title: str,
        lines: Sequence[str],
        embeds: Optional[List[DiscordEmbed]] = None,
    ) -> None:
        self.send(
            WebhookTarget.DISCORD,
            DiscordWebhookMessage(
                discord_messages=[
                    DiscordMessage(title=title, messages=list(lines), embeds=embeds)
                ]
            ),
        )

    def send(self, target: WebhookTarget, message: WebhookMessage) -> None:
        """
        target に応じてメッセージを配信する。

        :raises UnsupportedMessageTypeError: ALL に CommonWebhookMessage 以外を渡した場合。
        """
        if not self._enabled:
            logger.debug("Webhook is disabled, skipping send")
            return

        if target == WebhookTarget.ALL:
            if getattr(message, "kind", None) != "common":
                raise UnsupportedMessageTypeError(message, target)
            self._send_to_all(message)
            return

        self._send_to_target(target, message)

    def _send_to_target(self, target: WebhookTarget, message: WebhookMessage) -> None:
        sender = self._router.route(target)
        if sender is None:
            logger.warning("No webhook sender found for target: %s", target.name)
            return

        converted = self._converter.convert(target, message)
        sender.send(converted)

    def _send_to_all(self, message: CommonWebhookMessage) -> None:
        for sender in self._router.all():
            try:
                converted = self._converter.convert(sender.target, message)
                sender.send(converted)
            except Exception:  # noqa: BLE001 - 1 つの送信先の失敗で他を止めない
                logger.exception("Failed to send webhook to %s", sender.target.name)
