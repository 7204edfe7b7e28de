# backend/notifier/notifications/service.py

"""
通知インターフェースと実装。

- NotificationService: send_notification / send_critical_alert / is_enabled
- WebhookNotificationService: WebhookService.send_all 経由で全送信先にブロードキャスト
- LoggingNotificationService: Python の logger に記録するだけの実装
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

from notifier.webhook.service import WebhookService

logger = logging.getLogger(__name__)

CRITICAL_ALERT_PREFIX = "🚨"


class NotificationService(Protocol):
    def send_notification(self, title: str, messages: Sequence[str]) -> None:  # pragma: no cover - Protocol
        ...

    def send_critical_alert(self, title: str, messages: Sequence[str]) -> None:  # pragma: no cover - Protocol
        ...

    def is_enabled(self) -> bool:  # pragma: no cover - Protocol
        ...


def critical_title(title: str) -> str:
    return f"{CRITICAL_ALERT_PREFIX} {title}"


class WebhookNotificationService:
    """
    通知を WebhookService のブロードキャストに流すサービス。

    ブロードキャストは送信先ごとの失敗を握りつぶすため、
    呼び出し元（メール送信失敗時のアラートなど）が通知で失敗することはない。
    """

    def __init__(self, webhook_service: WebhookService, *, enabled: bool) -> None:
        self._webhook_service = webhook_service
        self._enabled = enabled

    def send_notification(self, title: str, messages: Sequence[str]) -> None:
        if self._enabled:
            self._webhook_service.send_all(title, messages)

    def send_critical_alert(self, title: str, messages: Sequence[str]) -> None:
        if self._enabled:
            self._webhook_service.send_all(critical_title(title), messages)

    def is_enabled(self) -> bool:
        return self._enabled


class LoggingNotificationService:
    """
    通知内容をログに記録するだけのサービス。

    Webhook が無効な環境でも通知内容を追えるようにするためのもの。
    外部への通知は行わないため、is_enabled() は False を返す。
    """

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger

    @staticmethod
    def _format(title: str, messages: Sequence[str]) -> str:
        lines: List[str] = [title]
        lines.extend(f"- {message}" for message in messages)
        return "\n".join(lines)

    def send_notification(self, title: str, messages: Sequence[str]) -> None:
        self._logger.info(self._format(title, messages))

    def send_critical_alert(self, title: str, messages: Sequence[str]) -> None:
        self._logger.error(self._format(critical_title(title), messages))

    def is_enabled(self) -> bool:
        return False
