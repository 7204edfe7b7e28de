# backend/notifier/notifications/factory.py

"""
通知サービスの簡易ファクトリ。

- Webhook が有効なら WebhookNotificationService を返す。
- 無効なら LoggingNotificationService を返し、通知内容はログにのみ残す。
"""

from __future__ import annotations

from typing import Optional

from notifier.webhook.factory import get_webhook_service

from .service import (
    LoggingNotificationService,
    NotificationService,
    WebhookNotificationService,
)

_notification_service: Optional[NotificationService] = None


def get_notification_service() -> NotificationService:
    """
    アプリ全体で共有する NotificationService を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _notification_service
    if _notification_service is None:
        webhook_service = get_webhook_service()
        if webhook_service.enabled:
            _notification_service = WebhookNotificationService(webhook_service, enabled=True)
        else:
            _notification_service = LoggingNotificationService()
    return _notification_service


def reset_state() -> None:
    """
    NotificationService のシングルトン状態をリセットする（アプリ終了時・テスト後）。
    """
    global _notification_service
    _notification_service = None


__all__ = [
    "NotificationService",
    "WebhookNotificationService",
    "LoggingNotificationService",
    "get_notification_service",
    "reset_state",
]
