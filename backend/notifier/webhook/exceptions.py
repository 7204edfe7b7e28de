# backend/notifier/webhook/exceptions.py

"""
Webhook 配信まわりの例外定義。

いずれも呼び出し側のプログラミングミス（契約違反）を表すため、
ValueError のサブクラスとして扱う。設定不足やリモート側の失敗は例外にせず、
ログ出力のみで済ませる。
"""

from typing import Any


class WebhookError(ValueError):
    """Webhook 配信全般の基底例外。"""


class UnsupportedMessageTypeError(WebhookError):
    """送信先に対応しないメッセージ型が渡された場合の例外。"""

    def __init__(self, message: Any, target: Any) -> None:
        self.message_type = type(message).__name__
        self.target = target
        super().__init__(
            f"Unsupported message type: {self.message_type} for {_target_label(target)}"
        )


class InvalidWebhookTargetError(WebhookError):
    """具体的な送信先が必要な箇所に ALL などが渡された場合の例外。"""

    def __init__(self, target: Any, reason: str) -> None:
        self.target = target
        super().__init__(reason)


def _target_label(target: Any) -> str:
    return getattr(target, "name", str(target))
