# backend/notifier/webhook/converter.py

"""
共通メッセージをプラットフォーム固有メッセージへ変換するコンバータ。

(送信先, メッセージの kind) の組み合わせごとに
- 既に送信先の型ならそのまま返す
- CommonWebhookMessage なら 1 件のプラットフォーム固有メッセージに包む
- それ以外は契約違反として例外を投げる
のいずれかになる。
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from .exceptions import InvalidWebhookTargetError, UnsupportedMessageTypeError
from .schemas import (
    CommonWebhookMessage,
    DiscordMessage,
    DiscordWebhookMessage,
    SlackMessage,
    SlackWebhookMessage,
    WebhookMessage,
    WebhookTarget,
)


def convert_common_to_slack(message: CommonWebhookMessage) -> SlackWebhookMessage:
    return SlackWebhookMessage(
        slack_messages=[SlackMessage(title=message.title, messages=message.lines())]
    )


def convert_common_to_discord(message: CommonWebhookMessage) -> DiscordWebhookMessage:
    return DiscordWebhookMessage(
        discord_messages=[DiscordMessage(title=message.title, messages=message.lines())]
    )


def _identity(message: WebhookMessage) -> WebhookMessage:
    return message


# (送信先, kind) -> 変換関数
_CONVERSIONS: Dict[Tuple[WebhookTarget, str], Callable[[Any], WebhookMessage]] = {
    (WebhookTarget.SLACK, "slack"): _identity,
    (WebhookTarget.SLACK, "common"): convert_common_to_slack,
    (WebhookTarget.DISCORD, "discord"): _identity,
    (WebhookTarget.DISCORD, "common"): convert_common_to_discord,
}


class WebhookMessageConverter:
    """WebhookTarget ごとの変換ルールをまとめたコンバータ。"""

    def convert(self, target: WebhookTarget, message: WebhookMessage) -> WebhookMessage:
        """
        メッセージを target 向けの型に変換する。

        :raises InvalidWebhookTargetError: target が ALL の場合。
        :raises UnsupportedMessageTypeError: target に対応しないメッセージ型の場合。
        """
        if target == WebhookTarget.ALL:
            raise InvalidWebhookTargetError(target, "Cannot convert for ALL target")

        rule = _CONVERSIONS.get((target, getattr(message, "kind", None)))
        if rule is None:
            raise UnsupportedMessageTypeError(message, target)
        return rule(message)
