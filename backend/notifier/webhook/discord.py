# backend/notifier/webhook/discord.py

"""
Discord Webhook への Sender。

ペイロード:
    {"content": "<本文>", "embeds": [...]}  # embeds は 1 件以上ある場合のみ
"""

from __future__ import annotations

from typing import Any, Dict, List

from .emoji import resolve_line_emoji, resolve_title_emoji
from .schemas import DiscordMessage, DiscordWebhookMessage, WebhookTarget
from .sender import HttpWebhookSender


def format_discord_message(message: DiscordMessage) -> str:
    header = f"{resolve_title_emoji(message.title)} **[{message.title}]**"
    body = "\n".join(f"{resolve_line_emoji(line)} {line}" for line in message.messages)
    return f"{header}\n{body}"


def build_discord_payload(messages: List[DiscordMessage]) -> Dict[str, Any]:
    """
    DiscordMessage の一覧から Webhook ペイロードを組み立てる。

    各メッセージは空行区切りで content に連結し、
    embeds は全メッセージ分をフラットにまとめる。
    """
    content = "\n\n".join(format_discord_message(message) for message in messages)
    embeds = [
        embed.model_dump(exclude_none=True)
        for message in messages
        for embed in (message.embeds or [])
    ]

    payload: Dict[str, Any] = {"content": content}
    if embeds:
        payload["embeds"] = embeds
    return payload


class DiscordWebhookSender(HttpWebhookSender):
    target = WebhookTarget.DISCORD
    message_type = DiscordWebhookMessage
    platform_name = "Discord"

    def build_payload(self, message: DiscordWebhookMessage) -> Dict[str, Any]:
        return build_discord_payload(message.discord_messages)
