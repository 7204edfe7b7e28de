# backend/notifier/webhook/slack.py

"""
Slack Incoming Webhook への Sender。

Block Kit 形式で送る:
- メッセージごとに「タイトル section → divider → 各行 section」
- メッセージ間は divider で区切る（最後のメッセージの後には付けない）
- text には通知プレビュー用のプレーンな要約を入れる
"""

from __future__ import annotations

from typing import Any, Dict, List

from .emoji import resolve_line_emoji, resolve_title_emoji
from .schemas import SlackMessage, SlackWebhookMessage, WebhookTarget
from .sender import HttpWebhookSender


def _section_block(text: str) -> Dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def _divider_block() -> Dict[str, Any]:
    return {"type": "divider"}


def build_message_blocks(message: SlackMessage, *, is_last: bool) -> List[Dict[str, Any]]:
    blocks = [
        _section_block(f"{resolve_title_emoji(message.title)} *{message.title}*"),
        _divider_block(),
    ]
    blocks.extend(
        _section_block(f"{resolve_line_emoji(line)} {line}") for line in message.messages
    )
    if not is_last:
        blocks.append(_divider_block())
    return blocks


def build_slack_payload(messages: List[SlackMessage]) -> Dict[str, Any]:
    blocks: List[Dict[str, Any]] = []
    for index, message in enumerate(messages):
        blocks.extend(build_message_blocks(message, is_last=index == len(messages) - 1))

    text = "\n\n".join(
        f"*{message.title}*\n" + "\n".join(f"• {line}" for line in message.messages)
        for message in messages
    )
    return {"text": text, "blocks": blocks}


class SlackWebhookSender(HttpWebhookSender):
    target = WebhookTarget.SLACK
    message_type = SlackWebhookMessage
    platform_name = "Slack"

    def build_payload(self, message: SlackWebhookMessage) -> Dict[str, Any]:
        return build_slack_payload(message.slack_messages)
