# backend/notifier/webhook/schemas.py

"""
Webhook 通知メッセージのスキーマ定義。

- WebhookTarget: 送信先プラットフォーム（ALL はブロードキャスト指示であり、実際の送信先ではない）
- CommonWebhookMessage: プラットフォーム非依存のメッセージ（タイトル＋行）
- SlackWebhookMessage / DiscordWebhookMessage: プラットフォーム固有のメッセージ

いずれのメッセージも生成後は変更しない前提のため、frozen なモデルにしている。
kind フィールドで種別を判別できるようにし、Converter 側で網羅的に分岐する。
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WebhookTarget(str, Enum):
    """
    Webhook の論理的な送信先。

    - SLACK: Slack Incoming Webhook
    - DISCORD: Discord Webhook
    - ALL: 登録済みの全 Sender へのブロードキャスト（単一 Sender の解決には使えない）
    """

    SLACK = "slack"
    DISCORD = "discord"
    ALL = "all"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CommonWebhookMessage(_FrozenModel):
    """
    プラットフォーム非依存のアラート。

    WebhookTarget.ALL で送る場合は必ずこの型を使う。
    """

    kind: Literal["common"] = "common"
    title: str = Field(..., description="アラートのタイトル。")
    contents: List[str] = Field(
        default_factory=list,
        description="本文の各行。順序はそのまま各プラットフォームに引き継がれる。",
    )

    def lines(self) -> List[str]:
        return list(self.contents)


class SlackMessage(_FrozenModel):
    """Slack に送る 1 ブロック分のメッセージ。"""

    title: str
    messages: List[str] = Field(default_factory=list)


class SlackWebhookMessage(_FrozenModel):
    kind: Literal["slack"] = "slack"
    slack_messages: List[SlackMessage] = Field(default_factory=list)

    def lines(self) -> List[str]:
        return [line for message in self.slack_messages for line in message.messages]


class DiscordEmbedField(_FrozenModel):
    name: str
    value: str
    inline: bool = False


class DiscordEmbedFooter(_FrozenModel):
    text: str


class DiscordEmbed(_FrozenModel):
    """
    Discord の embed ブロック。

    未指定の項目は送信ペイロードから除外される。
    """

    title: Optional[str] = None
    description: Optional[str] = None
    color: Optional[int] = None
    fields: Optional[List[DiscordEmbedField]] = None
    footer: Optional[DiscordEmbedFooter] = None


class DiscordMessage(_FrozenModel):
    """Discord に送る 1 ブロック分のメッセージ。"""

    title: str
    messages: List[str] = Field(default_factory=list)
    embeds: Optional[List[DiscordEmbed]] = None


class DiscordWebhookMessage(_FrozenModel):
    kind: Literal["discord"] = "discord"
    discord_messages: List[DiscordMessage] = Field(default_factory=list)

    def lines(self) -> List[str]:
        return [line for message in self.discord_messages for line in message.messages]


WebhookMessage = Union[CommonWebhookMessage, SlackWebhookMessage, DiscordWebhookMessage]


class WebhookSendRequest(BaseModel):
    """
    /webhook/send のリクエストボディ。

    embeds は target が DISCORD の場合のみ使われる。
    """

    target: WebhookTarget = Field(..., description="送信先（slack / discord / all）。")
    title: str = Field(..., description="通知タイトル。")
    lines: List[str] = Field(default_factory=list, description="本文の各行。")
    embeds: Optional[List[DiscordEmbed]] = Field(
        default=None,
        description="Discord 向けの embed ブロック。",
    )


class WebhookSendResponse(BaseModel):
    status: Literal["accepted", "disabled"]
    target: WebhookTarget


__all__ = [
    "WebhookTarget",
    "WebhookMessage",
    "CommonWebhookMessage",
    "SlackMessage",
    "SlackWebhookMessage",
    "DiscordEmbed",
    "DiscordEmbedField",
    "DiscordEmbedFooter",
    "DiscordMessage",
    "DiscordWebhookMessage",
    "WebhookSendRequest",
    "WebhookSendResponse",
]
