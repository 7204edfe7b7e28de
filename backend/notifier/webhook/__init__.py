"""
Webhook 配信モジュール。

- schemas: 共通 / Slack / Discord メッセージと WebhookTarget
- emoji: タイトル・行に付ける絵文字の解決
- converter: 共通メッセージからプラットフォーム固有メッセージへの変換
- routing: WebhookTarget から Sender を引くルーター
- slack / discord: 各プラットフォームへの Sender
- service: ブロードキャスト / 単一送信先への配信
- factory: 設定値から WebhookService を組み立てる
- router: /webhook/send エンドポイント
"""

from .converter import WebhookMessageConverter  # noqa: F401
from .exceptions import (  # noqa: F401
    InvalidWebhookTargetError,
    UnsupportedMessageTypeError,
    WebhookError,
)
from .routing import WebhookRouter  # noqa: F401
from .schemas import (  # noqa: F401
    CommonWebhookMessage,
    DiscordEmbed,
    DiscordEmbedField,
    DiscordEmbedFooter,
    DiscordWebhookMessage,
    SlackWebhookMessage,
    WebhookTarget,
)
from .service import WebhookService  # noqa: F401
