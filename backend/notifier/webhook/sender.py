# backend/notifier/webhook/sender.py

"""
Webhook Sender のインターフェースと共通実装。

各 Sender は 1 つのプラットフォームへの配信だけを受け持つ。
HTTP 送信は専用スレッドプールに投げっぱなしにし、結果はログでのみ確認する。
send() がリモート側の失敗で例外を投げることはない。
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future
from typing import Any, Dict, Optional, Protocol, Type

import httpx

from .schemas import WebhookMessage, WebhookTarget

logger = logging.getLogger(__name__)


class WebhookSender(Protocol):
    """
    Webhook 送信の最小インターフェース。

    実装:
    - SlackWebhookSender
    - DiscordWebhookSender
    """

    @property
    def target(self) -> WebhookTarget:  # pragma: no cover - Protocol
        ...

    def send(self, message: WebhookMessage) -> Optional[Future]:  # pragma: no cover - Protocol
        ...


class HttpWebhookSender(ABC):
    """
    Webhook URL へ JSON を POST する Sender の基底クラス。

    サブクラスは target / message_type / platform_name と build_payload() を定義する。
    """

    target: WebhookTarget
    message_type: Type[Any]
    platform_name: str

    def __init__(
        self,
        url: str,
        *,
        executor: Executor,
        http_client: httpx.Client,
        logger_: logging.Logger | None = None,
    ) -> None:
        self._url = url or ""
        self._executor = executor
        self._http_client = http_client
        self._logger = logger_ or logger

    @property
    def url(self) -> str:
        return self._url

    @abstractmethod
    def build_payload(self, message: Any) -> Dict[str, Any]:
        """message_type のメッセージから送信用 JSON を組み立てる。"""

    def send(self, message: WebhookMessage) -> Optional[Future]:
        """
        メッセージを Webhook に送信する（投げっぱなし）。

        - URL 未設定: warning を出して何もしない
        - 型が合わない: error を出して何もしない（ルーティング/変換のバグを示す）

        :return: 送信処理の Future。送信しなかった場合は None。
        """
        if not self._url.strip():
            self._logger.warning("%s webhook URL is not configured", self.platform_name)
            return None

        if not isinstance(message, self.message_type):
            self._logger.error(
                "Invalid message type for %s: %s",
                self.platform_name,
                type(message).__name__,
            )
            return None

        payload = self.build_payload(message)
        future = self._executor.submit(self._post, payload)
        future.add_done_callback(self._log_result)
        return future

    def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        response = self._http_client.post(self._url, json=payload)
        response.raise_for_status()
        self._logger.info(
            "%s webhook sent successfully on thread: %s",
            self.platform_name,
            threading.current_thread().name,
        )
        return response

    def _log_result(self, future: Future) -> None:
        if future.cancelled():
            self._logger.warning("%s webhook send was cancelled", self.platform_name)
            return

        exc = future.exception()
        if exc is None:
            return

        if isinstance(exc, httpx.HTTPStatusError):
            self._logger.error(
                "Failed to send message to %s: status_code=%s, body=%s",
                self.platform_name,
                exc.response.status_code,
                exc.response.text,
            )
        else:
            self._logger.error(
                "Failed to send message to %s",
                self.platform_name,
                exc_info=exc,
            )
