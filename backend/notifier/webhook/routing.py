# backend/notifier/webhook/routing.py

"""
WebhookTarget から担当 Sender を引くルーター。

Sender の一覧は生成時に明示的に渡され、その後は変更しない。
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .exceptions import InvalidWebhookTargetError
from .schemas import WebhookTarget
from .sender import WebhookSender

logger = logging.getLogger(__name__)


class WebhookRouter:
    def __init__(self, senders: Iterable[WebhookSender]) -> None:
        self._senders: List[WebhookSender] = list(senders)

        seen = set()
        for sender in self._senders:
            if sender.target in seen:
                # 同じ target の Sender が複数ある場合は先に登録された方が使われる
                logger.warning(
                    "Duplicate webhook sender registered for target: %s", sender.target.name
                )
            seen.add(sender.target)

    def route(self, target: WebhookTarget) -> Optional[WebhookSender]:
        """
        target を担当する Sender を返す。未登録なら None。

        :raises InvalidWebhookTargetError: target が ALL の場合（all() を使うこと）。
        """
        if target == WebhookTarget.ALL:
            raise InvalidWebhookTargetError(target, "Cannot route to ALL target")

        for sender in self._senders:
            if sender.target == target:
                return sender
        return None

    def all(self) -> List[WebhookSender]:
        """登録順に全 Sender を返す。"""
        return list(self._senders)
