# backend/notifier/webhook/executor.py

"""
Webhook 送信用のスレッドプールと HTTP クライアントの共有状態。

- 送信は呼び出し元スレッドを待たせないよう、専用のスレッドプールで実行する
- HTTP クライアントは接続を使い回すため 1 つを共有する
- テスト時にリセットできるようにする
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import httpx

from .config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

THREAD_NAME_PREFIX = "async-webhook-exec"

_executor: Optional[ThreadPoolExecutor] = None
_http_client: Optional[httpx.Client] = None


def get_webhook_executor(max_workers: int = DEFAULT_MAX_WORKERS) -> ThreadPoolExecutor:
    """
    共有の送信用 ThreadPoolExecutor を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _executor
    if _executor is None:
        _executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=THREAD_NAME_PREFIX,
        )
        logger.info("Webhook executor initialized with max_workers=%d", max_workers)
    return _executor


def get_http_client(timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS) -> httpx.Client:
    """共有の httpx.Client を返す。"""
    global _http_client
    if _http_client is None:
        _http_client = httpx.Client(timeout=timeout_seconds)
    return _http_client


def shutdown(wait: bool = True) -> None:
    """
    スレッドプールと HTTP クライアントを閉じる。

    wait=True の場合、送信中のリクエストが終わるまで待つ。
    """
    global _executor, _http_client
    if _executor is not None:
        _executor.shutdown(wait=wait)
        _executor = None
    if _http_client is not None:
        _http_client.close()
        _http_client = None


def reset_state() -> None:
    """
    テスト用に共有状態をリセットする。
    """
    shutdown(wait=True)
