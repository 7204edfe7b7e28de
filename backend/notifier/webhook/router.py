# backend/notifier/webhook/router.py

"""
Webhook 配信用の FastAPI ルーター定義。

- POST /webhook/send
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from .exceptions import WebhookError
from .factory import get_webhook_service
from .schemas import WebhookSendRequest, WebhookSendResponse, WebhookTarget
from .service import WebhookService

router = APIRouter(prefix="/webhook", tags=["webhook"])


@router.post(
    "/send",
    response_model=WebhookSendResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Webhook 通知の送信",
    description=(
        "target に応じて Slack / Discord / 全送信先に通知を送る。"
        "送信は非同期で行われ、結果はサーバーログでのみ確認できる。"
    ),
)
def send_webhook(
    request: WebhookSendRequest,
    service: WebhookService = Depends(get_webhook_service),
) -> WebhookSendResponse:
    """
    契約違反（送信先とメッセージ型の不一致など）は 400 として返す。
    """
    if not service.enabled:
        return WebhookSendResponse(status="disabled", target=request.target)

    try:
        if request.target == WebhookTarget.ALL:
            service.send_all(request.title, request.lines)
        elif request.target == WebhookTarget.SLACK:
            service.send_slack(request.title, request.lines)
        else:
            service.send_discord(request.title, request.lines, embeds=request.embeds)
    except WebhookError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return WebhookSendResponse(status="accepted", target=request.target)
