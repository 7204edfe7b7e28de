# backend/notifier/notifications/router.py

"""
通知用の FastAPI ルーター定義。

- POST /notifications
"""

from fastapi import APIRouter, Depends, status

from .factory import get_notification_service
from .schemas import NotificationRequest, NotificationResponse
from .service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post(
    "",
    response_model=NotificationResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="通知の送信",
)
def post_notification(
    request: NotificationRequest,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    if request.critical:
        service.send_critical_alert(request.title, request.messages)
    else:
        service.send_notification(request.title, request.messages)

    return NotificationResponse(enabled=service.is_enabled(), critical=request.critical)
