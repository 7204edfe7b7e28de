# backend/notifier/notifications/schemas.py

"""
/notifications エンドポイント用のスキーマ定義。

※ 通知本文は Slack / Discord にそのまま流れるため、
  API キーなどの機密情報は含めないこと。
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class NotificationRequest(BaseModel):
    title: str = Field(..., description="通知タイトル。")
    messages: List[str] = Field(default_factory=list, description="本文の各行。")
    critical: bool = Field(
        default=False,
        description="True の場合は緊急アラートとして送る（タイトルに 🚨 が付く）。",
    )


class NotificationResponse(BaseModel):
    enabled: bool
    critical: bool
