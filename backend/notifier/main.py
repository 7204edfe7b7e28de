# backend/notifier/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /webhook/send エンドポイントを公開する
- /notifications エンドポイントを公開する
- 終了時に Webhook 送信用のスレッドプールと共有サービスを破棄する
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from notifier.notifications import factory as notifications_factory
from notifier.notifications.router import router as notifications_router
from notifier.webhook import factory as webhook_factory
from notifier.webhook.router import router as webhook_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # 共有サービスも破棄し、次回起動時に新しいスレッドプールで組み立て直す。
    # 送信中のリクエストは待ってから閉じる。
    notifications_factory.reset_state()
    webhook_factory.reset_state()


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - Webhook 送信エンドポイント (/webhook/send)
    - 通知エンドポイント (/notifications)
    - ヘルスチェックエンドポイント (/health)
    """
    app = FastAPI(title="Webhook Notifier Backend", lifespan=lifespan)

    # ルーター登録
    app.include_router(webhook_router)
    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
