# backend/tests/test_webhook_factory.py

import threading

from notifier.webhook import executor as webhook_executor
from notifier.webhook.config import WebhookSettings
from notifier.webhook.discord import DiscordWebhookSender
from notifier.webhook.factory import build_webhook_service, get_webhook_service
from notifier.webhook.schemas import WebhookTarget
from notifier.webhook.slack import SlackWebhookSender


def test_build_webhook_service_registers_slack_then_discord() -> None:
    settings = WebhookSettings(
        enabled=True,
        slack_url="https://hooks.slack.test/x",
        discord_url="https://discord.test/api/webhooks/1/x",
    )

    service = build_webhook_service(settings)
    senders = service._router.all()

    assert service.enabled is True
    assert [type(s) for s in senders] == [SlackWebhookSender, DiscordWebhookSender]
    assert [s.target for s in senders] == [WebhookTarget.SLACK, WebhookTarget.DISCORD]
    assert senders[0].url == "https://hooks.slack.test/x"


def test_get_webhook_service_is_shared_and_disabled_by_default() -> None:
    first = get_webhook_service()
    second = get_webhook_service()

    assert first is second
    assert first.enabled is False


def test_executor_threads_use_webhook_prefix() -> None:
    executor = webhook_executor.get_webhook_executor(max_workers=2)
    name = executor.submit(lambda: threading.current_thread().name).result(timeout=5)

    assert name.startswith(webhook_executor.THREAD_NAME_PREFIX)
    assert webhook_executor.get_webhook_executor() is executor

    webhook_executor.shutdown()
