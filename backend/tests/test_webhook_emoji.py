# backend/tests/test_webhook_emoji.py

import pytest

from notifier.webhook import emoji


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Error occurred in application", emoji.ERROR.emoji),
        ("Deploy to production completed", emoji.DEPLOY.emoji),
        ("Warning: Performance issue detected", emoji.WARN.emoji),
        ("Build successful", emoji.SUCCESS.emoji),
        ("Test failed", emoji.ERROR.emoji),
        ("Response is slow", emoji.SLOW.emoji),
        ("Regular notification", emoji.DEFAULT_TITLE_EMOJI),
        ("ERROR in uppercase", emoji.ERROR.emoji),
        ("", emoji.DEFAULT_TITLE_EMOJI),
    ],
)
def test_resolve_title_emoji(title: str, expected: str) -> None:
    assert emoji.resolve_title_emoji(title) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Error in processing", emoji.FAIL.emoji),
        ("Deployment started", emoji.DEPLOY.emoji),
        ("Warning: Low memory", emoji.WARN.emoji),
        ("Build success", emoji.SUCCESS.emoji),
        ("Test failed", emoji.FAIL.emoji),
        ("Performance is slow", emoji.SLOW.emoji),
        ("Regular line content", emoji.DEFAULT_LINE_EMOJI),
        ("SUCCESS in uppercase", emoji.SUCCESS.emoji),
        ("", emoji.DEFAULT_LINE_EMOJI),
    ],
)
def test_resolve_line_emoji(line: str, expected: str) -> None:
    assert emoji.resolve_line_emoji(line) == expected


def test_error_group_takes_priority_over_deploy() -> None:
    """
    "fail" と "deploy" の両方を含む場合、先に評価される error グループが勝つこと。
    """
    assert emoji.resolve_title_emoji("Deployment failed") == "❌"
    assert emoji.resolve_line_emoji("Deployment failed") == "❌"


def test_title_and_line_defaults_differ() -> None:
    assert emoji.resolve_title_emoji("hello") == "📝"
    assert emoji.resolve_line_emoji("hello") == "🔹"


def test_success_before_slow_in_line_resolution() -> None:
    assert emoji.resolve_line_emoji("slow but completed") == "✅"
