# backend/notifier/webhook/emoji.py

"""
タイトル・本文の行に付ける絵文字を決めるリゾルバ。

キーワードグループを優先順に評価し、最初に一致したグループの絵文字を返す。
タイトル用と行用でグループ列とデフォルトを別々に持つ。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Sequence


@dataclass(frozen=True)
class EmojiKeywordGroup:
    keywords: FrozenSet[str]
    emoji: str

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.keywords)


ERROR = EmojiKeywordGroup(frozenset({"error", "fail"}), "❌")
DEPLOY = EmojiKeywordGroup(frozenset({"deploy", "release"}), "🚀")
WARN = EmojiKeywordGroup(frozenset({"warn"}), "⚠️")
SUCCESS = EmojiKeywordGroup(frozenset({"success", "completed"}), "✅")
FAIL = EmojiKeywordGroup(frozenset({"fail", "error"}), "❌")
SLOW = EmojiKeywordGroup(frozenset({"warn", "slow"}), "⚠️")

DEFAULT_TITLE_EMOJI = "📝"
DEFAULT_LINE_EMOJI = "🔹"

# error/fail > deploy/release > warn > success/completed の順
TITLE_GROUPS: Sequence[EmojiKeywordGroup] = (ERROR, DEPLOY, WARN, SUCCESS, SLOW)
LINE_GROUPS: Sequence[EmojiKeywordGroup] = (FAIL, DEPLOY, WARN, SUCCESS, SLOW)


def _resolve(text: str, groups: Sequence[EmojiKeywordGroup], default: str) -> str:
    for group in groups:
        if group.matches(text):
            return group.emoji
    return default


def resolve_title_emoji(title: str) -> str:
    """タイトル用の絵文字を返す。どのキーワードにも一致しなければ 📝。"""
    return _resolve(title, TITLE_GROUPS, DEFAULT_TITLE_EMOJI)


def resolve_line_emoji(line: str) -> str:
    """本文 1 行用の絵文字を返す。どのキーワードにも一致しなければ 🔹。"""
    return _resolve(line, LINE_GROUPS, DEFAULT_LINE_EMOJI)
