"""Eligibility rules applied before a message is inspected."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ThreadMessage


@dataclass(slots=True)
class FilterDecision:
    """Result of evaluating filters."""

    allowed: bool
    reason: str | None = None


class FilterEngine:
    """Accept only human messages in game-day threads of the tracked server."""

    def __init__(self, guild_id: str, game_day_category_id: str):
        self._guild_id = guild_id.strip()
        self._category_id = game_day_category_id.strip()

    def evaluate(self, message: ThreadMessage) -> FilterDecision:
        if message.author_is_bot:
            return FilterDecision(False, "bot_author")
        if not message.guild_id or message.guild_id != self._guild_id:
            return FilterDecision(False, "guild_mismatch")
        if not message.is_thread:
            return FilterDecision(False, "not_thread")
        if message.category_id != self._category_id:
            return FilterDecision(False, "not_game_day")
        if not message.content:
            return FilterDecision(False, "empty")
        return FilterDecision(True)
