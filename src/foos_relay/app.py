"""Application bootstrap for the Foos relay."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import aiohttp

from .classifier import classify_message
from .deduplication import ForwardGate
from .filters import FilterEngine
from .formatting import format_forward
from .gateway import RelayClient
from .membership import ThreadTracker
from .models import RelaySettings, ThreadMessage
from .state_store import StateStore
from .utils import ThreadProcessingGuard
from .webhook import WebhookClient, WebhookProtocol

logger = logging.getLogger(__name__)


class FoosRelayApp:
    """High level coordinator tying together Discord, the state file and the webhook."""

    def __init__(
        self,
        *,
        settings: RelaySettings,
        state_path: Path,
        webhook: WebhookProtocol | None = None,
    ):
        self._settings = settings
        self._store = StateStore(state_path)
        self._tracker = ThreadTracker(self._store, settings.team)
        self._gate = ForwardGate(self._store)
        self._filters = FilterEngine(settings.guild_id, settings.game_day_category_id)
        self._thread_guard = ThreadProcessingGuard()
        self._webhook = webhook

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def tracker(self) -> ThreadTracker:
        return self._tracker

    @property
    def gate(self) -> ForwardGate:
        return self._gate

    async def run(self) -> None:
        state = self._store.state
        logger.info(
            "Loaded state from %s: %d game threads, %d watermarks",
            self._store.path,
            len(state.foos_threads),
            len(state.last_forwarded_by_thread),
        )
        async with aiohttp.ClientSession() as session:
            if self._webhook is None:
                self._webhook = WebhookClient(self._settings.webhook_url, session)
            client = RelayClient(self.handle_message, guild_id=self._settings.guild_id)
            async with client:
                await client.start(self._settings.discord_token)

    async def handle_message(self, message: ThreadMessage) -> bool:
        """Process one created message; returns True when it was forwarded.

        Errors never escape: they are logged and the message is dropped.
        """

        try:
            return await self._handle_message_inner(message)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(
                "Handler error for message %s in channel %s", message.id, message.channel_id
            )
            return False

    async def _handle_message_inner(self, message: ThreadMessage) -> bool:
        decision = self._filters.evaluate(message)
        if not decision.allowed:
            logger.debug("Skipping message %s: %s", message.id, decision.reason)
            return False

        thread_id = message.channel_id
        async with self._thread_guard.lock(thread_id):
            self._tracker.mark_if_game_message(thread_id, message.content)
            if not self._tracker.is_tracked_thread(thread_id):
                return False

            kind = classify_message(message.content)
            if kind is None:
                return False

            if not self._gate.should_forward(thread_id, message.id):
                logger.debug(
                    "Message %s is not newer than %s in thread %s",
                    message.id,
                    self._gate.watermark(thread_id),
                    thread_id,
                )
                return False

            if self._webhook is None:
                raise RuntimeError("Webhook is not configured")
            delivered = await self._webhook.post(format_forward(message, kind))
            # Delivery is not retried, so the watermark advances either way.
            self._gate.record_forwarded(thread_id, message.id)
            logger.info(
                "Forwarded %s %s from thread %s%s",
                kind.value,
                message.id,
                thread_id,
                "" if delivered else " (delivery failed)",
            )
            return True
