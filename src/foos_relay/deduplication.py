"""Per-thread watermarks preventing duplicate forwards."""
from __future__ import annotations

from .state_store import StateStore
from .utils import snowflake_value

_DEFAULT_WATERMARK = "0"


class ForwardGate:
    """Only let messages newer than the last forwarded one through."""

    def __init__(self, store: StateStore):
        self._store = store

    def watermark(self, thread_id: str) -> str:
        return self._store.state.last_forwarded_by_thread.get(thread_id) or _DEFAULT_WATERMARK

    def should_forward(self, thread_id: str, message_id: str) -> bool:
        """Return True if ``message_id`` is strictly newer than the thread watermark."""

        return snowflake_value(message_id) > snowflake_value(self.watermark(thread_id))

    def record_forwarded(self, thread_id: str, message_id: str) -> None:
        self._store.state.last_forwarded_by_thread[thread_id] = str(message_id)
        self._store.save()
