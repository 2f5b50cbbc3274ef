"""Tracking of threads confirmed to host a Foos game."""

from __future__ import annotations

import logging

from .classifier import is_foos_game_message
from .models import TeamMarkers
from .state_store import StateStore

logger = logging.getLogger(__name__)


class ThreadTracker:
    """Remember game threads once any message in them carries team markers."""

    def __init__(self, store: StateStore, markers: TeamMarkers):
        self._store = store
        self._markers = markers

    def mark_if_game_message(self, thread_id: str, text: str) -> bool:
        """Mark ``thread_id`` as a game thread when ``text`` carries team markers."""

        if not is_foos_game_message(text, self._markers):
            return False
        threads = self._store.state.foos_threads
        if not threads.get(thread_id):
            logger.info("Thread %s confirmed as a Foos game", thread_id)
        threads[thread_id] = True
        self._store.save()
        return True

    def is_tracked_thread(self, thread_id: str) -> bool:
        return bool(self._store.state.foos_threads.get(thread_id))
