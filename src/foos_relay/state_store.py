"""JSON snapshot backing the relay's forwarding state."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from .models import ForwardState

logger = logging.getLogger(__name__)


class StateStore:
    """Load-or-default and save-whole access to the persisted state file."""

    def __init__(self, path: Path):
        self._path = path
        self._state: ForwardState | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def state(self) -> ForwardState:
        if self._state is None:
            self._state = self.load()
        return self._state

    def load(self) -> ForwardState:
        """Read the snapshot, falling back to an empty state on any failure."""

        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ForwardState()
        except (OSError, UnicodeDecodeError):
            logger.debug("Cannot read state file %s, starting empty", self._path, exc_info=True)
            return ForwardState()

        try:
            payload = json.loads(raw)
        except ValueError:
            logger.debug("State file %s is not valid JSON, starting empty", self._path)
            return ForwardState()

        state = _state_from_payload(payload)
        if state is None:
            logger.debug("State file %s has an unexpected shape, starting empty", self._path)
            return ForwardState()
        return state

    def save(self, state: ForwardState | None = None) -> None:
        """Overwrite the snapshot with the whole state."""

        if state is not None:
            self._state = state
        current = self.state
        self._path.write_text(json.dumps(current.to_payload(), indent=2), encoding="utf-8")


def _state_from_payload(payload: Any) -> ForwardState | None:
    if not isinstance(payload, Mapping):
        return None
    watermarks = payload.get("lastForwardedByThread") or {}
    threads = payload.get("foosThreads") or {}
    if not isinstance(watermarks, Mapping) or not isinstance(threads, Mapping):
        return None
    last_forwarded: dict[str, str] = {}
    for key, value in watermarks.items():
        watermark = _watermark_value(value)
        if watermark is None:
            logger.debug("Dropping invalid watermark %r for thread %s", value, key)
            continue
        last_forwarded[str(key)] = watermark
    return ForwardState(
        last_forwarded_by_thread=last_forwarded,
        foos_threads={str(key): bool(value) for key, value in threads.items() if value},
    )


def _watermark_value(value: Any) -> str | None:
    # A dropped watermark reads back as "0", so the thread keeps forwarding.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value) if value >= 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        return value.strip()
    return None
