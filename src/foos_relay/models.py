"""Data models used across the relay."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MessageKind(str, Enum):
    """Role of a message in the game's turn sequence."""

    UMP_RESULT = "UMP_RESULT"
    PITCHER_WRITEUP = "PITCHER_WRITEUP"
    SWING_WRITEUP = "SWING_WRITEUP"


@dataclass(slots=True, frozen=True)
class TeamMarkers:
    """Text markers identifying the tracked team in game threads."""

    abbreviation: str = "LAF"
    display_name: str = "@Los Angeles Foos"


@dataclass(slots=True)
class RelaySettings:
    """Startup configuration of the relay."""

    discord_token: str
    guild_id: str
    game_day_category_id: str
    webhook_url: str
    team: TeamMarkers = field(default_factory=TeamMarkers)


@dataclass(slots=True)
class ThreadMessage:
    """Subset of the Discord message payload used by the handler."""

    id: str
    guild_id: str | None
    channel_id: str
    channel_name: str
    is_thread: bool
    category_id: str | None
    author_is_bot: bool
    content: str
    jump_url: str


@dataclass(slots=True)
class ForwardState:
    """Persisted forwarding watermarks and confirmed game threads."""

    last_forwarded_by_thread: dict[str, str] = field(default_factory=dict)
    foos_threads: dict[str, bool] = field(default_factory=dict)

    def to_payload(self) -> dict[str, dict[str, object]]:
        return {
            "lastForwardedByThread": dict(self.last_forwarded_by_thread),
            "foosThreads": dict(self.foos_threads),
        }
