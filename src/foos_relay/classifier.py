"""Heuristics recognising Foos game threads and play-by-play posts."""

from __future__ import annotations

import re

from .models import MessageKind, TeamMarkers

_SCOREBOARD_RE = re.compile(r"[A-Z]{2,4}\s+\d+\s*-\s*[A-Z]{2,4}\s+\d+", re.ASCII)

# Ump result writeup: Pitch / Swing / Diff lines in that order.
_RESULT_BLOCK_RE = re.compile(
    r"^\s*Pitch:\s*\d{1,4}\s*$.*?"
    r"^\s*Swing:\s*\d{1,4}\s*$.*?"
    r"^\s*Diff:\s*\d{1,4}\s*->\s*.+?\s*$",
    re.MULTILINE | re.DOTALL | re.ASCII,
)

_PITCHER_ANNOUNCE_RE = re.compile(r"\bOn the mound:", re.IGNORECASE | re.ASCII)
_UP_TO_BAT_RE = re.compile(
    r"\bis up to bat\b|\bwhen you swing\b|\btimer expires\b", re.IGNORECASE | re.ASCII
)

_SWING_EXPLICIT_RE = re.compile(r"\bSwing\s*:\s*(\d{1,4})\b", re.IGNORECASE | re.ASCII)
_SWING_INLINE_RE = re.compile(r"\b(?:swing|swung)\s+(\d{1,4})\b", re.IGNORECASE | re.ASCII)
# Mention snowflakes are far longer than four digits, so they never match.
_NUMBER_RE = re.compile(r"\b(\d{1,4})\b", re.ASCII)
_ROLE_PING_RE = re.compile(r"<@&\d+>", re.ASCII)

SWING_MIN = 1
SWING_MAX = 1000
_ROLE_PING_MIN_LENGTH = 25
_BARE_SWING_MAX_LENGTH = 10


def is_foos_game_message(text: str | None, markers: TeamMarkers) -> bool:
    """Return True if ``text`` suggests its thread hosts a tracked team game."""

    if not text:
        return False
    if markers.display_name and markers.display_name in text:
        return True
    abbreviation = markers.abbreviation
    if not abbreviation:
        return False
    if abbreviation in text and _SCOREBOARD_RE.search(text):
        return True
    line_start = re.compile(rf"^\s*{re.escape(abbreviation)}\s+\d+\b", re.MULTILINE | re.ASCII)
    return line_start.search(text) is not None


def extract_swing_from_text(text: str | None) -> int | None:
    """Pull the submitted swing number out of a free-form batter post.

    An explicit ``Swing: 123`` or inline ``swung 123`` label wins; a labelled
    number outside 1-1000 yields ``None`` without looking any further.
    Otherwise the last standalone 1-4 digit number in range is used, since
    batters tend to put the swing at the end ("... 793 feet").
    """

    if not text:
        return None

    match = _SWING_EXPLICIT_RE.search(text) or _SWING_INLINE_RE.search(text)
    if match:
        value = int(match.group(1))
        return value if SWING_MIN <= value <= SWING_MAX else None

    candidates = [
        value
        for value in (int(found.group(1)) for found in _NUMBER_RE.finditer(text))
        if SWING_MIN <= value <= SWING_MAX
    ]
    if not candidates:
        return None
    return candidates[-1]


def classify_message(text: str | None) -> MessageKind | None:
    """Classify a game thread message; ``None`` means it is not forwarded."""

    if not text:
        return None
    if _RESULT_BLOCK_RE.search(text):
        return MessageKind.UMP_RESULT
    if _PITCHER_ANNOUNCE_RE.search(text) and _UP_TO_BAT_RE.search(text):
        return MessageKind.PITCHER_WRITEUP

    swing = extract_swing_from_text(text)
    if swing is None:
        return None

    length = len(text.strip())
    if _ROLE_PING_RE.search(text) and length >= _ROLE_PING_MIN_LENGTH:
        return MessageKind.SWING_WRITEUP
    if length <= _BARE_SWING_MAX_LENGTH:
        return MessageKind.SWING_WRITEUP
    return None
