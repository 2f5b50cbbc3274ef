"""Webhook text formatting helpers."""

from __future__ import annotations

from .models import MessageKind, ThreadMessage

MAX_BODY_LENGTH = 1600
ELLIPSIS = "…"

_KIND_HEADERS = {
    MessageKind.UMP_RESULT: "🧾 **RESULT**",
    MessageKind.PITCHER_WRITEUP: "🎯 **PITCH** (ump writeup)",
    MessageKind.SWING_WRITEUP: "⚾ **SWING**",
}
_SEPARATOR = " • "


def format_forward(message: ThreadMessage, kind: MessageKind) -> str:
    """Render a classified thread message for the Foos webhook."""

    header = _SEPARATOR.join(
        (
            _KIND_HEADERS[kind],
            f"**{message.channel_name}**",
            f"[Jump]({message.jump_url})",
        )
    )
    return f"{header}\n```text\n{trim_block(message.content)}\n```"


def trim_block(text: str | None, limit: int = MAX_BODY_LENGTH) -> str:
    stripped = (text or "").strip()
    if len(stripped) <= limit:
        return stripped
    return stripped[:limit] + ELLIPSIS
