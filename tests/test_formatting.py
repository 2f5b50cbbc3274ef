from __future__ import annotations

from foos_relay.formatting import ELLIPSIS, MAX_BODY_LENGTH, format_forward, trim_block
from foos_relay.models import MessageKind, ThreadMessage


def _message(content: str) -> ThreadMessage:
    return ThreadMessage(
        id="900",
        guild_id="20",
        channel_name="LAF vs NYM",
        channel_id="10",
        is_thread=True,
        category_id="30",
        author_is_bot=False,
        content=content,
        jump_url="https://discord.com/channels/20/10/900",
    )


def test_format_forward_layout() -> None:
    text = format_forward(_message("  Pitch: 1\n"), MessageKind.UMP_RESULT)

    assert text == (
        "🧾 **RESULT** • **LAF vs NYM** • [Jump](https://discord.com/channels/20/10/900)\n"
        "```text\nPitch: 1\n```"
    )


def test_headers_per_kind() -> None:
    message = _message("body")

    assert format_forward(message, MessageKind.PITCHER_WRITEUP).startswith(
        "🎯 **PITCH** (ump writeup) • "
    )
    assert format_forward(message, MessageKind.SWING_WRITEUP).startswith("⚾ **SWING** • ")


def test_trim_block_truncates_long_text() -> None:
    long_text = "x" * (MAX_BODY_LENGTH + 50)

    trimmed = trim_block(long_text)

    assert len(trimmed) == MAX_BODY_LENGTH + len(ELLIPSIS)
    assert trimmed.endswith(ELLIPSIS)
    assert trim_block("x" * MAX_BODY_LENGTH) == "x" * MAX_BODY_LENGTH
    assert trim_block(None) == ""
