"""Discord gateway client feeding messages to the relay."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import discord

from .models import ThreadMessage

logger = logging.getLogger(__name__)

MessageHandler = Callable[[ThreadMessage], Awaitable[object]]
ChannelFetcher = Callable[[int], Awaitable[Any]]


def build_intents() -> discord.Intents:
    """Gateway intents needed to read thread messages.

    The message content intent must also be enabled in the developer portal.
    """

    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class RelayClient(discord.Client):
    """Discord client that hands every created message to the relay."""

    def __init__(self, handler: MessageHandler, *, guild_id: str | None = None, **options: Any):
        options.setdefault("intents", build_intents())
        super().__init__(**options)
        self._handler = handler
        self._guild_id = guild_id

    async def on_ready(self) -> None:
        logger.info("Logged in as %s", self.user)

    async def on_message(self, message: discord.Message) -> None:
        fetch_channel = self.fetch_channel if self._may_fetch_parent(message) else None
        try:
            payload = await thread_message_from_discord(message, fetch_channel)
        except Exception:
            logger.exception("Cannot read Discord message %s", getattr(message, "id", "?"))
            return
        await self._handler(payload)

    def _may_fetch_parent(self, message: discord.Message) -> bool:
        # REST lookups only for human messages in the tracked server.
        if getattr(message.author, "bot", False):
            return False
        guild = message.guild
        if guild is None:
            return False
        return self._guild_id is None or str(guild.id) == self._guild_id


async def thread_message_from_discord(
    message: discord.Message,
    fetch_channel: ChannelFetcher | None = None,
) -> ThreadMessage:
    channel = message.channel
    is_thread = isinstance(channel, discord.Thread)
    category_id: str | None = None
    if is_thread:
        category_id = await _resolve_category_id(channel, fetch_channel)

    guild = message.guild
    author = message.author
    return ThreadMessage(
        id=str(message.id),
        guild_id=str(guild.id) if guild is not None else None,
        channel_id=str(channel.id),
        channel_name=str(getattr(channel, "name", "") or ""),
        is_thread=is_thread,
        category_id=category_id,
        author_is_bot=bool(getattr(author, "bot", False)),
        content=message.content or "",
        jump_url=message.jump_url,
    )


async def _resolve_category_id(
    thread: discord.Thread,
    fetch_channel: ChannelFetcher | None,
) -> str | None:
    # Game-day threads hang off a text channel whose category is the game day.
    parent = thread.parent
    if parent is None and fetch_channel is not None and thread.parent_id:
        try:
            parent = await fetch_channel(thread.parent_id)
        except (discord.HTTPException, discord.InvalidData):
            logger.warning(
                "Cannot fetch parent channel %s of thread %s", thread.parent_id, thread.id
            )
            return None
    if parent is None:
        return None
    category_id = getattr(parent, "category_id", None)
    return str(category_id) if category_id else None
