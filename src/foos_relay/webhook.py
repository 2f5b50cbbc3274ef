"""Delivery of formatted posts to the Foos webhook."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import aiohttp

logger = logging.getLogger(__name__)

_REQUEST_TIMEOUT = 15


class WebhookProtocol(Protocol):
    async def post(self, content: str) -> bool: ...


class WebhookClient:
    """Lightweight Discord-style webhook wrapper."""

    def __init__(self, url: str, session: aiohttp.ClientSession):
        self._url = url
        self._session = session

    async def post(self, content: str) -> bool:
        """Send ``content``; failures are logged and reported as ``False``."""

        try:
            timeout_cfg = aiohttp.ClientTimeout(total=_REQUEST_TIMEOUT)
            async with self._session.post(
                self._url,
                json={"content": content},
                headers={"Content-Type": "application/json"},
                timeout=timeout_cfg,
            ) as resp:
                if 200 <= resp.status < 300:
                    await resp.read()
                    return True
                try:
                    body = await resp.text()
                except (aiohttp.ClientError, UnicodeDecodeError):
                    body = ""
                logger.error("Webhook error: %s %s", resp.status, body)
                return False
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error("Webhook request failed: %s", exc)
            return False
