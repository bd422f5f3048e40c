from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from models import GatewayResult
from settings import Settings


logger = logging.getLogger("voice-relay.gateway")


class GatewayClient:
    """Single-shot HTTP client for the upstream chat gateway."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.chat_url = settings.gateway_chat_url
        self.timeout = settings.gateway_timeout_seconds
        self._transport = transport

    async def send_message(self, message: Any) -> GatewayResult:
        """POST ``message`` to the gateway; never raises for network failures."""
        try:
            return await asyncio.wait_for(self._post(message), timeout=self.timeout)
        except asyncio.TimeoutError:
            return GatewayResult.failure(f"no response within {self.timeout:g}s")
        except httpx.HTTPError as exc:
            return GatewayResult.failure(_describe_error(exc))

    async def _post(self, message: Any) -> GatewayResult:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.chat_url, json={"message": message})

        if not response.is_success:
            return GatewayResult.failure(f"gateway responded with HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            logger.debug("Gateway body is not JSON: %.200r", response.text)
            body = None
        return GatewayResult.success(body)


def _describe_error(exc: httpx.HTTPError) -> str:
    detail = str(exc).strip()
    name = type(exc).__name__
    return f"{name}: {detail}" if detail else name
