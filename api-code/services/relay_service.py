from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from domain import RelayOutcome, fallback_reply
from models import GatewayResult
from schemas import ChatRequest, ChatResponse

from .gateway_client import GatewayClient


logger = logging.getLogger("voice-relay.chat")


class RelayService:
    """Forwards chat messages to the gateway and shapes the reply.

    Every path ends in a ``ChatResponse``: missing input, an unreachable
    gateway and an uninterpretable gateway answer each map to their own
    fallback text.
    """

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def handle_chat(self, request: Optional[ChatRequest]) -> ChatResponse:
        message = request.message if request is not None else None
        outcome, reply = await self.relay(message)
        logger.debug("Chat relayed with outcome=%s", outcome.value)
        return ChatResponse(reply=reply)

    async def relay(self, message: Any) -> Tuple[RelayOutcome, str]:
        if not message:
            return RelayOutcome.NO_INPUT, fallback_reply(RelayOutcome.NO_INPUT)

        result = await self.gateway.send_message(message)
        if not result.delivered:
            logger.warning("Gateway error: %s", result.error)

        outcome = self.classify(result)
        if outcome is RelayOutcome.REPLIED:
            return outcome, result.body["reply"]
        return outcome, fallback_reply(outcome)

    @staticmethod
    def classify(result: GatewayResult) -> RelayOutcome:
        if not result.delivered:
            return RelayOutcome.UNAVAILABLE
        if result.extract_reply() is None:
            return RelayOutcome.UNINTERPRETABLE
        return RelayOutcome.REPLIED
