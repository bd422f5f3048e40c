from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from schemas import ChatRequest, ChatResponse
from services import RelayService


def build_chat_router(relay_service: RelayService) -> APIRouter:
    """Create the chat router wired to the provided relay service."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post("/chat", response_model=ChatResponse)
    async def chat_endpoint(payload: Any = Body(default=None)) -> ChatResponse:
        return await relay_service.handle_chat(ChatRequest.from_payload(payload))

    return router
