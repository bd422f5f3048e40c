from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: Any = Field(
        default=None, description="User message forwarded to the gateway as sent."
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "ChatRequest":
        """Build a request from any decoded JSON body; non-objects carry no message."""
        if not isinstance(payload, dict):
            return cls()
        return cls(message=payload.get("message"))


class ChatResponse(BaseModel):
    reply: str = Field(..., description="Gateway reply or a fallback text.")
