from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class GatewayResult(BaseModel):
    """Outcome of one call to the upstream gateway.

    A delivered result carries the decoded response body, which is ``None``
    when the gateway answered with something that is not JSON. A failed
    result carries a human readable cause and no body.
    """

    delivered: bool = Field(..., description="True when the gateway answered with a 2xx status.")
    body: Any = Field(default=None, description="Decoded JSON body of a delivered response.")
    error: Optional[str] = Field(default=None, description="Failure cause when not delivered.")

    model_config = {"frozen": True}

    @classmethod
    def success(cls, body: Any) -> "GatewayResult":
        return cls(delivered=True, body=body)

    @classmethod
    def failure(cls, error: str) -> "GatewayResult":
        return cls(delivered=False, error=error)

    def extract_reply(self) -> Optional[str]:
        """Return the non-empty string ``reply`` of a delivered body, else None."""
        if not self.delivered or not isinstance(self.body, dict):
            return None
        reply = self.body.get("reply")
        if isinstance(reply, str) and reply:
            return reply
        return None
