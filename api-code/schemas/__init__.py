from .chat import ChatRequest, ChatResponse
from .health import HealthResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
]
