from .relay_outcomes import (
    FALLBACK_REPLIES,
    NO_INPUT_REPLY,
    RECEIVED_REPLY,
    UNAVAILABLE_REPLY,
    RelayOutcome,
    fallback_reply,
)

__all__ = [
    "FALLBACK_REPLIES",
    "NO_INPUT_REPLY",
    "RECEIVED_REPLY",
    "UNAVAILABLE_REPLY",
    "RelayOutcome",
    "fallback_reply",
]
