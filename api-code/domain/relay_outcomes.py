from __future__ import annotations

from enum import Enum


class RelayOutcome(str, Enum):
    NO_INPUT = "no_input"
    REPLIED = "replied"
    UNINTERPRETABLE = "uninterpretable"
    UNAVAILABLE = "unavailable"


NO_INPUT_REPLY = "本小姐没听清楚呢..."
RECEIVED_REPLY = "本小姐收到啦～"
UNAVAILABLE_REPLY = "本小姐现在有点困，等会儿再聊吧～"

FALLBACK_REPLIES: dict[RelayOutcome, str] = {
    RelayOutcome.NO_INPUT: NO_INPUT_REPLY,
    RelayOutcome.UNINTERPRETABLE: RECEIVED_REPLY,
    RelayOutcome.UNAVAILABLE: UNAVAILABLE_REPLY,
}


def fallback_reply(outcome: RelayOutcome) -> str:
    try:
        return FALLBACK_REPLIES[outcome]
    except KeyError as exc:
        raise ValueError(f"{outcome.value} has no fallback reply.") from exc
