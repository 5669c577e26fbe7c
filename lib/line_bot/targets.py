"""
Send targets and delivery routing.

Each delivery mode addresses recipients differently. Targets are tagged
objects built by the mode-specific client methods, and ``SEND_ROUTES`` maps
every ``SendMode`` to its endpoint and the body field the target goes into.
"""

from typing import Any, Dict, Final, List, NamedTuple, Sequence, Union

from .constants import ENDPOINT_MULTICAST, ENDPOINT_PUSH, ENDPOINT_REPLY, SendMode


class SendRoute(NamedTuple):
    endpoint: str
    targetField: str


SEND_ROUTES: Final[Dict[SendMode, SendRoute]] = {
    SendMode.REPLY: SendRoute(ENDPOINT_REPLY, "replyToken"),
    SendMode.PUSH: SendRoute(ENDPOINT_PUSH, "to"),
    SendMode.MULTICAST: SendRoute(ENDPOINT_MULTICAST, "to"),
}

_missingRoutes = set(SendMode) - set(SEND_ROUTES)
if _missingRoutes:
    raise RuntimeError(f"No send route for modes: {sorted(_missingRoutes)}")


class ReplyTarget:
    """Reply token of a webhook event (single use)"""

    __slots__ = ("replyToken",)
    mode: Final = SendMode.REPLY

    def __init__(self, replyToken: str) -> None:
        self.replyToken = replyToken

    @property
    def value(self) -> str:
        return self.replyToken

    def __repr__(self) -> str:
        return f"ReplyTarget({self.replyToken!r})"


class PushTarget:
    """Single user, group or room ID"""

    __slots__ = ("to",)
    mode: Final = SendMode.PUSH

    def __init__(self, to: str) -> None:
        self.to = to

    @property
    def value(self) -> str:
        return self.to

    def __repr__(self) -> str:
        return f"PushTarget({self.to!r})"


class MulticastTarget:
    """Ordered list of user IDs"""

    __slots__ = ("to",)
    mode: Final = SendMode.MULTICAST

    def __init__(self, to: Sequence[str]) -> None:
        if isinstance(to, (str, bytes)):
            raise TypeError(f"Multicast recipients must be a sequence of user IDs, got {type(to).__name__}")
        self.to: List[str] = list(to)

    @property
    def value(self) -> List[str]:
        return self.to

    def __repr__(self) -> str:
        return f"MulticastTarget({self.to!r})"


SendTarget = Union[ReplyTarget, PushTarget, MulticastTarget]


def buildSendBody(target: SendTarget, messages: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Build request body for target; messages are put in as given."""
    route = SEND_ROUTES[target.mode]
    return {route.targetField: target.value, "messages": messages}
