"""
Shared fixtures for LINE client tests.

HTTP layer is replaced with ``RecordingTransport``: it records every request
the client sends and answers with queued responses (or a handler callable).
"""

import inspect
import json
from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

from .client import LineBotClient
from .interceptor import RequestDescription

DEFAULT_TOKEN = "default_token"
DEFAULT_SECRET = "channel_secret"

PNG_1X1 = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
    b"\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)
GIF_1X1 = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"

ResponseSpec = Union[httpx.Response, Exception]
Handler = Callable[[httpx.Request], Any]


def jsonResponse(data: Any, statusCode: int = 200) -> httpx.Response:
    """Build JSON response for queueing into transport."""
    return httpx.Response(statusCode, json=data)


class RecordingTransport(httpx.AsyncBaseTransport):
    """Transport that records requests and replays queued responses.

    Responses are taken from ``responses`` in order; exceptions in the queue
    are raised instead of answering. When queue is empty, ``handler`` is called
    (it may be async), and without handler an empty 200 response is returned.
    """

    def __init__(self, responses: Optional[List[ResponseSpec]] = None, handler: Optional[Handler] = None):
        self.responses: List[ResponseSpec] = list(responses or [])
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def queue(self, *responses: ResponseSpec) -> None:
        self.responses.extend(responses)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)

        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response

        if self.handler is not None:
            result = self.handler(request)
            if inspect.isawaitable(result):
                result = await result
            return result

        return httpx.Response(200, content=b"")

    @property
    def lastRequest(self) -> httpx.Request:
        return self.requests[-1]

    def lastJson(self) -> Any:
        return json.loads(self.lastRequest.content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def observed() -> List[RequestDescription]:
    """Request descriptions passed to client observer."""
    return []


@pytest.fixture
async def client(transport, observed):
    """Client with recording transport and collecting observer."""
    lineClient = LineBotClient(DEFAULT_TOKEN, DEFAULT_SECRET, onRequest=observed.append, transport=transport)
    yield lineClient
    await lineClient.aclose()
