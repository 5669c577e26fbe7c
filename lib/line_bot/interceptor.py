"""
Outgoing request observation.

The client registers an ``httpx`` request hook which turns every outgoing
request into a plain ``RequestDescription`` dict and hands it to the observer
configured on that client instance.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional, TypedDict

import httpx

from lib import utils

from .constants import AUTH_HEADER, CONTENT_TYPE_JSON

logger = logging.getLogger(__name__)


class RequestDescription(TypedDict):
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Any]


RequestObserver = Callable[[RequestDescription], Any]


def _decodeBody(request: httpx.Request) -> Optional[Any]:
    content = request.content
    if not content:
        return None

    contentType = request.headers.get("content-type", "")
    if contentType.startswith(CONTENT_TYPE_JSON):
        try:
            return json.loads(content)
        except ValueError:
            logger.debug(f"Request body declared as JSON but failed to decode: {content[:64]!r}")
    return content


def describeRequest(request: httpx.Request) -> RequestDescription:
    """Build normalized description of outgoing request.

    Args:
        request: Fully built request, headers already merged with client defaults

    Returns:
        Dict with method, absolute url, headers and body (decoded JSON, raw bytes or None)
    """
    return {
        "method": request.method.upper(),
        "url": str(request.url),
        "headers": {k: v for k, v in request.headers.items()},
        "body": _decodeBody(request),
    }


def _maskHeaders(headers: Dict[str, str]) -> Dict[str, str]:
    return {k: ("***" if k.lower() == AUTH_HEADER.lower() else v) for k, v in headers.items()}


def logRequest(description: RequestDescription) -> None:
    """Default observer: log request to module logger."""
    logger.debug(f"LINE REQUEST: {description['method']} {description['url']}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Headers: {utils.jsonDumps(_maskHeaders(description['headers']))}")
        body = description["body"]
        if isinstance(body, bytes):
            logger.debug(f"Body: <{len(body)} bytes>")
        elif body is not None:
            logger.debug(f"Body: {utils.jsonDumps(body)}")
