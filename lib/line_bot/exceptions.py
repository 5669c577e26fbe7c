"""
LINE Messaging API Exceptions

This module contains custom exception classes for LINE API failures and the
helpers that turn raw HTTP failures into them.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .constants import ERROR_SOURCE

logger = logging.getLogger(__name__)


class ErrorDetail:
    """Single field-level problem reported by the API"""

    __slots__ = ("property", "message")

    def __init__(self, propertyName: str, message: str) -> None:
        self.property = propertyName
        self.message = message

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrorDetail":
        return cls(propertyName=str(data.get("property", "")), message=str(data.get("message", "")))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorDetail):
            return NotImplemented
        return self.property == other.property and self.message == other.message

    def __repr__(self) -> str:
        return f"ErrorDetail(property={self.property!r}, message={self.message!r})"


class LineBotError(Exception):
    """Base exception class for all LINE client errors.

    Attributes:
        message: Human-readable error message
        statusCode: HTTP status code (if a response was received)
        response: Parsed API error body (if available)
        details: Field-level details reported by the API
        error: Original failure (transport exception or ``httpx.Response``)
    """

    def __init__(
        self,
        message: str,
        *,
        statusCode: Optional[int] = None,
        response: Optional[Dict[str, Any]] = None,
        details: Optional[List[ErrorDetail]] = None,
        error: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.statusCode = statusCode
        self.response = response
        self.details: List[ErrorDetail] = details or []
        self.error = error
        logger.debug(f"LineBotError: {message} (status: {statusCode})")

    def __str__(self) -> str:
        return self.message


class ConfigurationError(LineBotError):
    """Raised when the client or its configuration is unusable."""


class NetworkError(LineBotError):
    """Raised when the request never got a response.

    This includes connection failures, DNS resolution errors and timeouts.
    The message is the raw transport error text.
    """


class PreflightValidationError(LineBotError):
    """Raised when a local check fails before any request is sent."""


class APIError(LineBotError):
    """Raised when the API answers with a non-success status.

    More specific subclasses exist for the common statuses.
    """

    @property
    def httpResponse(self) -> Optional[httpx.Response]:
        """Original HTTP response"""
        return self.error if isinstance(self.error, httpx.Response) else None


class BadRequestError(APIError):
    """Raised on 400: the request body or parameters were rejected."""


class AuthenticationError(APIError):
    """Raised on 401: the channel access token is invalid or expired."""


class ForbiddenError(APIError):
    """Raised on 403: the channel is not allowed to use this endpoint."""


class NotFoundError(APIError):
    """Raised on 404: the user, chat, rich menu or content does not exist."""


class RateLimitError(APIError):
    """Raised on 429: too many requests or the monthly message quota is used up."""


class ServiceUnavailableError(APIError):
    """Raised on 5xx: the platform failed to process the request."""


_STATUS_ERRORS: Dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def _rawDetails(body: Dict[str, Any]) -> List[Dict[str, Any]]:
    details = body.get("details")
    if not isinstance(details, list):
        return []
    return [d for d in details if isinstance(d, dict)]


def formatApiErrorMessage(body: Dict[str, Any]) -> str:
    """Build display message for structured API error body.

    Args:
        body: Error body like ``{"message": ..., "details": [{"property": ..., "message": ...}]}``

    Returns:
        ``"LINE API - <message>"`` followed by one ``"- <property>: <message>"`` line per detail

    Example:
        >>> formatApiErrorMessage({"message": "Invalid reply token"})
        'LINE API - Invalid reply token'
    """
    msg = f"{ERROR_SOURCE} - {body.get('message')}"
    for detail in _rawDetails(body):
        msg += f"\n- {detail.get('property')}: {detail.get('message')}"
    return msg


def _parseResponseBody(response: httpx.Response) -> Optional[Dict[str, Any]]:
    if not response.content:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def parseApiError(response: httpx.Response) -> APIError:
    """Parse API error response and return appropriate exception.

    Args:
        response: Failed HTTP response

    Returns:
        Exception instance matching the status code. Structured bodies produce
        the formatted LINE message, anything else produces a generic status message.
    """
    statusCode = response.status_code
    body = _parseResponseBody(response)

    if body is not None and "message" in body:
        message = formatApiErrorMessage(body)
        details = [ErrorDetail.from_dict(d) for d in _rawDetails(body)]
    else:
        message = f"Request failed with status code {statusCode}"
        details = []

    errorClass = _STATUS_ERRORS.get(statusCode)
    if errorClass is None:
        errorClass = ServiceUnavailableError if 500 <= statusCode < 600 else APIError

    return errorClass(message, statusCode=statusCode, response=body, details=details, error=response)


def parseTransportError(error: httpx.HTTPError) -> NetworkError:
    """Wrap transport-level failure (no response received)."""
    return NetworkError(str(error) or type(error).__name__, error=error)
