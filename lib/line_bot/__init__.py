"""
LINE Bot Client Library

Async Python client for the LINE Messaging API.

This library provides a typed interface for the LINE Messaging API using
httpx with per-call channel access tokens, normalized errors and request
observation.

Basic usage:
    >>> from lib.line_bot import LineBotClient
    >>>
    >>> async with LineBotClient("channel_access_token") as client:
    ...     await client.pushText("U4af4980629...", "Hello!")
    ...     memberIds = await client.getAllGroupMemberIds("Ca56f9463...")
"""

from .client import ClientConfig, LineBotClient
from .constants import (
    API_ORIGIN,
    MAX_MESSAGES_PER_REQUEST,
    MAX_MULTICAST_RECIPIENTS,
    ChatType,
    ImageAspectRatio,
    ImageSize,
    MessageType,
    SendMode,
    TemplateType,
)
from .exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ErrorDetail,
    ForbiddenError,
    LineBotError,
    NetworkError,
    NotFoundError,
    PreflightValidationError,
    RateLimitError,
    ServiceUnavailableError,
)
from .file_utils import UnsupportedFileTypeError
from .interceptor import RequestDescription, RequestObserver
from .models import LiffApp, LinkToken, MemberIdsPage, RichMenu, RichMenuSize, UserProfile
from .targets import MulticastTarget, PushTarget, ReplyTarget, SendTarget

# Public API
__all__ = [
    # Main client
    "LineBotClient",
    "ClientConfig",
    # Targets
    "ReplyTarget",
    "PushTarget",
    "MulticastTarget",
    "SendTarget",
    # Request observation
    "RequestDescription",
    "RequestObserver",
    # Constants
    "API_ORIGIN",
    "MAX_MESSAGES_PER_REQUEST",
    "MAX_MULTICAST_RECIPIENTS",
    # Enums
    "SendMode",
    "ChatType",
    "MessageType",
    "TemplateType",
    "ImageAspectRatio",
    "ImageSize",
    # Models
    "UserProfile",
    "MemberIdsPage",
    "RichMenu",
    "RichMenuSize",
    "LiffApp",
    "LinkToken",
    # Exceptions
    "LineBotError",
    "ErrorDetail",
    "ConfigurationError",
    "NetworkError",
    "PreflightValidationError",
    "UnsupportedFileTypeError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServiceUnavailableError",
]
