"""
LINE Messaging API Constants

This module contains all constants and enums for the LINE Messaging API client.
"""

from enum import StrEnum
from typing import Final, FrozenSet

VERSION: Final[str] = "0.1.0"

# API Configuration
API_ORIGIN: Final[str] = "https://api.line.me"
DEFAULT_TIMEOUT: Final[int] = 30

# HTTP Methods
HTTP_GET: Final[str] = "GET"
HTTP_POST: Final[str] = "POST"
HTTP_PUT: Final[str] = "PUT"
HTTP_DELETE: Final[str] = "DELETE"

# Platform limits (not enforced locally)
MAX_MULTICAST_RECIPIENTS: Final[int] = 500
MAX_MESSAGES_PER_REQUEST: Final[int] = 5

# Authentication
AUTH_HEADER: Final[str] = "Authorization"
AUTH_SCHEME: Final[str] = "Bearer"

# Content Types
CONTENT_TYPE_HEADER: Final[str] = "Content-Type"
CONTENT_TYPE_JSON: Final[str] = "application/json"
MIME_JPEG: Final[str] = "image/jpeg"
MIME_PNG: Final[str] = "image/png"
RICH_MENU_IMAGE_MIME_TYPES: Final[FrozenSet[str]] = frozenset({MIME_JPEG, MIME_PNG})

# Error message prefix
ERROR_SOURCE: Final[str] = "LINE API"

# API Endpoints
ENDPOINT_REPLY: Final[str] = "/v2/bot/message/reply"
ENDPOINT_PUSH: Final[str] = "/v2/bot/message/push"
ENDPOINT_MULTICAST: Final[str] = "/v2/bot/message/multicast"
ENDPOINT_MESSAGE_CONTENT: Final[str] = "/v2/bot/message/{messageId}/content"
ENDPOINT_PROFILE: Final[str] = "/v2/bot/profile/{userId}"
ENDPOINT_MEMBER_PROFILE: Final[str] = "/v2/bot/{chatType}/{chatId}/member/{userId}"
ENDPOINT_MEMBER_IDS: Final[str] = "/v2/bot/{chatType}/{chatId}/members/ids"
ENDPOINT_LEAVE: Final[str] = "/v2/bot/{chatType}/{chatId}/leave"
ENDPOINT_RICH_MENU: Final[str] = "/v2/bot/richmenu"
ENDPOINT_RICH_MENU_LIST: Final[str] = "/v2/bot/richmenu/list"
ENDPOINT_RICH_MENU_BY_ID: Final[str] = "/v2/bot/richmenu/{richMenuId}"
ENDPOINT_RICH_MENU_CONTENT: Final[str] = "/v2/bot/richmenu/{richMenuId}/content"
ENDPOINT_USER_RICH_MENU: Final[str] = "/v2/bot/user/{userId}/richmenu"
ENDPOINT_USER_RICH_MENU_LINK: Final[str] = "/v2/bot/user/{userId}/richmenu/{richMenuId}"
ENDPOINT_DEFAULT_RICH_MENU: Final[str] = "/v2/bot/user/all/richmenu"
ENDPOINT_DEFAULT_RICH_MENU_BY_ID: Final[str] = "/v2/bot/user/all/richmenu/{richMenuId}"
ENDPOINT_LINK_TOKEN: Final[str] = "/v2/bot/user/{userId}/linkToken"
ENDPOINT_LIFF_APPS: Final[str] = "/liff/v1/apps"
ENDPOINT_LIFF_APP: Final[str] = "/liff/v1/apps/{liffId}"
ENDPOINT_LIFF_APP_VIEW: Final[str] = "/liff/v1/apps/{liffId}/view"


class SendMode(StrEnum):
    """Message delivery mode"""

    REPLY = "reply"
    PUSH = "push"
    MULTICAST = "multicast"


class ChatType(StrEnum):
    """Kind of multi-person chat the bot can be a member of"""

    GROUP = "group"
    ROOM = "room"


class MessageType(StrEnum):
    """Message object types from the Messaging API reference"""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    LOCATION = "location"
    STICKER = "sticker"
    IMAGEMAP = "imagemap"
    FLEX = "flex"
    TEMPLATE = "template"


class TemplateType(StrEnum):
    """Template message layouts"""

    BUTTONS = "buttons"
    CONFIRM = "confirm"
    CAROUSEL = "carousel"
    IMAGE_CAROUSEL = "image_carousel"


class ImageAspectRatio(StrEnum):
    RECTANGLE = "rectangle"
    SQUARE = "square"


class ImageSize(StrEnum):
    COVER = "cover"
    CONTAIN = "contain"
