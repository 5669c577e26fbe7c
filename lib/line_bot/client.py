"""
LINE Messaging API Async Client

This module provides the main LineBotClient class for interacting with
the LINE Messaging API using httpx with per-call credentials and error handling.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import urljoin

import httpx

from . import messages as builders
from .constants import (
    API_ORIGIN,
    CONTENT_TYPE_HEADER,
    DEFAULT_TIMEOUT,
    ENDPOINT_DEFAULT_RICH_MENU,
    ENDPOINT_DEFAULT_RICH_MENU_BY_ID,
    ENDPOINT_LEAVE,
    ENDPOINT_LIFF_APP,
    ENDPOINT_LIFF_APP_VIEW,
    ENDPOINT_LIFF_APPS,
    ENDPOINT_LINK_TOKEN,
    ENDPOINT_MEMBER_IDS,
    ENDPOINT_MEMBER_PROFILE,
    ENDPOINT_MESSAGE_CONTENT,
    ENDPOINT_PROFILE,
    ENDPOINT_RICH_MENU,
    ENDPOINT_RICH_MENU_BY_ID,
    ENDPOINT_RICH_MENU_CONTENT,
    ENDPOINT_RICH_MENU_LIST,
    ENDPOINT_USER_RICH_MENU,
    ENDPOINT_USER_RICH_MENU_LINK,
    HTTP_DELETE,
    HTTP_GET,
    HTTP_POST,
    HTTP_PUT,
    MAX_MESSAGES_PER_REQUEST,
    MAX_MULTICAST_RECIPIENTS,
    VERSION,
    ChatType,
    SendMode,
)
from .credentials import buildAuthorizationHeader
from .exceptions import ConfigurationError, LineBotError, parseApiError, parseTransportError
from .file_utils import validateImageType
from .interceptor import RequestObserver, describeRequest, logRequest
from .messages import Message
from .models import LiffApp, LinkToken, MemberIdsPage, RichMenu, UserProfile
from .pagination import collectAll
from .targets import SEND_ROUTES, MulticastTarget, PushTarget, ReplyTarget, SendTarget, buildSendBody

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Settings fixed for the whole lifetime of a client.

    Attributes:
        accessToken: Default channel access token
        channelSecret: Channel secret (kept for webhook signature checks by callers)
        origin: API origin (default: https://api.line.me)
        requestObserver: Called with a description of every outgoing request
        timeout: Request timeout in seconds
    """

    accessToken: str
    channelSecret: Optional[str] = None
    origin: str = API_ORIGIN
    requestObserver: RequestObserver = logRequest
    timeout: float = DEFAULT_TIMEOUT


class LineBotClient:
    """Async client for LINE Messaging API, dood!

    Every public method funnels into ``_makeRequest``: the bearer token is
    resolved per call (``accessToken`` keyword overrides the instance token for
    that call only), the configured observer sees each request before it is
    sent, and failures are converted to ``LineBotError`` subclasses. There is
    no retry and no state kept between calls.

    Example:
        >>> async with LineBotClient("channel_access_token", "channel_secret") as client:
        ...     await client.pushText("U4af4980629...", "Hello!")
        ...     profile = await client.getUserProfile("U4af4980629...")

    Multi-tenant usage:
        >>> await client.replyText(replyToken, "Hi", accessToken=tenantToken)
    """

    __slots__ = ("_config", "_transport", "_httpClient")

    def __init__(
        self,
        accessToken: str,
        channelSecret: Optional[str] = None,
        *,
        origin: str = API_ORIGIN,
        onRequest: Optional[RequestObserver] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the LINE client.

        Args:
            accessToken: Channel access token used when a call gives no override
            channelSecret: Channel secret (optional)
            origin: API origin (default: https://api.line.me)
            onRequest: Request observer (default: log request at debug level)
            timeout: Request timeout in seconds (default: 30)
            transport: Custom httpx transport (optional, used for testing and proxies)

        Raises:
            ConfigurationError: If accessToken is empty
        """
        if not accessToken or not accessToken.strip():
            raise ConfigurationError("Access token cannot be empty")

        self._config = ClientConfig(
            accessToken=accessToken.strip(),
            channelSecret=channelSecret,
            origin=(origin or API_ORIGIN).rstrip("/"),
            requestObserver=onRequest or logRequest,
            timeout=timeout,
        )
        self._transport = transport
        self._httpClient: Optional[httpx.AsyncClient] = None

        logger.debug(f"LineBotClient initialized for {self._config.origin}")

    @classmethod
    def fromConfig(
        cls, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "LineBotClient":
        """Create client from prepared ``ClientConfig``."""
        return cls(
            config.accessToken,
            config.channelSecret,
            origin=config.origin,
            onRequest=config.requestObserver,
            timeout=config.timeout,
            transport=transport,
        )

    @classmethod
    def connect(cls, accessToken: str, channelSecret: Optional[str] = None, **kwargs: Any) -> "LineBotClient":
        """Same as the constructor."""
        return cls(accessToken, channelSecret, **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def accessToken(self) -> str:
        return self._config.accessToken

    @property
    def channelSecret(self) -> Optional[str]:
        return self._config.channelSecret

    @property
    def origin(self) -> str:
        return self._config.origin

    @property
    def httpClient(self) -> httpx.AsyncClient:
        """Underlying httpx client (created on first access)."""
        return self._getHttpClient()

    async def __aenter__(self) -> "LineBotClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _getHttpClient(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        The shared client carries no credentials: ``Authorization`` is attached
        to every request separately.

        Returns:
            Configured httpx.AsyncClient instance
        """
        if self._httpClient is None or self._httpClient.is_closed:
            self._httpClient = httpx.AsyncClient(
                base_url=self._config.origin,
                timeout=httpx.Timeout(self._config.timeout),
                headers={
                    "User-Agent": f"line-bot-client/{VERSION}",
                },
                event_hooks={"request": [self._onRequest]},
                transport=self._transport,
            )
            logger.debug("Created new HTTP client")

        return self._httpClient

    async def aclose(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._httpClient and not self._httpClient.is_closed:
            await self._httpClient.aclose()
            logger.debug("HTTP client closed")

    async def _onRequest(self, request: httpx.Request) -> None:
        self._config.requestObserver(describeRequest(request))

    def _buildUrl(self, endpoint: str) -> str:
        """Build full URL for API endpoint.

        Args:
            endpoint: API endpoint path (e.g., "/v2/bot/message/push")

        Returns:
            Full URL for the endpoint
        """
        return urljoin(self._config.origin + "/", endpoint.lstrip("/"))

    async def _makeRequest(
        self,
        method: str,
        endpoint: str,
        *,
        accessToken: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        binaryResponse: bool = False,
        notFoundAsNone: bool = False,
    ) -> Any:
        """Make single HTTP request and normalize the outcome.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint path
            accessToken: Per-call token override (optional)
            params: Query parameters
            json: JSON request body
            content: Raw request body
            headers: Extra request headers
            binaryResponse: Return raw response bytes instead of parsed JSON
            notFoundAsNone: Return None instead of raising on 404

        Returns:
            Parsed JSON (``{}`` for empty body), bytes or None

        Raises:
            NetworkError: If no response was received
            APIError: If API answered with error status
        """
        client = self._getHttpClient()
        url = self._buildUrl(endpoint)

        requestHeaders = buildAuthorizationHeader(self._config.accessToken, accessToken)
        if headers:
            requestHeaders.update(headers)

        kwargs: Dict[str, Any] = {}
        if params is not None:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json
        if content is not None:
            kwargs["content"] = content

        logger.debug(f"Making {method} request to {url}")

        try:
            response = await client.request(method, url, headers=requestHeaders, **kwargs)
        except httpx.RequestError as e:
            logger.warning(f"Network error on {method} {url}: {type(e).__name__}#{e}")
            raise parseTransportError(e) from e

        if response.is_success:
            logger.debug(f"Request successful: {method} {url}")
            if binaryResponse:
                return response.content
            return self._parseJson(response)

        if notFoundAsNone and response.status_code == httpx.codes.NOT_FOUND:
            logger.debug(f"Resource not found: {method} {url}")
            return None

        error = parseApiError(response)
        logger.warning(f"API error: {response.status_code} {error.message}")
        raise error

    @staticmethod
    def _parseJson(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise LineBotError(
                f"Invalid JSON response: {e}", statusCode=response.status_code, error=response
            ) from e

    # Send dispatching

    async def send(
        self,
        target: SendTarget,
        messages: Sequence[Message],
        *,
        accessToken: Optional[str] = None,
        notificationDisabled: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Send messages to target.

        Routes to the reply, push or multicast endpoint depending on target type and
        issues exactly one request. Messages are sent as given, never inspected.

        Args:
            target: ReplyTarget, PushTarget or MulticastTarget
            messages: Message objects (see ``lib.line_bot.messages``)
            accessToken: Per-call token override (optional)
            notificationDisabled: Do not notify recipients (optional)

        Returns:
            API response body (``{}`` on plain success)

        Example:
            >>> await client.send(PushTarget("U123"), [createText("Hi")])
        """
        if isinstance(target, MulticastTarget) and len(target.to) > MAX_MULTICAST_RECIPIENTS:
            logger.warning(f"Multicast to {len(target.to)} users exceeds platform limit {MAX_MULTICAST_RECIPIENTS}")
        if len(messages) > MAX_MESSAGES_PER_REQUEST:
            logger.warning(f"Sending {len(messages)} messages exceeds platform limit {MAX_MESSAGES_PER_REQUEST}")

        body = buildSendBody(target, messages)
        if notificationDisabled is not None:
            body["notificationDisabled"] = notificationDisabled

        return await self._sendRawBody(target.mode, body, accessToken=accessToken)

    async def _sendRawBody(
        self, mode: SendMode, body: Dict[str, Any], *, accessToken: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._makeRequest(HTTP_POST, SEND_ROUTES[mode].endpoint, json=body, accessToken=accessToken)

    # Reply messages

    async def replyRawBody(self, body: Dict[str, Any], *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        """Send prepared ``{"replyToken": ..., "messages": [...]}`` body."""
        return await self._sendRawBody(SendMode.REPLY, body, accessToken=accessToken)

    async def reply(
        self,
        replyToken: str,
        messages: Sequence[Message],
        *,
        accessToken: Optional[str] = None,
        notificationDisabled: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Reply to webhook event.

        Reply tokens can be used only once and expire shortly after the event.

        Args:
            replyToken: Reply token received via webhook
            messages: Messages to send (up to 5)
            accessToken: Per-call token override (optional)
            notificationDisabled: Do not notify the user (optional)
        """
        return await self.send(
            ReplyTarget(replyToken), messages, accessToken=accessToken, notificationDisabled=notificationDisabled
        )

    replyMessages = reply

    async def replyText(
        self,
        replyToken: str,
        text: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.send(
            ReplyTarget(replyToken), [builders.createText(text, quickReply=quickReply)], accessToken=accessToken
        )

    async def replyImage(
        self,
        replyToken: str,
        originalContentUrl: str,
        previewImageUrl: Optional[str] = None,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImage(originalContentUrl, previewImageUrl, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyVideo(
        self,
        replyToken: str,
        originalContentUrl: str,
        previewImageUrl: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createVideo(originalContentUrl, previewImageUrl, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyAudio(
        self,
        replyToken: str,
        originalContentUrl: str,
        duration: int,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createAudio(originalContentUrl, duration, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyLocation(
        self,
        replyToken: str,
        title: str,
        address: str,
        latitude: float,
        longitude: float,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createLocation(title, address, latitude, longitude, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replySticker(
        self,
        replyToken: str,
        packageId: str,
        stickerId: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createSticker(packageId, stickerId, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyImagemap(
        self,
        replyToken: str,
        altText: str,
        baseUrl: str,
        baseSize: Dict[str, int],
        actions: List[Dict[str, Any]],
        video: Optional[Dict[str, Any]] = None,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImagemap(altText, baseUrl, baseSize, actions, video, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyFlex(
        self,
        replyToken: str,
        altText: str,
        contents: Dict[str, Any],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createFlex(altText, contents, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyTemplate(
        self,
        replyToken: str,
        altText: str,
        template: Dict[str, Any],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createTemplate(altText, template, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyButtonTemplate(
        self,
        replyToken: str,
        altText: str,
        text: str,
        actions: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
        **templateFields: Any,
    ) -> Dict[str, Any]:
        """Reply with buttons template.

        Args:
            replyToken: Reply token received via webhook
            altText: Alternative text
            text: Message text
            actions: Button actions (up to 4)
            quickReply: Quick reply buttons (optional)
            accessToken: Per-call token override (optional)
            **templateFields: thumbnailImageUrl, imageAspectRatio, imageSize,
                imageBackgroundColor, title, defaultAction
        """
        message = builders.createButtonTemplate(altText, text, actions, quickReply=quickReply, **templateFields)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    replyButtonsTemplate = replyButtonTemplate

    async def replyConfirmTemplate(
        self,
        replyToken: str,
        altText: str,
        text: str,
        actions: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createConfirmTemplate(altText, text, actions, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyCarouselTemplate(
        self,
        replyToken: str,
        altText: str,
        columns: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
        **templateFields: Any,
    ) -> Dict[str, Any]:
        """Reply with carousel template; ``templateFields`` are imageAspectRatio and imageSize."""
        message = builders.createCarouselTemplate(altText, columns, quickReply=quickReply, **templateFields)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    async def replyImageCarouselTemplate(
        self,
        replyToken: str,
        altText: str,
        columns: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImageCarouselTemplate(altText, columns, quickReply=quickReply)
        return await self.send(ReplyTarget(replyToken), [message], accessToken=accessToken)

    # Push messages

    async def pushRawBody(self, body: Dict[str, Any], *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        """Send prepared ``{"to": ..., "messages": [...]}`` body."""
        return await self._sendRawBody(SendMode.PUSH, body, accessToken=accessToken)

    async def push(
        self,
        to: str,
        messages: Sequence[Message],
        *,
        accessToken: Optional[str] = None,
        notificationDisabled: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Push messages to a user, group or room at any time.

        Args:
            to: User, group or room ID
            messages: Messages to send (up to 5)
            accessToken: Per-call token override (optional)
            notificationDisabled: Do not notify the recipient (optional)
        """
        return await self.send(
            PushTarget(to), messages, accessToken=accessToken, notificationDisabled=notificationDisabled
        )

    pushMessages = push

    async def pushText(
        self,
        to: str,
        text: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.send(PushTarget(to), [builders.createText(text, quickReply=quickReply)], accessToken=accessToken)

    async def pushImage(
        self,
        to: str,
        originalContentUrl: str,
        previewImageUrl: Optional[str] = None,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImage(originalContentUrl, previewImageUrl, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushVideo(
        self,
        to: str,
        originalContentUrl: str,
        previewImageUrl: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createVideo(originalContentUrl, previewImageUrl, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushAudio(
        self,
        to: str,
        originalContentUrl: str,
        duration: int,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createAudio(originalContentUrl, duration, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushLocation(
        self,
        to: str,
        title: str,
        address: str,
        latitude: float,
        longitude: float,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createLocation(title, address, latitude, longitude, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushSticker(
        self,
        to: str,
        packageId: str,
        stickerId: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createSticker(packageId, stickerId, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushImagemap(
        self,
        to: str,
        altText: str,
        baseUrl: str,
        baseSize: Dict[str, int],
        actions: List[Dict[str, Any]],
        video: Optional[Dict[str, Any]] = None,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImagemap(altText, baseUrl, baseSize, actions, video, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushFlex(
        self,
        to: str,
        altText: str,
        contents: Dict[str, Any],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createFlex(altText, contents, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushTemplate(
        self,
        to: str,
        altText: str,
        template: Dict[str, Any],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createTemplate(altText, template, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushButtonTemplate(
        self,
        to: str,
        altText: str,
        text: str,
        actions: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
        **templateFields: Any,
    ) -> Dict[str, Any]:
        """Push buttons template, see ``replyButtonTemplate`` for ``templateFields``."""
        message = builders.createButtonTemplate(altText, text, actions, quickReply=quickReply, **templateFields)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    pushButtonsTemplate = pushButtonTemplate

    async def pushConfirmTemplate(
        self,
        to: str,
        altText: str,
        text: str,
        actions: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createConfirmTemplate(altText, text, actions, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushCarouselTemplate(
        self,
        to: str,
        altText: str,
        columns: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
        **templateFields: Any,
    ) -> Dict[str, Any]:
        message = builders.createCarouselTemplate(altText, columns, quickReply=quickReply, **templateFields)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    async def pushImageCarouselTemplate(
        self,
        to: str,
        altText: str,
        columns: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImageCarouselTemplate(altText, columns, quickReply=quickReply)
        return await self.send(PushTarget(to), [message], accessToken=accessToken)

    # Multicast messages

    async def multicastRawBody(self, body: Dict[str, Any], *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        """Send prepared ``{"to": [...], "messages": [...]}`` body."""
        return await self._sendRawBody(SendMode.MULTICAST, body, accessToken=accessToken)

    async def multicast(
        self,
        to: Sequence[str],
        messages: Sequence[Message],
        *,
        accessToken: Optional[str] = None,
        notificationDisabled: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Send same messages to multiple users at once.

        Only user IDs are accepted, not group or room IDs. The platform allows up
        to 500 recipients per call; this is checked by the server, not here.

        Args:
            to: User IDs
            messages: Messages to send (up to 5)
            accessToken: Per-call token override (optional)
            notificationDisabled: Do not notify the recipients (optional)
        """
        return await self.send(
            MulticastTarget(to), messages, accessToken=accessToken, notificationDisabled=notificationDisabled
        )

    multicastMessages = multicast

    async def multicastText(
        self,
        to: Sequence[str],
        text: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self.send(
            MulticastTarget(to), [builders.createText(text, quickReply=quickReply)], accessToken=accessToken
        )

    async def multicastImage(
        self,
        to: Sequence[str],
        originalContentUrl: str,
        previewImageUrl: Optional[str] = None,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImage(originalContentUrl, previewImageUrl, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastVideo(
        self,
        to: Sequence[str],
        originalContentUrl: str,
        previewImageUrl: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createVideo(originalContentUrl, previewImageUrl, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastAudio(
        self,
        to: Sequence[str],
        originalContentUrl: str,
        duration: int,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createAudio(originalContentUrl, duration, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastLocation(
        self,
        to: Sequence[str],
        title: str,
        address: str,
        latitude: float,
        longitude: float,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createLocation(title, address, latitude, longitude, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastSticker(
        self,
        to: Sequence[str],
        packageId: str,
        stickerId: str,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createSticker(packageId, stickerId, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastImagemap(
        self,
        to: Sequence[str],
        altText: str,
        baseUrl: str,
        baseSize: Dict[str, int],
        actions: List[Dict[str, Any]],
        video: Optional[Dict[str, Any]] = None,
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImagemap(altText, baseUrl, baseSize, actions, video, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastFlex(
        self,
        to: Sequence[str],
        altText: str,
        contents: Dict[str, Any],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createFlex(altText, contents, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastTemplate(
        self,
        to: Sequence[str],
        altText: str,
        template: Dict[str, Any],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createTemplate(altText, template, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastButtonTemplate(
        self,
        to: Sequence[str],
        altText: str,
        text: str,
        actions: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
        **templateFields: Any,
    ) -> Dict[str, Any]:
        message = builders.createButtonTemplate(altText, text, actions, quickReply=quickReply, **templateFields)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    multicastButtonsTemplate = multicastButtonTemplate

    async def multicastConfirmTemplate(
        self,
        to: Sequence[str],
        altText: str,
        text: str,
        actions: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createConfirmTemplate(altText, text, actions, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastCarouselTemplate(
        self,
        to: Sequence[str],
        altText: str,
        columns: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
        **templateFields: Any,
    ) -> Dict[str, Any]:
        message = builders.createCarouselTemplate(altText, columns, quickReply=quickReply, **templateFields)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    async def multicastImageCarouselTemplate(
        self,
        to: Sequence[str],
        altText: str,
        columns: List[Dict[str, Any]],
        *,
        quickReply: Optional[Dict[str, Any]] = None,
        accessToken: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = builders.createImageCarouselTemplate(altText, columns, quickReply=quickReply)
        return await self.send(MulticastTarget(to), [message], accessToken=accessToken)

    # Content

    async def retrieveMessageContent(self, messageId: str, *, accessToken: Optional[str] = None) -> bytes:
        """Download image, video, audio or file sent by a user.

        Args:
            messageId: ID of the message with content
            accessToken: Per-call token override (optional)

        Returns:
            Raw content bytes
        """
        return await self._makeRequest(
            HTTP_GET,
            ENDPOINT_MESSAGE_CONTENT.format(messageId=messageId),
            accessToken=accessToken,
            binaryResponse=True,
        )

    # Profiles

    async def getUserProfile(self, userId: str, *, accessToken: Optional[str] = None) -> Optional[UserProfile]:
        """Get profile of a user who added the bot as a friend.

        Args:
            userId: User ID
            accessToken: Per-call token override (optional)

        Returns:
            User profile, or None if the user does not exist (HTTP 404)

        Example:
            >>> profile = await client.getUserProfile("U4af4980629...")
            >>> if profile is not None:
            ...     print(profile.displayName)
        """
        response = await self._makeRequest(
            HTTP_GET, ENDPOINT_PROFILE.format(userId=userId), accessToken=accessToken, notFoundAsNone=True
        )
        return None if response is None else UserProfile.from_dict(response)

    async def _getMemberProfile(
        self, chatType: ChatType, chatId: str, userId: str, accessToken: Optional[str]
    ) -> UserProfile:
        response = await self._makeRequest(
            HTTP_GET,
            ENDPOINT_MEMBER_PROFILE.format(chatType=chatType.value, chatId=chatId, userId=userId),
            accessToken=accessToken,
        )
        return UserProfile.from_dict(response)

    async def getGroupMemberProfile(
        self, groupId: str, userId: str, *, accessToken: Optional[str] = None
    ) -> UserProfile:
        """Get profile of a group member (not softened: 404 raises NotFoundError)."""
        return await self._getMemberProfile(ChatType.GROUP, groupId, userId, accessToken)

    async def getRoomMemberProfile(self, roomId: str, userId: str, *, accessToken: Optional[str] = None) -> UserProfile:
        """Get profile of a room member (not softened: 404 raises NotFoundError)."""
        return await self._getMemberProfile(ChatType.ROOM, roomId, userId, accessToken)

    # Group/room membership

    async def _getMemberIds(
        self, chatType: ChatType, chatId: str, start: Optional[str], accessToken: Optional[str]
    ) -> MemberIdsPage:
        response = await self._makeRequest(
            HTTP_GET,
            ENDPOINT_MEMBER_IDS.format(chatType=chatType.value, chatId=chatId),
            params={"start": start} if start else None,
            accessToken=accessToken,
        )
        return MemberIdsPage.from_dict(response)

    async def getGroupMemberIds(
        self, groupId: str, start: Optional[str] = None, *, accessToken: Optional[str] = None
    ) -> MemberIdsPage:
        """Get one page of group member user IDs.

        Args:
            groupId: Group ID
            start: Continuation token from previous page (optional)
            accessToken: Per-call token override (optional)

        Returns:
            Page with ``memberIds`` and ``next`` continuation token
        """
        return await self._getMemberIds(ChatType.GROUP, groupId, start, accessToken)

    async def getAllGroupMemberIds(self, groupId: str, *, accessToken: Optional[str] = None) -> List[str]:
        """Get all group member user IDs, following continuation tokens."""
        return await collectAll(lambda cursor: self._getMemberIds(ChatType.GROUP, groupId, cursor, accessToken))

    async def getRoomMemberIds(
        self, roomId: str, start: Optional[str] = None, *, accessToken: Optional[str] = None
    ) -> MemberIdsPage:
        """Get one page of room member user IDs."""
        return await self._getMemberIds(ChatType.ROOM, roomId, start, accessToken)

    async def getAllRoomMemberIds(self, roomId: str, *, accessToken: Optional[str] = None) -> List[str]:
        """Get all room member user IDs, following continuation tokens."""
        return await collectAll(lambda cursor: self._getMemberIds(ChatType.ROOM, roomId, cursor, accessToken))

    async def leaveGroup(self, groupId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(
            HTTP_POST, ENDPOINT_LEAVE.format(chatType=ChatType.GROUP.value, chatId=groupId), accessToken=accessToken
        )

    async def leaveRoom(self, roomId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(
            HTTP_POST, ENDPOINT_LEAVE.format(chatType=ChatType.ROOM.value, chatId=roomId), accessToken=accessToken
        )

    # Rich menu

    async def getRichMenuList(self, *, accessToken: Optional[str] = None) -> List[RichMenu]:
        response = await self._makeRequest(HTTP_GET, ENDPOINT_RICH_MENU_LIST, accessToken=accessToken)
        return [RichMenu.from_dict(v) for v in response.get("richmenus", [])]

    async def getRichMenu(self, richMenuId: str, *, accessToken: Optional[str] = None) -> Optional[RichMenu]:
        """Get rich menu by ID, None if it does not exist."""
        response = await self._makeRequest(
            HTTP_GET,
            ENDPOINT_RICH_MENU_BY_ID.format(richMenuId=richMenuId),
            accessToken=accessToken,
            notFoundAsNone=True,
        )
        return None if response is None else RichMenu.from_dict(response)

    async def createRichMenu(
        self, richMenu: Union[RichMenu, Dict[str, Any]], *, accessToken: Optional[str] = None
    ) -> str:
        """Create rich menu.

        Args:
            richMenu: RichMenu model or raw rich menu object
            accessToken: Per-call token override (optional)

        Returns:
            ID of the created rich menu
        """
        body = richMenu.toRequestBody() if isinstance(richMenu, RichMenu) else richMenu
        response = await self._makeRequest(HTTP_POST, ENDPOINT_RICH_MENU, json=body, accessToken=accessToken)
        return response.get("richMenuId", "")

    async def deleteRichMenu(self, richMenuId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(
            HTTP_DELETE, ENDPOINT_RICH_MENU_BY_ID.format(richMenuId=richMenuId), accessToken=accessToken
        )

    async def getLinkedRichMenu(self, userId: str, *, accessToken: Optional[str] = None) -> Optional[str]:
        """Get ID of rich menu linked to user, None if there is none."""
        response = await self._makeRequest(
            HTTP_GET, ENDPOINT_USER_RICH_MENU.format(userId=userId), accessToken=accessToken, notFoundAsNone=True
        )
        return None if response is None else response.get("richMenuId")

    async def linkRichMenu(self, userId: str, richMenuId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(
            HTTP_POST,
            ENDPOINT_USER_RICH_MENU_LINK.format(userId=userId, richMenuId=richMenuId),
            accessToken=accessToken,
        )

    async def unlinkRichMenu(self, userId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(HTTP_DELETE, ENDPOINT_USER_RICH_MENU.format(userId=userId), accessToken=accessToken)

    async def getDefaultRichMenu(self, *, accessToken: Optional[str] = None) -> Optional[str]:
        """Get ID of default rich menu, None if it is not set."""
        response = await self._makeRequest(
            HTTP_GET, ENDPOINT_DEFAULT_RICH_MENU, accessToken=accessToken, notFoundAsNone=True
        )
        return None if response is None else response.get("richMenuId")

    async def setDefaultRichMenu(self, richMenuId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(
            HTTP_POST, ENDPOINT_DEFAULT_RICH_MENU_BY_ID.format(richMenuId=richMenuId), accessToken=accessToken
        )

    async def deleteDefaultRichMenu(self, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(HTTP_DELETE, ENDPOINT_DEFAULT_RICH_MENU, accessToken=accessToken)

    async def uploadRichMenuImage(
        self, richMenuId: str, image: bytes, *, accessToken: Optional[str] = None
    ) -> Dict[str, Any]:
        """Upload rich menu image.

        Images must be JPEG or PNG, 2500x1686 or 2500x843 pixels. An image
        attached to a rich menu cannot be replaced: create a new rich menu instead.

        Args:
            richMenuId: Rich menu ID
            image: Image content
            accessToken: Per-call token override (optional)

        Raises:
            UnsupportedFileTypeError: If image is not JPEG or PNG (no request is sent)
        """
        mimeType = validateImageType(image)
        return await self._makeRequest(
            HTTP_POST,
            ENDPOINT_RICH_MENU_CONTENT.format(richMenuId=richMenuId),
            content=image,
            headers={CONTENT_TYPE_HEADER: mimeType},
            accessToken=accessToken,
        )

    async def downloadRichMenuImage(self, richMenuId: str, *, accessToken: Optional[str] = None) -> Optional[bytes]:
        """Download rich menu image, None if menu or image does not exist."""
        return await self._makeRequest(
            HTTP_GET,
            ENDPOINT_RICH_MENU_CONTENT.format(richMenuId=richMenuId),
            accessToken=accessToken,
            binaryResponse=True,
            notFoundAsNone=True,
        )

    # Account link

    async def issueLinkToken(self, userId: str, *, accessToken: Optional[str] = None) -> LinkToken:
        """Issue token for linking user's LINE account with a provider service account."""
        response = await self._makeRequest(HTTP_POST, ENDPOINT_LINK_TOKEN.format(userId=userId), accessToken=accessToken)
        return LinkToken.from_dict(response)

    # LIFF

    async def getLiffAppList(self, *, accessToken: Optional[str] = None) -> List[LiffApp]:
        response = await self._makeRequest(HTTP_GET, ENDPOINT_LIFF_APPS, accessToken=accessToken)
        return [LiffApp.from_dict(v) for v in response.get("apps", [])]

    async def createLiffApp(self, view: Dict[str, Any], *, accessToken: Optional[str] = None) -> str:
        """Register LIFF app.

        Args:
            view: ``{"type": "full" | "tall" | "compact", "url": "https://..."}``
            accessToken: Per-call token override (optional)

        Returns:
            LIFF app ID
        """
        response = await self._makeRequest(HTTP_POST, ENDPOINT_LIFF_APPS, json=view, accessToken=accessToken)
        return response.get("liffId", "")

    async def updateLiffApp(
        self, liffId: str, view: Dict[str, Any], *, accessToken: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._makeRequest(
            HTTP_PUT,
            ENDPOINT_LIFF_APP_VIEW.format(liffId=liffId),
            json=view,
            accessToken=accessToken,
        )

    async def deleteLiffApp(self, liffId: str, *, accessToken: Optional[str] = None) -> Dict[str, Any]:
        return await self._makeRequest(HTTP_DELETE, ENDPOINT_LIFF_APP.format(liffId=liffId), accessToken=accessToken)
