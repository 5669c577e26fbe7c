"""
Message object builders for LINE Messaging API.

Plain functions returning wire-format message dicts ready to be put into the
``messages`` list of reply, push and multicast requests. Optional fields left
as ``None`` are omitted. Every builder accepts ``quickReply``, which is
attached to the message as is.

Example:
    >>> createText("Hello")
    {'type': 'text', 'text': 'Hello'}
    >>> createImage("https://example.com/original.jpg")["previewImageUrl"]
    'https://example.com/original.jpg'
"""

from typing import Any, Dict, List, Optional

from .constants import ImageAspectRatio, ImageSize, MessageType, TemplateType

Message = Dict[str, Any]


def _buildMessage(quickReply: Optional[Dict[str, Any]], **fields: Any) -> Message:
    message: Message = {k: v for k, v in fields.items() if v is not None}
    if quickReply is not None:
        message["quickReply"] = quickReply
    return message


def createText(text: str, *, quickReply: Optional[Dict[str, Any]] = None) -> Message:
    return _buildMessage(quickReply, type=MessageType.TEXT.value, text=text)


def createImage(
    originalContentUrl: str,
    previewImageUrl: Optional[str] = None,
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    """Image message; preview defaults to the original image URL."""
    return _buildMessage(
        quickReply,
        type=MessageType.IMAGE.value,
        originalContentUrl=originalContentUrl,
        previewImageUrl=previewImageUrl or originalContentUrl,
    )


def createVideo(
    originalContentUrl: str,
    previewImageUrl: str,
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return _buildMessage(
        quickReply,
        type=MessageType.VIDEO.value,
        originalContentUrl=originalContentUrl,
        previewImageUrl=previewImageUrl,
    )


def createAudio(
    originalContentUrl: str,
    duration: int,
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    """Audio message, ``duration`` in milliseconds."""
    return _buildMessage(
        quickReply,
        type=MessageType.AUDIO.value,
        originalContentUrl=originalContentUrl,
        duration=duration,
    )


def createLocation(
    title: str,
    address: str,
    latitude: float,
    longitude: float,
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return _buildMessage(
        quickReply,
        type=MessageType.LOCATION.value,
        title=title,
        address=address,
        latitude=latitude,
        longitude=longitude,
    )


def createSticker(
    packageId: str,
    stickerId: str,
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return _buildMessage(quickReply, type=MessageType.STICKER.value, packageId=packageId, stickerId=stickerId)


def createImagemap(
    altText: str,
    baseUrl: str,
    baseSize: Dict[str, int],
    actions: List[Dict[str, Any]],
    video: Optional[Dict[str, Any]] = None,
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    """Imagemap message.

    Args:
        altText: Text shown in push notifications and chat list
        baseUrl: Base URL of the image, without the size suffix
        baseSize: ``{"width": 1040, "height": ...}``
        actions: Tappable areas with their actions
        video: Optional video area definition
        quickReply: Quick reply buttons (optional)
    """
    return _buildMessage(
        quickReply,
        type=MessageType.IMAGEMAP.value,
        baseUrl=baseUrl,
        altText=altText,
        baseSize=baseSize,
        video=video,
        actions=actions,
    )


def createFlex(
    altText: str,
    contents: Dict[str, Any],
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return _buildMessage(quickReply, type=MessageType.FLEX.value, altText=altText, contents=contents)


def createTemplate(
    altText: str,
    template: Dict[str, Any],
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return _buildMessage(quickReply, type=MessageType.TEMPLATE.value, altText=altText, template=template)


def createButtonTemplate(
    altText: str,
    text: str,
    actions: List[Dict[str, Any]],
    *,
    thumbnailImageUrl: Optional[str] = None,
    imageAspectRatio: Optional[ImageAspectRatio] = None,
    imageSize: Optional[ImageSize] = None,
    imageBackgroundColor: Optional[str] = None,
    title: Optional[str] = None,
    defaultAction: Optional[Dict[str, Any]] = None,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    """Buttons template message (image, title, text and up to 4 action buttons)."""
    template = {
        k: v
        for k, v in {
            "type": TemplateType.BUTTONS.value,
            "thumbnailImageUrl": thumbnailImageUrl,
            "imageAspectRatio": imageAspectRatio,
            "imageSize": imageSize,
            "imageBackgroundColor": imageBackgroundColor,
            "title": title,
            "text": text,
            "defaultAction": defaultAction,
            "actions": actions,
        }.items()
        if v is not None
    }
    return createTemplate(altText, template, quickReply=quickReply)


createButtonsTemplate = createButtonTemplate


def createConfirmTemplate(
    altText: str,
    text: str,
    actions: List[Dict[str, Any]],
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return createTemplate(
        altText,
        {"type": TemplateType.CONFIRM.value, "text": text, "actions": actions},
        quickReply=quickReply,
    )


def createCarouselTemplate(
    altText: str,
    columns: List[Dict[str, Any]],
    *,
    imageAspectRatio: Optional[ImageAspectRatio] = None,
    imageSize: Optional[ImageSize] = None,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    template: Dict[str, Any] = {"type": TemplateType.CAROUSEL.value, "columns": columns}
    if imageAspectRatio is not None:
        template["imageAspectRatio"] = imageAspectRatio
    if imageSize is not None:
        template["imageSize"] = imageSize
    return createTemplate(altText, template, quickReply=quickReply)


def createImageCarouselTemplate(
    altText: str,
    columns: List[Dict[str, Any]],
    *,
    quickReply: Optional[Dict[str, Any]] = None,
) -> Message:
    return createTemplate(
        altText,
        {"type": TemplateType.IMAGE_CAROUSEL.value, "columns": columns},
        quickReply=quickReply,
    )
