"""
Rich menu models for LINE Messaging API.

A rich menu is a persistent tappable image menu shown at the bottom of the chat
screen. Areas and their actions are kept as plain dicts, exactly as the API
describes them.
"""

from typing import Any, Dict, List, Optional

from .base import BaseLineModel


class RichMenuSize(BaseLineModel):
    """Rich menu image size in pixels (2500x1686 or 2500x843)"""

    __slots__ = ("width", "height")

    def __init__(self, *, width: int, height: int, api_kwargs: Optional[Dict[str, Any]] = None):
        super().__init__(api_kwargs=api_kwargs)
        self.width: int = width
        self.height: int = height

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RichMenuSize":
        return cls(
            width=data.get("width", 0),
            height=data.get("height", 0),
            api_kwargs=cls._getExtraKwargs(data),
        )

    def toRequestBody(self) -> Dict[str, Any]:
        body = self.to_dict()
        body.pop("api_kwargs", None)
        body.update(self.api_kwargs)
        return body


class RichMenu(BaseLineModel):
    """
    Rich menu object.

    ``richMenuId`` is only set on menus returned by the API; leave it as ``None``
    when building a menu for ``createRichMenu``.
    """

    __slots__ = ("richMenuId", "size", "selected", "name", "chatBarText", "areas")

    def __init__(
        self,
        *,
        size: RichMenuSize,
        selected: bool,
        name: str,
        chatBarText: str,
        areas: List[Dict[str, Any]],
        richMenuId: Optional[str] = None,
        api_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(api_kwargs=api_kwargs)
        self.richMenuId: Optional[str] = richMenuId
        self.size: RichMenuSize = size
        self.selected: bool = selected
        self.name: str = name
        self.chatBarText: str = chatBarText
        self.areas: List[Dict[str, Any]] = areas

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RichMenu":
        """Create RichMenu instance from API response dictionary.

        Args:
            data: Dictionary containing API response data

        Returns:
            RichMenu: New RichMenu instance
        """
        return cls(
            richMenuId=data.get("richMenuId", None),
            size=RichMenuSize.from_dict(data.get("size", {})),
            selected=data.get("selected", False),
            name=data.get("name", ""),
            chatBarText=data.get("chatBarText", ""),
            areas=list(data.get("areas", [])),
            api_kwargs=cls._getExtraKwargs(data),
        )

    def toRequestBody(self) -> Dict[str, Any]:
        """Wire representation for ``createRichMenu`` (no ``richMenuId``)."""
        body = self.to_dict(recursive=True)
        body.pop("richMenuId", None)
        body.pop("api_kwargs", None)
        body["size"] = self.size.toRequestBody()
        body.update(self.api_kwargs)
        return body
