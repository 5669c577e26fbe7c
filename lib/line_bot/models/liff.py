"""
LIFF app and account link models for LINE Messaging API.
"""

from typing import Any, Dict, Optional

from .base import BaseLineModel


class LiffApp(BaseLineModel):
    """
    LIFF app registered against the channel.

    ``view`` is kept as the raw dict: ``{"type": "full"|"tall"|"compact", "url": ...}``
    """

    __slots__ = ("liffId", "view")

    def __init__(
        self,
        *,
        liffId: str,
        view: Dict[str, Any],
        api_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(api_kwargs=api_kwargs)
        self.liffId: str = liffId
        self.view: Dict[str, Any] = view

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LiffApp":
        return cls(
            liffId=data.get("liffId", ""),
            view=dict(data.get("view", {})),
            api_kwargs=cls._getExtraKwargs(data),
        )


class LinkToken(BaseLineModel):
    """Account link token issued for a user"""

    __slots__ = ("linkToken",)

    def __init__(self, *, linkToken: str, api_kwargs: Optional[Dict[str, Any]] = None):
        super().__init__(api_kwargs=api_kwargs)
        self.linkToken: str = linkToken

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LinkToken":
        return cls(
            linkToken=data.get("linkToken", ""),
            api_kwargs=cls._getExtraKwargs(data),
        )
