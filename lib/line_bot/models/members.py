"""
Group/room membership models for LINE Messaging API.
"""

from typing import Any, Dict, List, Optional

from .base import BaseLineModel


class MemberIdsPage(BaseLineModel):
    """
    One page of group or room member user IDs.

    ``next`` is the continuation token for the following page, absent on the last one.
    """

    __slots__ = ("memberIds", "next")

    def __init__(
        self,
        *,
        memberIds: List[str],
        next: Optional[str] = None,
        api_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(api_kwargs=api_kwargs)
        self.memberIds: List[str] = memberIds
        self.next: Optional[str] = next

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MemberIdsPage":
        return cls(
            memberIds=list(data.get("memberIds", [])),
            next=data.get("next", None),
            api_kwargs=cls._getExtraKwargs(data),
        )
