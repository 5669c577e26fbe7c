"""
User profile models for LINE Messaging API.
"""

from typing import Any, Dict, Optional

from .base import BaseLineModel


class UserProfile(BaseLineModel):
    """
    Profile of a user, as returned by the profile and group/room member profile endpoints.

    ``statusMessage`` and ``language`` are only returned for users who are friends of the bot.
    """

    __slots__ = ("userId", "displayName", "pictureUrl", "statusMessage", "language")

    def __init__(
        self,
        *,
        userId: str,
        displayName: str,
        pictureUrl: Optional[str] = None,
        statusMessage: Optional[str] = None,
        language: Optional[str] = None,
        api_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(api_kwargs=api_kwargs)
        self.userId: str = userId
        self.displayName: str = displayName
        self.pictureUrl: Optional[str] = pictureUrl
        self.statusMessage: Optional[str] = statusMessage
        self.language: Optional[str] = language

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        """Create UserProfile instance from API response dictionary.

        Args:
            data: Dictionary containing API response data

        Returns:
            UserProfile: New UserProfile instance
        """
        return cls(
            userId=data.get("userId", ""),
            displayName=data.get("displayName", ""),
            pictureUrl=data.get("pictureUrl", None),
            statusMessage=data.get("statusMessage", None),
            language=data.get("language", None),
            api_kwargs=cls._getExtraKwargs(data),
        )
