"""
LINE Messaging API Models Package.

Response models for the LINE Messaging API. Every model keeps the fields it
does not map in ``api_kwargs`` and can be built from a response dict with
``from_dict()``.
"""

from .base import BaseLineModel
from .liff import LiffApp, LinkToken
from .members import MemberIdsPage
from .profile import UserProfile
from .rich_menu import RichMenu, RichMenuSize

__all__ = [
    "BaseLineModel",
    "LiffApp",
    "LinkToken",
    "MemberIdsPage",
    "RichMenu",
    "RichMenuSize",
    "UserProfile",
]
