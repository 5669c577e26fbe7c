"""
Base model classes for LINE Messaging API.

Provides the BaseLineModel class that serves as the foundation for all
LINE API response models with common functionality like serialization,
attribute introspection, and API kwargs handling.
"""

from typing import Any, Dict, Iterator, Optional


class BaseLineModel:
    """
    Base Class for all models from LINE Messaging API
    """

    __slots__ = ("api_kwargs",)

    api_kwargs: Dict[str, Any]
    """Raw API response fields not mapped to attributes"""

    def __init__(self, *, api_kwargs: Optional[Dict[str, Any]] = None):
        if api_kwargs is None:
            api_kwargs = {}
        self.api_kwargs = api_kwargs

    def _getAttrsNames(self, includePrivate: bool) -> Iterator[str]:
        """Get attribute names from __slots__ hierarchy.

        Args:
            includePrivate: Whether to include private attributes (starting with _)

        Returns:
            Iterator of attribute names from the class hierarchy
        """
        return self.__class__._getClassAttrsNames(includePrivate)

    @classmethod
    def _getClassAttrsNames(cls, includePrivate: bool) -> Iterator[str]:
        allSlots: Iterator[str] = (s for c in cls.__mro__[:-1] for s in c.__slots__)

        if includePrivate:
            return allSlots
        return (attr for attr in allSlots if not attr.startswith("_"))

    def to_dict(
        self,
        includePrivate: bool = False,
        recursive: bool = False,
    ) -> Dict[str, Any]:
        """Convert model instance to dictionary representation.

        Args:
            includePrivate: Whether to include private attributes in output
            recursive: Whether to recursively convert nested models to dicts

        Returns:
            Dictionary representation of the model instance
        """
        data = {}

        for key in self._getAttrsNames(includePrivate=includePrivate):
            value = getattr(self, key, None)

            # Do not put empty api_kwargs into resulting dict
            if key == "api_kwargs" and not value:
                continue
            if recursive and hasattr(value, "to_dict"):
                data[key] = value.to_dict(recursive=True)
            else:
                data[key] = value

        return data

    def __repr__(self) -> str:
        asDict = self.to_dict(recursive=False, includePrivate=False)
        contents = ", ".join(f"{k}={asDict[k]!r}" for k in sorted(asDict.keys()) if (asDict[k] is not None))
        return f"{self.__class__.__name__}({contents})"

    def __str__(self) -> str:
        return self.__repr__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseLineModel) or type(other) is not type(self):
            return NotImplemented
        return self.to_dict(recursive=True) == other.to_dict(recursive=True)

    @classmethod
    def _getExtraKwargs(cls, api_kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Extract extra kwargs not defined in class __slots__.

        Args:
            api_kwargs: Dictionary of all API response data

        Returns:
            Dictionary of kwargs that are not defined class attributes
        """
        knownArgs = set(cls._getClassAttrsNames(includePrivate=True))
        return {k: v for k, v in api_kwargs.items() if k not in knownArgs}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseLineModel":
        """Create model instance from API response dictionary."""
        return cls(api_kwargs=data)
