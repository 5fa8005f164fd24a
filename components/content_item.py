"""
Content Item Module - The title/description pair shown by content cards
"""

from collections.abc import Mapping
from dataclasses import dataclass


def _as_text(value) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def _attr_text(obj, name) -> str:
    # methods such as str.title are not content
    value = getattr(obj, name, None)
    return '' if callable(value) else _as_text(value)


@dataclass(frozen=True)
class ContentItem:
    """Read-only view of one piece of content (blog post, project, etc.)"""
    title: str = ''
    description: str = ''

    @classmethod
    def from_mapping(cls, data: Mapping) -> 'ContentItem':
        """
        Build an item from a dict-like value

        Only 'title' and 'description' are read; any other keys are ignored.
        Missing keys and None values become empty strings.
        """
        return cls(
            title=_as_text(data.get('title')),
            description=_as_text(data.get('description')),
        )

    @classmethod
    def coerce(cls, value) -> 'ContentItem':
        """
        Normalize whatever a caller hands to a card into a ContentItem

        Args:
            value: ContentItem, mapping, None, or any object exposing
                `title` / `description` attributes

        Returns:
            ContentItem: never raises for the accepted shapes
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        return cls(
            title=_attr_text(value, 'title'),
            description=_attr_text(value, 'description'),
        )
