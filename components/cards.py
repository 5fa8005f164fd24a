"""
Cards Module - Content card for a single ContentItem
"""

from markupsafe import Markup

from .content_item import ContentItem
from .rendering import render_component


def content_card(item) -> Markup:
    """
    Render a title/description card

    Args:
        item: ContentItem, or a mapping/object with `title` and `description`.
            Missing fields render as empty regions.

    Returns:
        Markup: div.blogCard > div.blogContainer > h4 > b (title) + p (description)
    """
    return render_component('content_card.html', item=ContentItem.coerce(item))
