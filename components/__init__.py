"""
Components Package - Presentational view components
Each component is a pure function of its inputs returning rendered Markup.
"""

from .cards import content_card
from .content_item import ContentItem
from .info_page import CLOUD_CONSULTING, InfoPageContent, static_info_page
from .navigation import HOME, NavTarget
from .panels import (
    EMPTY_STATE_BODY,
    EMPTY_STATE_HEADING,
    NO_CONTENT_HEADING,
    NO_CONTENT_MESSAGE,
    empty_state_panel,
    no_content_panel,
)

__all__ = [
    # Data
    'ContentItem',
    'NavTarget',
    'HOME',
    'InfoPageContent',
    'CLOUD_CONSULTING',

    # Components
    'content_card',
    'empty_state_panel',
    'no_content_panel',
    'static_info_page',

    # Fixed text
    'EMPTY_STATE_HEADING',
    'EMPTY_STATE_BODY',
    'NO_CONTENT_HEADING',
    'NO_CONTENT_MESSAGE',
]
