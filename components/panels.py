"""
Panels Module - Placeholder panels shown when there is nothing to display
"""

from markupsafe import Markup

from .rendering import render_component

EMPTY_STATE_HEADING = 'Select a Post'
EMPTY_STATE_BODY = 'Choose a blog post from the sidebar on the left to read it here.'

NO_CONTENT_HEADING = 'Nothing Here Yet'
NO_CONTENT_MESSAGE = 'No blog posts found.'


def empty_state_panel() -> Markup:
    """Placeholder for the reading pane while no post is selected"""
    return render_component(
        'empty_state_panel.html',
        heading=EMPTY_STATE_HEADING,
        body=EMPTY_STATE_BODY,
    )


def no_content_panel(message: str = NO_CONTENT_MESSAGE) -> Markup:
    """
    Card shown in place of a listing that came back empty

    Args:
        message (str): line displayed under the heading (escaped)

    Returns:
        Markup: rendered card
    """
    return render_component(
        'no_content_panel.html',
        heading=NO_CONTENT_HEADING,
        message=message if message is not None else '',
    )
