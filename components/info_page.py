"""
Info Page Module - Fixed article describing the cloud consulting service
"""

from dataclasses import dataclass
from typing import Tuple

from markupsafe import Markup

from .navigation import HOME, NavTarget
from .rendering import render_component


@dataclass(frozen=True)
class InfoPageContent:
    title: str
    icon: str
    lead: str
    capabilities: Tuple[str, ...]
    closing: str


CLOUD_CONSULTING = InfoPageContent(
    title='Cloud & CRM Consulting',
    icon='cloud',
    lead=(
        'Practical help planning, building and running the cloud platforms '
        'and CRM systems your business depends on.'
    ),
    capabilities=(
        'Platform assessment and migration planning',
        'Salesforce configuration, automation and custom development',
        'Digital Experience sites and customer portals',
        'Integration with third-party APIs and internal systems',
        'Data modelling, import and clean-up',
        'Security reviews and access control design',
        'Ongoing support, training and documentation',
    ),
    closing=(
        'Every engagement starts with a short discovery call so the work is '
        'scoped around your goals. Get in touch to talk through your project.'
    ),
)


def static_info_page(back_link: NavTarget = HOME) -> Markup:
    """
    Render the cloud consulting service page

    Args:
        back_link (NavTarget): where the "back" link points. The caller resolves
            the route; the default is the site root.

    Returns:
        Markup: complete article with exactly one navigation link
    """
    return render_component(
        'static_info_page.html',
        page=CLOUD_CONSULTING,
        back_link=back_link,
    )
