"""
Icons Module - Resolves glyph names to Font Awesome classes
"""

from markupsafe import Markup, escape

DEFAULT_ICON = 'circle'

# glyph name -> Font Awesome class string
ICONS = {
    'arrow-left': 'fa-solid fa-arrow-left',
    'check-circle': 'fa-solid fa-circle-check',
    'circle': 'fa-solid fa-circle',
    'cloud': 'fa-solid fa-cloud',
}


def icon_classes(name, extra=''):
    """Return the class string for a glyph; unknown names fall back to DEFAULT_ICON"""
    classes = ICONS.get(name) or ICONS[DEFAULT_ICON]
    if extra:
        classes = f'{classes} {extra}'
    return classes


def render_icon(name, extra=''):
    """
    Render a decorative icon element

    Args:
        name (str): glyph name from ICONS
        extra (str): additional utility classes (size, color, spacing)

    Returns:
        Markup: <i> element hidden from assistive technology
    """
    return Markup('<i class="{}" aria-hidden="true"></i>').format(
        escape(icon_classes(name, extra))
    )


__all__ = ['ICONS', 'DEFAULT_ICON', 'icon_classes', 'render_icon']
