"""
Navigation Module - Route descriptors handed to components

Components never resolve routes themselves. The embedding view builds a
NavTarget (usually from url_for) and the component only renders it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NavTarget:
    href: str
    label: str = ''


HOME = NavTarget(href='/', label='Back to Home')
