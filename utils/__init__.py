"""
Utils Package - Centralized utility modules initialization
"""

from .data import (
    get_published_posts,
    get_recent_posts,
    get_post,
    parse_date,
    parse_flag,
    load_posts_file,
    import_posts
)
from .ui_helpers import (
    get_page_specific_class,
    current_page_class
)

__all__ = [
    # Data
    'get_published_posts',
    'get_recent_posts',
    'get_post',
    'parse_date',
    'parse_flag',
    'load_posts_file',
    'import_posts',
    
    # UI Helpers
    'get_page_specific_class',
    'current_page_class'
]
