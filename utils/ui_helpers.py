"""
UI Helper Functions for Blueprint-Specific Styling
Provides the page CSS class injected on <body> by the context processor.
"""

from flask import request
from typing import Optional


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the current page
    
    Args:
        blueprint_name: Blueprint name
        route_name: endpoint name within the blueprint (optional)
        
    Returns:
        str: CSS class for the page
        
    Example:
        >>> get_page_specific_class('blog', 'show_post')
        'page-blog page-blog-show_post'
    """
    if not blueprint_name:
        return 'page-default'
    
    classes = [f'page-{blueprint_name}']
    
    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')
    
    return ' '.join(classes)


def current_page_class() -> str:
    """Page class for the active request"""
    endpoint = request.endpoint.split('.')[-1] if request.endpoint else None
    return get_page_specific_class(request.blueprint, endpoint)
