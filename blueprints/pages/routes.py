"""
Pages Routes - Public landing page
"""

from flask import render_template, current_app
from components import content_card, no_content_panel
from utils.data import get_recent_posts
from . import pages_bp


@pages_bp.route('/')
def index():
    """Landing page - recent posts as cards"""
    posts = get_recent_posts()
    current_app.logger.debug(f"Landing page showing {len(posts)} posts")
    
    cards = [content_card(post.to_content_item()) for post in posts]
    
    return render_template('pages/index.html',
                           cards=cards,
                           empty_panel=None if cards else no_content_panel())
