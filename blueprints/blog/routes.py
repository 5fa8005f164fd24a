"""
Blog Routes - Sidebar of posts plus the selected post
"""

from flask import render_template, abort, current_app
from components import content_card, empty_state_panel, no_content_panel
from utils.data import get_published_posts, get_post
from . import blog_bp


@blog_bp.route('/', strict_slashes=False)
def index():
    """Blog index - no post selected yet"""
    posts = get_published_posts()
    
    if posts:
        reading_pane = empty_state_panel()
    else:
        reading_pane = no_content_panel()
    
    return render_template('blog/index.html',
                           posts=posts,
                           selected_id=None,
                           reading_pane=reading_pane)


@blog_bp.route('/<post_id>')
def show_post(post_id):
    """Single post in the reading pane"""
    post = get_post(post_id)
    if post is None:
        current_app.logger.info(f"Post not found: {post_id}")
        abort(404)
    
    return render_template('blog/index.html',
                           posts=get_published_posts(),
                           selected_id=post.id,
                           post=post,
                           reading_pane=content_card(post.to_content_item()))
