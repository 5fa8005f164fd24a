"""
Blog Blueprint - Post sidebar with a reading pane
Handles: Blog index (nothing selected) and single post view
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__, url_prefix='/blog')

from . import routes
