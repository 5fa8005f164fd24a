"""
Services Routes - Fixed service description pages
"""

from flask import render_template, url_for
from components import CLOUD_CONSULTING, NavTarget, static_info_page
from . import services_bp


@services_bp.route('/cloud-consulting')
def cloud_consulting():
    """Cloud & CRM consulting service page"""
    back_link = NavTarget(href=url_for('pages.index'), label='Back to Home')
    return render_template('services/info.html',
                           page_title=CLOUD_CONSULTING.title,
                           article=static_info_page(back_link=back_link))
