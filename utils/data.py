"""
Data Management Module - Loads blog posts for the views
Views receive ContentItem-ready Post rows; nothing here renders markup.
"""

import json
from datetime import datetime
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Post


def get_published_posts():
    """All published posts, newest first. Empty list on database errors."""
    try:
        return (Post.query
                .filter_by(is_published=True)
                .order_by(Post.created_at.desc())
                .all())
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading posts: {str(e)}")
        db.session.rollback()
        return []


def get_recent_posts(limit=None):
    """
    Most recent published posts for the landing page

    Args:
        limit (int, optional): max posts, defaults to RECENT_POSTS_LIMIT

    Returns:
        list: Post rows, newest first
    """
    if limit is None:
        limit = current_app.config.get('RECENT_POSTS_LIMIT', 6)
    try:
        return (Post.query
                .filter_by(is_published=True)
                .order_by(Post.created_at.desc())
                .limit(limit)
                .all())
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading recent posts: {str(e)}")
        db.session.rollback()
        return []


def get_post(post_id):
    """Published post by id, or None"""
    try:
        post = db.session.get(Post, post_id)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading post {post_id}: {str(e)}")
        db.session.rollback()
        return None
    if post is None or not post.is_published:
        return None
    return post


def parse_date(date_str):
    """Parse date string to datetime object"""
    if not date_str:
        return None
    formats = [
        '%Y-%m-%d %H:%M:%S',
        '%Y-%m-%d',
        '%Y-%m-%dT%H:%M:%S.%f',
        '%Y-%m-%dT%H:%M:%S'
    ]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt)
        except (ValueError, TypeError):
            continue
    return None


TRUE_STRINGS = {'true', '1', 'yes', 'on'}


def parse_flag(value, default=False):
    """Interpret a flag from JSON; strings such as "false" are not truthy"""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def load_posts_file(path):
    """
    Read post entries from a JSON file

    Accepts either a list of post objects or {"posts": [...]}.

    Raises:
        ValueError: if the JSON root has neither shape
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('posts')
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of posts or an object with a 'posts' list")
    return data


def import_posts(entries):
    """
    Insert post entries that are not in the database yet

    Entries without a title, and entries whose title already exists, are skipped.

    Args:
        entries (list): dicts with title, description, content, tags,
            is_published, created_at

    Returns:
        dict: {'imported': int, 'skipped': int}
    """
    existing = {title for (title,) in db.session.query(Post.title).all()}
    imported = 0
    skipped = 0

    for entry in entries:
        raw_title = entry.get('title') if isinstance(entry, dict) else None
        # Compare against the stored form: titles are capped at the column size
        title = raw_title.strip()[:255] if isinstance(raw_title, str) else ''
        if not title or title in existing:
            skipped += 1
            continue

        post = Post(
            title=title,
            description=entry.get('description') or '',
            content=entry.get('content') or '',
            tags=[t for t in (entry.get('tags') or []) if t],
            is_published=parse_flag(entry.get('is_published'), default=True),
        )
        created_at = parse_date(entry.get('created_at'))
        if created_at:
            post.created_at = created_at

        db.session.add(post)
        existing.add(title)
        imported += 1

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    current_app.logger.info(f"Imported {imported} posts, skipped {skipped}")
    return {'imported': imported, 'skipped': skipped}
