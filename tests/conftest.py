"""
Pytest Configuration and Fixtures

Shared fixtures: a testing app backed by in-memory SQLite, its test
client, and a few sample posts.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app import create_app
from extensions import db
from models import Post


@pytest.fixture
def app():
    """Testing app with a fresh database."""
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def sample_posts(app):
    """Three published posts and one draft, newest first by created_at."""
    now = datetime(2025, 3, 1, 12, 0, 0)
    posts = [
        Post(title='Shipping a Flask site', description='Notes from the first deploy.',
             content='Long form body.', created_at=now),
        Post(title='Tailwind tips', description='Utility classes that pull their weight.',
             created_at=now - timedelta(days=1)),
        Post(title='Salesforce portals', description='Experience Cloud in practice.',
             created_at=now - timedelta(days=2)),
        Post(title='Unfinished draft', description='Not ready.', is_published=False,
             created_at=now + timedelta(days=1)),
    ]
    db.session.add_all(posts)
    db.session.commit()
    return posts


def parse_html(markup):
    """Parse rendered markup for assertions."""
    return BeautifulSoup(str(markup), 'html.parser')


@pytest.fixture
def soup():
    return parse_html
