"""
Tests for configuration selection.
"""

from config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from utils.ui_helpers import get_page_specific_class


class TestGetConfig:

    def test_by_name(self):
        assert get_config('testing') is TestingConfig
        assert get_config('production') is ProductionConfig

    def test_unknown_name_uses_default(self):
        assert get_config('staging') is DevelopmentConfig

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'production')
        assert get_config() is ProductionConfig

    def test_default_environment(self, monkeypatch):
        monkeypatch.delenv('FLASK_ENV', raising=False)
        assert get_config() is DevelopmentConfig

    def test_testing_uses_memory_database(self, app):
        assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
        assert app.testing


class TestPageClass:

    def test_no_blueprint(self):
        assert get_page_specific_class(None) == 'page-default'

    def test_blueprint_and_route(self):
        assert get_page_specific_class('blog', 'show_post') == 'page-blog page-blog-show_post'
