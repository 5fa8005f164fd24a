"""
Folio - Main Application Entry Point
Application Factory Pattern with blueprints

This module initializes the Flask application with its extensions,
configuration and hooks. Route handling is delegated to blueprints and
all markup fragments come from the components package.
"""

import os
import logging
from datetime import datetime
import click
from flask import Flask, render_template
from config import get_config
from extensions import db

from blueprints.blog import blog_bp
from blueprints.pages import pages_bp
from blueprints.services import services_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance
    
    Args:
        config_name (str): Configuration environment name (optional)
        
    Returns:
        Flask: Configured Flask application instance
    """
    
    app = Flask(__name__)
    
    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(getattr(logging, app.config.get('LOG_LEVEL', 'INFO'), logging.INFO))
    
    # Initialize extensions with app
    initialize_extensions(app)
    
    # Register blueprints
    register_blueprints(app)
    
    # Register error handlers
    register_error_handlers(app)
    
    # Register context processors
    register_hooks(app)
    
    # Register CLI commands
    register_commands(app)
    
    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': f"{app.config['SITE_NAME']} is running"}, 200
    
    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    
    # Create tables if they don't exist
    with app.app_context():
        import models  # noqa: F401 - registers tables on db.metadata
        try:
            from sqlalchemy import text
            db.create_all()
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(services_bp)
    app.logger.debug(f"Registered blueprints: {', '.join(app.blueprints)}")


def register_error_handlers(app):
    """Register custom error handlers"""
    
    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404
    
    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register context processors"""
    
    @app.context_processor
    def inject_global_vars():
        from utils.ui_helpers import current_page_class
        
        return {
            'site_name': app.config.get('SITE_NAME', 'Folio'),
            'current_year': datetime.now().year,
            'page_class': current_page_class()
        }


def register_commands(app):
    """Register flask CLI commands"""
    
    @app.cli.command('import-posts')
    @click.argument('path', type=click.Path(exists=True, dir_okay=False))
    def import_posts_command(path):
        """Import blog posts from a JSON file"""
        from utils.data import load_posts_file, import_posts
        
        try:
            entries = load_posts_file(path)
        except ValueError as e:
            raise click.ClickException(str(e))
        
        result = import_posts(entries)
        click.echo(f"Imported {result['imported']} posts ({result['skipped']} skipped)")


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    
    app = create_app(env)
    
    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
