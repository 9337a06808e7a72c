"""
Game Archive - Main Application Entry Point
Application Factory Pattern

This module creates the Flask application with its configuration, Jinja
filters, error handlers and hooks. All page handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template
from config import get_config

from blueprints.pages import pages_bp


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

    configure_logging(app)

    # Register Jinja filters
    try:
        from utils.helpers import sanitize_description
        app.jinja_env.filters['rich_text'] = sanitize_description
        app.logger.info('✓ Registered Jinja filter: rich_text')
    except Exception as e:
        app.logger.warning(f'Could not register rich_text filter: {str(e)}')

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Game Archive is running'}, 200

    return app


def configure_logging(app):
    """Apply the configured log level to the app logger"""
    level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    try:
        app.logger.setLevel(level)
    except ValueError:
        app.logger.setLevel('INFO')
        app.logger.warning(f'Unknown LOG_LEVEL "{level}", using INFO')


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)


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
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Context shared by all templates"""
        from utils.catalog import get_categories
        from utils.status import get_status_badge
        from utils.ui_helpers import get_ui_config, inject_page_class

        default_meta = {
            'title': 'Game Archive | Game Development Portfolio',
            'description': 'Games, prototypes and graphics work built with Unity and Unreal.',
            'keywords': 'Game Archive, Unity, Unreal, Shader, Portfolio'
        }

        return {
            'current_year': datetime.now().year,
            'default_meta': default_meta,
            'categories': get_categories(),
            'get_status_badge': get_status_badge,
            'ui_config': get_ui_config(),
            'page_class': inject_page_class()
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline' https://pagead2.googlesyndication.com; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data: https:; "
            "frame-src https://googleads.g.doubleclick.net;"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
