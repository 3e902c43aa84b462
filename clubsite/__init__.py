"""
Club Website - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from cachelib import FileSystemCache
from flask import Flask

from clubsite.config import Config
from clubsite.extensions import db, server_session


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('clubsite').setLevel(app.config['LOG_LEVEL'])

    if app.config.get('SESSION_CACHELIB') is None:
        os.makedirs(app.config['SESSION_DIR'], exist_ok=True)
        app.config['SESSION_CACHELIB'] = FileSystemCache(app.config['SESSION_DIR'], threshold=500)

    # Initialize extensions
    db.init_app(app)
    server_session.init_app(app)

    # Register blueprints
    from clubsite.public import public_bp
    from clubsite.admin import admin_bp
    from clubsite.errors import register_error_handlers

    app.register_blueprint(public_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    register_error_handlers(app)

    # Context processor for admin flag
    @app.context_processor
    def inject_is_admin_flag():
        """Inject `is_admin` flag into templates based on SESSION."""
        from flask import session
        return dict(is_admin=session.get('is_admin', False))

    # Create database tables and load fixtures
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///'):
            db_path = app.config['SQLALCHEMY_DATABASE_URI'][len('sqlite:///'):]
            if db_path != ':memory:' and os.path.dirname(db_path):
                os.makedirs(os.path.dirname(db_path), exist_ok=True)
        from clubsite.services import init_database
        init_database(app)

    return app
