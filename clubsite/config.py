"""
Configuration settings for the Club Website
"""
import os
from datetime import timedelta

from cachelib import SimpleCache


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'club.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions (Flask-Session). SESSION_CACHELIB is built from
    # SESSION_DIR in create_app() when left unset.
    SESSION_TYPE = 'cachelib'
    SESSION_CACHELIB = None
    SESSION_DIR = os.environ.get('SESSION_DIR') or os.path.join(basedir, 'instance', 'sessions')
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(hours=2)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Image uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or \
        os.path.join(os.path.dirname(__file__), 'static', 'images')
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024

    # Fixture data loaded into an empty database on startup
    SEED_ON_STARTUP = True
    SEED_DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Admin Credentials (session-based, single shared identity)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SESSION_CACHELIB = SimpleCache()
    SEED_ON_STARTUP = False
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin123'
