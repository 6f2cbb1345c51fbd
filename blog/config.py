"""
Configuration settings for the blog
"""
import os
from datetime import timedelta


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Publicly known; only fit for local development and tests
DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production-12345'


class Config:
    """Flask application configuration"""

    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEFAULT_SECRET_KEY

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session cookie
    SESSION_COOKIE_NAME = 'user'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_MAX_AGE = int(os.environ.get('SESSION_MAX_AGE') or 720)
    PERMANENT_SESSION_LIFETIME = timedelta(seconds=SESSION_MAX_AGE)

    # Re-read templates on every render instead of caching them
    LIVE_RELOAD = _env_flag('LIVE_RELOAD')

    # Admin account seeded at startup (no self-registration)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256:600000'

    # Application settings
    BLOG_DESCRIPTION = os.environ.get('BLOG_DESCRIPTION') or \
        'A blog about programming and other things.'
    SEED_DEMO_ARTICLES = _env_flag('SEED_DEMO_ARTICLES')
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Login attempt notifications (disabled unless MAIL_SERVER and NOTIFY_EMAIL are set)
    MAIL_SERVER = os.environ.get('MAIL_SERVER')
    MAIL_PORT = int(os.environ.get('MAIL_PORT') or 587)
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS', default=True)
    MAIL_SENDER = os.environ.get('MAIL_SENDER') or 'blog@localhost'
    NOTIFY_EMAIL = os.environ.get('NOTIFY_EMAIL')


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    ADMIN_USERNAME = None
    ADMIN_EMAIL = None
    ADMIN_PASSWORD = None
    SEED_DEMO_ARTICLES = False
    LIVE_RELOAD = False
    MAIL_SERVER = None
    NOTIFY_EMAIL = None
