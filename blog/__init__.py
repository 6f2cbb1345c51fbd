"""
Blog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, render_template

from blog.config import DEFAULT_SECRET_KEY, Config
from blog.exceptions import StoreError
from blog.extensions import db

logger = logging.getLogger(__name__)


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
    logging.getLogger('blog').setLevel(app.config['LOG_LEVEL'])

    if app.config['SECRET_KEY'] == DEFAULT_SECRET_KEY and not app.testing:
        logger.warning('SECRET_KEY is not set; session cookies can be forged. '
                       'Set SECRET_KEY before exposing the admin area.')

    # Cached templates unless live reload is on
    app.config['TEMPLATES_AUTO_RELOAD'] = app.config['LIVE_RELOAD']
    app.jinja_env.auto_reload = app.config['LIVE_RELOAD']

    # Initialize extensions
    db.init_app(app)

    from blog.services.notify import LoginNotifier
    app.extensions['login_notifier'] = LoginNotifier(app.config)

    # Register blueprints
    from blog.admin import admin_bp
    from blog.articles import articles_bp

    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(articles_bp)

    _register_template_helpers(app)
    _register_error_handlers(app)

    # Create database tables on first use of an empty file
    with app.app_context():
        _ensure_instance_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        try:
            db.create_all()
        except Exception:
            logger.exception('Could not create database schema')
            raise
        _ensure_default_data(app)

    return app


def _ensure_instance_dir(uri):
    prefix = 'sqlite:///'
    if uri.startswith(prefix) and uri != prefix + ':memory:':
        folder = os.path.dirname(uri[len(prefix):])
        if folder:
            os.makedirs(folder, exist_ok=True)


def _register_template_helpers(app):
    from blog.admin.session import read_state

    @app.context_processor
    def inject_session_flags():
        """Inject `logged_in` and the admin name into every template."""
        state = read_state()
        return dict(logged_in=state.authenticated,
                    admin_name=state.name,
                    description=app.config['BLOG_DESCRIPTION'])

    @app.template_filter('date_only')
    def date_only_filter(value):
        """Render a timestamp as YYYY-MM-DD."""
        if value is None:
            return ''
        return value.strftime('%Y-%m-%d')


def _register_error_handlers(app):

    @app.errorhandler(401)
    def unauthorized(e):
        return render_template('error.html', code=401, message='You need to log in to do that.'), 401

    @app.errorhandler(404)
    def not_found(e):
        return render_template('error.html', code=404, message='404 not found'), 404

    @app.errorhandler(StoreError)
    def store_failure(e):
        db.session.rollback()
        return render_template('error.html', code=500, message='Something went wrong saving your changes.'), 500


def _ensure_default_data(app):
    """Ensure the admin account and optional demo articles exist."""
    from blog.services import store
    from blog.services.demo import make_demo_articles
    from blog.services.security import hash_password

    username = app.config.get('ADMIN_USERNAME')
    password = app.config.get('ADMIN_PASSWORD')
    email = app.config.get('ADMIN_EMAIL')
    if username and password and email:
        if store.get_user(username) is None:
            store.save_user(username, email,
                            hash_password(password, method=app.config['PASSWORD_HASH_METHOD']))
            logger.info('Created admin user %r', username)

    if app.config.get('SEED_DEMO_ARTICLES'):
        seeded = store.seed_articles(make_demo_articles(20))
        if seeded:
            logger.info('Seeded %d demo articles', seeded)
