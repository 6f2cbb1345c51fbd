"""
Admin Routes

Login, logout and the admin panel.
"""

import logging

from flask import current_app, redirect, render_template, request, url_for

from blog.admin import admin_bp
from blog.admin.decorators import login_required
from blog.admin.session import SessionState, expire, is_authenticated, read_state, set_state
from blog.services import store
from blog.services.notify import client_ip
from blog.services.security import verify_password
from blog.services.validation import LOGIN_FAILED, validate_login

logger = logging.getLogger(__name__)


def _notify(username, success):
    notifier = current_app.extensions.get('login_notifier')
    if notifier is not None:
        notifier.notify(client_ip(request), username, success)


@admin_bp.route('/login', methods=['GET'])
def login_page():
    """Login form. An authenticated visitor goes straight to the panel."""
    if is_authenticated():
        return redirect(url_for('admin.admin_panel'), code=303)
    return render_template('login.html', errors=[])


@admin_bp.route('/login', methods=['POST'])
def admin_login():
    """Check the submitted credentials and start an authenticated session.

    Missing fields answer 422. An unknown user and a wrong password both
    answer 401 with the same message.
    """
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    errors = validate_login(username, password)
    if errors:
        _notify(username, False)
        return render_template('login.html', errors=errors), 422

    user = store.get_user(username)
    if user is None or not verify_password(user.password_hash, password):
        logger.info('Failed login for %r from %s', username, client_ip(request))
        _notify(username, False)
        return render_template('login.html', errors=[LOGIN_FAILED]), 401

    _notify(username, True)
    set_state(SessionState(name=user.username, authenticated=True))
    logger.info('Admin %r logged in', user.username)
    return redirect(url_for('admin.admin_panel'), code=303)


@admin_bp.route('/logout', methods=['POST'])
def admin_logout():
    """Expire the session cookie and go back to the index."""
    name = read_state().name
    expire()
    if name:
        logger.info('Admin %r logged out', name)
    return redirect(url_for('articles.index'), code=303)


@admin_bp.route('', methods=['GET'])
@login_required
def admin_panel():
    """List every article with edit and delete links."""
    return render_template('admin_panel.html', articles=store.get_all())
