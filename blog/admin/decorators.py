"""
Admin Decorator
"""

from functools import wraps

from flask import abort

from blog.admin.session import is_authenticated


def login_required(f):
    """Answer 401 unless the session is authenticated.

    Runs before the view, so an anonymous request never reads the form or
    touches the store.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not is_authenticated():
            abort(401)
        return f(*args, **kwargs)
    return wrapper
