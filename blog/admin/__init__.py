"""
Admin Blueprint

Login, logout and the admin panel. Identity lives only in the signed
session cookie.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from blog.admin import routes  # noqa: E402, F401
