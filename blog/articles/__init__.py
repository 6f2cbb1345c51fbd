"""
Articles Blueprint

Public listings and article views, plus the gated create, edit and delete
routes.
"""

from flask import Blueprint

articles_bp = Blueprint('articles', __name__)

from blog.articles import routes  # noqa: E402, F401
