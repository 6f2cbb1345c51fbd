"""
Flask Extensions

The blog keeps its admin identity in the signed session cookie, so the only
extension it needs is the database.
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()
