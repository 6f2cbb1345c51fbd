"""
Article Model
"""

from datetime import datetime, timezone

from blog.extensions import db

PROGRAMMING = 'Programming'
OTHER = 'Other'
CATEGORIES = (PROGRAMMING, OTHER)

MAX_TITLE_LENGTH = 50


def utcnow():
    """Naive UTC timestamp, the form SQLite stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Article(db.Model):
    """A blog article. Slugs are stored lowercased and are unique."""
    __tablename__ = 'articles'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(MAX_TITLE_LENGTH), nullable=False)
    preview = db.Column(db.Text, nullable=False)
    body = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    published = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    edited = db.Column(db.DateTime, nullable=False, default=utcnow)
    category = db.Column(db.String(32), nullable=False, index=True)

    @property
    def is_edited(self):
        if self.published is None or self.edited is None:
            return False
        return self.published < self.edited

    def __repr__(self):
        return f'<Article {self.slug} [{self.category}]>'
