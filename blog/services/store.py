"""
Article Store

Persistence for articles and users on top of Flask-SQLAlchemy. Each
category is read newest-first and handed to the pagination service.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blog.exceptions import SlugInUseError, StoreError
from blog.extensions import db
from blog.models import Article, User
from blog.models.article import utcnow
from blog.services.pagination import paginate

logger = logging.getLogger(__name__)


def _newest_first(query):
    return query.order_by(Article.published.desc(), Article.id.desc())


def get_all():
    """Every article, newest first."""
    return _newest_first(Article.query).all()


def count_articles():
    return Article.query.count()


def get_page(page, category):
    """Return (articles, effective page, max page) for one category."""
    articles = _newest_first(Article.query.filter_by(category=category)).all()
    return paginate(articles, page)


def get_article(slug):
    """Look up an article by slug, ignoring case.

    Returns:
        Tuple of (id, article). Unknown slugs give (0, None).
    """
    try:
        article = Article.query.filter_by(slug=(slug or '').lower()).first()
    except SQLAlchemyError:
        logger.exception('Article lookup failed for slug %r', slug)
        db.session.rollback()
        return 0, None
    if article is None:
        return 0, None
    return article.id, article


def does_slug_exist(slug):
    article_id, _ = get_article(slug)
    return article_id > 0


def new_article(article):
    """Insert ``article``; its slug is lowercased before saving.

    Raises:
        SlugInUseError: the unique index rejected the slug
        StoreError: any other database failure
    """
    article.slug = article.slug.lower()
    if article.published is None:
        article.published = utcnow()
    if article.edited is None:
        article.edited = article.published
    db.session.add(article)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.info('Rejected duplicate slug %r', article.slug)
        raise SlugInUseError(article.slug)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not save article %r', article.slug)
        raise StoreError(str(e)) from e
    return article


def edit_article(article_id, edited):
    """Copy the editable fields of ``edited`` onto the stored article.

    ``published`` is never touched.
    """
    article = db.session.get(Article, article_id)
    if article is None:
        raise StoreError(f'no article with id {article_id}')

    article.title = edited.title
    article.preview = edited.preview
    article.body = edited.body
    article.slug = edited.slug.lower()
    article.edited = edited.edited
    article.category = edited.category
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise SlugInUseError(edited.slug.lower())
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not edit article %s', article_id)
        raise StoreError(str(e)) from e
    return article


def delete_article(article_id):
    article = db.session.get(Article, article_id)
    if article is None:
        return False
    try:
        db.session.delete(article)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not delete article %s', article_id)
        raise StoreError(str(e)) from e
    return True


def seed_articles(articles):
    """Save ``articles`` only if the store is still empty."""
    if count_articles() > 0:
        return 0
    for a in articles:
        a.slug = a.slug.lower()
        db.session.add(a)
    db.session.commit()
    return len(articles)


# User

def get_user(username):
    """Return the User named ``username``, or None."""
    try:
        return User.query.filter_by(username=username).first()
    except SQLAlchemyError:
        logger.exception('User lookup failed for %r', username)
        db.session.rollback()
        return None


def save_user(username, email, password_hash):
    user = User(username=username, email=email, password_hash=password_hash)
    db.session.add(user)
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not save user %r', username)
        raise StoreError(str(e)) from e
    return user
