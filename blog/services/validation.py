"""
Validation Service

Field rules for article and login forms. Every failing rule is reported,
not just the first one.
"""

from blog.models.article import CATEGORIES, MAX_TITLE_LENGTH
from blog.services import store

ERR_TITLE_LONG = 'Title is too long'
ERR_TITLE_EMPTY = 'Title cannot be empty'
ERR_PREVIEW_EMPTY = 'Preview cannot be empty'
ERR_BODY_EMPTY = 'Body cannot be empty'
ERR_SLUG_EMPTY = 'Slug cannot be empty'
ERR_SLUG_IN_USE = 'Slug is already being used by another article'
ERR_SLUG_BAD = 'Slug contains illegal characters'
ERR_CATEGORY_INVALID = 'Category is invalid'

LOGIN_NO_USERNAME = 'Please enter a username.'
LOGIN_NO_PASSWORD = 'Please enter a password.'
LOGIN_FAILED = 'Incorrect username and/or password. Try again.'

ILLEGAL_SLUG_CHARS = '&$+,/:;=?@# <>[]{}|\\^%'


def has_illegal_slug_chars(slug):
    for char in slug:
        if char in ILLEGAL_SLUG_CHARS:
            return True
    return False


def validate_article(article, check_slug_exists=False):
    """Return the list of error messages for ``article``.

    Args:
        article: Article candidate (need not be persisted)
        check_slug_exists: Also reject slugs already stored. Only new
            articles are checked; an edit may keep its own slug.
    """
    title = article.title or ''
    slug = article.slug or ''
    errors = []

    if len(title) > MAX_TITLE_LENGTH:
        errors.append(ERR_TITLE_LONG)
    if not title:
        errors.append(ERR_TITLE_EMPTY)
    if not article.preview:
        errors.append(ERR_PREVIEW_EMPTY)
    if not article.body:
        errors.append(ERR_BODY_EMPTY)
    if not slug:
        errors.append(ERR_SLUG_EMPTY)
    if check_slug_exists and slug and store.does_slug_exist(slug):
        errors.append(ERR_SLUG_IN_USE)
    if has_illegal_slug_chars(slug):
        errors.append(ERR_SLUG_BAD)
    if article.category not in CATEGORIES:
        errors.append(ERR_CATEGORY_INVALID)

    return errors


def validate_login(username, password):
    """Missing-field errors for the login form."""
    errors = []
    if not username:
        errors.append(LOGIN_NO_USERNAME)
    if not password:
        errors.append(LOGIN_NO_PASSWORD)
    return errors
