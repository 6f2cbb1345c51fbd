"""
Pagination Service

Splits a newest-first list of articles into fixed-size pages.
"""

import re
from dataclasses import dataclass

PAGE_SIZE = 10

# Signed ASCII digits only
_PAGE_TOKEN = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class PageInfo:
    """Page numbers handed to the index template."""
    current_page: int
    max_page: int
    next: int
    prev: int


def make_page_info(page, max_page):
    return PageInfo(current_page=page, max_page=max_page, next=page + 1, prev=page - 1)


def parse_page_number(token):
    """Turn the ``page`` URL segment into an int, defaulting to 1."""
    if not isinstance(token, str) or not _PAGE_TOKEN.fullmatch(token):
        return 1
    return int(token)


def paginate(articles, page):
    """
    Return one page of ``articles``.

    ``articles`` must already be ordered newest-first; nothing is sorted here.

    Args:
        articles: Sequence of articles in display order
        page: Requested page number, any integer

    Returns:
        Tuple of (articles on the page, effective page, max page)

    ``max_page`` is ``len(articles) // PAGE_SIZE``. Articles past the last
    full page are not given a page of their own; they are appended to the
    page equal to ``max_page``, which can therefore hold up to
    ``2 * PAGE_SIZE - 1`` articles.
    """
    articles = list(articles)
    if not articles:
        return [], 1, 0
    if len(articles) <= PAGE_SIZE:
        return articles, 1, 1

    max_page = len(articles) // PAGE_SIZE
    current = min(max(page, 1), max_page)

    start = (current - 1) * PAGE_SIZE
    if current == max_page:
        return articles[start:], current, max_page
    return articles[start:start + PAGE_SIZE], current, max_page
