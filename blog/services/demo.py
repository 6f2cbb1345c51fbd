"""
Demo Content Service

Generates placeholder articles for an empty store.
"""

from datetime import timedelta

from blog.models.article import Article, CATEGORIES, utcnow

LOREM = (
    'Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec in tincidunt '
    'magna. Maecenas venenatis dictum porttitor. Nulla condimentum est odio, ac '
    'blandit lorem posuere quis.'
)


def make_demo_article(i, category, now=None):
    """
    Build (but do not save) demo article number ``i`` of ``category``.

    Published one hour before ``now`` plus ``i`` seconds, so a higher ``i``
    is newer.
    """
    if now is None:
        now = utcnow()
    published = now - timedelta(hours=1) + timedelta(seconds=i)
    return Article(
        title=f'{category} Article {i}',
        preview=LOREM,
        body=f'<p>{LOREM}</p>\n<p>{LOREM}</p>',
        slug=f'{category.lower()}-article-{i}',
        published=published,
        edited=published,
        category=category,
    )


def make_demo_articles(n, categories=CATEGORIES, now=None):
    """
    Build ``n`` demo articles for each category.

    Args:
        n: Articles per category
        categories: Categories to fill
        now: Reference time (default: current UTC time)

    Returns:
        List of unsaved Article objects, oldest first within each category
    """
    if now is None:
        now = utcnow()
    articles = []
    for category in categories:
        for i in range(1, n + 1):
            articles.append(make_demo_article(i, category, now))
    return articles
