"""
Article Routes

Index pages per category, the "all" page, single article views and the
admin-only create, edit and delete routes.
"""

import logging

from flask import abort, redirect, render_template, request, url_for

from blog.admin.decorators import login_required
from blog.articles import articles_bp
from blog.articles.forms import ArticleForm
from blog.exceptions import SlugInUseError
from blog.models import OTHER, PROGRAMMING
from blog.models.article import CATEGORIES, utcnow
from blog.services import store
from blog.services.pagination import make_page_info, parse_page_number
from blog.services.validation import ERR_SLUG_IN_USE, validate_article

logger = logging.getLogger(__name__)


def _index_page(category, page):
    articles, current, max_page = store.get_page(parse_page_number(page), category)
    return render_template('index.html',
                           articles=articles,
                           category=category,
                           page_info=make_page_info(current, max_page))


def _article_form(form, action, errors=None, status=200):
    heading = 'New Article' if action == url_for('articles.new_article') else 'Edit Article'
    return render_template('article_form.html',
                           form=form,
                           action=action,
                           heading=heading,
                           categories=CATEGORIES,
                           errors=errors or []), status


@articles_bp.route('/', defaults={'page': None})
@articles_bp.route('/page/<page>')
def index(page):
    """Programming articles, newest first"""
    return _index_page(PROGRAMMING, page)


@articles_bp.route('/other', defaults={'page': None})
@articles_bp.route('/other/page/<page>')
def other_index(page):
    """Other articles, newest first"""
    return _index_page(OTHER, page)


@articles_bp.route('/all')
def all_articles():
    """Every article, split into two columns."""
    articles = store.get_all()
    half = len(articles) // 2
    return render_template('all.html', column1=articles[:half], column2=articles[half:])


@articles_bp.route('/new', methods=['GET'])
@login_required
def new_article_form():
    return _article_form(ArticleForm(), url_for('articles.new_article'))


@articles_bp.route('/new', methods=['POST'])
@login_required
def new_article():
    """Validate and save a new article, then show it."""
    form = ArticleForm.from_request(request.form)
    action = url_for('articles.new_article')

    errors = validate_article(form, check_slug_exists=True)
    if errors:
        return _article_form(form, action, errors, 400)

    now = utcnow()
    try:
        article = store.new_article(form.to_article(published=now, edited=now))
    except SlugInUseError:
        # Lost a race with another request creating the same slug
        return _article_form(form, action, [ERR_SLUG_IN_USE], 400)

    logger.info('Created article %r', article.slug)
    return redirect(url_for('articles.article_view', slug=article.slug), code=303)


@articles_bp.route('/<slug>')
def article_view(slug):
    article_id, article = store.get_article(slug)
    if not article_id:
        abort(404)
    return render_template('article.html', article=article)


@articles_bp.route('/<slug>/edit', methods=['GET'])
@login_required
def edit_article_form(slug):
    article_id, article = store.get_article(slug)
    if not article_id:
        abort(404)
    return _article_form(ArticleForm.from_article(article),
                         url_for('articles.edit_article', slug=article.slug))


@articles_bp.route('/<slug>/edit', methods=['POST'])
@login_required
def edit_article(slug):
    """Save changes to an article, keeping its publish date."""
    article_id, article = store.get_article(slug)
    if not article_id:
        abort(404)

    form = ArticleForm.from_request(request.form)
    action = url_for('articles.edit_article', slug=article.slug)

    errors = validate_article(form, check_slug_exists=False)
    if errors:
        return _article_form(form, action, errors, 400)

    edited = form.to_article(published=article.published, edited=utcnow())
    try:
        article = store.edit_article(article_id, edited)
    except SlugInUseError:
        return _article_form(form, action, [ERR_SLUG_IN_USE], 400)

    logger.info('Edited article %s, slug now %r', article_id, article.slug)
    return redirect(url_for('articles.article_view', slug=article.slug), code=303)


# Delete uses GET because it is triggered from a plain link
@articles_bp.route('/<slug>/delete', methods=['GET'])
@login_required
def delete_article(slug):
    article_id, _ = store.get_article(slug)
    if not article_id:
        abort(404)
    store.delete_article(article_id)
    logger.info('Deleted article %r', slug)
    return redirect(url_for('admin.admin_panel'), code=303)
