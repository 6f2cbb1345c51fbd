import pytest

from blog.services.pagination import PAGE_SIZE, make_page_info, paginate, parse_page_number


def items(n):
    # newest first, like the store hands them over
    return [f'article-{i}' for i in range(n, 0, -1)]


def test_empty_category():
    assert paginate([], 1) == ([], 1, 0)
    assert paginate([], 7) == ([], 1, 0)


def test_fewer_than_one_page():
    articles = items(PAGE_SIZE - 1)
    assert paginate(articles, 1) == (articles, 1, 1)
    assert paginate(articles, 5) == (articles, 1, 1)


def test_exactly_one_page():
    articles = items(PAGE_SIZE)
    page, current, max_page = paginate(articles, 1)
    assert page == articles
    assert (current, max_page) == (1, 1)


def test_one_more_than_a_page_lands_on_the_last_page():
    articles = items(PAGE_SIZE + 1)
    page, current, max_page = paginate(articles, 1)
    assert max_page == 1
    assert current == 1
    assert len(page) == PAGE_SIZE + 1
    assert page == articles


def test_full_pages():
    articles = items(50)
    assert paginate(articles, 1) == (articles[:10], 1, 5)
    assert paginate(articles, 2) == (articles[10:20], 2, 5)
    assert paginate(articles, 5) == (articles[40:50], 5, 5)


def test_partial_tail_is_appended_to_max_page():
    articles = items(25)
    assert paginate(articles, 1) == (articles[:10], 1, 2)
    page, current, max_page = paginate(articles, 2)
    assert (current, max_page) == (2, 2)
    assert page == articles[10:]
    assert len(page) == 15


@pytest.mark.parametrize('requested, expected', [(0, 1), (-5, 1), (9999, 5)])
def test_requested_page_is_clamped(requested, expected):
    articles = items(50)
    page, current, _ = paginate(articles, requested)
    assert current == expected
    assert page == articles[(expected - 1) * PAGE_SIZE:expected * PAGE_SIZE]


@pytest.mark.parametrize('n', [0, 1, 9, 10, 11, 19, 20, 21, 37, 100])
@pytest.mark.parametrize('requested', [-3, 0, 1, 2, 3, 4, 50])
def test_page_bounds_hold_for_any_size(n, requested):
    articles = items(n)
    page, current, max_page = paginate(articles, requested)

    assert 1 <= current <= max(1, max_page)
    if n == 0:
        assert page == []
    else:
        assert page
        assert len(page) <= 2 * PAGE_SIZE - 1
    assert paginate(articles, requested) == (page, current, max_page)


def test_every_article_reachable():
    articles = items(37)
    _, _, max_page = paginate(articles, 1)
    seen = []
    for p in range(1, max_page + 1):
        seen.extend(paginate(articles, p)[0])
    assert seen == articles


def test_does_not_modify_input():
    articles = items(30)
    before = list(articles)
    paginate(articles, 2)
    assert articles == before


@pytest.mark.parametrize('token, expected', [
    (None, 1),
    ('1', 1),
    ('3', 3),
    ('-5', -5),
    ('abc', 1),
    ('', 1),
    ('2.5', 1),
    ('+4', 4),
    ('1_0', 1),
    ('\uff13', 1),
    (' 2', 1),
    ('2\n', 1),
])
def test_parse_page_number(token, expected):
    assert parse_page_number(token) == expected


def test_make_page_info():
    info = make_page_info(3, 5)
    assert info.current_page == 3
    assert info.max_page == 5
    assert info.next == 4
    assert info.prev == 2
