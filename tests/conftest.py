import pytest

from blog import create_app
from blog.config import TestConfig
from blog.extensions import db
from blog.models.article import utcnow
from blog.services import store
from blog.services.demo import make_demo_article
from blog.services.security import hash_password

ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD = 'password'

VALID_ARTICLE = {
    'title': 'I am a valid article!',
    'preview': '<p>This is a valid preview.</p>',
    'body': '<p>This is a valid body of an article.</p>',
    'slug': 'this-is_a.v4l1d~slug',
    'category': 'Other',
}

EDITED_ARTICLE = {
    'title': 'Edited article',
    'preview': '<p>Edited Preview.</p>',
    'body': '<p>Edited Body.</p>',
    'slug': 'edited-article',
    'category': 'Programming',
}

INVALID_ARTICLE = {
    'title': 'this is an invalid title ' * 100,
    'preview': '',
    'body': '',
    'slug': '&$+,/:;=?@# <>[]{}|\\^%',
    'category': 'invalid-category',
}


def config_for(db_path, **overrides):
    attrs = {'SQLALCHEMY_DATABASE_URI': 'sqlite:///' + str(db_path)}
    attrs.update(overrides)
    return type('LocalTestConfig', (TestConfig,), attrs)


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / 'blog.db'


@pytest.fixture()
def app(db_path):
    app = create_app(config_for(db_path))
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture(autouse=True)
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def notifications(app):
    """Record login notifications instead of sending them."""
    calls = []

    class RecordingNotifier:
        def notify(self, ip, username, success):
            calls.append((ip, username, success))

    app.extensions['login_notifier'] = RecordingNotifier()
    return calls


@pytest.fixture()
def admin_user(app):
    return store.save_user(ADMIN_USERNAME, 'admin@example.com',
                           hash_password(ADMIN_PASSWORD, method=app.config['PASSWORD_HASH_METHOD']))


@pytest.fixture()
def login(client, admin_user):
    def do_login(username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
        return client.post('/admin/login', data={'username': username, 'password': password})
    return do_login


@pytest.fixture()
def make_articles():
    """Save ``n`` demo articles of one category, published a second apart."""
    def save(n, category, now=None):
        now = now or utcnow()
        articles = [make_demo_article(i, category, now) for i in range(1, n + 1)]
        for a in articles:
            store.new_article(a)
        return articles
    return save
