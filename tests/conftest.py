import os

import pytest
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from quill import create_app
from quill.config import TestConfig
from quill.extensions import db
from quill.models import User, Post


@pytest.fixture(scope='session')
def _app(tmp_path_factory):
    class _TestConfig(TestConfig):
        UPLOAD_FOLDER = str(tmp_path_factory.mktemp('uploads'))

    return create_app(_TestConfig)


@pytest.fixture()
def app(_app):
    with _app.app_context():
        db.session.remove()
        db.drop_all()
        db.create_all()

    folder = _app.config['UPLOAD_FOLDER']
    for name in os.listdir(folder):
        os.remove(os.path.join(folder, name))

    return _app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _make_user(username='alice', email='a@x.com', password='pw123'):
        with app.app_context():
            user = User(username=username, email=email, password_hash=generate_password_hash(password))
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make_user


@pytest.fixture()
def make_post(app):
    def _make_post(user_id, title='Hi', content='World', image=None):
        with app.app_context():
            post = Post(title=title, content=content, image=image, user_id=user_id)
            db.session.add(post)
            db.session.commit()
            return post.id
    return _make_post


@pytest.fixture()
def get_post(app):
    def _get_post(post_id):
        with app.app_context():
            post = db.session.get(Post, post_id)
            if post is not None:
                db.session.expunge(post)
            return post
    return _get_post


@pytest.fixture()
def login():
    def _login(client, email='a@x.com', password='pw123'):
        return client.post('/login', data={'email': email, 'password': password})
    return _login


@pytest.fixture()
def rollbacks(monkeypatch):
    """Records every Session.rollback call made during the test."""
    calls = []
    original = Session.rollback

    def _rollback(self):
        calls.append(self)
        return original(self)

    monkeypatch.setattr(Session, 'rollback', _rollback)
    return calls
