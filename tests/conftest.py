import pytest

from clubsite import create_app
from clubsite.config import TestConfig
from clubsite.extensions import db


@pytest.fixture()
def app(tmp_path):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(Config)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, username='admin', password='admin123'):
    return client.post('/admin/login', data={'username': username, 'password': password})


@pytest.fixture()
def admin_client(client):
    r = login(client)
    assert r.status_code in (301, 302)
    return client
