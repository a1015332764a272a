import pytest

from awareness_portal import create_app
from awareness_portal.seed import seed_content


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "AI_GATEWAY_API_KEY": None,
    })
    with app.app_context():
        seed_content()
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
