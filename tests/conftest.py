import pytest

from app import create_app
from app.config import TestConfig
from app.extensions import db

CLEAN_CODE = "978-0-13-235088-4"
EFFECTIVE_JAVA = "978-0-13-468599-1"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def book_data():
    return {
        "title": "Clean Code",
        "author": "Robert Martin",
        "isbn": CLEAN_CODE,
        "total_copies": 3,
    }
