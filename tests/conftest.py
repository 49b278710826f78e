from __future__ import annotations

from datetime import date

import pytest

from plant_management.extensions import db
from plant_management.main import create_app


@pytest.fixture
def app():
    app = create_app("config.testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def container(app):
    return app.extensions["plant_management"]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def work_date() -> date:
    return date(2026, 3, 2)
