# tests/conftest.py
# Shared pytest fixtures: a fresh Flask app and test client per test

import pytest

from api import create_app


@pytest.fixture
def app():
    """Application built by the real factory, in testing mode."""
    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
