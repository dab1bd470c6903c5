"""Pytest configuration and fixtures."""

import os
import pytest

from authforms import create_app

# Use the testing configuration for every app created in the suite
os.environ['FLASK_ENV'] = 'testing'


@pytest.fixture(autouse=True)
def setup_env():
    """Ensure the testing configuration is selected."""
    os.environ['FLASK_ENV'] = 'testing'
    yield
    os.environ['FLASK_ENV'] = 'testing'


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key',
    })
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
