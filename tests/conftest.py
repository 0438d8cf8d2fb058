"""
Test configuration and fixtures
"""
import os
import sys

import pytest

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from services.user_service import UserService
from tests.utils.seed import FakeUserRepository
from ui.overlay import reset_overlay_host


@pytest.fixture(autouse=True)
def overlay_host():
    """Fresh global overlay host for every test"""
    host = reset_overlay_host()
    yield host
    reset_overlay_host()


@pytest.fixture
def user_repository():
    """Twelve users, six per page (two pages)"""
    return FakeUserRepository(count=12, per_page=6)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def app(user_service):
    """Create application for testing"""
    app = create_app(
        {
            "TESTING": True,
            "WTF_CSRF_ENABLED": False,
        },
        user_service=user_service,
    )
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()
