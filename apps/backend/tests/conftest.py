import pytest
from fastapi.testclient import TestClient

from src.main import create_app
from src.services import startup_service


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture(autouse=True)
def _rearm_announcer():
    startup_service.reset_announcer()
    yield
    startup_service.reset_announcer()
