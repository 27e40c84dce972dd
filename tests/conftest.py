import pytest
from fastapi.testclient import TestClient

from desk import ServiceDesk
from server import app, get_desk

FIXED_TIME = "2024-09-01 09:00:00"


@pytest.fixture
def desk():
    """Empty desk with a fixed clock and predictable request ids"""
    counter = iter(range(1, 1000))
    return ServiceDesk(clock=lambda: FIXED_TIME, id_factory=lambda: str(next(counter)))


@pytest.fixture
def seeded_desk(desk):
    desk.seed()
    return desk


@pytest.fixture
def client(desk):
    app.dependency_overrides[get_desk] = lambda: desk
    yield TestClient(app)
    app.dependency_overrides.clear()
