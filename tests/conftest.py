"""Root conftest — shared test configuration and fixtures.

Invariants:
    - MONGOURI always set so importing the app never needs a real environment
    - Every test gets a fresh in-memory collection and repository
    - get_user_repository overridden for route tests; no MongoDB server required

Design Decisions:
    - FakeCollection injected into the real MongoUserRepository: repository
      logic (id parsing, $set building, error translation) runs under test
"""

import os

# Ensure tests never reach a real store
os.environ.setdefault("MONGOURI", "mongodb://localhost:27017/test")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from tests.fakes import FakeCollection  # noqa: E402
from user_service.infrastructure.database import get_user_repository  # noqa: E402
from user_service.infrastructure.user_repository import MongoUserRepository  # noqa: E402
from user_service.main import create_app  # noqa: E402


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def repository(fake_collection):
    return MongoUserRepository(fake_collection)


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app, repository):
    """FastAPI test client with the repository dependency overridden."""
    app.dependency_overrides[get_user_repository] = lambda: repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seed_user(fake_collection):
    """Insert one user directly into the fake collection. Returns its hex id."""
    oid = fake_collection.seed(
        name="Ada Lovelace", location="London", title="Analyst",
    )
    return str(oid)
