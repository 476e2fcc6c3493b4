"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from quirknotes.config import Settings
from quirknotes.database import Database
from quirknotes.main import create_app
from quirknotes.security import PasswordHasher, TokenIssuer

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_SECRET = "test-secret-key"


@pytest.fixture
def test_settings(tmp_path):
    """Settings for testing: in-memory SQLite, cheap hashing, logs in tmp."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key=TEST_SECRET,
        password_hash_rounds=4,
        log_dir=str(tmp_path / "logs"),
        debug=True,
    )


class FrozenClock:
    """Callable clock that tests can move forward."""

    def __init__(self, now=None):
        self.now = now or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def tokens():
    """Token issuer using the real clock."""
    return TokenIssuer(key_source=lambda: TEST_SECRET)


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
async def database(test_settings):
    """Fresh in-memory database per test."""
    db = Database.from_settings(test_settings)
    db.connect()
    await db.create_tables()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
async def test_session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def client(test_settings):
    """Test client running the app lifespan (DB created and disposed)."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


