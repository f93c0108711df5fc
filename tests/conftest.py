"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio

# Set test environment variables before importing application modules
os.environ["JWT_SECRET"] = "test-signing-secret-that-is-long-enough-for-hs256"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["FRONTEND_URL"] = "http://frontend.test"
os.environ["GITHUB_CLIENT_ID"] = "test-github-client-id"
os.environ["GITHUB_CLIENT_SECRET"] = "test-github-client-secret"
os.environ["GOOGLE_CLIENT_ID"] = "test-google-client-id"
os.environ["GOOGLE_CLIENT_SECRET"] = "test-google-client-secret"
os.environ["DEBUG"] = "false"


@pytest.fixture
def test_settings(tmp_path):
    """Provide test settings backed by a temporary SQLite database."""
    from auth_gateway.config import Settings

    return Settings(
        jwt_secret="test-signing-secret-that-is-long-enough-for-hs256",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'auth_gateway.db'}",
        # Cheap hashing keeps the suite fast
        password_hash_time_cost=1,
        password_hash_memory_cost=8,
        password_hash_parallelism=1,
        frontend_url="http://frontend.test",
        github_client_id="test-github-client-id",
        github_client_secret="test-github-client-secret",
        google_client_id="test-google-client-id",
        google_client_secret="test-google-client-secret",
        google_redirect_uri="http://localhost:3000/auth/google/callback",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """Initialize a database for tests.

    Creates all tables and yields, then disposes the engine.
    """
    from auth_gateway.db import Database

    db = Database(test_settings)
    await db.init()
    yield db
    await db.close()
