"""
Integration Test Fixtures.

Fixtures for integration tests - real database (in-memory SQLite by
default) and the real FastAPI app served through httpx.ASGITransport.
"""

from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from heyo.backend.core.database import get_db_session
from heyo.backend.main import create_app


# =============================================================================
# App and Client Fixtures
# =============================================================================


@pytest.fixture
def app(db_session: AsyncSession) -> Generator[FastAPI, None, None]:
    """
    The application with its database session bound to the test session.

    Every request in a test shares one session that gets rolled back
    afterwards.
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    application = create_app()
    application.dependency_overrides[get_db_session] = override_get_db_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def transport(app: FastAPI) -> ASGITransport:
    return ASGITransport(app=app)


@pytest.fixture
async def client(transport: ASGITransport) -> AsyncGenerator[AsyncClient, None]:
    """
    Test client for the API.

    Usage:
        async def test_list(client: AsyncClient):
            response = await client.get("/api/notes")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_status(response: Any, expected_status: int) -> Any:
        """Assert the status code and return the decoded JSON body (None for empty bodies)."""
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        return response.json() if response.content else None

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """Assert an error body with the given status and optional code."""
        data = ApiAssertions.assert_status(response, expected_status)
        assert isinstance(data.get("error"), str), f"Missing error message: {data}"

        if expected_code:
            assert data.get("code") == expected_code, (
                f"Expected error code {expected_code}, got {data.get('code')}"
            )
        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """Assert a 400 validation error, optionally naming the failing field."""
        data = ApiAssertions.assert_error(response, 400, "VAL_REQUEST_INVALID")
        assert data.get("details"), f"Missing validation details: {data}"

        if field:
            fields = [d.get("field", "") for d in data["details"]]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )
        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
