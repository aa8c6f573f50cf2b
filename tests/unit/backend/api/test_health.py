"""
Unit Tests for Health Check Endpoints.

Tests the health check functionality including:
- Liveness check (/health)
- Readiness check (/health/ready)
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from heyo.backend.api.health import health_check, readiness_check
from heyo.backend.core.exceptions import DatabaseError


class TestHealthCheck:
    """Tests for the liveness health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_healthy(self):
        result = await health_check()

        assert result["status"] == "healthy"
        assert "timestamp" in result


class TestReadinessCheck:
    """Tests for the readiness check endpoint."""

    @pytest.mark.asyncio
    async def test_ready_when_database_answers(self):
        service = MagicMock()
        service.count_notes = AsyncMock(return_value=3)

        response = await readiness_check(service)

        assert response.status_code == 200
        body = json.loads(response.body)
        assert body["status"] == "healthy"
        assert body["notes"] == 3
        assert body["database"]["latency_ms"] >= 0

    @pytest.mark.asyncio
    async def test_not_ready_when_database_fails(self):
        service = MagicMock()
        service.count_notes = AsyncMock(side_effect=DatabaseError())

        response = await readiness_check(service)

        assert response.status_code == 503
        assert json.loads(response.body)["database"]["status"] == "unhealthy"
