"""Tests for API health endpoint behavior.

These tests validate the health payload contract and that concurrent requests
receive independent, complete responses.
"""

import asyncio
from datetime import datetime, timezone

import httpx
from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings
from app.domain import MemoryUsage
from app.system import HostSystemIntrospectionService


class _FixedIntrospectionService:
    """Test double that reports deterministic host metadata."""

    def system_hostname(self) -> str:
        return "test-host"

    def system_platform(self) -> str:
        return "linux"

    def system_runtime_version(self) -> str:
        return "3.12.4"

    def system_memory(self) -> MemoryUsage:
        return MemoryUsage(total_bytes=8 * 1024 * 1024 * 1024, free_bytes=2 * 1024 * 1024 * 1024)

    def system_uptime_seconds(self) -> float:
        return 42.5

    def system_now(self) -> datetime:
        return datetime(2026, 10, 19, 12, 30, 15, 123456, tzinfo=timezone.utc)


def _build_settings() -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    return AppSettings(environment="test")


def test_api_health_returns_healthy_payload() -> None:
    """Return HTTP 200 and the documented health fields.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    application = create_api_application(_build_settings(), _FixedIntrospectionService())
    client = TestClient(application)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "status": "healthy",
        "hostname": "test-host",
        "timestamp": "2026-10-19T12:30:15.123Z",
        "uptime": 42.5,
    }


def test_api_health_reports_live_host_values() -> None:
    """Report a non-negative numeric uptime and string fields from the real host service.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when payload types are wrong.
    """

    application = create_api_application(_build_settings(), HostSystemIntrospectionService())
    client = TestClient(application)

    payload = client.get("/health").json()

    assert payload["status"] == "healthy"
    assert isinstance(payload["hostname"], str)
    assert isinstance(payload["timestamp"], str)
    assert payload["timestamp"].endswith("Z")
    assert isinstance(payload["uptime"], float)
    assert payload["uptime"] >= 0


def test_api_health_concurrent_requests_receive_independent_responses() -> None:
    """Serve many simultaneous health requests with complete payloads each.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when any response is incomplete or failed.
    """

    application = create_api_application(_build_settings(), HostSystemIntrospectionService())

    async def _issue_requests() -> list[httpx.Response]:
        transport = httpx.ASGITransport(app=application)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            return await asyncio.gather(*(client.get("/health") for _ in range(25)))

    responses = asyncio.run(_issue_requests())

    assert len(responses) == 25
    for response in responses:
        assert response.status_code == 200
        payload = response.json()
        assert set(payload) == {"status", "hostname", "timestamp", "uptime"}
        assert payload["status"] == "healthy"
        assert payload["uptime"] >= 0
