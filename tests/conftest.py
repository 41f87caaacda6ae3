"""Shared test fixtures.

Provides a ``test_client`` for FastAPI with the scheduler patched out, a
mock weather API client factory, and an autouse fixture that clears the
session registry and weather cache between tests.
"""

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient


def _weather_payload(temperature: float, code: int) -> dict[str, Any]:
    """Return a realistic Open-Meteo ``current_weather`` body."""
    return {
        "latitude": 37.52,
        "longitude": 127.05,
        "current_weather": {
            "temperature": temperature,
            "windspeed": 7.2,
            "winddirection": 250,
            "weathercode": code,
            "is_day": 1,
            "time": "2026-07-15T12:00",
        },
    }


def _mock_async_client(
    temperature: float = 28.0,
    code: int = 0,
    *,
    payload: dict[str, Any] | None = None,
    error: Exception | None = None,
) -> MagicMock:
    """Build an ``httpx.AsyncClient`` stand-in usable as an async context manager."""
    mock_response = MagicMock()
    mock_response.status_code = 200
    mock_response.raise_for_status = MagicMock()
    mock_response.json.return_value = (
        payload if payload is not None else _weather_payload(temperature, code)
    )

    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    if error is not None:
        mock_client.get = AsyncMock(side_effect=error)
    else:
        mock_client.get = AsyncMock(return_value=mock_response)
    return mock_client


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Start and end every test with no sessions and no cached weather."""
    from lunchmate.services.session import close_all_sessions
    from lunchmate.services.weather import clear_cached_weather

    close_all_sessions()
    clear_cached_weather()
    yield
    close_all_sessions()
    clear_cached_weather()


@pytest.fixture()
def make_weather_client() -> Callable[..., MagicMock]:
    """Factory for mock weather API clients.

    Call with ``(temperature, code)`` for a normal reading, ``payload=`` for a
    raw body, or ``error=`` to make ``get`` raise.
    """
    return _mock_async_client


@pytest.fixture()
def mock_weather_api() -> Generator[MagicMock, None, None]:
    """Patch ``httpx.AsyncClient`` to answer with a clear 28°C reading."""
    mock_client = _mock_async_client(28.0, 0)
    with patch("httpx.AsyncClient", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def test_client(mock_weather_api: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient with the scheduler patched out."""
    from lunchmate.main import app

    with patch("lunchmate.main.start_scheduler"), patch(
        "lunchmate.main.shutdown_scheduler"
    ), patch("lunchmate.routers.health.is_scheduler_running", return_value=True):
        with TestClient(app) as client:
            yield client
