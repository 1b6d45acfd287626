"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from tone_picker.services.adjust import ToneAdjustmentService
from tone_picker.services.ai import AIService
from tone_picker.services.cache import ResultCache


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> ResultCache:
    return ResultCache(ttl_seconds=300, clock=clock)


@pytest.fixture
def mock_ai() -> AIService:
    """AI service whose model call returns a fixed rewrite."""
    ai = AsyncMock(spec=AIService)
    ai.complete = AsyncMock(return_value='"Hey team, quick update for you."')
    return ai


@pytest.fixture
def service(cache, mock_ai) -> ToneAdjustmentService:
    return ToneAdjustmentService(cache=cache, ai=mock_ai)


@pytest.fixture
def client(service) -> TestClient:
    from main import create_app

    return TestClient(create_app(service))
