"""Pytest configuration for test suite."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.config.settings import settings
from app.main import app
from app.services.generator import generator_service

VALID_REPLY = (
    '{"variants": ['
    '{"hook": "Spring just got cozier", "caption": "Spring just got cozier. 20% off all candles!", '
    '"hashtags": ["candles", "#springsale"]}, '
    '{"hook": "", "caption": "Light up your evenings! Hand-poured in small batches.", "hashtags": []}'
    ']}'
)


@pytest.fixture
def api_key(monkeypatch):
    """Pretend the server has an OpenAI key."""
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
    return "sk-test"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)


@pytest.fixture
def mock_chain(monkeypatch):
    """Replace the completion chain so no request leaves the process."""
    chain = MagicMock()
    chain.complete = AsyncMock(return_value=VALID_REPLY)
    monkeypatch.setattr(generator_service, "chain", chain)
    return chain


@pytest.fixture
def client():
    return TestClient(app)
