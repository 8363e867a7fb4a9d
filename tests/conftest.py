from __future__ import annotations

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from quotegen.core.settings import settings
from quotegen.main import create_app


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def png_bytes() -> bytes:
    buf = BytesIO()
    Image.new("RGB", (8, 8), (200, 40, 120)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    return "test-key"


@pytest.fixture()
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
