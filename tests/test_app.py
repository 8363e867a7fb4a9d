from __future__ import annotations

import pytest
from PIL import Image

from quotegen.generation.media import resolve_mime_type, sniff_mime_type
from quotegen.generation.prompt import build_prompt
from quotegen.generation.schema import resolve_platform


def test_index_serves_upload_ui(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    for marker in ('id="file"', 'id="submit" disabled', 'id="remove"', 'id="copy-all"', 'fetch("/api/caption"'):
        assert marker in html
    for platform in ("general", "instagram", "facebook", "linkedin"):
        assert f'data-platform="{platform}"' in html
    assert 'join("\\n\\n")' in html


def test_healthz_reports_key_presence_without_leaking_it(client, api_key):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["env_keys_present"]["GEMINI_API_KEY"] is True
    assert api_key not in resp.text


def test_malformed_form_uses_error_contract(client):
    resp = client.post("/api/caption", data={"image": "not-a-file"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_unparseable_multipart_uses_error_contract(client):
    resp = client.post("/api/caption", content=b"junk", headers={"content-type": "multipart/form-data"})
    assert resp.status_code == 400
    body = resp.json()
    assert "detail" not in body
    assert "boundary" in body["error"].lower()


def test_unknown_route_uses_error_contract(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


@pytest.mark.parametrize(
    "raw, expected",
    [(None, "general"), ("", "general"), ("  ", "general"), ("Instagram", "instagram"), ("tiktok", "tiktok")],
)
def test_resolve_platform(raw, expected):
    assert resolve_platform(raw) == expected


def test_prompt_mentions_platform_and_json_array():
    prompt = build_prompt("facebook")
    assert "tailored for a facebook post" in prompt
    assert "5 short" in prompt
    assert "JSON array of strings" in prompt


def test_mime_type_prefers_declared_image_type(png_bytes):
    assert resolve_mime_type(png_bytes, "image/webp") == "image/webp"


def test_mime_type_is_sniffed_when_missing(png_bytes):
    assert sniff_mime_type(png_bytes) == "image/png"
    assert resolve_mime_type(png_bytes, None) == "image/png"


def test_oversized_image_sniff_falls_back_to_filename(png_bytes, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    assert sniff_mime_type(png_bytes) is None
    assert resolve_mime_type(png_bytes, "application/octet-stream", "big.png") == "image/png"


def test_mime_type_falls_back_to_filename_then_declared():
    assert resolve_mime_type(b"garbage", None, "cat.jpg") == "image/jpeg"
    assert resolve_mime_type(b"garbage", "text/plain") == "text/plain"
    assert resolve_mime_type(b"garbage", None) == "application/octet-stream"
