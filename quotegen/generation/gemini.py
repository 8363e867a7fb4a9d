"""
Purpose:
- Call the Gemini generateContent REST API with one prompt + one inline image.
- Return the model's raw text; classify failures into a small ErrorKind enum.

Notes:
- Requires an API key (passed in by the caller; see service.resolve_api_key).
- The key travels in the x-goog-api-key header so it never lands in URLs or logs.
- One short-lived httpx client per call; no retries.
"""

from __future__ import annotations
import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional
import httpx

GENERATE_PATH = "/models/{model}:generateContent"
INVALID_KEY_MARKER = "API key not valid"

class ErrorKind(str, Enum):
    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    BLOCKED = "blocked"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"

class GenerationError(Exception):
    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

@dataclass
class InlineImage:
    data: bytes
    mime_type: str

    def to_part(self) -> Dict[str, Any]:
        return {
            "inline_data": {
                "mime_type": self.mime_type,
                "data": base64.b64encode(self.data).decode("ascii"),
            }
        }

def build_request_body(prompt: str, image: InlineImage) -> Dict[str, Any]:
    return {"contents": [{"role": "user", "parts": [{"text": prompt}, image.to_part()]}]}

def classify_error(status_code: int, payload: Any) -> ErrorKind:
    """
    Map a non-2xx Gemini reply to an ErrorKind.
    An invalid key shows up as 400 INVALID_ARGUMENT with reason API_KEY_INVALID.
    """
    err = payload.get("error") if isinstance(payload, dict) else None
    err = err if isinstance(err, dict) else {}
    message = str(err.get("message") or "")
    reasons = {d.get("reason") for d in (err.get("details") or []) if isinstance(d, dict)}

    if status_code == 401 or "API_KEY_INVALID" in reasons or INVALID_KEY_MARKER in message:
        return ErrorKind.INVALID_CREDENTIAL
    if status_code == 429:
        return ErrorKind.RATE_LIMITED
    return ErrorKind.UPSTREAM

def _error_message(resp: httpx.Response, payload: Any) -> str:
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        msg = payload["error"].get("message")
        if msg:
            return str(msg)
    return f"HTTP {resp.status_code}: {resp.text[:200]}"

def extract_text(payload: Dict[str, Any]) -> str:
    """
    Concatenate the text parts of the first candidate.
    A prompt-level block with no candidates is raised as BLOCKED.
    """
    candidates = payload.get("candidates") or []
    if not candidates:
        block = (payload.get("promptFeedback") or {}).get("blockReason")
        if block:
            raise GenerationError(ErrorKind.BLOCKED, f"prompt blocked: {block}")
        return ""
    parts = ((candidates[0] or {}).get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

def generate_text(
    prompt: str,
    image: InlineImage,
    api_key: str,
    model: str,
    api_base: str,
    timeout: float = 60.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    url = api_base.rstrip("/") + GENERATE_PATH.format(model=model)
    body = build_request_body(prompt, image)

    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            resp = client.post(url, json=body, headers={"x-goog-api-key": api_key})
    except httpx.HTTPError as e:
        raise GenerationError(ErrorKind.TRANSPORT, f"request failed: {e!r}") from e

    try:
        payload = resp.json()
    except ValueError:
        payload = None

    if resp.is_error:
        raise GenerationError(
            classify_error(resp.status_code, payload),
            _error_message(resp, payload),
            status_code=resp.status_code,
        )
    if not isinstance(payload, dict):
        raise GenerationError(ErrorKind.UPSTREAM, "response body is not a JSON object", status_code=resp.status_code)

    return extract_text(payload)
