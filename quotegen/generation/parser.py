"""
Purpose:
- Turn loosely-structured model text into a clean list of captions.

Design:
- Stage 1: strict JSON (non-empty array of strings).
- Stage 2: line-based heuristic, only when stage 1 fails.
- Neither yields anything -> CaptionParseError.
"""

from __future__ import annotations
import json
import logging
import re
from typing import List, Optional

from .errors import CaptionParseError

log = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?")
# leading bullet, any double quote, any comma
_LINE_NOISE_RE = re.compile(r'^- |"|,')
_BRACKETS_ONLY_RE = re.compile(r"^[\[\]\s]*$")

def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()

def parse_json_captions(text: str) -> Optional[List[str]]:
    """
    Strict decode. Returns None unless the text is a non-empty JSON array of strings.
    """
    try:
        data = json.loads(text)
    except ValueError:
        return None
    if not isinstance(data, list) or not data:
        return None
    if not all(isinstance(item, str) for item in data):
        return None
    return data

def parse_line_captions(text: str) -> List[str]:
    out: List[str] = []
    for line in text.splitlines():
        cleaned = _LINE_NOISE_RE.sub("", line).strip()
        if not cleaned or _BRACKETS_ONLY_RE.match(cleaned):
            continue
        out.append(cleaned)
    return out

def parse_captions(raw: str) -> List[str]:
    text = strip_code_fences(raw)

    captions = parse_json_captions(text)
    if captions is not None:
        return captions

    log.warning("Model response is not a JSON array of strings; using line fallback. text=%r", text)
    captions = parse_line_captions(text)
    if captions:
        return captions

    log.error("Could not extract any captions from model response. text=%r", text)
    raise CaptionParseError()
