"""
Purpose:
- The "service" orchestrates validate -> credential -> model call -> parse.
- Translates client-level GenerationError into endpoint-level CaptionError subclasses.
"""

from __future__ import annotations
import logging
import os
from typing import List, Optional

from ..core.settings import settings
from .errors import (
    GenerationFailedError,
    InvalidCredentialError,
    InvalidInputError,
    MissingConfigurationError,
)
from .gemini import ErrorKind, GenerationError, InlineImage, generate_text
from .parser import parse_captions
from .prompt import build_prompt

log = logging.getLogger(__name__)

def resolve_api_key() -> Optional[str]:
    # read per request so a key added to the environment is picked up without a restart
    for key in (settings.gemini_api_key, os.getenv("GEMINI_API_KEY")):
        if key and key.strip():
            return key.strip()
    return None

def generate_captions(image_bytes: bytes, mime_type: str, platform: str) -> List[str]:
    if not image_bytes:
        raise InvalidInputError()

    api_key = resolve_api_key()
    if not api_key:
        raise MissingConfigurationError()

    try:
        text = generate_text(
            build_prompt(platform),
            InlineImage(data=image_bytes, mime_type=mime_type),
            api_key=api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            timeout=settings.gemini_timeout_s,
        )
    except GenerationError as e:
        log.error("Caption generation failed: kind=%s status=%s message=%s", e.kind.value, e.status_code, e.message)
        if e.kind is ErrorKind.INVALID_CREDENTIAL:
            raise InvalidCredentialError() from e
        raise GenerationFailedError() from e

    return parse_captions(text)
