"""
Purpose:
- Pydantic models for the caption endpoint so the API is self-documenting and stable.
- Platform names the prompt knows how to address.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

class Platform(str, Enum):
    general = "general"
    instagram = "instagram"
    facebook = "facebook"
    linkedin = "linkedin"

def resolve_platform(raw: Optional[str]) -> str:
    """
    Blank -> "general"; known names are normalized; anything else is echoed as-is.
    """
    text = (raw or "").strip()
    if not text:
        return Platform.general.value
    try:
        return Platform(text.lower()).value
    except ValueError:
        return text

class CaptionResponse(BaseModel):
    captions: List[str] = Field(default_factory=list, description="Generated captions in model order")

class ErrorResponse(BaseModel):
    error: str
