"""
Purpose:
- Decide which MIME type to declare for an uploaded image.
- Browsers usually send one; when they don't, sniff the bytes with Pillow.
"""

from __future__ import annotations
import mimetypes
from io import BytesIO
from typing import Optional
from PIL import Image

FALLBACK_MIME = "application/octet-stream"

def sniff_mime_type(raw: bytes) -> Optional[str]:
    try:
        with Image.open(BytesIO(raw)) as img:
            return Image.MIME.get(img.format or "")
    except (OSError, Image.DecompressionBombError):
        # OSError includes UnidentifiedImageError
        return None

def resolve_mime_type(raw: bytes, declared: Optional[str], filename: Optional[str] = None) -> str:
    if declared and declared.startswith("image/"):
        return declared
    guessed = sniff_mime_type(raw) or mimetypes.guess_type(filename or "")[0]
    return guessed or declared or FALLBACK_MIME
