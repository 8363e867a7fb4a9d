"""
Purpose:
- Serve the single-page upload/preview UI at "/".
"""

from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

INDEX_HTML = Path(__file__).resolve().parent.parent / "static" / "index.html"

router = APIRouter(tags=["ui"])

@router.get("/", response_class=HTMLResponse)
def index():
    """
    Minimal web UI: pick platform, upload image, generate and copy quotes.
    """
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))
