# Common language: Environment/ops probe that surfaces version pins and config status.
# Use this before/after upgrades to confirm no silent drift.

from fastapi import APIRouter
from ..core.settings import settings
from ..generation.service import resolve_api_key
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except ImportError:
        return "not-installed"

@router.get("/healthz")
def healthz():
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "httpx": _ver("httpx"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
            "PIL": _ver("PIL"),
        },
        "config": {
            "gemini_model": settings.gemini_model,
            "gemini_timeout_s": settings.gemini_timeout_s,
        },
        "env_keys_present": {
            "GEMINI_API_KEY": bool(resolve_api_key()),
        },
    }
