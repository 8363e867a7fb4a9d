"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- The Gemini key is optional here; callers check it per request.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")

    # CORS
    cors_allow_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed origins for browser apps"
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    # ---- Gemini (generateContent REST API) ----
    # GEMINI_API_KEY comes from env or .env; absence is reported per request, not at startup.
    gemini_api_key: Optional[str] = None
    gemini_model: str = Field(default="gemini-2.5-flash", description="Multimodal model used for captions")
    gemini_api_base: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_timeout_s: float = Field(default=60.0, description="Upstream request timeout in seconds")

settings = Settings()
