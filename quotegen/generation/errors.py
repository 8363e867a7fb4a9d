"""
Purpose:
- Error kinds surfaced by the caption endpoint.
- Each carries the HTTP status and the message shown to the user verbatim.
"""

from __future__ import annotations


class CaptionError(Exception):
    status_code: int = 500
    message: str = "Failed to generate caption."

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(CaptionError):
    status_code = 400
    message = "No image file uploaded."


class MissingConfigurationError(CaptionError):
    status_code = 400
    message = "API key is missing. Please provide your own key or configure one on the server."


class InvalidCredentialError(CaptionError):
    status_code = 401
    message = "The provided API key is not valid. Please check your key and try again."


class GenerationFailedError(CaptionError):
    status_code = 500
    message = "Failed to generate caption."


class CaptionParseError(CaptionError):
    status_code = 500
    message = "Failed to parse generated captions."
