"""
Purpose:
- POST /api/caption: multipart image + platform -> {"captions": [...]}.
- Every failure comes back as {"error": "..."} with the status carried by the error.
"""

import logging
from typing import Optional
from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse
from ..generation.errors import CaptionError, GenerationFailedError, InvalidInputError
from ..generation.media import resolve_mime_type
from ..generation.schema import CaptionResponse, ErrorResponse, resolve_platform
from ..generation.service import generate_captions

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["caption"])

def error_response(err: CaptionError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content=ErrorResponse(error=err.message).model_dump())

@router.post(
    "/caption",
    response_model=CaptionResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def caption(
    image: Optional[UploadFile] = File(default=None),
    platform: Optional[str] = Form(default=None),
):
    """
    Generate captions for one uploaded image, tuned for the chosen platform.
    """
    try:
        if image is None:
            raise InvalidInputError()
        raw = image.file.read()
        mime_type = resolve_mime_type(raw, image.content_type, image.filename)
        captions = generate_captions(raw, mime_type, resolve_platform(platform))
    except CaptionError as e:
        return error_response(e)
    except Exception:
        log.exception("Unexpected error while generating captions")
        return error_response(GenerationFailedError())

    return CaptionResponse(captions=captions)
