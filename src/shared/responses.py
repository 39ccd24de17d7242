"""Render translated responses as HTTP responses.

Messages go out as plain text; echoed reviews and ratings as JSON.
"""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from shared.translation import TranslatedResponse


def to_response(translated: TranslatedResponse) -> Response:
    if isinstance(translated.body, str):
        return PlainTextResponse(status_code=translated.status_code, content=translated.body)
    return JSONResponse(
        status_code=translated.status_code,
        content=jsonable_encoder(translated.body, exclude_none=True),
    )
