"""Review Gateway FastAPI application.

Stateless HTTP front for the authentication, product/review and company
services. Every route validates, forwards to one downstream service and
translates the outcome; nothing is persisted here.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from identity.api import router as identity_router
from identity.auth import get_identity_service
from reviews.api import review_router
from reviews.company import get_company_service
from reviews.product import get_product_service
from shared.api import downstream_router
from shared.config import get_settings
from shared.logging import add_context, clear_context, configure_logging, get_logger
from shared.validation import MALFORMED_BODY

configure_logging()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Review Gateway API",
    description="User registration, product reviews and average ratings",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind request identifiers into the log context for the request's lifetime."""
    request_id = request.headers.get("X-Request-Id") or uuid4().hex
    add_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers["X-Request-Id"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Answer unparseable bodies with a single-line 400 instead of FastAPI's 422."""
    logger.warning("Malformed request", path=request.url.path, errors=len(exc.errors()))
    return PlainTextResponse(status_code=400, content=MALFORMED_BODY)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(identity_router)
app.include_router(review_router)
app.include_router(downstream_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
def health():
    return JSONResponse(
        content={
            "status": "ok",
            "environment": get_settings().environment,
            "downstream": {
                "auth": type(get_identity_service()).__name__,
                "product": type(get_product_service()).__name__,
                "company": type(get_company_service()).__name__,
            },
        }
    )
