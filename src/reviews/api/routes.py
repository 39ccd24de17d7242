"""FastAPI routes for review submission and average ratings.

Each route builds the matching handler with the active downstream service
and renders whatever it translates to. The submission body is read raw so
the caller identity header is checked before the payload is parsed.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from reviews.company import get_company_service
from reviews.model import ReviewSubmission
from reviews.product import get_product_service
from reviews.rating import GetCompanyRating, GetProductRating
from reviews.submission import SubmitReview
from shared.api.dependencies import caller_identity
from shared.responses import to_response

review_router = APIRouter(prefix="/review", tags=["reviews"])


@review_router.post(
    "/product/{product_id}",
    status_code=201,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ReviewSubmission.model_json_schema()}},
        }
    },
)
async def submit_review(
    product_id: str,
    request: Request,
    identity: str | None = Depends(caller_identity),
):
    """Submit a review for a product."""
    handler = SubmitReview(get_product_service(), product_id, await request.body(), identity)
    return to_response(await run_in_threadpool(handler.handle))


@review_router.get("/product/{product_id}/average-rating")
def get_product_average_rating(product_id: str, identity: str | None = Depends(caller_identity)):
    """Average rating of a product."""
    handler = GetProductRating(get_product_service(), product_id, identity)
    return to_response(handler.handle())


@review_router.get("/company/{company_id}/average-rating")
def get_company_average_rating(company_id: str, identity: str | None = Depends(caller_identity)):
    """Average rating of a company."""
    handler = GetCompanyRating(get_company_service(), company_id, identity)
    return to_response(handler.handle())
