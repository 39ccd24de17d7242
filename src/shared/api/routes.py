"""Runtime configuration of the fake downstream services (non-production only)."""

from fastapi import APIRouter, HTTPException

from identity.auth import get_identity_service
from identity.auth.fake_adapter import FakeIdentityService
from reviews.company import get_company_service
from reviews.company.fake_adapter import FakeCompanyRatingService
from reviews.product import get_product_service
from reviews.product.fake_adapter import FakeProductReviewService
from shared.api.schemas import ConfigureFakeServiceRequest, FakeServiceConfigResponse
from shared.config import get_settings

downstream_router = APIRouter(prefix="/downstream", tags=["downstream"])

_SERVICES = {
    "auth": get_identity_service,
    "product": get_product_service,
    "company": get_company_service,
}

_FAKES = (FakeIdentityService, FakeProductReviewService, FakeCompanyRatingService)


@downstream_router.post("/{service}/configure", response_model=FakeServiceConfigResponse)
def configure_service(service: str, body: ConfigureFakeServiceRequest) -> FakeServiceConfigResponse:
    """Configure a fake downstream service's behavior.

    Lets manual API testing toggle declared errors, unreachability and the
    set of known callers without a real collaborator running.
    """
    if get_settings().is_production:
        raise HTTPException(status_code=403, detail="Downstream configuration not available in production")

    if service not in _SERVICES:
        raise HTTPException(status_code=404, detail=f"Unknown downstream service: {service}")

    adapter = _SERVICES[service]()
    if not isinstance(adapter, _FAKES):
        raise HTTPException(status_code=400, detail="Downstream configuration only available for fake services")

    options = {
        "forced_status": body.forced_status,
        "message": body.message,
        "unreachable": body.unreachable,
    }
    if not isinstance(adapter, FakeIdentityService):
        options["known_callers"] = set(body.known_callers) if body.known_callers is not None else None
    adapter.configure(**options)

    return FakeServiceConfigResponse(
        service=service,
        adapter=type(adapter).__name__,
        forced_status=adapter.forced_status,
        unreachable=adapter.unreachable,
    )
