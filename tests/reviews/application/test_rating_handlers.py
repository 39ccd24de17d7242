"""Application tests for the product and company rating handlers."""

import pytest
from reviews.company.fake_adapter import FakeCompanyRatingService
from reviews.model import ReviewSubmission
from reviews.product.fake_adapter import FakeProductReviewService
from reviews.rating import GetCompanyRating, GetProductRating
from reviews.submission import MISSING_CALLER_IDENTITY
from shared.translation import UNKNOWN_CALLER, TranslatedResponse


class TestGetProductRating:
    def test_average_of_stored_reviews(self):
        service = FakeProductReviewService()
        service.submit_review("123", ReviewSubmission(rating=4), "U1")
        service.submit_review("123", ReviewSubmission(rating=5), "U2")
        assert GetProductRating(service, "123", "U1").handle() == TranslatedResponse(200, 4.5)

    def test_no_reviews_is_not_found(self):
        response = GetProductRating(FakeProductReviewService(), "123", "U1").handle()
        assert response == TranslatedResponse(404, "No reviews found for productId: 123")

    def test_unknown_caller(self):
        service = FakeProductReviewService()
        service.configure(known_callers={"U2"})
        assert GetProductRating(service, "123", "U1").handle() == TranslatedResponse(401, UNKNOWN_CALLER)

    @pytest.mark.parametrize("caller", [None, " "])
    def test_missing_caller_never_reaches_service(self, caller):
        service = FakeProductReviewService()
        assert GetProductRating(service, "123", caller).handle() == TranslatedResponse(400, MISSING_CALLER_IDENTITY)
        assert service.calls == []


class TestGetCompanyRating:
    def test_preset_rating(self):
        service = FakeCompanyRatingService()
        service.set_rating("456", 4.2)
        assert GetCompanyRating(service, "456", "U1").handle() == TranslatedResponse(200, 4.2)

    def test_no_reviews_is_not_found(self):
        response = GetCompanyRating(FakeCompanyRatingService(), "456", "U1").handle()
        assert response == TranslatedResponse(404, "No reviews found for companyId: 456")

    def test_server_error(self):
        service = FakeCompanyRatingService()
        service.configure(forced_status=502, message="Bad Gateway")
        response = GetCompanyRating(service, "456", "U1").handle()
        assert response == TranslatedResponse(500, "Failed to fetch company rating: Bad Gateway")

    def test_missing_caller_never_reaches_service(self):
        service = FakeCompanyRatingService()
        assert GetCompanyRating(service, "456", None).handle() == TranslatedResponse(400, MISSING_CALLER_IDENTITY)
        assert service.calls == []
