"""Shared BDD fixtures and step definitions for reviews and ratings."""

from pytest_bdd import given, parsers, then
from reviews.model import ReviewSubmission
from shared.outcome import Success


@given(parsers.cfparse('the product service only knows caller "{caller}"'))
def product_service_knows(product_service, caller):
    product_service.configure(known_callers={caller})


@given(parsers.cfparse("the product service echoes rating {rating:d}"))
def product_service_echoes(product_service, monkeypatch, rating):
    monkeypatch.setattr(
        product_service,
        "submit_review",
        lambda product_id, review, caller: Success(review.model_copy(update={"rating": rating})),
    )


@given(parsers.cfparse('product "{product_id}" has reviews rated {first:d} and {second:d}'))
def product_has_reviews(product_service, product_id, first, second):
    product_service.submit_review(product_id, ReviewSubmission(rating=first), "seed")
    product_service.submit_review(product_id, ReviewSubmission(rating=second), "seed")
    product_service.calls.clear()


@given(parsers.cfparse('company "{company_id}" has an average rating of {rating:f}'))
def company_has_rating(company_service, company_id, rating):
    company_service.set_rating(company_id, rating)


@given("the company service is unreachable")
def company_service_unreachable(company_service):
    company_service.configure(unreachable=True)


@then(parsers.cfparse("the gateway responds with status {status:d}"))
def gateway_status(response, status):
    assert response.status_code == status


@then(parsers.cfparse('the response body is "{body}"'))
def response_body(response, body):
    assert response.text == body


@then(parsers.cfparse('the echoed review has rating {rating:d} and comment "{comment}"'))
def echoed_review(response, rating, comment):
    body = response.json()
    assert body["rating"] == rating
    assert body["comment"] == comment


@then("the product service was not called")
def product_service_not_called(product_service):
    assert product_service.calls == []
