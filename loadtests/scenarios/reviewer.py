"""Reviewer load test scenarios.

ReviewerJourney is a SequentialTaskSet: register a user id, submit reviews,
then read back product and company averages with that identity.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import company_id, product_id, review_data, unique_user_id
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ReviewerState


class ReviewerJourney(SequentialTaskSet):
    """Register -> Review x2 -> Product average -> Company average."""

    def on_start(self):
        self.state = ReviewerState()

    @property
    def headers(self) -> dict:
        return {"X-User-Id": self.state.user_id}

    @task
    def register(self):
        user_id = unique_user_id()
        with self.client.post(
            "/auth/users",
            json={"userId": user_id},
            catch_response=True,
            name="POST /auth/users",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = user_id
            else:
                resp.failure(f"Registration failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    def _submit_review(self):
        product = product_id()
        with self.client.post(
            f"/review/product/{product}",
            json=review_data(self.state.user_id),
            headers=self.headers,
            catch_response=True,
            name="POST /review/product/{id}",
        ) as resp:
            if resp.status_code == 201:
                self.state.reviewed_products.append(product)
            else:
                resp.failure(f"Review failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def first_review(self):
        self._submit_review()

    @task
    def second_review(self):
        self._submit_review()

    @task
    def product_average(self):
        product = self.state.reviewed_products[-1] if self.state.reviewed_products else product_id()
        with self.client.get(
            f"/review/product/{product}/average-rating",
            headers=self.headers,
            catch_response=True,
            name="GET /review/product/{id}/average-rating",
        ) as resp:
            if resp.status_code not in (200, 404):
                resp.failure(f"Product average failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def company_average(self):
        with self.client.get(
            f"/review/company/{company_id()}/average-rating",
            headers=self.headers,
            catch_response=True,
            name="GET /review/company/{id}/average-rating",
        ) as resp:
            if resp.status_code not in (200, 404):
                resp.failure(f"Company average failed: {resp.status_code} - {extract_error_detail(resp)}")
        self.interrupt(reschedule=False)


class ReviewerUser(HttpUser):
    wait_time = between(0.5, 2.0)
    tasks = [ReviewerJourney]
