"""Rejection-path load scenarios.

Exercises the requests the gateway answers without a downstream call
(missing identity, blank user id) alongside out-of-range ratings, so the
validation and translation paths are measured under load too.
"""

from locust import HttpUser, constant_pacing, task

from loadtests.data_generators import out_of_range_review, product_id, review_data


class RejectionUser(HttpUser):
    """Each task expects a 4xx; anything else is recorded as a failure."""

    wait_time = constant_pacing(0.2)

    @task(3)
    def review_without_identity(self):
        with self.client.post(
            f"/review/product/{product_id()}",
            json=review_data(),
            catch_response=True,
            name="[REJECT] POST /review/product/{id} (no header)",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")

    @task(2)
    def blank_user_id(self):
        with self.client.post(
            "/auth/users",
            json={"userId": "   "},
            catch_response=True,
            name="[REJECT] POST /auth/users (blank)",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")

    @task(1)
    def out_of_range_rating(self):
        with self.client.post(
            f"/review/product/{product_id()}",
            json=out_of_range_review(),
            headers={"X-User-Id": "lt-rejections"},
            catch_response=True,
            name="[REJECT] POST /review/product/{id} (bad rating)",
        ) as resp:
            if resp.status_code in (400, 401):
                resp.success()
            else:
                resp.failure(f"Expected 400/401, got {resp.status_code}")
