"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names the gateway's request schemas expect
(``userId`` for registration, ``rating``/``comment``/``user`` for reviews).
"""

import random
import uuid

from faker import Faker

fake = Faker()


def unique_user_id() -> str:
    """Generate unique user ids like 'lt-jdoe-a1b2c3d4' (no whitespace)."""
    handle = fake.user_name()[:20].replace(" ", "")
    return f"lt-{handle}-{uuid.uuid4().hex[:8]}"


def product_id() -> str:
    """Pick from a small pool so ratings accumulate per product."""
    return f"prod-lt-{random.randint(1, 50):03d}"


def company_id() -> str:
    return f"comp-lt-{random.randint(1, 20):03d}"


def review_data(user_id: str | None = None) -> dict:
    """Generate a review payload with an in-range rating."""
    payload = {
        "rating": random.randint(0, 5),
        "comment": fake.sentence(nb_words=random.randint(4, 16)),
    }
    if user_id:
        payload["user"] = {"id": user_id, "username": fake.user_name()}
    return payload


def out_of_range_review() -> dict:
    return {"rating": random.choice([-1, 6, 10]), "comment": fake.sentence()}
