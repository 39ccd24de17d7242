"""Review payloads exchanged with callers and the product service."""

from pydantic import BaseModel, ConfigDict, Field

MIN_RATING = 0.0
MAX_RATING = 5.0


class UserRef(BaseModel):
    """Author of a review. Passed through untouched."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    username: str | None = None


class ReviewSubmission(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "examples": [
                {
                    "comment": "Good product",
                    "rating": 4,
                    "user": {"username": "reviewer-42"},
                }
            ]
        },
    )

    id: str | None = None
    comment: str | None = None
    rating: float | None = Field(default=None, allow_inf_nan=False)
    user: UserRef | None = None

    @property
    def has_valid_rating(self) -> bool:
        return self.rating is None or MIN_RATING <= self.rating <= MAX_RATING
