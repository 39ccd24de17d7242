"""Pydantic request schemas for the Identity API."""

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        json_schema_extra={"examples": [{"userId": "reviewer-42"}]},
    )

    user_id: str | None = Field(default=None, alias="userId")
