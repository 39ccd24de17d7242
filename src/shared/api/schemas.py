"""Pydantic schemas for the downstream configuration API."""

from pydantic import BaseModel, Field


class ConfigureFakeServiceRequest(BaseModel):
    forced_status: int | None = Field(default=None, ge=100, le=599)
    message: str = "Forced failure"
    unreachable: bool = False
    known_callers: list[str] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"forced_status": 409, "message": "User already exists"},
                {"unreachable": True},
                {"known_callers": ["U1", "U2"]},
            ]
        }
    }


class FakeServiceConfigResponse(BaseModel):
    service: str
    adapter: str
    forced_status: int | None = None
    unreachable: bool = False
