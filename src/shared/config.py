"""Gateway settings read from the environment (prefix ``REVIEW_GATEWAY_``)."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REVIEW_GATEWAY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    environment: str = Field(default="development", description="Deployment environment name.")

    auth_service_url: str = Field(
        default="http://localhost:8081/auth",
        min_length=8,
        description="Base URL of the authentication service.",
    )
    product_service_url: str = Field(
        default="http://localhost:8080/api/products",
        min_length=8,
        description="Base URL of the product/review service.",
    )
    company_service_url: str = Field(
        default="http://localhost:8080/api/company",
        min_length=8,
        description="Base URL of the company service.",
    )

    http_timeout_seconds: float = Field(default=10.0, gt=0, description="Per-request timeout (seconds).")
    caller_identity_header: str = Field(
        default="X-User-Id",
        min_length=1,
        description="Header carrying the caller identity, read from callers and sent downstream.",
    )

    downstream_adapter: Literal["http", "fake"] = Field(
        default="http",
        description="Which adapter family backs the downstream ports.",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> GatewaySettings:
    return GatewaySettings()
