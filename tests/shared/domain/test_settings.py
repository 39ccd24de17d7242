"""Tests for environment-driven gateway settings."""

import pytest
from pydantic import ValidationError
from shared.config import GatewaySettings, get_settings


class TestGatewaySettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("REVIEW_GATEWAY_DOWNSTREAM_ADAPTER", raising=False)
        monkeypatch.delenv("REVIEW_GATEWAY_ENVIRONMENT", raising=False)
        settings = GatewaySettings(_env_file=None)
        assert settings.downstream_adapter == "http"
        assert settings.caller_identity_header == "X-User-Id"
        assert settings.product_service_url == "http://localhost:8080/api/products"
        assert settings.company_service_url == "http://localhost:8080/api/company"
        assert settings.is_production is False

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("REVIEW_GATEWAY_AUTH_SERVICE_URL", "http://auth.internal:9000")
        monkeypatch.setenv("REVIEW_GATEWAY_HTTP_TIMEOUT_SECONDS", "3")
        settings = GatewaySettings(_env_file=None)
        assert settings.auth_service_url == "http://auth.internal:9000"
        assert settings.http_timeout_seconds == 3.0

    def test_rejects_unknown_adapter(self, monkeypatch):
        monkeypatch.setenv("REVIEW_GATEWAY_DOWNSTREAM_ADAPTER", "carrier-pigeon")
        with pytest.raises(ValidationError):
            GatewaySettings(_env_file=None)

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            GatewaySettings(_env_file=None, http_timeout_seconds=0)

    def test_production_flag(self):
        assert GatewaySettings(_env_file=None, environment="Production").is_production is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
