"""
Tests for ApiSettings.

System role: Verification of CORS origin parsing from the environment
"""

import pytest

from docqa.configs.api import ApiSettings


@pytest.fixture(autouse=True)
def clean_origin_env(monkeypatch):
    monkeypatch.delenv("API_ALLOWED_ORIGINS", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)


class TestAllowedOrigins:
    """Test suite for allowed_origins loading."""

    def test_default_should_be_empty(self) -> None:
        assert ApiSettings().allowed_origins == []

    def test_comma_separated_env_should_split(self, monkeypatch) -> None:
        monkeypatch.setenv("API_ALLOWED_ORIGINS", "https://a.example, https://b.example,")

        settings = ApiSettings()

        assert settings.allowed_origins == ["https://a.example", "https://b.example"]

    def test_json_list_env_should_still_parse(self, monkeypatch) -> None:
        monkeypatch.setenv("API_ALLOWED_ORIGINS", '["https://a.example"]')

        assert ApiSettings().allowed_origins == ["https://a.example"]

    def test_unprefixed_name_should_be_accepted(self, monkeypatch) -> None:
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://app.example")

        assert ApiSettings().allowed_origins == ["https://app.example"]
