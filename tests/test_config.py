"""
Tests for ProviderConfig environment handling.
"""

import pytest

from local_info.config import CLIENT_IDENTIFIER, GEOCODE_BASE_URL, ProviderConfig


class TestProviderConfigFromEnv:
    """Test ProviderConfig.from_env."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in (
            "LOCAL_INFO_GEOCODE_URL",
            "LOCAL_INFO_POINTS_URL",
            "LOCAL_INFO_USER_AGENT",
            "LOCAL_INFO_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        config = ProviderConfig.from_env()
        assert config.geocode_base_url == GEOCODE_BASE_URL
        assert config.headers == {"User-Agent": CLIENT_IDENTIFIER}
        assert config.timeout is None

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("LOCAL_INFO_POINTS_URL", "https://points.test/")
        monkeypatch.setenv("LOCAL_INFO_TIMEOUT", "2.5")
        config = ProviderConfig.from_env()
        assert config.grid_point_base_url == "https://points.test/"
        assert config.timeout == 2.5

    @pytest.mark.parametrize("raw", ["soon", "-1", "0"])
    def test_bad_timeout_falls_back_to_none(self, monkeypatch, caplog, raw):
        monkeypatch.setenv("LOCAL_INFO_TIMEOUT", raw)
        assert ProviderConfig.from_env().timeout is None
        assert "LOCAL_INFO_TIMEOUT" in caplog.text
