"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from sentinel.config import Settings


class TestRiskPolicySettings:
    """Tests for risk policy configuration."""

    def test_defaults_match_canonical_policy(self):
        settings = Settings()

        assert settings.risk_amount_threshold == 1000
        assert settings.risk_high_risk_locations == ["North Korea", "Syria", "Iran"]
        assert settings.risk_velocity_probability == 0.1
        assert settings.risk_medium_threshold == 40
        assert settings.risk_high_threshold == 80

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RISK_HIGH_THRESHOLD", "90")
        monkeypatch.setenv("RISK_HIGH_RISK_LOCATIONS", '["Atlantis"]')

        settings = Settings()

        assert settings.risk_high_threshold == 90
        assert settings.risk_high_risk_locations == ["Atlantis"]

    @pytest.mark.parametrize("medium,high", [(80, 40), (40, 40), (0, 50), (40, 101)])
    def test_rejects_misordered_bands(self, medium, high):
        with pytest.raises(ValidationError):
            Settings(risk_medium_threshold=medium, risk_high_threshold=high)

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_rejects_bad_probability(self, probability):
        with pytest.raises(ValidationError):
            Settings(risk_velocity_probability=probability)


class TestApplicationSettings:
    """Tests for environment-level settings."""

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_debug_forbidden_in_production(self):
        with pytest.raises(ValidationError):
            Settings(environment="production", debug=True, cors_origins=["https://example.com"])

    def test_is_production(self):
        settings = Settings(environment="production", cors_origins=["https://example.com"])

        assert settings.is_production

    def test_localhost_cors_warns_in_production(self):
        with pytest.warns(UserWarning):
            Settings(environment="production")
