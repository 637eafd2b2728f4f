# tests/test_config.py
"""Settings loading from the environment."""

from decimal import Decimal

from portpass.core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.chdir("/")
        settings = Settings()
        assert settings.bcrypt_rounds == 10
        assert settings.database_url.startswith("sqlite+aiosqlite")
        assert settings.seed.username == "admin"
        assert settings.report_timezone is None

    def test_nested_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORTPASS_SECURITY__BCRYPT_ROUNDS", "12")
        monkeypatch.setenv("PORTPASS_REPORTS__TIMEZONE", "Indian/Maldives")
        monkeypatch.setenv("PORTPASS_PRICING__DAILY", "7.25")

        settings = Settings()

        assert settings.bcrypt_rounds == 12
        assert settings.report_timezone == "Indian/Maldives"
        assert settings.pricing.daily == Decimal("7.25")
