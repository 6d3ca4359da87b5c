import pytest
from pydantic import ValidationError

from userbase.core.config import Settings


def test_defaults() -> None:
    s = Settings(_env_file=None)
    assert s.api_v1_str == "/api/v1"
    assert s.database_url == "sqlite:///./dev.db"
    assert s.log_level == "INFO"


def test_seed_values_are_not_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEED_ADMIN_EMAIL", "ops@corp.test")
    s = Settings(_env_file=None)
    assert not hasattr(s, "seed_admin_email")
    assert "seed_user_count" not in Settings.model_fields
    assert "env" not in Settings.model_fields


@pytest.mark.parametrize("raw", ["info", " Info ", "INFO"])
def test_log_level_normalised(raw: str) -> None:
    assert Settings(_env_file=None, log_level=raw).log_level == "INFO"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.database_url == "sqlite:///./other.db"
    assert s.log_level == "DEBUG"
