import pytest

from fredclient.config import FRED_BASE_URL, FredSettings, validate_api_key
from fredclient.errors import ConfigurationError
from fredclient.utils.time import format_update_time, parse_last_updated


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("FRED_API_KEY", "FRED_API_URL", "FRED_TIMEOUT", "FRED_REQUESTS_PER_MINUTE", "FRED_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_from_empty_environment(clean_env):
    settings = FredSettings.from_env(dotenv=False)
    assert settings.api_key is None
    assert settings.api_url == FRED_BASE_URL
    assert settings.timeout == 30.0
    assert settings.requests_per_minute == 120
    assert settings.max_retries == 0


def test_values_from_environment(clean_env):
    clean_env.setenv("FRED_API_KEY", "abcdefghijklmnopqrstuvwxyz012345")
    clean_env.setenv("FRED_API_URL", "https://example.test/fred/")
    clean_env.setenv("FRED_TIMEOUT", "5")
    clean_env.setenv("FRED_MAX_RETRIES", "2")
    settings = FredSettings.from_env(dotenv=False)
    assert settings.api_key == "abcdefghijklmnopqrstuvwxyz012345"
    assert settings.api_url == "https://example.test/fred"
    assert settings.timeout == 5.0
    assert settings.max_retries == 2


def test_non_numeric_environment_value(clean_env):
    clean_env.setenv("FRED_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="FRED_TIMEOUT"):
        FredSettings.from_env(dotenv=False)


@pytest.mark.parametrize("kwargs", [{"timeout": 0}, {"requests_per_minute": 0}, {"max_retries": -1}])
def test_invalid_settings(kwargs):
    with pytest.raises(ConfigurationError):
        FredSettings(**kwargs)


def test_validate_api_key_strips_whitespace():
    assert validate_api_key("  abcdefghijklmnopqrstuvwxyz012345\n") == "abcdefghijklmnopqrstuvwxyz012345"


def test_parse_last_updated_without_offset_is_utc():
    assert parse_last_updated("2013-07-31 09:26:16").utcoffset().total_seconds() == 0


def test_format_update_time_rejects_other_types():
    with pytest.raises(ValueError):
        format_update_time(20180302)
