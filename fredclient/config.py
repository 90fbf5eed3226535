"""
Settings for the FRED client, read from the environment (and .env files).
"""
import logging
import os
import re
from dataclasses import dataclass

from dotenv import load_dotenv

from fredclient.errors import ConfigurationError

logger = logging.getLogger(__name__)

FRED_BASE_URL = "https://api.stlouisfed.org/fred"
FRED_API_KEY_ENV = "FRED_API_KEY"

# FRED issues 32 character lower-case alphanumeric keys.
_API_KEY_RE = re.compile(r"[a-z0-9]{32}")


def validate_api_key(api_key: str | None) -> str:
    """Return the stripped key or raise ConfigurationError."""
    if api_key is None or not api_key.strip():
        raise ConfigurationError(
            f"No FRED API key configured. Pass api_key explicitly or set {FRED_API_KEY_ENV} in your environment or .env file."
        )
    api_key = api_key.strip()
    if not _API_KEY_RE.fullmatch(api_key):
        raise ConfigurationError("FRED API key must be a 32 character lower-case alphanumeric string.")
    return api_key


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


@dataclass
class FredSettings:
    api_key: str | None = None
    api_url: str = FRED_BASE_URL
    timeout: float = 30.0
    requests_per_minute: int = 120
    max_retries: int = 0

    def __post_init__(self):
        self.api_url = self.api_url.rstrip("/")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.requests_per_minute < 1:
            raise ConfigurationError("requests_per_minute must be at least 1")
        if self.max_retries < 0:
            raise ConfigurationError("max_retries cannot be negative")

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "FredSettings":
        """Build settings from FRED_* environment variables, loading .env first."""
        if dotenv:
            load_dotenv()
        settings = cls(
            api_key=os.getenv(FRED_API_KEY_ENV),
            api_url=os.getenv("FRED_API_URL") or FRED_BASE_URL,
            timeout=_env_number("FRED_TIMEOUT", 30.0, float),
            requests_per_minute=_env_number("FRED_REQUESTS_PER_MINUTE", 120, int),
            max_retries=_env_number("FRED_MAX_RETRIES", 0, int),
        )
        logger.debug(
            f"Loaded FRED settings: url={settings.api_url} timeout={settings.timeout} "
            f"rpm={settings.requests_per_minute} retries={settings.max_retries} has_key={bool(settings.api_key)}"
        )
        return settings
