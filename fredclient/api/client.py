"""
API Client module providing centralized access to the FRED API endpoints.
Orchestrates sub-API modules for categories, releases, series, sources and tags.
"""
import logging

from fredclient.api.categories import CategoriesAPI
from fredclient.api.handle_requests import RequestHandler
from fredclient.api.releases import ReleasesAPI
from fredclient.api.series import SeriesAPI
from fredclient.api.sources import SourcesAPI
from fredclient.api.tags import TagsAPI
from fredclient.config import FredSettings, validate_api_key

logger = logging.getLogger(__name__)


class FredClient:
    """Root client that centralizes sub-APIs and holds the API key and shared HTTP session.

    The key is taken from ``api_key`` or, when omitted, from ``FRED_API_KEY``
    (a .env file is honoured). A missing or malformed key raises
    ConfigurationError here, before any request is made.
    """

    def __init__(self, api_key: str | None = None, settings: FredSettings | None = None):
        self.settings = settings or FredSettings.from_env()
        self.api_key = validate_api_key(api_key if api_key is not None else self.settings.api_key)
        self.http = RequestHandler(
            self.settings.api_url,
            timeout=self.settings.timeout,
            requests_per_minute=self.settings.requests_per_minute,
            max_retries=self.settings.max_retries,
        )
        self.categories = CategoriesAPI(self)
        self.releases = ReleasesAPI(self)
        self.series = SeriesAPI(self)
        self.sources = SourcesAPI(self)
        self.tags = TagsAPI(self)
        logger.debug(f"FRED client ready for {self.settings.api_url}")

    def with_key(self, api_key: str) -> "FredClient":
        """Swap the API key used for subsequent requests."""
        self.api_key = validate_api_key(api_key)
        return self

    def close(self):
        self.http.close()

    def __enter__(self) -> "FredClient":
        return self

    def __exit__(self, *exc_info):
        self.close()
