"""
HTTP request handler for the FRED API.
Wraps one rate-limited session and maps every failure onto TransportError
(no usable HTTP response) or ParseError (a response we cannot decode).
"""
import logging

import requests
from pyrate_limiter import Duration, Limiter, MemoryListBucket, RequestRate
from requests.adapters import HTTPAdapter
from requests_ratelimiter import LimiterSession
from urllib3.util.retry import Retry

from fredclient.errors import FredAPIError, ParseError, RateLimitedError, TransportError

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def _redact(params: dict) -> dict:
    return {k: ("***" if k == "api_key" else v) for k, v in params.items()}


class RequestHandler:
    def __init__(self, base_url: str, timeout: float = 30.0, requests_per_minute: int = 120, max_retries: int = 0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.limiter = Limiter(
            RequestRate(requests_per_minute, Duration.MINUTE),
            bucket_class=MemoryListBucket,
        )
        self.session = LimiterSession(limiter=self.limiter, per_host=False)
        # max_retries=0 keeps to exactly one request per call
        self.retry = Retry(
            total=max_retries,
            connect=max_retries, read=max_retries, status=max_retries,
            backoff_factor=1.2,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        self.adapter = HTTPAdapter(max_retries=self.retry)
        self.session.mount("https://", self.adapter)
        self.session.mount("http://", self.adapter)

    def close(self):
        self.session.close()

    def query(self, api_key: str, params: dict | None = None) -> dict:
        """Endpoint parameters followed by api_key and file_type=json."""
        query = dict(params or {})
        query["api_key"] = api_key
        query["file_type"] = "json"
        return query

    def build_url(self, path: str, api_key: str, params: dict | None = None) -> str:
        """Full request URL, query string included, as get_json() would send it."""
        request = requests.Request("GET", f"{self.base_url}/{path}", params=self.query(api_key, params))
        return request.prepare().url

    def get_json(self, path: str, api_key: str, params: dict | None = None) -> dict:
        """
        GET {base_url}/{path} and return the decoded JSON object.
        path: path relative to base_url (no leading slash)
        """
        url = f"{self.base_url}/{path}"
        query = self.query(api_key, params)
        logger.debug(f"GET {path} params={_redact(query)}")
        try:
            resp = self.session.get(url, params=query, timeout=self.timeout)
        except requests.Timeout as exc:
            raise TransportError(f"Request to {path} timed out after {self.timeout}s", path=path) from exc
        except requests.RequestException as exc:
            raise TransportError(f"Request to {path} failed: {exc}", path=path) from exc

        logger.debug(f"GET {path} -> {resp.status_code}")
        if resp.status_code != 200:
            self._raise_for_status(resp, path)

        try:
            payload = resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:200]
            raise ParseError(f"Response from {path} is not valid JSON: {snippet!r}", path=path) from exc
        if not isinstance(payload, dict):
            raise ParseError(f"Expected a JSON object from {path}, got {type(payload).__name__}", path=path)
        if "error_code" in payload:
            # an error document is never a valid result, whatever the status says
            raise self._api_error(payload, resp.status_code, path)
        return payload

    def decode(self, model, payload: dict, path: str):
        """Build ``model`` from ``payload`` via its from_dict, raising ParseError on a shape mismatch."""
        try:
            return model.from_dict(payload)
        except _DECODE_ERRORS as exc:
            raise ParseError(f"Unexpected {model.__name__} shape from {path}: {exc!r}", path=path) from exc

    def _api_error(self, payload: dict, status_code: int, path: str) -> FredAPIError:
        code = payload.get("error_code", status_code)
        message = payload.get("error_message", "")
        logger.warning(f"FRED rejected {path}: ERROR {code}: {message}")
        return FredAPIError(code, message, status_code=status_code, path=path)

    def _raise_for_status(self, resp: requests.Response, path: str):
        if resp.status_code == 429:
            retry_after = None
            raw = resp.headers.get("Retry-After")
            if raw:
                try:
                    retry_after = float(raw)
                except ValueError:
                    retry_after = None
            logger.warning(f"Rate limited by FRED on {path} (retry_after={retry_after})")
            raise RateLimitedError(f"FRED rate limit exceeded requesting {path}", retry_after=retry_after, path=path)

        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "error_code" in body:
            raise self._api_error(body, resp.status_code, path)
        raise TransportError(
            f"FRED returned HTTP {resp.status_code} for {path}",
            status_code=resp.status_code,
            path=path,
        )
