"""
Endpoint module: shared request path for the sub-APIs.
Turns required arguments and an optional builder into query params, then fetches and decodes.
"""
from typing import TYPE_CHECKING

from fredclient.builders.base import QueryBuilder
from fredclient.errors import InvalidParameterError

if TYPE_CHECKING:
    from fredclient.api.client import FredClient


class EndpointGroup:
    """Base for the sub-APIs hanging off FredClient."""

    def __init__(self, client: "FredClient"):
        self.client = client

    def _get(
        self,
        path: str,
        model,
        required: dict | None = None,
        builder: QueryBuilder | None = None,
        builder_cls: type[QueryBuilder] | None = None,
    ):
        """
        builder_cls: when set, the endpoint cannot be called without a builder of that class
        """
        params = {}
        for key, value in (required or {}).items():
            if value is None or str(value).strip() == "":
                raise InvalidParameterError(f"{key} is required for {path}")
            params[key] = str(value)
        if builder_cls is not None and not isinstance(builder, builder_cls):
            raise InvalidParameterError(
                f"{path} requires a {builder_cls.__name__}, got {type(builder).__name__}"
            )
        if builder is not None:
            # raises before any request if the builder is incomplete
            params.update(builder.build())
        payload = self.client.http.get_json(path, self.client.api_key, params=params)
        return self.client.http.decode(model, payload, path)
