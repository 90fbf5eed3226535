"""
Sources API module: data sources and the releases they publish.
"""
from fredclient.api.endpoint import EndpointGroup
from fredclient.builders.source import SourceBuilder, SourceReleasesBuilder, SourcesBuilder
from fredclient.data.models.release import ReleasesResponse
from fredclient.data.models.source import SourcesResponse


class SourcesAPI(EndpointGroup):
    """Source endpoints."""

    def list(self, builder: SourcesBuilder | None = None) -> SourcesResponse:
        """Fetch all sources (GET /sources)."""
        return self._get("sources", SourcesResponse, builder=builder)

    def get(self, source_id: int, builder: SourceBuilder | None = None) -> SourcesResponse:
        """Fetch a source (GET /source)."""
        return self._get("source", SourcesResponse, {"source_id": source_id}, builder)

    def releases(self, source_id: int, builder: SourceReleasesBuilder | None = None) -> ReleasesResponse:
        """Fetch the releases of a source (GET /source/releases)."""
        return self._get("source/releases", ReleasesResponse, {"source_id": source_id}, builder)
