"""
Releases API module: releases of economic data, their dates, series, sources, tags and tables.
"""
from fredclient.api.endpoint import EndpointGroup
from fredclient.builders.release import (
    ReleaseBuilder,
    ReleaseDatesBuilder,
    ReleaseRelatedTagsBuilder,
    ReleaseSeriesBuilder,
    ReleasesBuilder,
    ReleasesDatesBuilder,
    ReleaseSourcesBuilder,
    ReleaseTablesBuilder,
    ReleaseTagsBuilder,
)
from fredclient.data.models.release import ReleaseDatesResponse, ReleasesResponse, ReleaseTablesResponse
from fredclient.data.models.series import SeriesResponse
from fredclient.data.models.source import SourcesResponse
from fredclient.data.models.tag import TagsResponse


class ReleasesAPI(EndpointGroup):
    """Release endpoints."""

    def list(self, builder: ReleasesBuilder | None = None) -> ReleasesResponse:
        """Fetch all releases (GET /releases)."""
        return self._get("releases", ReleasesResponse, builder=builder)

    def all_dates(self, builder: ReleasesDatesBuilder | None = None) -> ReleaseDatesResponse:
        """Fetch release dates across all releases (GET /releases/dates)."""
        return self._get("releases/dates", ReleaseDatesResponse, builder=builder)

    def get(self, release_id: int, builder: ReleaseBuilder | None = None) -> ReleasesResponse:
        """Fetch a release (GET /release)."""
        return self._get("release", ReleasesResponse, {"release_id": release_id}, builder)

    def dates(self, release_id: int, builder: ReleaseDatesBuilder | None = None) -> ReleaseDatesResponse:
        """Fetch the dates of one release (GET /release/dates)."""
        return self._get("release/dates", ReleaseDatesResponse, {"release_id": release_id}, builder)

    def series(self, release_id: int, builder: ReleaseSeriesBuilder | None = None) -> SeriesResponse:
        """Fetch the series on a release (GET /release/series)."""
        return self._get("release/series", SeriesResponse, {"release_id": release_id}, builder)

    def sources(self, release_id: int, builder: ReleaseSourcesBuilder | None = None) -> SourcesResponse:
        """Fetch the sources of a release (GET /release/sources)."""
        return self._get("release/sources", SourcesResponse, {"release_id": release_id}, builder)

    def tags(self, release_id: int, builder: ReleaseTagsBuilder | None = None) -> TagsResponse:
        """Fetch the tags of a release (GET /release/tags)."""
        return self._get("release/tags", TagsResponse, {"release_id": release_id}, builder)

    def related_tags(self, release_id: int, builder: ReleaseRelatedTagsBuilder) -> TagsResponse:
        """Fetch tags related to one or more tags within a release (GET /release/related_tags)."""
        return self._get(
            "release/related_tags", TagsResponse, {"release_id": release_id}, builder, ReleaseRelatedTagsBuilder
        )

    def tables(self, release_id: int, builder: ReleaseTablesBuilder | None = None) -> ReleaseTablesResponse:
        """Fetch the release table tree (GET /release/tables)."""
        return self._get("release/tables", ReleaseTablesResponse, {"release_id": release_id}, builder)
