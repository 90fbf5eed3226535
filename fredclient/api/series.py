"""
Series API module: series metadata, observations, search, updates and vintage dates.
"""
from fredclient.api.endpoint import EndpointGroup
from fredclient.builders.series import (
    ObservationsBuilder,
    SeriesBuilder,
    SeriesCategoriesBuilder,
    SeriesReleaseBuilder,
    SeriesSearchBuilder,
    SeriesSearchRelatedTagsBuilder,
    SeriesSearchTagsBuilder,
    SeriesTagsBuilder,
    SeriesUpdatesBuilder,
    VintageDatesBuilder,
)
from fredclient.data.models.category import CategoriesResponse
from fredclient.data.models.observation import ObservationsResponse
from fredclient.data.models.release import ReleasesResponse
from fredclient.data.models.series import SeriesResponse, SeriesUpdatesResponse, VintageDatesResponse
from fredclient.data.models.tag import TagsResponse


class SeriesAPI(EndpointGroup):
    """Series endpoints."""

    def get(self, series_id: str, builder: SeriesBuilder | None = None) -> SeriesResponse:
        """Fetch series metadata (GET /series)."""
        return self._get("series", SeriesResponse, {"series_id": series_id}, builder)

    def categories(self, series_id: str, builder: SeriesCategoriesBuilder | None = None) -> CategoriesResponse:
        """Fetch the categories a series belongs to (GET /series/categories)."""
        return self._get("series/categories", CategoriesResponse, {"series_id": series_id}, builder)

    def observations(self, series_id: str, builder: ObservationsBuilder | None = None) -> ObservationsResponse:
        """Fetch the observations (data values) of a series (GET /series/observations)."""
        return self._get("series/observations", ObservationsResponse, {"series_id": series_id}, builder)

    def release(self, series_id: str, builder: SeriesReleaseBuilder | None = None) -> ReleasesResponse:
        """Fetch the release a series belongs to (GET /series/release)."""
        return self._get("series/release", ReleasesResponse, {"series_id": series_id}, builder)

    def search(self, search_text: str, builder: SeriesSearchBuilder | None = None) -> SeriesResponse:
        """Search series by keywords (GET /series/search)."""
        return self._get("series/search", SeriesResponse, {"search_text": search_text}, builder)

    def search_tags(self, series_search_text: str, builder: SeriesSearchTagsBuilder | None = None) -> TagsResponse:
        """Fetch the tags of a series search (GET /series/search/tags)."""
        return self._get("series/search/tags", TagsResponse, {"series_search_text": series_search_text}, builder)

    def search_related_tags(self, series_search_text: str, builder: SeriesSearchRelatedTagsBuilder) -> TagsResponse:
        """Fetch tags related to a series search (GET /series/search/related_tags)."""
        return self._get(
            "series/search/related_tags",
            TagsResponse,
            {"series_search_text": series_search_text},
            builder,
            SeriesSearchRelatedTagsBuilder,
        )

    def tags(self, series_id: str, builder: SeriesTagsBuilder | None = None) -> TagsResponse:
        """Fetch the tags of a series (GET /series/tags)."""
        return self._get("series/tags", TagsResponse, {"series_id": series_id}, builder)

    def updates(self, builder: SeriesUpdatesBuilder | None = None) -> SeriesUpdatesResponse:
        """Fetch recently updated series (GET /series/updates)."""
        return self._get("series/updates", SeriesUpdatesResponse, builder=builder)

    def vintage_dates(self, series_id: str, builder: VintageDatesBuilder | None = None) -> VintageDatesResponse:
        """Fetch the dates a series was revised or released (GET /series/vintagedates)."""
        return self._get("series/vintagedates", VintageDatesResponse, {"series_id": series_id}, builder)
