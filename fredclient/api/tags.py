"""
Tags API module: FRED tags, tags related to other tags, and series matching tags.
"""
from fredclient.api.endpoint import EndpointGroup
from fredclient.builders.tags import RelatedTagsBuilder, TagsBuilder, TagsSeriesBuilder
from fredclient.data.models.series import SeriesResponse
from fredclient.data.models.tag import TagsResponse


class TagsAPI(EndpointGroup):
    """Tag endpoints."""

    def list(self, builder: TagsBuilder | None = None) -> TagsResponse:
        """Fetch tags (GET /tags)."""
        return self._get("tags", TagsResponse, builder=builder)

    def related(self, builder: RelatedTagsBuilder) -> TagsResponse:
        """Fetch tags related to one or more tags (GET /related_tags). The builder must name a tag."""
        return self._get("related_tags", TagsResponse, builder=builder, builder_cls=RelatedTagsBuilder)

    def series(self, builder: TagsSeriesBuilder) -> SeriesResponse:
        """Fetch series matching all of the builder's tags (GET /tags/series)."""
        return self._get("tags/series", SeriesResponse, builder=builder, builder_cls=TagsSeriesBuilder)
