"""Builders for the category/* endpoints."""
from fredclient.builders.base import RealtimeBuilder, RelatedTagListBuilder, SeriesListBuilder, TagListBuilder


class CategoryChildrenBuilder(RealtimeBuilder):
    """Options for category/children."""


class CategoryRelatedBuilder(RealtimeBuilder):
    """Options for category/related."""


class CategorySeriesBuilder(SeriesListBuilder):
    """Options for category/series."""


class CategoryTagsBuilder(TagListBuilder):
    """Options for category/tags."""


class CategoryRelatedTagsBuilder(RelatedTagListBuilder):
    """Options for category/related_tags. Requires at least one tag_name()."""
