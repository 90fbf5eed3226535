"""Builders for the tags, related_tags and tags/series endpoints."""
from fredclient.builders.base import (
    ExcludeTagsMixin,
    OrderByMixin,
    PagingMixin,
    QueryBuilder,
    RealtimeMixin,
    RelatedTagListBuilder,
    SortOrderMixin,
    TagListBuilder,
    TagNamesMixin,
)
from fredclient.data.enums import SeriesOrderBy


class TagsBuilder(TagListBuilder):
    """Options for tags."""


class RelatedTagsBuilder(RelatedTagListBuilder):
    """Options for related_tags. Requires at least one tag_name()."""


class TagsSeriesBuilder(
    RealtimeMixin,
    PagingMixin,
    OrderByMixin,
    SortOrderMixin,
    TagNamesMixin,
    ExcludeTagsMixin,
    QueryBuilder,
):
    """Options for tags/series. Requires at least one tag_name()."""

    ORDER_BY = SeriesOrderBy
    REQUIRED = ("tag_names",)
