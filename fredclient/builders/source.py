"""Builders for the sources and source/* endpoints."""
from fredclient.builders.base import (
    OrderByMixin,
    PagingMixin,
    QueryBuilder,
    RealtimeBuilder,
    RealtimeMixin,
    SortOrderMixin,
)
from fredclient.data.enums import ReleaseOrderBy, SourceOrderBy


class SourcesBuilder(RealtimeMixin, PagingMixin, OrderByMixin, SortOrderMixin, QueryBuilder):
    """Options for sources."""

    ORDER_BY = SourceOrderBy


class SourceBuilder(RealtimeBuilder):
    """Options for source."""


class SourceReleasesBuilder(RealtimeMixin, PagingMixin, OrderByMixin, SortOrderMixin, QueryBuilder):
    """Options for source/releases."""

    ORDER_BY = ReleaseOrderBy
