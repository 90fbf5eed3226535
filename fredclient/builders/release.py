"""Builders for the releases, releases/dates and release/* endpoints."""
from datetime import date

from fredclient.builders.base import (
    OrderByMixin,
    PagingMixin,
    QueryBuilder,
    RealtimeBuilder,
    RealtimeMixin,
    RelatedTagListBuilder,
    SeriesListBuilder,
    SortOrderMixin,
    TagListBuilder,
    non_negative_int,
)
from fredclient.data.enums import ReleaseDatesOrderBy, ReleaseOrderBy
from fredclient.utils.time import format_date


class _IncludeEmptyDatesMixin:
    def include_release_dates_with_no_data(self, include: bool = True):
        """Also return scheduled release dates that have no data yet."""
        return self._set("include_release_dates_with_no_data", "true" if include else "false")


class ReleasesBuilder(RealtimeMixin, PagingMixin, OrderByMixin, SortOrderMixin, QueryBuilder):
    """Options for releases."""

    ORDER_BY = ReleaseOrderBy


class ReleasesDatesBuilder(
    RealtimeMixin, PagingMixin, OrderByMixin, SortOrderMixin, _IncludeEmptyDatesMixin, QueryBuilder
):
    """Options for releases/dates (release dates across all releases)."""

    ORDER_BY = ReleaseDatesOrderBy


class ReleaseBuilder(RealtimeBuilder):
    """Options for release."""


class ReleaseDatesBuilder(RealtimeMixin, PagingMixin, SortOrderMixin, _IncludeEmptyDatesMixin, QueryBuilder):
    """Options for release/dates (dates of a single release)."""

    MAX_LIMIT = 10000


class ReleaseSeriesBuilder(SeriesListBuilder):
    """Options for release/series."""


class ReleaseSourcesBuilder(RealtimeBuilder):
    """Options for release/sources."""


class ReleaseTagsBuilder(TagListBuilder):
    """Options for release/tags."""


class ReleaseRelatedTagsBuilder(RelatedTagListBuilder):
    """Options for release/related_tags. Requires at least one tag_name()."""


class ReleaseTablesBuilder(QueryBuilder):
    """Options for release/tables."""

    def element_id(self, element_id: int):
        """Root the returned tree at this element instead of the release root."""
        return self._set("element_id", non_negative_int("element_id", element_id))

    def include_observation_values(self, include: bool = True):
        return self._set("include_observation_values", "true" if include else "false")

    def observation_date(self, observation_date: date | str):
        return self._set("observation_date", format_date(observation_date))
