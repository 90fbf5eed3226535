"""Builders for the series and series/* endpoints."""
from datetime import date, datetime

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
)
from fredclient.data.enums import (
    AggregationMethod,
    Frequency,
    OutputType,
    SearchType,
    SeriesSearchOrderBy,
    TagOrderBy,
    Units,
    UpdatesFilterValue,
)
from fredclient.utils.time import format_date, format_update_time


class SeriesBuilder(RealtimeBuilder):
    """Options for series."""


class SeriesCategoriesBuilder(RealtimeBuilder):
    """Options for series/categories."""


class SeriesReleaseBuilder(RealtimeBuilder):
    """Options for series/release."""


class ObservationsBuilder(RealtimeMixin, PagingMixin, SortOrderMixin, QueryBuilder):
    """
    Options for series/observations.

    Vintage dates accumulate: each vintage_date() call adds one date and the
    request carries them comma separated.
    """

    MAX_LIMIT = 100000
    LIST_SEPARATORS = {"vintage_dates": ","}

    def observation_start(self, start_date: date | str):
        return self._set("observation_start", format_date(start_date))

    def observation_end(self, end_date: date | str):
        return self._set("observation_end", format_date(end_date))

    def units(self, units: Units | str):
        """Data value transformation applied by FRED (levels, percent change, ...)."""
        return self._choice("units", Units, units)

    def frequency(self, frequency: Frequency | str):
        """Aggregate to a lower frequency than the series' native one."""
        return self._choice("frequency", Frequency, frequency)

    def aggregation_method(self, method: AggregationMethod | str):
        return self._choice("aggregation_method", AggregationMethod, method)

    def output_type(self, output_type: OutputType | str):
        return self._choice("output_type", OutputType, output_type)

    def vintage_date(self, vintage: date | str):
        return self._append("vintage_dates", format_date(vintage))

    def vintage_dates(self, *vintages: date | str):
        for vintage in vintages:
            self.vintage_date(vintage)
        return self


class SeriesSearchBuilder(SeriesListBuilder):
    """Options for series/search."""

    ORDER_BY = SeriesSearchOrderBy

    def search_type(self, search_type: SearchType | str):
        return self._choice("search_type", SearchType, search_type)


class SeriesSearchTagsBuilder(TagListBuilder):
    """Options for series/search/tags."""

    SEARCH_TEXT_PARAM = "tag_search_text"


class SeriesSearchRelatedTagsBuilder(RelatedTagListBuilder):
    """Options for series/search/related_tags. Requires at least one tag_name()."""

    SEARCH_TEXT_PARAM = "tag_search_text"


class SeriesTagsBuilder(RealtimeMixin, OrderByMixin, SortOrderMixin, QueryBuilder):
    """Options for series/tags."""

    ORDER_BY = TagOrderBy


class SeriesUpdatesBuilder(RealtimeMixin, PagingMixin, QueryBuilder):
    """Options for series/updates."""

    def filter_value(self, value: UpdatesFilterValue | str):
        """Limit updates to macroeconomic or regional series."""
        return self._choice("filter_value", UpdatesFilterValue, value)

    def time_range(self, start_time: datetime | str, end_time: datetime | str):
        """Only series updated between the two times (YYYYMMDDHhmm, US central time)."""
        self._set("start_time", format_update_time(start_time))
        return self._set("end_time", format_update_time(end_time))


class VintageDatesBuilder(RealtimeMixin, PagingMixin, SortOrderMixin, QueryBuilder):
    """Options for series/vintagedates."""

    MAX_LIMIT = 10000
