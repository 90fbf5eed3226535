from datetime import date, datetime

import pytest

from fredclient.builders.category import CategoryRelatedTagsBuilder, CategorySeriesBuilder
from fredclient.builders.release import ReleaseDatesBuilder, ReleasesDatesBuilder, ReleaseTablesBuilder
from fredclient.builders.series import (
    ObservationsBuilder,
    SeriesBuilder,
    SeriesSearchBuilder,
    SeriesSearchTagsBuilder,
    SeriesUpdatesBuilder,
    VintageDatesBuilder,
)
from fredclient.builders.source import SourcesBuilder
from fredclient.builders.tags import RelatedTagsBuilder, TagsBuilder, TagsSeriesBuilder
from fredclient.data.enums import (
    FilterVariable,
    Frequency,
    OutputType,
    ReleaseDatesOrderBy,
    SearchType,
    SeriesOrderBy,
    SeriesSearchOrderBy,
    SortOrder,
    SourceOrderBy,
    TagGroupId,
    TagOrderBy,
    Units,
    UpdatesFilterValue,
)
from fredclient.errors import InvalidParameterError


def test_fresh_builder_sends_nothing():
    assert ObservationsBuilder().build() == {}
    assert SeriesSearchBuilder().build() == {}
    assert ReleaseTablesBuilder().build() == {}


def test_only_set_parameters_are_built():
    params = ObservationsBuilder().observation_start("2000-01-01").units(Units.PCH).build()
    assert params == {"observation_start": "2000-01-01", "units": "pch"}


def test_setters_chain_and_return_same_builder():
    builder = ObservationsBuilder()
    assert builder.realtime_start("2020-01-01") is builder
    assert builder.limit(10).offset(5).sort_order(SortOrder.DESCENDING) is builder


def test_setting_twice_keeps_last_value():
    params = SeriesBuilder().realtime_start("2000-01-01").realtime_start("2001-01-01").build()
    assert params == {"realtime_start": "2001-01-01"}


def test_observation_options_use_wire_values():
    params = (
        ObservationsBuilder()
        .frequency(Frequency.WEEKLY_ENDING_TUESDAY)
        .output_type(OutputType.INITIAL_RELEASE_ONLY)
        .sort_order(SortOrder.ASCENDING)
        .build()
    )
    assert params == {"frequency": "wetu", "output_type": "4", "sort_order": "asc"}


def test_enum_string_values_are_accepted():
    assert ObservationsBuilder().units("log").build() == {"units": "log"}


@pytest.mark.parametrize("bad", ["percent", "LIN", 3, None, SortOrder.ASCENDING])
def test_values_outside_enum_are_rejected(bad):
    with pytest.raises(InvalidParameterError):
        ObservationsBuilder().units(bad)


def test_order_by_rejects_another_endpoints_ordering():
    with pytest.raises(InvalidParameterError):
        CategorySeriesBuilder().order_by(SeriesSearchOrderBy.SEARCH_RANK)
    with pytest.raises(InvalidParameterError):
        SourcesBuilder().order_by(TagOrderBy.NAME)
    assert SeriesSearchBuilder().order_by(SeriesSearchOrderBy.SEARCH_RANK).build() == {"order_by": "search_rank"}
    assert SourcesBuilder().order_by(SourceOrderBy.SOURCE_ID).build() == {"order_by": "source_id"}


def test_invalid_parameter_error_is_a_value_error():
    with pytest.raises(ValueError):
        SeriesBuilder().realtime_start("2000/01/01")


def test_dates_accept_date_objects():
    params = ObservationsBuilder().observation_start(date(1999, 3, 7)).realtime_end(datetime(2001, 2, 3, 4, 5)).build()
    assert params == {"observation_start": "1999-03-07", "realtime_end": "2001-02-03"}


@pytest.mark.parametrize(
    "builder, requested, expected",
    [
        (TagsBuilder(), 5000, "1000"),
        (TagsBuilder(), 0, "1"),
        (ObservationsBuilder(), 2000000, "100000"),
        (VintageDatesBuilder(), 20000, "10000"),
        (ReleaseDatesBuilder(), 20000, "10000"),
        (ReleasesDatesBuilder(), 20000, "1000"),
    ],
)
def test_limit_is_clamped(builder, requested, expected):
    assert builder.limit(requested).build() == {"limit": expected}


def test_negative_offset_is_rejected():
    with pytest.raises(InvalidParameterError):
        TagsBuilder().offset(-1)


def test_tag_names_accumulate_with_semicolons():
    params = CategorySeriesBuilder().tag_name("income").tag_name("bea").exclude_tag("discontinued").build()
    assert params == {"tag_names": "income;bea", "exclude_tag_names": "discontinued"}


def test_vintage_dates_accumulate_with_commas():
    params = ObservationsBuilder().vintage_date("2000-01-01").vintage_dates("2001-01-01", date(2002, 1, 1)).build()
    assert params == {"vintage_dates": "2000-01-01,2001-01-01,2002-01-01"}


@pytest.mark.parametrize("builder_cls", [RelatedTagsBuilder, CategoryRelatedTagsBuilder, TagsSeriesBuilder])
def test_required_tag_names(builder_cls):
    with pytest.raises(InvalidParameterError, match="tag_name"):
        builder_cls().realtime_start("2013-01-01").build()
    assert builder_cls().tag_name("usa").build() == {"tag_names": "usa"}


def test_tag_search_text_parameter_name_differs_by_endpoint():
    assert TagsBuilder().search_text("gdp").build() == {"search_text": "gdp"}
    assert SeriesSearchTagsBuilder().search_text("gdp").build() == {"tag_search_text": "gdp"}


def test_tag_group_and_series_filters():
    params = TagsBuilder().tag_group_id(TagGroupId.GEOGRAPHY).build()
    assert params == {"tag_group_id": "geo"}
    params = (
        SeriesSearchBuilder()
        .search_type(SearchType.SERIES_ID)
        .filter_variable(FilterVariable.SEASONAL_ADJUSTMENT)
        .filter_value("Seasonally Adjusted")
        .order_by(SeriesOrderBy.POPULARITY.value)
        .build()
    )
    assert params == {
        "search_type": "series_id",
        "filter_variable": "seasonal_adjustment",
        "filter_value": "Seasonally Adjusted",
        "order_by": "popularity",
    }


def test_series_updates_time_range():
    params = (
        SeriesUpdatesBuilder()
        .filter_value(UpdatesFilterValue.REGIONAL)
        .time_range(datetime(2018, 3, 2, 2, 20), "201803022200")
        .build()
    )
    assert params == {"filter_value": "regional", "start_time": "201803020220", "end_time": "201803022200"}
    with pytest.raises(InvalidParameterError):
        SeriesUpdatesBuilder().time_range("2018-03-02", "201803022200")


def test_release_builders():
    params = ReleasesDatesBuilder().order_by(ReleaseDatesOrderBy.RELEASE_DATE).include_release_dates_with_no_data().build()
    assert params == {"order_by": "release_date", "include_release_dates_with_no_data": "true"}
    params = ReleaseTablesBuilder().element_id(12886).include_observation_values().observation_date("2012-01-01").build()
    assert params == {"element_id": "12886", "include_observation_values": "true", "observation_date": "2012-01-01"}
