from dataclasses import dataclass
from datetime import datetime

from fredclient.utils.time import parse_last_updated


def _opt_int(value) -> int | None:
    return None if value is None else int(value)


@dataclass(frozen=True)
class Series:
    id: str
    realtime_start: str
    realtime_end: str
    title: str
    observation_start: str
    observation_end: str
    frequency: str
    frequency_short: str
    units: str
    units_short: str
    seasonal_adjustment: str
    seasonal_adjustment_short: str
    last_updated: str
    popularity: int
    group_popularity: int | None = None
    notes: str | None = None

    @property
    def last_updated_at(self) -> datetime:
        return parse_last_updated(self.last_updated)

    @staticmethod
    def from_dict(d: dict) -> "Series":
        return Series(
            id=d["id"],
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            title=d["title"],
            observation_start=d["observation_start"],
            observation_end=d["observation_end"],
            frequency=d["frequency"],
            frequency_short=d["frequency_short"],
            units=d["units"],
            units_short=d["units_short"],
            seasonal_adjustment=d["seasonal_adjustment"],
            seasonal_adjustment_short=d["seasonal_adjustment_short"],
            last_updated=d["last_updated"],
            popularity=int(d["popularity"]),
            group_popularity=_opt_int(d.get("group_popularity")),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class SeriesResponse:
    """Response shared by series, series/search, category/series, release/series and tags/series."""

    realtime_start: str
    realtime_end: str
    series: tuple[Series, ...]
    order_by: str | None = None
    sort_order: str | None = None
    count: int | None = None
    offset: int | None = None
    limit: int | None = None

    @staticmethod
    def from_dict(d: dict) -> "SeriesResponse":
        return SeriesResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            # FRED's key for the list of series really is "seriess"
            series=tuple(Series.from_dict(s) for s in d["seriess"]),
            order_by=d.get("order_by"),
            sort_order=d.get("sort_order"),
            count=_opt_int(d.get("count")),
            offset=_opt_int(d.get("offset")),
            limit=_opt_int(d.get("limit")),
        )


@dataclass(frozen=True)
class SeriesUpdatesResponse:
    realtime_start: str
    realtime_end: str
    filter_variable: str
    filter_value: str
    order_by: str
    sort_order: str
    count: int
    offset: int
    limit: int
    series: tuple[Series, ...]

    @staticmethod
    def from_dict(d: dict) -> "SeriesUpdatesResponse":
        return SeriesUpdatesResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            filter_variable=d["filter_variable"],
            filter_value=d["filter_value"],
            order_by=d["order_by"],
            sort_order=d["sort_order"],
            count=int(d["count"]),
            offset=int(d["offset"]),
            limit=int(d["limit"]),
            series=tuple(Series.from_dict(s) for s in d["seriess"]),
        )


@dataclass(frozen=True)
class VintageDatesResponse:
    realtime_start: str
    realtime_end: str
    order_by: str
    sort_order: str
    count: int
    offset: int
    limit: int
    vintage_dates: tuple[str, ...]

    @staticmethod
    def from_dict(d: dict) -> "VintageDatesResponse":
        vintage_dates = d["vintage_dates"]
        if not isinstance(vintage_dates, list) or not all(isinstance(v, str) for v in vintage_dates):
            raise TypeError("vintage_dates must be a list of date strings")
        return VintageDatesResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            order_by=d["order_by"],
            sort_order=d["sort_order"],
            count=int(d["count"]),
            offset=int(d["offset"]),
            limit=int(d["limit"]),
            vintage_dates=tuple(vintage_dates),
        )
