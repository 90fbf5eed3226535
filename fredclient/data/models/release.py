from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _opt_int(value) -> int | None:
    return None if value is None else int(value)


@dataclass(frozen=True)
class Release:
    id: int
    realtime_start: str
    realtime_end: str
    name: str
    press_release: bool
    link: str | None = None
    notes: str | None = None

    @staticmethod
    def from_dict(d: dict) -> "Release":
        press_release = d["press_release"]
        if not isinstance(press_release, bool):
            raise TypeError(f"press_release must be a boolean, got {press_release!r}")
        return Release(
            id=int(d["id"]),
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            name=d["name"],
            press_release=press_release,
            link=d.get("link"),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class ReleasesResponse:
    """Response for releases, release, series/release and source/releases."""

    realtime_start: str
    realtime_end: str
    releases: tuple[Release, ...]
    order_by: str | None = None
    sort_order: str | None = None
    count: int | None = None
    offset: int | None = None
    limit: int | None = None

    @staticmethod
    def from_dict(d: dict) -> "ReleasesResponse":
        return ReleasesResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            releases=tuple(Release.from_dict(r) for r in d["releases"]),
            order_by=d.get("order_by"),
            sort_order=d.get("sort_order"),
            count=_opt_int(d.get("count")),
            offset=_opt_int(d.get("offset")),
            limit=_opt_int(d.get("limit")),
        )


@dataclass(frozen=True)
class ReleaseDate:
    release_id: int
    date: str
    release_name: str | None = None

    def __str__(self) -> str:
        return f"Release Date {self.release_id}: {self.date}"

    @staticmethod
    def from_dict(d: dict) -> "ReleaseDate":
        return ReleaseDate(
            release_id=int(d["release_id"]),
            date=d["date"],
            release_name=d.get("release_name"),
        )


@dataclass(frozen=True)
class ReleaseDatesResponse:
    realtime_start: str
    realtime_end: str
    order_by: str
    sort_order: str
    count: int
    offset: int
    limit: int
    release_dates: tuple[ReleaseDate, ...]

    def __str__(self) -> str:
        return "".join(f"{r}\n" for r in self.release_dates)

    @staticmethod
    def from_dict(d: dict) -> "ReleaseDatesResponse":
        return ReleaseDatesResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            order_by=d["order_by"],
            sort_order=d["sort_order"],
            count=int(d["count"]),
            offset=int(d["offset"]),
            limit=int(d["limit"]),
            release_dates=tuple(ReleaseDate.from_dict(r) for r in d["release_dates"]),
        )


@dataclass(frozen=True)
class ReleaseTableElement:
    element_id: int
    release_id: int
    type: str
    name: str
    level: str
    series_id: str | None = None
    parent_id: int | None = None
    line: str | None = None
    observation_value: str | None = None
    observation_date: str | None = None
    children: tuple["ReleaseTableElement", ...] = field(default_factory=tuple)

    @staticmethod
    def from_dict(d: dict) -> "ReleaseTableElement":
        return ReleaseTableElement(
            element_id=int(d["element_id"]),
            release_id=int(d["release_id"]),
            type=d["type"],
            name=d["name"],
            level=str(d["level"]),
            series_id=d.get("series_id"),
            parent_id=_opt_int(d.get("parent_id")),
            line=None if d.get("line") is None else str(d["line"]),
            observation_value=d.get("observation_value"),
            observation_date=d.get("observation_date"),
            children=tuple(ReleaseTableElement.from_dict(c) for c in d.get("children", [])),
        )


@dataclass(frozen=True)
class ReleaseTablesResponse:
    release_id: str
    elements: Mapping[str, ReleaseTableElement]
    name: str | None = None
    element_id: int | None = None

    @staticmethod
    def from_dict(d: dict) -> "ReleaseTablesResponse":
        elements = d["elements"]
        if not isinstance(elements, dict):
            raise TypeError("elements must be an object keyed by element id")
        return ReleaseTablesResponse(
            release_id=str(d["release_id"]),
            elements=MappingProxyType({key: ReleaseTableElement.from_dict(e) for key, e in elements.items()}),
            name=d.get("name"),
            element_id=_opt_int(d.get("element_id")),
        )
