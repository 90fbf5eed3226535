from dataclasses import dataclass


def _opt_int(value) -> int | None:
    return None if value is None else int(value)


@dataclass(frozen=True)
class Source:
    id: int
    realtime_start: str
    realtime_end: str
    name: str
    link: str | None = None
    notes: str | None = None

    @staticmethod
    def from_dict(d: dict) -> "Source":
        return Source(
            id=int(d["id"]),
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            name=d["name"],
            link=d.get("link"),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class SourcesResponse:
    """Response for sources, source and release/sources."""

    realtime_start: str
    realtime_end: str
    sources: tuple[Source, ...]
    order_by: str | None = None
    sort_order: str | None = None
    count: int | None = None
    offset: int | None = None
    limit: int | None = None

    @staticmethod
    def from_dict(d: dict) -> "SourcesResponse":
        return SourcesResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            sources=tuple(Source.from_dict(s) for s in d["sources"]),
            order_by=d.get("order_by"),
            sort_order=d.get("sort_order"),
            count=_opt_int(d.get("count")),
            offset=_opt_int(d.get("offset")),
            limit=_opt_int(d.get("limit")),
        )
