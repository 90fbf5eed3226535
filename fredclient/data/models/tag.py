from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    name: str
    group_id: str
    created: str
    popularity: int
    series_count: int
    notes: str | None = None

    def __str__(self) -> str:
        return f"Tag {self.name}"

    @staticmethod
    def from_dict(d: dict) -> "Tag":
        return Tag(
            name=d["name"],
            group_id=d["group_id"],
            created=d["created"],
            popularity=int(d["popularity"]),
            series_count=int(d["series_count"]),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class TagsResponse:
    """Response for every endpoint that lists tags (tags, related_tags, */tags, */related_tags)."""

    realtime_start: str
    realtime_end: str
    order_by: str
    sort_order: str
    count: int
    offset: int
    limit: int
    tags: tuple[Tag, ...]

    def __str__(self) -> str:
        return "".join(f"{t}\n" for t in self.tags)

    @staticmethod
    def from_dict(d: dict) -> "TagsResponse":
        return TagsResponse(
            realtime_start=d["realtime_start"],
            realtime_end=d["realtime_end"],
            order_by=d["order_by"],
            sort_order=d["sort_order"],
            count=int(d["count"]),
            offset=int(d["offset"]),
            limit=int(d["limit"]),
            tags=tuple(Tag.from_dict(t) for t in d["tags"]),
        )
