"""
Shared machinery for the per-endpoint option builders.

A builder only records parameters the caller explicitly set. Each setter
validates its argument immediately and returns the builder so calls chain:

    builder = ObservationsBuilder().observation_start("2000-01-01").units(Units.PCH)
"""
from datetime import date
from enum import Enum
from typing import TypeVar

from fredclient.data.enums import FilterVariable, SeriesOrderBy, SortOrder, TagGroupId, TagOrderBy
from fredclient.errors import InvalidParameterError
from fredclient.utils.time import format_date

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value) -> E:
    """Accept a member of ``enum_cls`` or one of its wire values; reject everything else."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, Enum):
        raise InvalidParameterError(f"{value!r} is not a {enum_cls.__name__}")
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidParameterError(f"{value!r} is not a valid {enum_cls.__name__} (expected one of: {allowed})") from exc


def _non_empty_text(name: str, value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameterError(f"{name} must be a non-empty string")
    return value.strip()


def non_negative_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidParameterError(f"{name} cannot be negative")
    return value


class QueryBuilder:
    """Base for all builders: a mapping of query parameter name to wire value."""

    # parameters that must be present before build() succeeds
    REQUIRED: tuple[str, ...] = ()
    # separators for multi-valued parameters; anything else joins with ';'
    LIST_SEPARATORS: dict[str, str] = {}

    def __init__(self):
        self._params: dict[str, str] = {}
        self._lists: dict[str, list[str]] = {}

    def _set(self, key: str, value):
        self._params[key] = str(value)
        return self

    def _choice(self, key: str, enum_cls: type[Enum], value):
        self._params[key] = coerce_enum(enum_cls, value).value
        return self

    def _append(self, key: str, value: str):
        self._lists.setdefault(key, []).append(value)
        return self

    def build(self) -> dict[str, str]:
        """Return the query parameters that were set, ready to send."""
        params = dict(self._params)
        for key, values in self._lists.items():
            if values:
                params[key] = self.LIST_SEPARATORS.get(key, ";").join(values)
        for key in self.REQUIRED:
            if key not in params:
                raise InvalidParameterError(self._missing_message(key))
        return params

    def _missing_message(self, key: str) -> str:
        if key == "tag_names":
            return f"At least one tag must be specified using tag_name() on {type(self).__name__}."
        return f"{key} is required by {type(self).__name__}."

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r}, lists={self._lists!r})"


class RealtimeMixin:
    def realtime_start(self, start_date: date | str):
        """Start of the real-time period (YYYY-MM-DD)."""
        return self._set("realtime_start", format_date(start_date))

    def realtime_end(self, end_date: date | str):
        """End of the real-time period (YYYY-MM-DD)."""
        return self._set("realtime_end", format_date(end_date))


class PagingMixin:
    MAX_LIMIT = 1000

    def limit(self, num_results: int):
        """Maximum number of results; clamped into [1, MAX_LIMIT]."""
        if isinstance(num_results, bool) or not isinstance(num_results, int):
            raise InvalidParameterError(f"limit must be an integer, got {type(num_results).__name__}")
        return self._set("limit", max(1, min(num_results, self.MAX_LIMIT)))

    def offset(self, ofs: int):
        return self._set("offset", non_negative_int("offset", ofs))


class SortOrderMixin:
    def sort_order(self, order: SortOrder | str):
        return self._choice("sort_order", SortOrder, order)


class OrderByMixin:
    ORDER_BY: type[Enum]

    def order_by(self, order):
        """Result ordering; accepts members of the builder's ORDER_BY enum."""
        return self._choice("order_by", self.ORDER_BY, order)


class TagNamesMixin:
    def tag_name(self, tag: str):
        """Add a tag the results must carry. May be called repeatedly."""
        return self._append("tag_names", _non_empty_text("tag", tag))

    def tag_names(self, *tags: str):
        for tag in tags:
            self.tag_name(tag)
        return self


class ExcludeTagsMixin:
    def exclude_tag(self, tag: str):
        """Add a tag the results must not carry. May be called repeatedly."""
        return self._append("exclude_tag_names", _non_empty_text("tag", tag))


class TagGroupMixin:
    def tag_group_id(self, group: TagGroupId | str):
        return self._choice("tag_group_id", TagGroupId, group)


class SearchTextMixin:
    # series/search/* endpoints name this parameter tag_search_text
    SEARCH_TEXT_PARAM = "search_text"

    def search_text(self, text: str):
        """Restrict tags to those whose name matches ``text``."""
        return self._set(self.SEARCH_TEXT_PARAM, _non_empty_text("search text", text))


class SeriesFilterMixin:
    def filter_variable(self, variable: FilterVariable | str):
        return self._choice("filter_variable", FilterVariable, variable)

    def filter_value(self, value: str):
        return self._set("filter_value", _non_empty_text("filter value", value))


class RealtimeBuilder(RealtimeMixin, QueryBuilder):
    """Builder for endpoints whose only options are the real-time period."""


class SeriesListBuilder(
    RealtimeMixin,
    PagingMixin,
    OrderByMixin,
    SortOrderMixin,
    SeriesFilterMixin,
    TagNamesMixin,
    ExcludeTagsMixin,
    QueryBuilder,
):
    """Builder for endpoints returning a filtered, paged list of series."""

    ORDER_BY = SeriesOrderBy


class TagListBuilder(
    RealtimeMixin,
    TagNamesMixin,
    TagGroupMixin,
    SearchTextMixin,
    PagingMixin,
    OrderByMixin,
    SortOrderMixin,
    QueryBuilder,
):
    """Builder for endpoints returning a paged list of tags."""

    ORDER_BY = TagOrderBy


class RelatedTagListBuilder(ExcludeTagsMixin, TagListBuilder):
    """Tags related to one or more tags; at least one tag name is required."""

    REQUIRED = ("tag_names",)
