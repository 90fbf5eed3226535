"""Typed client for the FRED (Federal Reserve Economic Data) web API."""
from fredclient.api.client import FredClient
from fredclient.builders.category import (
    CategoryChildrenBuilder,
    CategoryRelatedBuilder,
    CategoryRelatedTagsBuilder,
    CategorySeriesBuilder,
    CategoryTagsBuilder,
)
from fredclient.builders.release import (
    ReleaseBuilder,
    ReleaseDatesBuilder,
    ReleaseRelatedTagsBuilder,
    ReleaseSeriesBuilder,
    ReleasesBuilder,
    ReleasesDatesBuilder,
    ReleaseSourcesBuilder,
    ReleaseTablesBuilder,
    ReleaseTagsBuilder,
)
from fredclient.builders.series import (
    ObservationsBuilder,
    SeriesBuilder,
    SeriesCategoriesBuilder,
    SeriesReleaseBuilder,
    SeriesSearchBuilder,
    SeriesSearchRelatedTagsBuilder,
    SeriesSearchTagsBuilder,
    SeriesTagsBuilder,
    SeriesUpdatesBuilder,
    VintageDatesBuilder,
)
from fredclient.builders.source import SourceBuilder, SourceReleasesBuilder, SourcesBuilder
from fredclient.builders.tags import RelatedTagsBuilder, TagsBuilder, TagsSeriesBuilder
from fredclient.config import FredSettings
from fredclient.data.enums import (
    AggregationMethod,
    FilterVariable,
    Frequency,
    OutputType,
    ReleaseDatesOrderBy,
    ReleaseOrderBy,
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
from fredclient.errors import (
    ConfigurationError,
    FredAPIError,
    FredError,
    InvalidParameterError,
    ParseError,
    RateLimitedError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "FredClient",
    "FredSettings",
    # builders
    "CategoryChildrenBuilder",
    "CategoryRelatedBuilder",
    "CategoryRelatedTagsBuilder",
    "CategorySeriesBuilder",
    "CategoryTagsBuilder",
    "ReleaseBuilder",
    "ReleaseDatesBuilder",
    "ReleaseRelatedTagsBuilder",
    "ReleaseSeriesBuilder",
    "ReleasesBuilder",
    "ReleasesDatesBuilder",
    "ReleaseSourcesBuilder",
    "ReleaseTablesBuilder",
    "ReleaseTagsBuilder",
    "ObservationsBuilder",
    "SeriesBuilder",
    "SeriesCategoriesBuilder",
    "SeriesReleaseBuilder",
    "SeriesSearchBuilder",
    "SeriesSearchRelatedTagsBuilder",
    "SeriesSearchTagsBuilder",
    "SeriesTagsBuilder",
    "SeriesUpdatesBuilder",
    "VintageDatesBuilder",
    "SourceBuilder",
    "SourceReleasesBuilder",
    "SourcesBuilder",
    "RelatedTagsBuilder",
    "TagsBuilder",
    "TagsSeriesBuilder",
    # enums
    "AggregationMethod",
    "FilterVariable",
    "Frequency",
    "OutputType",
    "ReleaseDatesOrderBy",
    "ReleaseOrderBy",
    "SearchType",
    "SeriesOrderBy",
    "SeriesSearchOrderBy",
    "SortOrder",
    "SourceOrderBy",
    "TagGroupId",
    "TagOrderBy",
    "Units",
    "UpdatesFilterValue",
    # errors
    "ConfigurationError",
    "FredAPIError",
    "FredError",
    "InvalidParameterError",
    "ParseError",
    "RateLimitedError",
    "TransportError",
]
