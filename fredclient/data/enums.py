from enum import Enum


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class Units(Enum):
    LIN = "lin"  # levels (no transformation)
    CHG = "chg"  # change
    CH1 = "ch1"  # change from a year ago
    PCH = "pch"  # percent change
    PC1 = "pc1"  # percent change from a year ago
    PCA = "pca"  # compounded annual rate of change
    CCH = "cch"  # continuously compounded rate of change
    CCA = "cca"  # continuously compounded annual rate of change
    LOG = "log"  # natural log


class Frequency(Enum):
    DAILY = "d"
    WEEKLY = "w"
    BIWEEKLY = "bw"
    MONTHLY = "m"
    QUARTERLY = "q"
    SEMIANNUAL = "sa"
    ANNUAL = "a"
    WEEKLY_ENDING_FRIDAY = "wef"
    WEEKLY_ENDING_THURSDAY = "weth"
    WEEKLY_ENDING_WEDNESDAY = "wew"
    WEEKLY_ENDING_TUESDAY = "wetu"
    WEEKLY_ENDING_MONDAY = "wem"
    WEEKLY_ENDING_SUNDAY = "wesu"
    WEEKLY_ENDING_SATURDAY = "wesa"
    BIWEEKLY_ENDING_WEDNESDAY = "bwew"
    BIWEEKLY_ENDING_MONDAY = "bwem"


class AggregationMethod(Enum):
    AVERAGE = "avg"
    SUM = "sum"
    END_OF_PERIOD = "eop"


class OutputType(Enum):
    REAL_TIME_PERIOD = "1"
    VINTAGE_DATE_ALL = "2"
    VINTAGE_DATE_NEW_AND_REVISED = "3"
    INITIAL_RELEASE_ONLY = "4"


class SearchType(Enum):
    FULL_TEXT = "full_text"
    SERIES_ID = "series_id"


class FilterVariable(Enum):
    FREQUENCY = "frequency"
    UNITS = "units"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"


class UpdatesFilterValue(Enum):
    MACRO = "macro"
    REGIONAL = "regional"
    ALL = "all"


class TagGroupId(Enum):
    FREQUENCY = "freq"
    GENERAL = "gen"
    GEOGRAPHY = "geo"
    GEOGRAPHY_TYPE = "geot"
    RELEASE = "rls"
    SEASONAL_ADJUSTMENT = "seas"
    SOURCE = "src"
    CITATION_AND_COPYRIGHT = "cc"


class TagOrderBy(Enum):
    SERIES_COUNT = "series_count"
    POPULARITY = "popularity"
    CREATED = "created"
    NAME = "name"
    GROUP_ID = "group_id"


class SeriesOrderBy(Enum):
    SERIES_ID = "series_id"
    TITLE = "title"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    POPULARITY = "popularity"
    GROUP_POPULARITY = "group_popularity"


class SeriesSearchOrderBy(Enum):
    SEARCH_RANK = "search_rank"
    SERIES_ID = "series_id"
    TITLE = "title"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    POPULARITY = "popularity"
    GROUP_POPULARITY = "group_popularity"


class ReleaseOrderBy(Enum):
    RELEASE_ID = "release_id"
    NAME = "name"
    PRESS_RELEASE = "press_release"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"


class ReleaseDatesOrderBy(Enum):
    RELEASE_DATE = "release_date"
    RELEASE_ID = "release_id"
    RELEASE_NAME = "release_name"


class SourceOrderBy(Enum):
    SOURCE_ID = "source_id"
    NAME = "name"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
