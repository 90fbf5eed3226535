import pytest

from conftest import BASE_URL, load_fixture
from fredclient.builders.category import CategoryRelatedTagsBuilder, CategorySeriesBuilder
from fredclient.builders.release import ReleaseRelatedTagsBuilder, ReleaseTablesBuilder
from fredclient.builders.series import SeriesSearchRelatedTagsBuilder, SeriesUpdatesBuilder
from fredclient.builders.source import SourcesBuilder
from fredclient.builders.tags import RelatedTagsBuilder, TagsSeriesBuilder
from fredclient.data.enums import SeriesOrderBy, SourceOrderBy, UpdatesFilterValue
from fredclient.data.models.category import CategoriesResponse
from fredclient.data.models.observation import ObservationsResponse
from fredclient.data.models.release import ReleaseDatesResponse, ReleasesResponse, ReleaseTablesResponse
from fredclient.data.models.series import SeriesResponse, SeriesUpdatesResponse, VintageDatesResponse
from fredclient.data.models.source import SourcesResponse
from fredclient.data.models.tag import TagsResponse

ENDPOINTS = [
    # (call, path, fixture, expected required params, response type)
    (lambda c: c.categories.get(125), "category", "categories.json", {"category_id": "125"}, CategoriesResponse),
    (lambda c: c.categories.children(13), "category/children", "category_children.json", {"category_id": "13"}, CategoriesResponse),
    (lambda c: c.categories.related(32073), "category/related", "categories.json", {"category_id": "32073"}, CategoriesResponse),
    (lambda c: c.categories.series(125), "category/series", "series_search.json", {"category_id": "125"}, SeriesResponse),
    (lambda c: c.categories.tags(125), "category/tags", "tags.json", {"category_id": "125"}, TagsResponse),
    (
        lambda c: c.categories.related_tags(125, CategoryRelatedTagsBuilder().tag_name("services")),
        "category/related_tags", "tags.json", {"category_id": "125", "tag_names": "services"}, TagsResponse,
    ),
    (lambda c: c.releases.list(), "releases", "releases.json", {}, ReleasesResponse),
    (lambda c: c.releases.all_dates(), "releases/dates", "release_dates.json", {}, ReleaseDatesResponse),
    (lambda c: c.releases.get(53), "release", "releases.json", {"release_id": "53"}, ReleasesResponse),
    (lambda c: c.releases.dates(82), "release/dates", "release_dates.json", {"release_id": "82"}, ReleaseDatesResponse),
    (lambda c: c.releases.series(51), "release/series", "series_search.json", {"release_id": "51"}, SeriesResponse),
    (lambda c: c.releases.sources(51), "release/sources", "sources.json", {"release_id": "51"}, SourcesResponse),
    (lambda c: c.releases.tags(86), "release/tags", "tags.json", {"release_id": "86"}, TagsResponse),
    (
        lambda c: c.releases.related_tags(86, ReleaseRelatedTagsBuilder().tag_name("sa").tag_name("foreign")),
        "release/related_tags", "tags.json", {"release_id": "86", "tag_names": "sa;foreign"}, TagsResponse,
    ),
    (
        lambda c: c.releases.tables(53, ReleaseTablesBuilder().element_id(12886)),
        "release/tables", "release_tables.json", {"release_id": "53", "element_id": "12886"}, ReleaseTablesResponse,
    ),
    (lambda c: c.series.get("GNPCA"), "series", "series.json", {"series_id": "GNPCA"}, SeriesResponse),
    (lambda c: c.series.categories("EXJPUS"), "series/categories", "categories.json", {"series_id": "EXJPUS"}, CategoriesResponse),
    (lambda c: c.series.observations("GNPCA"), "series/observations", "series_observations.json", {"series_id": "GNPCA"}, ObservationsResponse),
    (lambda c: c.series.release("IRA"), "series/release", "releases.json", {"series_id": "IRA"}, ReleasesResponse),
    (lambda c: c.series.search("monetary service index"), "series/search", "series_search.json", {"search_text": "monetary service index"}, SeriesResponse),
    (lambda c: c.series.search_tags("monetary service index"), "series/search/tags", "tags.json", {"series_search_text": "monetary service index"}, TagsResponse),
    (
        lambda c: c.series.search_related_tags("mortgage rate", SeriesSearchRelatedTagsBuilder().tag_name("30-year").search_text("frb")),
        "series/search/related_tags", "tags.json",
        {"series_search_text": "mortgage rate", "tag_names": "30-year", "tag_search_text": "frb"}, TagsResponse,
    ),
    (lambda c: c.series.tags("STLFSI"), "series/tags", "tags.json", {"series_id": "STLFSI"}, TagsResponse),
    (
        lambda c: c.series.updates(SeriesUpdatesBuilder().filter_value(UpdatesFilterValue.MACRO)),
        "series/updates", "series_updates.json", {"filter_value": "macro"}, SeriesUpdatesResponse,
    ),
    (lambda c: c.series.vintage_dates("GNPCA"), "series/vintagedates", "vintagedates.json", {"series_id": "GNPCA"}, VintageDatesResponse),
    (
        lambda c: c.sources.list(SourcesBuilder().order_by(SourceOrderBy.NAME)),
        "sources", "sources.json", {"order_by": "name"}, SourcesResponse,
    ),
    (lambda c: c.sources.get(1), "source", "sources.json", {"source_id": "1"}, SourcesResponse),
    (lambda c: c.sources.releases(1), "source/releases", "releases.json", {"source_id": "1"}, ReleasesResponse),
    (lambda c: c.tags.list(), "tags", "tags.json", {}, TagsResponse),
    (
        lambda c: c.tags.related(RelatedTagsBuilder().tag_name("monetary aggregates").exclude_tag("discontinued")),
        "related_tags", "tags.json", {"tag_names": "monetary aggregates", "exclude_tag_names": "discontinued"}, TagsResponse,
    ),
    (
        lambda c: c.tags.series(TagsSeriesBuilder().tag_name("slovenia").tag_name("food")),
        "tags/series", "series_search.json", {"tag_names": "slovenia;food"}, SeriesResponse,
    ),
]


@pytest.mark.parametrize(
    "call, path, fixture, expected, response_type",
    ENDPOINTS,
    ids=[e[1] for e in ENDPOINTS],
)
def test_endpoint_path_params_and_response(client, requests_mock, call, path, fixture, expected, response_type):
    m = requests_mock.get(f"{BASE_URL}/{path}", json=load_fixture(fixture))

    resp = call(client)

    assert m.call_count == 1
    sent = {k: v[0] for k, v in m.last_request.qs.items()}
    assert sent.pop("file_type") == "json"
    assert sent.pop("api_key") == client.api_key
    assert sent == expected
    assert isinstance(resp, response_type)


def test_category_series_with_filters(client, requests_mock):
    m = requests_mock.get(f"{BASE_URL}/category/series", json=load_fixture("series_search.json"))
    builder = CategorySeriesBuilder().order_by(SeriesOrderBy.LAST_UPDATED).limit(10).tag_name("income")
    resp = client.categories.series(125, builder)
    assert m.last_request.qs["order_by"] == ["last_updated"]
    assert m.last_request.qs["limit"] == ["10"]
    assert m.last_request.qs["tag_names"] == ["income"]
    assert resp.series[0].id == "MSPNHSUS"
