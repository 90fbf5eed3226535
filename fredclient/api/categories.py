"""
Categories API module: the FRED category tree and the series and tags filed under it.
"""
from fredclient.api.endpoint import EndpointGroup
from fredclient.builders.category import (
    CategoryChildrenBuilder,
    CategoryRelatedBuilder,
    CategoryRelatedTagsBuilder,
    CategorySeriesBuilder,
    CategoryTagsBuilder,
)
from fredclient.data.models.category import CategoriesResponse
from fredclient.data.models.series import SeriesResponse
from fredclient.data.models.tag import TagsResponse


class CategoriesAPI(EndpointGroup):
    """Category endpoints."""

    def get(self, category_id: int) -> CategoriesResponse:
        """Fetch a category (GET /category)."""
        return self._get("category", CategoriesResponse, {"category_id": category_id})

    def children(self, category_id: int, builder: CategoryChildrenBuilder | None = None) -> CategoriesResponse:
        """Fetch the child categories (GET /category/children)."""
        return self._get("category/children", CategoriesResponse, {"category_id": category_id}, builder)

    def related(self, category_id: int, builder: CategoryRelatedBuilder | None = None) -> CategoriesResponse:
        """Fetch related categories (GET /category/related)."""
        return self._get("category/related", CategoriesResponse, {"category_id": category_id}, builder)

    def series(self, category_id: int, builder: CategorySeriesBuilder | None = None) -> SeriesResponse:
        """Fetch the series in a category (GET /category/series)."""
        return self._get("category/series", SeriesResponse, {"category_id": category_id}, builder)

    def tags(self, category_id: int, builder: CategoryTagsBuilder | None = None) -> TagsResponse:
        """Fetch the tags for a category (GET /category/tags)."""
        return self._get("category/tags", TagsResponse, {"category_id": category_id}, builder)

    def related_tags(self, category_id: int, builder: CategoryRelatedTagsBuilder) -> TagsResponse:
        """
        Fetch tags related to one or more tags within a category (GET /category/related_tags).
        The builder must name at least one tag.
        """
        return self._get(
            "category/related_tags", TagsResponse, {"category_id": category_id}, builder, CategoryRelatedTagsBuilder
        )
