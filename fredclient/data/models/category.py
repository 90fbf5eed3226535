from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    parent_id: int
    notes: str | None = None

    @staticmethod
    def from_dict(d: dict) -> "Category":
        return Category(
            id=int(d["id"]),
            name=d["name"],
            parent_id=int(d["parent_id"]),
            notes=d.get("notes"),
        )


@dataclass(frozen=True)
class CategoriesResponse:
    categories: tuple[Category, ...]

    @staticmethod
    def from_dict(d: dict) -> "CategoriesResponse":
        return CategoriesResponse(categories=tuple(Category.from_dict(c) for c in d["categories"]))
