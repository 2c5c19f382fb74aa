"""Category storage backed by the relational store."""

from __future__ import annotations

from shopapi.category_entity import Category, CategoryResponse
from shopapi.database import Database

_INSERT_CATEGORY = "INSERT INTO category (name, alias) VALUES (:name, :alias) RETURNING id"

_SELECT_CATEGORIES = "SELECT id, name, alias FROM category ORDER BY name LIMIT :limit OFFSET :offset"


class CategoryRepository:
    """Creates and lists categories in the ``category`` table."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, category: Category) -> Category:
        """Insert a category and return it with its new identifier."""
        (last_id,) = self._db.query_row(
            _INSERT_CATEGORY, {"name": category.name, "alias": category.alias}
        )
        return Category(id=last_id, name=category.name, alias=category.alias)

    def get_categories(self, offset: int, limit: int) -> list[CategoryResponse]:
        """Return a page of categories ordered by name."""
        rows = self._db.query(_SELECT_CATEGORIES, {"limit": limit, "offset": offset})
        return [
            CategoryResponse(id=category_id, name=name, alias=alias)
            for category_id, name, alias in rows
        ]