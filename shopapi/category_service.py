"""Category use cases."""

from __future__ import annotations

from shopapi.category_entity import Category, CategoryResponse
from shopapi.domain import CategoryStore


class CategoryService:
    """Creates and lists categories through a store."""

    def __init__(self, repo: CategoryStore) -> None:
        self._repo = repo

    def create(self, category: Category) -> Category:
        return self._repo.create(category)

    def get_categories(self, offset: int, limit: int) -> list[CategoryResponse]:
        return self._repo.get_categories(offset, limit)