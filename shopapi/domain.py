"""Interfaces between the HTTP layer, the services and the stores."""

from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable

from shopapi.category_entity import Category, CategoryResponse
from shopapi.product_entity import Product, ProductResponse


@runtime_checkable
class CategoryStore(Protocol):
    """Creates and lists categories."""

    def create(self, category: Category) -> Category: ...

    def get_categories(self, offset: int, limit: int) -> list[CategoryResponse]: ...


@runtime_checkable
class ProductStore(Protocol):
    """Creates and lists products."""

    def create_product(self, product: Product) -> Product: ...

    def get_products(self, offset: int, limit: int) -> list[ProductResponse]: ...


@runtime_checkable
class ProductFactory(Protocol):
    """Builds products ready to be stored."""

    def create(self, product: Product) -> Product: ...


class DefaultFactory:
    """A factory that hands back an independent copy of the product."""

    def create(self, product: Product) -> Product:
        return dataclasses.replace(product)