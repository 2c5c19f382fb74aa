"""Product use cases."""

from __future__ import annotations

from shopapi.domain import ProductStore
from shopapi.product_entity import Product, ProductResponse


class ProductService:
    """Creates and lists products through a store."""

    def __init__(self, repo: ProductStore) -> None:
        self._repo = repo

    def create_product(self, product: Product) -> Product:
        return self._repo.create_product(product)

    def get_products(self, offset: int, limit: int) -> list[ProductResponse]:
        return self._repo.get_products(offset, limit)