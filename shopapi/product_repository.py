"""Product storage backed by the relational store."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from shopapi.database import Database
from shopapi.logger import get_logger
from shopapi.product_entity import Product, ProductCategory, ProductResponse

TABLE_NAME = "product"

_INSERT_PRODUCT = (
    "INSERT INTO product (firm_id, user_id, name, anons, text, stock, price, discount, "
    "seo_title, seo_description, seo_keywords, created_at, updated_at) "
    "VALUES (:firm_id, :user_id, :name, :anons, :text, :stock, :price, :discount, "
    ":seo_title, :seo_description, :seo_keywords, :created_at, :updated_at) RETURNING id"
)

_SELECT_PRODUCTS = """
    SELECT p.id, p.name, p.price, p.firm_id
    FROM product p
    ORDER BY p.id DESC
    LIMIT :limit OFFSET :offset
"""

_SELECT_PRODUCT_CATEGORIES = """
    SELECT c.id, c.name FROM category c
    LEFT JOIN categories_to_product ctp ON c.id = ctp.category_id
    WHERE ctp.product_id = :product_id
"""

_SELECT_PRODUCTS_WITH_CATEGORIES = """
    SELECT
        p.id,
        p.name,
        p.price,
        p.firm_id,
        COALESCE(cat.categories, '[]') AS category
    FROM product p
    LEFT JOIN LATERAL (
        SELECT
          json_agg(json_build_object('id', c.id, 'name', c.name)) AS categories
        FROM categories_to_product ctp
        JOIN category c ON c.id = ctp.category_id
        WHERE ctp.product_id = p.id
    ) AS cat ON TRUE
    ORDER BY p.id DESC
    LIMIT :limit
    OFFSET :offset
"""


def _decode_categories(raw: Any) -> list[ProductCategory] | None:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        raw = json.loads(raw)
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ValueError("category list must be a JSON array")
    categories = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            raise ValueError("category entry must be a JSON object")
        folded = {str(key).lower(): value for key, value in entry.items()}
        categories.append(ProductCategory(id=folded.get("id"), name=folded.get("name")))
    return categories


class ProductRepository:
    """Creates and lists products in the ``product`` table."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create_product(self, product: Product) -> Product:
        """Insert a product and return its identifier, name, text and price."""
        log = get_logger()
        log.debug("Sql create product: sql=%s product=%r", _INSERT_PRODUCT, product)

        (last_id,) = self._db.query_row(
            _INSERT_PRODUCT,
            {
                "firm_id": product.firm_id,
                "user_id": product.user_id,
                "name": product.name,
                "anons": product.anons,
                "text": product.text,
                "stock": product.stock,
                "price": product.price,
                "discount": product.discount,
                "seo_title": product.seo_title,
                "seo_description": product.seo_description,
                "seo_keywords": product.seo_keywords,
                "created_at": product.created_at,
                "updated_at": product.updated_at,
            },
        )
        return Product(id=last_id, name=product.name, text=product.text, price=product.price)

    def get_products(self, offset: int, limit: int) -> list[ProductResponse]:
        """Return a page of products, newest first, each with its categories."""
        get_logger().debug(
            "Sql get products: sql=%s offset=%d limit=%d", _SELECT_PRODUCTS, offset, limit
        )
        rows = self._db.query(_SELECT_PRODUCTS, {"limit": limit, "offset": offset})
        products = []
        for product_id, name, price, firm_id in rows:
            products.append(
                ProductResponse(
                    id=product_id,
                    name=name,
                    price=price,
                    firm_id=firm_id,
                    category=self.get_categories_by_product_id(product_id),
                    images=[],
                )
            )
        return products

    def get_categories_by_product_id(self, product_id: int) -> list[ProductCategory]:
        """Return the categories a product belongs to."""
        rows = self._db.query(_SELECT_PRODUCT_CATEGORIES, {"product_id": product_id})
        return [ProductCategory(id=category_id, name=name) for category_id, name in rows]

    def get_products_second_version(self, offset: int, limit: int) -> list[ProductResponse]:
        """Return a page of products with categories gathered in a single query."""
        get_logger().debug(
            "Sql get products: sql=%s offset=%d limit=%d",
            _SELECT_PRODUCTS_WITH_CATEGORIES,
            offset,
            limit,
        )
        rows = self._db.query(_SELECT_PRODUCTS_WITH_CATEGORIES, {"limit": limit, "offset": offset})
        return [
            ProductResponse(
                id=product_id,
                name=name,
                price=price,
                firm_id=firm_id,
                category=_decode_categories(categories),
            )
            for product_id, name, price, firm_id, categories in rows
        ]