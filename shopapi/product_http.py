"""HTTP endpoints for products."""

from __future__ import annotations

import json
from http import HTTPStatus

from flask import Blueprint, Response, request

from shopapi.domain import ProductStore
from shopapi.http_helpers import ResponseWithPagination, parse_paginate, write_json
from shopapi.logger import get_logger
from shopapi.product_entity import Product


class ProductHandler:
    """Serves product creation and listings."""

    def __init__(self, service: ProductStore) -> None:
        self._service = service

    def create_product(self) -> Response:
        """Create a product from the JSON request body."""
        log = get_logger()
        try:
            body = request.get_data(as_text=True).lstrip(" \t\n\r")
            data, _ = json.JSONDecoder().raw_decode(body)
            product = Product() if data is None else Product.from_dict(data)
        except ValueError as exc:
            log.debug("Error decoding product: %s", exc)
            return Response(status=HTTPStatus.INTERNAL_SERVER_ERROR)

        errors = product.validate()
        if errors:
            return write_json(errors, HTTPStatus.BAD_REQUEST)

        try:
            created = self._service.create_product(product)
        except Exception as exc:
            log.debug("Error creating product: %s", exc)
            return Response(status=HTTPStatus.INTERNAL_SERVER_ERROR)
        return write_json(created, HTTPStatus.CREATED)

    def get_products(self) -> Response:
        """List a page of products selected by the ``offset`` and ``limit`` arguments."""
        offset, limit = parse_paginate(request.args)
        status = HTTPStatus.OK
        try:
            products = self._service.get_products(offset, limit)
        except Exception as exc:
            get_logger().error("Get products error: %s", exc)
            products, status = None, HTTPStatus.INTERNAL_SERVER_ERROR
        return write_json(ResponseWithPagination(items=products, offset=offset, limit=limit), status)

    def make_blueprint(self) -> Blueprint:
        """Return a blueprint exposing the product routes at its root."""
        blueprint = Blueprint("products", __name__)
        for view, method in ((self.create_product, "POST"), (self.get_products, "GET")):
            blueprint.add_url_rule(
                "/", endpoint=view.__name__, view_func=view, methods=[method], strict_slashes=False
            )
        return blueprint