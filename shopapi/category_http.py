"""HTTP endpoints for categories."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request

from shopapi.domain import CategoryStore
from shopapi.http_helpers import ResponseWithPagination, parse_paginate, write_json
from shopapi.logger import get_logger


class CategoryHandler:
    """Serves category listings."""

    def __init__(self, service: CategoryStore) -> None:
        self._service = service

    def get_categories(self) -> Response:
        """List a page of categories selected by the ``offset`` and ``limit`` arguments."""
        offset, limit = parse_paginate(request.args)
        try:
            categories = self._service.get_categories(offset, limit)
        except Exception as exc:
            get_logger().error("Get categories error: %s", exc)
            return Response(status=HTTPStatus.NO_CONTENT)

        page = ResponseWithPagination(items=categories, offset=offset, limit=limit)
        return write_json(page, HTTPStatus.OK)

    def make_blueprint(self) -> Blueprint:
        """Return a blueprint exposing the category routes at its root."""
        blueprint = Blueprint("category", __name__)
        blueprint.add_url_rule(
            "/",
            endpoint="get_categories",
            view_func=self.get_categories,
            methods=["GET"],
            strict_slashes=False,
        )
        return blueprint