import pytest
from flask import Flask

from shopapi.category_entity import Category, CategoryResponse
from shopapi.category_http import CategoryHandler
from shopapi.category_service import CategoryService
from shopapi.http_helpers import DEFAULT_LIMIT, DEFAULT_OFFSET


class FakeCategoryStore:
    def __init__(self, categories=None, error=None):
        self.categories = categories if categories is not None else []
        self.error = error
        self.calls = []

    def create(self, category: Category) -> Category:
        return category

    def get_categories(self, offset, limit):
        self.calls.append((offset, limit))
        if self.error is not None:
            raise self.error
        return self.categories


def make_client(store):
    handler = CategoryHandler(CategoryService(store))
    app = Flask(__name__)
    app.register_blueprint(handler.make_blueprint(), url_prefix="/api/category")
    return app.test_client()


@pytest.mark.parametrize(
    "categories, expected_items",
    [
        (
            [CategoryResponse(id=1, name="Тестовая категория", alias="test")],
            [{"id": 1, "name": "Тестовая категория", "alias": "test"}],
        ),
        ([], []),
    ],
    ids=["Get all categories", "Categories empty"],
)
def test_get_categories(categories, expected_items):
    store = FakeCategoryStore(categories)
    client = make_client(store)

    res = client.get("/api/category", query_string={"offset": "0", "limit": "1"})

    assert res.status_code == 200
    assert res.headers["Content-Type"] == "application/json"
    assert res.get_json() == {"items": expected_items, "offset": 0, "limit": 1}
    assert store.calls == [(0, 1)]


def test_get_categories_with_trailing_slash():
    store = FakeCategoryStore([CategoryResponse(id=2, name="Books", alias="books")])
    client = make_client(store)

    res = client.get("/api/category/?offset=3&limit=5")

    assert res.status_code == 200
    assert res.get_json()["items"] == [{"id": 2, "name": "Books", "alias": "books"}]
    assert store.calls == [(3, 5)]


def test_invalid_paging_falls_back_to_defaults():
    store = FakeCategoryStore([])
    client = make_client(store)

    res = client.get("/api/category?offset=-1&limit=7")

    assert res.status_code == 200
    assert store.calls == [(DEFAULT_OFFSET, DEFAULT_LIMIT)]
    assert res.get_json()["limit"] == DEFAULT_LIMIT


def test_store_error_gives_no_content():
    store = FakeCategoryStore(error=RuntimeError("db down"))
    client = make_client(store)

    res = client.get("/api/category")

    assert res.status_code == 204
    assert res.data == b""


def test_post_is_not_allowed():
    client = make_client(FakeCategoryStore())

    res = client.post("/api/category")

    assert res.status_code == 405