import pytest

from shopapi.app import create_app, main
from shopapi.http_helpers import DEFAULT_LIMIT, DEFAULT_OFFSET


class FakeDatabase:
    def __init__(self):
        self.categories = [(1, "Books", "books"), (2, "Garden", "garden")]
        self.products = [(5, "Lamp", 12.5, 2)]
        self.links = {5: [(1, "Books")]}
        self.inserted = []

    def query(self, sql, params=None):
        if "categories_to_product" in sql:
            return self.links.get(params["product_id"], [])
        start, stop = params["offset"], params["offset"] + params["limit"]
        if "FROM product" in sql:
            return self.products[start:stop]
        if "FROM category" in sql:
            return self.categories[start:stop]
        return []

    def query_row(self, sql, params=None):
        self.inserted.append(params)
        return (len(self.inserted),)


@pytest.fixture
def client():
    db = FakeDatabase()
    app = create_app(db)
    return app.test_client(), db


def test_categories_route(client):
    test_client, _ = client
    res = test_client.get("/api/category?offset=1&limit=1")
    assert res.status_code == 200
    assert res.get_json() == {
        "items": [{"id": 2, "name": "Garden", "alias": "garden"}],
        "offset": 1,
        "limit": 1,
    }


def test_products_route_lists_with_categories(client):
    test_client, _ = client
    res = test_client.get("/api/products")
    assert res.status_code == 200
    body = res.get_json()
    assert body["offset"] == DEFAULT_OFFSET
    assert body["limit"] == DEFAULT_LIMIT
    [item] = body["items"]
    assert item["id"] == 5
    assert item["firm_id"] == 2
    assert item["category"] == [{"id": 1, "name": "Books"}]
    assert item["images"] == []


def test_create_product_route_stores_product(client):
    test_client, db = client
    res = test_client.post("/api/products/", data='{"name": "Desk", "price": 40}')
    assert res.status_code == 201
    body = res.get_json()
    assert body["id"] == 1
    assert body["name"] == "Desk"
    assert db.inserted[0]["name"] == "Desk"


def test_unknown_route(client):
    test_client, _ = client
    assert test_client.get("/api/unknown").status_code == 404


def test_main_fails_without_database(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_DSN", "")
    with pytest.raises(SystemExit) as info:
        main([])
    assert str(info.value.code).startswith("init db failed")
    assert "Error loading .env file" in capsys.readouterr().out