from datetime import datetime, timezone

import pytest

from shopapi.product_entity import (
    Product,
    ProductCategory,
    ProductImage,
    ProductResponse,
)


def test_decode_valid_product():
    product = Product.from_dict({"name": "test", "price": 100.4})
    assert product.name == "test"
    assert product.price == 100.4
    assert product.validate() == {}


def test_validation_errors():
    product = Product.from_dict({"name": ""})
    assert product.validate() == {"name": ["is required"], "price": ["is required"]}


def test_integer_price_accepted():
    assert Product.from_dict({"name": "a", "price": 3}).price == 3.0


def test_keys_match_case_insensitively():
    product = Product.from_dict({"NAME": "x", "Price": 2.5})
    assert (product.name, product.price) == ("x", 2.5)


def test_unknown_keys_and_null_ignored():
    product = Product.from_dict({"name": "x", "colour": "red", "stock": None})
    assert product == Product(name="x")


@pytest.mark.parametrize(
    "data",
    [
        {"stock": 1.5},
        {"price": "100"},
        {"name": 5},
        {"active": 1},
        {"firm_id": True},
        {"created_at": "yesterday"},
        ["name"],
    ],
)
def test_decode_errors(data):
    with pytest.raises(ValueError):
        Product.from_dict(data)


def test_to_dict_omits_empty_optional_fields():
    data = Product(name="test", price=100.4).to_dict()
    assert "anons" not in data
    assert "active" not in data
    assert data["firm_id"] == 0
    assert data["created_at"] == "0001-01-01T00:00:00Z"


def test_to_dict_keeps_set_optional_fields():
    data = Product(name="n", price=1.0, anons="short", stock=2, active=True).to_dict()
    assert data["anons"] == "short"
    assert data["stock"] == 2
    assert data["active"] is True


def test_round_trip():
    product = Product(
        id=3,
        firm_id=1,
        user_id=1,
        name="iPhone 16 Pro Max",
        anons="test annons",
        text="test text",
        stock=1,
        price=120.5,
        discount=10,
        seo_title="test seo title",
        seo_description="test seo description",
        seo_keywords="test seo keywords",
        active=True,
        created_at=datetime(2024, 1, 2, 3, 4, 5, 600000, tzinfo=timezone.utc),
    )
    assert Product.from_dict(product.to_dict()) == product


def test_image_uses_is_base_key():
    assert ProductImage(id=1, image="a.png", base=True).to_dict() == {
        "id": 1,
        "image": "a.png",
        "is_base": True,
    }


def test_product_category_allows_nulls():
    assert ProductCategory().to_dict() == {"id": None, "name": None}


def test_product_response_defaults():
    data = ProductResponse(id=2, name="x", price=1.5).to_dict()
    assert data["firm_id"] is None
    assert data["category"] is None
    assert data["images"] is None
    assert "anons" not in data


def test_product_response_nested():
    response = ProductResponse(
        id=2,
        firm_id=7,
        name="x",
        category=[ProductCategory(id=1, name="c")],
        images=[],
    )
    data = response.to_dict()
    assert data["category"] == [{"id": 1, "name": "c"}]
    assert data["images"] == []
    assert data["firm_id"] == 7