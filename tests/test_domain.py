from shopapi.domain import DefaultFactory
from shopapi.product_entity import Product


def test_default_factory_returns_equal_copy():
    original = Product(name="test", price=100.4)
    created = DefaultFactory().create(original)
    assert created == original
    assert created is not original


def test_default_factory_copy_is_independent():
    original = Product(name="test", price=100.4)
    created = DefaultFactory().create(original)
    created.name = "changed"
    assert original.name == "test"
    assert created.name == "changed"