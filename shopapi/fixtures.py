"""Sample data for filling a development database."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from shopapi.category_entity import Category
from shopapi.category_repository import CategoryRepository
from shopapi.config import load_env_optional, new_server_config
from shopapi.database import Database, new_db
from shopapi.logger import load as load_logger
from shopapi.product_entity import Product
from shopapi.product_repository import ProductRepository

_FIRST_NAMES = (
    "Ada", "Boris", "Clara", "Dmitri", "Elena", "Farid", "Greta", "Hugo",
    "Irina", "Jonas", "Karim", "Lena", "Marat", "Nina", "Oskar", "Petra",
)
_LAST_NAMES = (
    "Adams", "Brooks", "Carter", "Dalton", "Evans", "Fischer", "Garcia", "Hale",
    "Ivanov", "Jensen", "Keller", "Lopez", "Morris", "Novak", "Olsen", "Price",
)
_EMOJI_ALIASES = (
    "smile", "heart", "rocket", "star", "fire", "sparkles", "tada", "coffee",
    "sunny", "zap", "apple", "gift", "rainbow", "snowflake", "moon", "tulip",
)
_WORDS = (
    "alpha", "bright", "calm", "delta", "early", "field", "green", "harbor",
    "island", "jolly", "kind", "light", "mellow", "north", "ocean", "plain",
    "quiet", "river", "stone", "timber", "upper", "valley", "warm", "yellow",
)
_PRODUCT_ADJECTIVES = (
    "Compact", "Deluxe", "Smart", "Classic", "Portable", "Wireless", "Premium", "Ergonomic",
)
_PRODUCT_NOUNS = (
    "Lamp", "Chair", "Speaker", "Backpack", "Kettle", "Watch", "Keyboard", "Blender",
)

_EARLIEST_DATE = datetime(1900, 1, 1, tzinfo=timezone.utc)

_rng = random.Random()


def _sentence(rng: random.Random, words: int) -> str:
    if words <= 0:
        return ""
    chosen = [rng.choice(_WORDS) for _ in range(words)]
    chosen[0] = chosen[0].capitalize()
    return " ".join(chosen) + "."


def _date(rng: random.Random) -> datetime:
    span = int((datetime.now(timezone.utc) - _EARLIEST_DATE).total_seconds())
    return _EARLIEST_DATE + timedelta(seconds=rng.randint(0, span))


def fake_category(rng: random.Random | None = None) -> Category:
    """Return a category with a random name and alias."""
    rng = rng or _rng
    now = datetime.now(timezone.utc)
    return Category(
        name=f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
        alias=rng.choice(_EMOJI_ALIASES),
        created_at=now,
        updated_at=now,
    )


def generate_category(n: int, db: Database) -> None:
    """Insert ``n`` random categories, printing any error and carrying on."""
    repo = CategoryRepository(db)
    for _ in range(n):
        try:
            repo.create(fake_category())
        except Exception as exc:
            print(exc)


def new_fake_product(rng: random.Random | None = None) -> Product:
    """Return a product filled with random values."""
    rng = rng or _rng
    return Product(
        name=f"{rng.choice(_PRODUCT_ADJECTIVES)} {rng.choice(_PRODUCT_NOUNS)}",
        firm_id=rng.randint(1, 10),
        user_id=rng.randint(1, 10),
        anons=_sentence(rng, rng.randint(8, 16)),
        price=round(rng.uniform(3, 500), 2),
        text=_sentence(rng, 1024),
        stock=rng.randint(0, 10),
        discount=rng.randint(0, 10),
        seo_title=_sentence(rng, 3),
        seo_keywords=_sentence(rng, 3),
        seo_description=_sentence(rng, 3),
        created_at=_date(rng),
        updated_at=_date(rng),
    )


def generate_product_fixtures(n: int, db: Database) -> None:
    """Insert ``n`` random products, printing any error and carrying on."""
    repo = ProductRepository(db)
    for _ in range(n):
        try:
            repo.create_product(new_fake_product())
        except Exception as exc:
            print(exc)


def main(argv: list[str] | None = None) -> None:
    """Fill the configured database with sample categories and products."""
    try:
        load_env_optional()
    except OSError:
        print("Error loading .env file")

    config = new_server_config(argv)
    load_logger(config)

    try:
        db = new_db(config.database)
    except Exception as exc:
        raise SystemExit(f"init db failed: {exc}") from exc

    with db:
        generate_category(10, db)
        generate_product_fixtures(10, db)