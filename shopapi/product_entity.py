"""Product records, their validation and API representations."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import datetime, timedelta, timezone
from typing import Any

from shopapi.category_entity import _ZERO_TIME, _format_time

_TIME_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)
_TYPES: dict[type, tuple[type, ...]] = {int: (int,), float: (int, float), str: (str,), bool: (bool,)}
_OMIT_EMPTY = frozenset(
    {"anons", "text", "stock", "discount", "seo_title", "seo_description", "seo_keywords", "active"}
)
_REQUIRED = ("name", "price")


def _parse_time(key: str, value: Any) -> datetime:
    match = _TIME_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"cannot decode {key!r}: {value!r} is not an RFC 3339 time")
    *parts, fraction, zone = match.groups()
    tz = timezone.utc
    if zone != "Z":
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    try:
        return datetime(*map(int, parts), int((fraction or "").ljust(6, "0")[:6]), tzinfo=tz)
    except ValueError as exc:
        raise ValueError(f"cannot decode {key!r}: {exc}") from None


def _coerce(key: str, kind: type, value: Any) -> Any:
    if kind is datetime:
        return _parse_time(key, value)
    if isinstance(value, _TYPES[kind]) and (kind is bool or not isinstance(value, bool)):
        return kind(value)
    raise ValueError(f"cannot decode {key!r}: expected {kind.__name__}")


@dataclass
class Product:
    """A product as stored and as submitted for creation."""

    id: int = 0
    firm_id: int = 0
    user_id: int = 0
    name: str = ""
    anons: str = ""
    text: str = ""
    stock: int = 0
    price: float = 0.0
    discount: int = 0
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: str = ""
    active: bool = False
    created_at: datetime = _ZERO_TIME
    updated_at: datetime = _ZERO_TIME

    @classmethod
    def from_dict(cls, data: Any) -> Product:
        """Decode a JSON object; keys match case-insensitively, unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("product must be a JSON object")
        kinds = {item.name: _KINDS[item.name] for item in fields(cls)}
        folded = {name.lower(): name for name in kinds}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = key if key in kinds else folded.get(str(key).lower())
            if name is not None and value is not None:
                values[name] = _coerce(name, kinds[name], value)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name not in _OMIT_EMPTY or value:
                result[item.name] = _format_time(value) if isinstance(value, datetime) else value
        return result

    def validate(self) -> dict[str, list[str]]:
        """Return messages per invalid field; an empty dict means the product is valid."""
        return {name: ["is required"] for name in _REQUIRED if not getattr(self, name)}


_KINDS: dict[str, type] = {
    "id": int, "firm_id": int, "user_id": int, "name": str, "anons": str, "text": str,
    "stock": int, "price": float, "discount": int, "seo_title": str, "seo_description": str,
    "seo_keywords": str, "active": bool, "created_at": datetime, "updated_at": datetime,
}


@dataclass
class ProductCategory:
    """A category attached to a listed product."""

    id: int | None = None
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class ProductImage:
    """An image attached to a listed product."""

    id: int = 0
    image: str = ""
    base: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "image": self.image, "is_base": self.base}


@dataclass
class ProductResponse:
    """A product as listed by the API."""

    id: int = 0
    firm_id: int | None = None
    name: str = ""
    anons: str = ""
    text: str = ""
    stock: int = 0
    price: float = 0.0
    discount: int = 0
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: str = ""
    created_at: datetime = _ZERO_TIME
    category: list[ProductCategory] | None = None
    images: list[ProductImage] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name in _OMIT_EMPTY and not value:
                continue
            if isinstance(value, datetime):
                value = _format_time(value)
            elif isinstance(value, list):
                value = [entry.to_dict() for entry in value]
            result[item.name] = value
        return result