"""Category records and their API representation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _format_time(moment: datetime) -> str:
    """Render a timestamp as RFC 3339 with trailing fraction zeros removed."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    rendered = moment.isoformat(timespec="microseconds")
    fraction, zone = rendered[20:26].rstrip("0"), rendered[26:]
    return rendered[:19] + (f".{fraction}" if fraction else "") + ("Z" if zone == "+00:00" else zone)


@dataclass
class Category:
    """A stored product category."""

    id: int = 0
    name: str = ""
    alias: str = ""
    created_at: datetime = _ZERO_TIME
    updated_at: datetime = _ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "alias": self.alias,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


@dataclass
class CategoryResponse:
    """A category as listed by the API."""

    id: int = 0
    name: str = ""
    alias: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "alias": self.alias}