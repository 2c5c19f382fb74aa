"""JSON responses and pagination parsing shared by the HTTP handlers."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from flask import Response

from shopapi.logger import get_logger

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


@dataclass
class ResponseWithPagination:
    """A page of items together with the window that produced it."""

    items: Any
    offset: int
    limit: int

    def to_dict(self) -> dict[str, Any]:
        return {"items": _jsonable(self.items), "offset": self.offset, "limit": self.limit}


def write_json(data: Any, code: int) -> Response:
    """Build a JSON response with the given status code."""
    try:
        body = json.dumps(_jsonable(data), ensure_ascii=False, separators=(",", ":")) + "\n"
    except (TypeError, ValueError) as exc:
        get_logger().error("Json encode error: %s", exc)
        body = ""
    return Response(body, status=code, content_type="application/json")


def _read_int(args: Mapping[str, str], key: str, default: int) -> int | None:
    value = args.get(key) or ""
    if value == "":
        return default
    return int(value) if _INT_PATTERN.fullmatch(value) else None


def parse_paginate(args: Mapping[str, str]) -> tuple[int, int]:
    """Read ``offset`` and ``limit`` from query arguments, falling back to defaults."""
    offset = _read_int(args, "offset", DEFAULT_OFFSET)
    limit = _read_int(args, "limit", DEFAULT_LIMIT)
    if offset is None or offset < 0 or limit is None or not 0 < limit <= MAX_LIMIT:
        return DEFAULT_OFFSET, DEFAULT_LIMIT
    return offset, limit