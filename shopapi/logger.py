"""Process-wide application logger."""

from __future__ import annotations

import logging
import sys

from shopapi.config import ServerConfig

_log = logging.getLogger("shopapi")
_log.addHandler(logging.NullHandler())
_log.propagate = False


def load(config: ServerConfig) -> None:
    """Configure the logger: verbose output in debug mode, info level otherwise."""
    handler = logging.StreamHandler(sys.stderr)
    if config.debug:
        handler.setFormatter(
            logging.Formatter("%(asctime)s\t%(levelname)s\t%(module)s:%(lineno)d\t%(message)s")
        )
        level = logging.DEBUG
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        level = logging.INFO

    for existing in list(_log.handlers):
        _log.removeHandler(existing)
    _log.addHandler(handler)
    _log.setLevel(level)


def get_logger() -> logging.Logger:
    """Return the application logger."""
    return _log