"""Server and database settings read from the command line and the environment."""

from __future__ import annotations

import argparse
import errno
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PORT = 8080
DEFAULT_ENV_FILE = ".env"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_BOOL_WORDS = {
    **dict.fromkeys(("1", "t", "T", "TRUE", "true", "True"), True),
    **dict.fromkeys(("0", "f", "F", "FALSE", "false", "False"), False),
}


@dataclass
class DatabaseConfig:
    """Connection settings for the relational store."""

    driver: str = ""
    dsn: str = ""
    conn_max_lifetime_minutes: int = 3
    max_open_conns: int = 10
    max_idle_conns: int = 1


@dataclass
class ServerConfig:
    """Settings for the HTTP server."""

    port: int = DEFAULT_PORT
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    debug: bool = False


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value and _INT_PATTERN.fullmatch(value) else default


def _port(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        value = -1
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid port value {text!r}")
    return value


def new_server_config(argv: list[str] | None = None) -> ServerConfig:
    """Build the server settings from ``argv`` and the process environment."""
    parser = argparse.ArgumentParser()
    parser.add_argument("-port", "--port", type=_port, default=DEFAULT_PORT, help="http server port")
    args = parser.parse_args(argv)

    return ServerConfig(
        port=args.port,
        database=DatabaseConfig(
            driver=os.environ.get("DATABASE_DRIVER", ""),
            dsn=os.environ.get("DATABASE_DSN", ""),
            conn_max_lifetime_minutes=_env_int("DATABASE_MAX_LIFE_IN_MINUTE", 3),
            max_open_conns=_env_int("DATABASE_MAX_OPEN_CONNS", 10),
            max_idle_conns=_env_int("DATABASE_MAX_IDLE_CONNS", 1),
        ),
        debug=_BOOL_WORDS.get(os.environ.get("DEBUG", ""), False),
    )


def load_env_optional(env_path: str | os.PathLike[str] | None = None) -> None:
    """Load variables from an env file without overriding existing ones.

    Raises FileNotFoundError if the file is missing.
    """
    path = Path(env_path or DEFAULT_ENV_FILE)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    load_dotenv(path, override=False)