"""The HTTP API application and its command-line entry point."""

from __future__ import annotations

import signal
import threading

from flask import Flask

from shopapi.category_http import CategoryHandler
from shopapi.category_repository import CategoryRepository
from shopapi.category_service import CategoryService
from shopapi.config import ServerConfig, load_env_optional, new_server_config
from shopapi.database import Database, new_db
from shopapi.logger import get_logger
from shopapi.logger import load as load_logger
from shopapi.product_http import ProductHandler
from shopapi.product_repository import ProductRepository
from shopapi.product_service import ProductService
from shopapi.server import HttpServer

_SHUTDOWN_SIGNALS = ("SIGINT", "SIGTERM", "SIGHUP", "SIGQUIT")


def create_app(db: Database) -> Flask:
    """Wire stores, services and handlers into a Flask application under ``/api``."""
    product_handler = ProductHandler(ProductService(ProductRepository(db)))
    category_handler = CategoryHandler(CategoryService(CategoryRepository(db)))

    app = Flask(__name__)
    app.register_blueprint(product_handler.make_blueprint(), url_prefix="/api/products")
    app.register_blueprint(category_handler.make_blueprint(), url_prefix="/api/category")
    return app


def _wait_for_signal() -> None:
    received = threading.Event()

    def _on_signal(signum: int, frame: object) -> None:
        received.set()

    previous = {}
    for name in _SHUTDOWN_SIGNALS:
        sig = getattr(signal, name, None)
        if sig is not None:
            previous[sig] = signal.signal(sig, _on_signal)
    try:
        while not received.wait(0.5):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def _serve(app: Flask, config: ServerConfig) -> None:
    server = HttpServer(app, config)
    server.start()
    log = get_logger()
    try:
        log.info("Listening for signal")
        _wait_for_signal()
        log.info("Graceful shutdown...")
    finally:
        server.stop()


def main(argv: list[str] | None = None) -> None:
    """Run the API server until a shutdown signal arrives."""
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
        _serve(create_app(db), config)