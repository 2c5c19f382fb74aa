"""A background HTTP server for a WSGI application."""

from __future__ import annotations

import threading
from typing import Any

from werkzeug.serving import BaseWSGIServer, make_server

from shopapi.config import ServerConfig

DEFAULT_HOST = "0.0.0.0"
SHUTDOWN_TIMEOUT = 3.0


class HttpServer:
    """Runs a WSGI application on a background thread."""

    def __init__(self, app: Any, config: ServerConfig, host: str = DEFAULT_HOST) -> None:
        self._app = app
        self._host = host
        self._port = config.port
        self._server: BaseWSGIServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        """The configured port, or the bound one once started."""
        return self._server.server_port if self._server is not None else self._port

    @property
    def address(self) -> str:
        return f"{self._host}:{self.port}"

    def start(self) -> None:
        """Bind the socket and serve requests in the background."""
        if self._server is not None:
            raise RuntimeError("server already started")
        self._server = make_server(self._host, self._port, self._app, threaded=True)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        print("http server started")

    def stop(self) -> None:
        """Stop serving; raise TimeoutError if the server does not stop in time."""
        server, thread = self._server, self._thread
        if server is None or thread is None:
            return
        self._server = self._thread = None
        server.shutdown()
        thread.join(SHUTDOWN_TIMEOUT)
        server.server_close()
        if thread.is_alive():
            raise TimeoutError("server forced to shutdown")

    def __enter__(self) -> HttpServer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()