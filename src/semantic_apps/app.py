import logging
from typing import Any, Callable

import uvicorn

from .backend import Backend
from .session import Session

logger = logging.getLogger(__name__)


class App:
    """A single-page app: a Semantic UI layout plus per-session server logic.

    Example::

        ui = div(counter_button("votes", "Votes", value=1200))

        def server(session):
            session.observe_input("votes", lambda clicks: print(clicks))

        app = App(ui, server)
    """

    def __init__(
        self,
        ui: Any,
        server: Callable[[Session], None] | None = None,
        title: str = "Semantic App",
        dev: bool = False,
        log_level: str = "INFO",
    ):
        self.ui = ui
        self.server = server
        self.title = title
        self.dev = dev
        self.log_level = log_level
        self._backend = None

    @property
    def backend(self) -> Backend:
        if self._backend is None:
            self._backend = Backend(self.ui, self.server, self.title, self.dev, self.log_level)
        return self._backend

    @property
    def asgi(self):
        return self.backend.backend

    def run(self, host: str = "127.0.0.1", port: int = 8000):
        """Start the server"""
        try:
            uvicorn.run(self.asgi, host=host, port=port)
        except KeyboardInterrupt:
            logger.info("Shutting down server...")
        finally:
            self.backend.sessions.clear()
            logger.info("Server shutdown complete")


def app(ui: Any, server: Callable[[Session], None] | None = None, **kwargs) -> App:
    return App(ui, server, **kwargs)
