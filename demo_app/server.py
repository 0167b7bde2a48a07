"""uvicorn launcher for demo-app.

The listener is bound inside ``Server.startup``. If the bind fails, uvicorn
logs the error and exits with its non-zero startup-failure code. This module
adds no retry and does not fall back to another port.
"""

import logging
import socket

import uvicorn

from demo_app.config import Settings

logger = logging.getLogger(__name__)

APP_IMPORT_PATH = "demo_app.main:app"


class ListeningServer(uvicorn.Server):
    """uvicorn server that announces its port once the listener is up."""

    def __init__(self, config: uvicorn.Config, service_name: str):
        super().__init__(config)
        self.service_name = service_name

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("%s listening on port %d", self.service_name, self.config.port)


def build_server(settings: Settings | None = None) -> ListeningServer:
    """Create a server for the current environment (or the given settings).

    Only the listener fields (host, port, log_level) and the service name in
    the "listening" line come from ``settings``. The app itself is loaded from
    ``demo_app.main`` and reads the module-level ``demo_app.config.settings``,
    so page content and lifespan log lines follow the process environment.
    """
    settings = settings or Settings()
    config = uvicorn.Config(
        APP_IMPORT_PATH,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    return ListeningServer(config, service_name=settings.service_name)


def run(settings: Settings | None = None) -> None:
    build_server(settings).run()
