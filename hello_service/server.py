from __future__ import annotations

import logging
import socket
import sys

import uvicorn

from hello_service.api.app import create_app
from hello_service.core.config import Settings

logger = logging.getLogger(__name__)


def format_banner(host: str, port: int) -> str:
    return f"Server running at http://{host}:{port}/"


class BannerServer(uvicorn.Server):
    """uvicorn server that announces its address on stdout once the socket is bound.

    uvicorn exits the process with a non-zero status from ``startup`` when binding fails,
    so the banner is only ever written for a live listener.
    """

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return
        sys.stdout.write(format_banner(self.config.host, self.bound_port) + "\n")
        sys.stdout.flush()

    @property
    def bound_port(self) -> int:
        # Port 0 asks the OS for an ephemeral port; report the one we got.
        if self.config.port == 0 and self.servers:
            for server in self.servers:
                for sock in server.sockets:
                    return sock.getsockname()[1]
        return self.config.port


def build_server(settings: Settings) -> BannerServer:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
        server_header=False,
    )
    return BannerServer(config)


def serve(settings: Settings) -> None:
    logger.info(
        "Starting server",
        extra={"routing_policy": settings.routing_policy, "service": settings.service_name},
    )
    build_server(settings).run()
