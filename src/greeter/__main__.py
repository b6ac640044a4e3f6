from __future__ import annotations

import socket

import structlog
import uvicorn

from greeter.app.main import app

log = structlog.get_logger()


class ListeningServer(uvicorn.Server):
    """
    uvicorn server that announces itself only once its sockets are bound.

    A failed bind exits inside ``startup()`` and never reaches the log line.
    """

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return

        log.info(
            "server.listening",
            host=self.config.host,
            port=self.config.port,
            message=f"Server is running on port {self.config.port}",
        )


def main() -> None:
    settings = app.state.settings

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    ListeningServer(config).run()


if __name__ == "__main__":
    main()
