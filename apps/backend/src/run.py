import logging
import uvicorn
from .config import settings  # ensures .env is loaded
from .services.startup_service import announce_startup


class AnnouncingServer(uvicorn.Server):
    """uvicorn server that prints the LAN banner once the socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            # Only graceful aborts land here; bind errors sys.exit inside super()
            return
        announce_startup(self.bound_port())

    def bound_port(self) -> int:
        for server in getattr(self, "servers", []):
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


def build_server(app="src.main:app") -> AnnouncingServer:
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
    return AnnouncingServer(config)


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    build_server().run()
