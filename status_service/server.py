from __future__ import annotations

import socket

import uvicorn

from .api.main import create_app
from .config import AltAppSettings, AppSettings
from .logging import stdout_logger


class BindError(OSError):
    """The listener could not be bound (port in use, permission denied, bad address)."""


def bind_socket(host: str, port: int, backlog: int = 2048) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        # SO_REUSEADDR lets two idle sockets share a port on Linux; listening makes the claim exclusive
        sock.listen(backlog)
    except OSError as e:
        sock.close()
        raise BindError(e.errno, f"cannot bind {host}:{port}: {e.strerror or e}") from e
    return sock


def serve(settings: AppSettings) -> None:
    """Bind, announce on stdout, and serve until the process is terminated.

    The startup line is written whatever the configured log level. A bind
    failure is not caught; it surfaces as a fatal startup error.
    """
    app = create_app(settings)
    sock = bind_socket(settings.host, settings.port)
    stdout_logger().info(
        "listening",
        service=settings.service_name,
        host=settings.host,
        port=settings.port,
        message=f"{settings.service_name} listening on {settings.port}",
    )
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    uvicorn.Server(config).run(sockets=[sock])


def main() -> None:
    serve(AppSettings())


def main_alt() -> None:
    serve(AltAppSettings())
