"""HTTP over unix domain sockets.

Builds httpx transports and clients that send every request to a local
unix socket regardless of the URL host, with keep-alive disabled so each
request dials a fresh connection.
"""

import httpx

DEFAULT_BASE_URL = "http://localhost"
DEFAULT_TIMEOUT = 30.0

_NO_KEEPALIVE = httpx.Limits(max_keepalive_connections=0)


def new_transport(socket_path: str) -> httpx.HTTPTransport:
    """Return a transport which sends requests via the unix socket at ``socket_path``."""
    return httpx.HTTPTransport(uds=socket_path, limits=_NO_KEEPALIVE)


def new_async_transport(socket_path: str) -> httpx.AsyncHTTPTransport:
    """Async counterpart of :func:`new_transport`."""
    return httpx.AsyncHTTPTransport(uds=socket_path, limits=_NO_KEEPALIVE)


def new_client(
    socket_path: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.Client:
    """Create an HTTP client bound to a unix socket.

    Args:
        socket_path: Filesystem path of the unix socket
        base_url: Base URL for relative request paths; only its path and
            Host header matter since the socket is always dialed
        timeout: Request timeout in seconds

    Returns:
        httpx.Client using the unix socket transport
    """
    return httpx.Client(
        transport=new_transport(socket_path),
        base_url=base_url,
        timeout=timeout,
        headers={"Connection": "close"},
    )


def new_async_client(
    socket_path: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Async counterpart of :func:`new_client`."""
    return httpx.AsyncClient(
        transport=new_async_transport(socket_path),
        base_url=base_url,
        timeout=timeout,
        headers={"Connection": "close"},
    )
