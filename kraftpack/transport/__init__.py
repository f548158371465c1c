"""Transports for talking to local daemons."""

from .httpunix import new_async_client, new_async_transport, new_client, new_transport

__all__ = ["new_async_client", "new_async_transport", "new_client", "new_transport"]
