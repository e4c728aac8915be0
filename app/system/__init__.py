"""Process and host introspection package."""

from .host import PROCESS_STARTED_MONOTONIC, HostSystemIntrospectionService
from .interfaces import SystemIntrospectionError, SystemIntrospectionPort

__all__ = [
    "PROCESS_STARTED_MONOTONIC",
    "HostSystemIntrospectionService",
    "SystemIntrospectionError",
    "SystemIntrospectionPort",
]
