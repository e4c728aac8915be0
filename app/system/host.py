"""Host introspection service backed by the standard library."""

import os
import platform
import socket
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from app.domain import MemoryUsage

from .interfaces import SystemIntrospectionError, SystemIntrospectionPort

PROCESS_STARTED_MONOTONIC = time.monotonic()
MEMINFO_PATH = Path("/proc/meminfo")
MEMINFO_AVAILABLE_FIELD = "MemAvailable"


class HostSystemIntrospectionService(SystemIntrospectionPort):
    """Introspection service reading live values from the running host."""

    def __init__(self, started_monotonic: float | None = None, meminfo_path: Path = MEMINFO_PATH):
        """Initialize host introspection service.

        Args:
            started_monotonic: Monotonic clock reading taken at process start.
                Defaults to the reading taken when this module was first imported,
                which `app.main` does during startup. ASGI servers that import the
                application lazily report uptime from that later import.
            meminfo_path: Linux memory statistics file consulted for available memory.
        """

        self._started_monotonic = PROCESS_STARTED_MONOTONIC if started_monotonic is None else started_monotonic
        self._meminfo_path = meminfo_path

    def system_hostname(self) -> str:
        return socket.gethostname()

    def system_platform(self) -> str:
        return sys.platform

    def system_runtime_version(self) -> str:
        return platform.python_version()

    def system_memory(self) -> MemoryUsage:
        """Read physical memory totals.

        Total memory comes from POSIX `sysconf`. Free memory is the kernel's
        `MemAvailable` estimate when `/proc/meminfo` provides it, which counts
        reclaimable page cache; otherwise it is the `sysconf` free page count.

        Returns:
            MemoryUsage: Total and available bytes.

        Raises:
            SystemIntrospectionError: Raised when the host does not expose memory counters.
        """

        try:
            page_size = os.sysconf("SC_PAGE_SIZE")
            total_pages = os.sysconf("SC_PHYS_PAGES")
        except (AttributeError, OSError, ValueError) as error:
            raise SystemIntrospectionError("host memory counters are unavailable") from error
        if min(page_size, total_pages) < 0:
            raise SystemIntrospectionError("host memory counters are unavailable")

        available_bytes = self._system_meminfo_available_bytes()
        if available_bytes is None:
            try:
                available_pages = os.sysconf("SC_AVPHYS_PAGES")
            except (AttributeError, OSError, ValueError) as error:
                raise SystemIntrospectionError("host memory counters are unavailable") from error
            if available_pages < 0:
                raise SystemIntrospectionError("host memory counters are unavailable")
            available_bytes = page_size * available_pages

        return MemoryUsage(total_bytes=page_size * total_pages, free_bytes=available_bytes)

    def _system_meminfo_available_bytes(self) -> int | None:
        """Return `MemAvailable` in bytes, or None when the host does not report it."""

        try:
            with self._meminfo_path.open(encoding="utf-8") as meminfo_file:
                for line in meminfo_file:
                    field_name, _, field_value = line.partition(":")
                    if field_name.strip() == MEMINFO_AVAILABLE_FIELD:
                        # Values are reported in kibibytes.
                        return int(field_value.split()[0]) * 1024
        except (OSError, ValueError, IndexError):
            return None
        return None

    def system_uptime_seconds(self) -> float:
        return max(0.0, time.monotonic() - self._started_monotonic)

    def system_now(self) -> datetime:
        return datetime.now(timezone.utc)
