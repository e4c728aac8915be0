"""Typed interfaces for host and process introspection services."""

from datetime import datetime
from typing import Protocol

from app.domain import MemoryUsage


class SystemIntrospectionError(RuntimeError):
    """Raised when the operating system cannot report a requested value."""


class SystemIntrospectionPort(Protocol):
    """Port definition for read-only process and host metadata."""

    def system_hostname(self) -> str:
        """Return the host name of the machine running the process.

        Returns:
            str: Host name.

        Raises:
            SystemIntrospectionError: Raised when the host name is unavailable.
        """

    def system_platform(self) -> str:
        """Return the operating system platform identifier, e.g. `linux`.

        Returns:
            str: Lowercase platform identifier.

        Raises:
            SystemIntrospectionError: Raised when the platform is unavailable.
        """

    def system_runtime_version(self) -> str:
        """Return the interpreter version string.

        Returns:
            str: Version such as `3.12.4`.

        Raises:
            SystemIntrospectionError: Raised when the version is unavailable.
        """

    def system_memory(self) -> MemoryUsage:
        """Return total and available physical memory.

        Returns:
            MemoryUsage: Host memory totals in bytes.

        Raises:
            SystemIntrospectionError: Raised when memory figures are unavailable.
        """

    def system_uptime_seconds(self) -> float:
        """Return seconds elapsed since the process started.

        Returns:
            float: Non-negative uptime.

        Raises:
            SystemIntrospectionError: Raised when uptime cannot be measured.
        """

    def system_now(self) -> datetime:
        """Return the current UTC time.

        Returns:
            datetime: Timezone-aware current time.

        Raises:
            SystemIntrospectionError: Raised when the clock is unavailable.
        """
