"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the payloads served by the
HTTP surface. Every payload is built fresh per request.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

BYTES_PER_MEGABYTE = 1024 * 1024


@dataclass(frozen=True)
class AppMetadata:
    """Static application metadata for runtime identification.

    Attributes:
        application_name: Human-readable app name.
        application_version: Release version string.
        environment_name: Runtime environment label.
    """

    application_name: str
    application_version: str
    environment_name: str


@dataclass(frozen=True)
class MemoryUsage:
    """Host memory totals in bytes.

    Attributes:
        total_bytes: Physical memory installed on the host.
        free_bytes: Physical memory currently available.
    """

    total_bytes: int
    free_bytes: int

    def to_payload(self) -> dict[str, str]:
        return {
            "total": domain_format_megabytes(self.total_bytes),
            "free": domain_format_megabytes(self.free_bytes),
        }


@dataclass(frozen=True)
class HealthReport:
    """Health response contract used by the `/health` surface.

    Attributes:
        status: Overall status text for service health.
        hostname: Host the process runs on.
        timestamp: Moment the report was built.
        uptime_seconds: Seconds elapsed since process start.
    """

    status: str
    hostname: str
    timestamp: datetime
    uptime_seconds: float

    def to_payload(self) -> dict[str, object]:
        return {
            "status": self.status,
            "hostname": self.hostname,
            "timestamp": domain_format_timestamp(self.timestamp),
            "uptime": self.uptime_seconds,
        }


@dataclass(frozen=True)
class ServerInfo:
    """Runtime description returned by `/api/info`.

    Attributes:
        metadata: Application identity and environment label.
        hostname: Host the process runs on.
        platform: Operating system platform identifier.
        python_version: Interpreter version string.
        memory: Host memory totals.
    """

    metadata: AppMetadata
    hostname: str
    platform: str
    python_version: str
    memory: MemoryUsage

    def to_payload(self) -> dict[str, object]:
        return {
            "application": self.metadata.application_name,
            "version": self.metadata.application_version,
            "environment": self.metadata.environment_name,
            "hostname": self.hostname,
            "platform": self.platform,
            "pythonVersion": self.python_version,
            "memory": self.memory.to_payload(),
        }


@dataclass(frozen=True)
class DeploymentInfo:
    """Deployment verification contract returned by `/api/deployment`.

    Attributes:
        deployed_at: Moment the response was built.
        infrastructure: Hosting infrastructure label.
        pipeline: CI/CD pipeline label.
        security_scan: Image scanner label.
    """

    deployed_at: datetime
    infrastructure: str = "AWS EC2"
    pipeline: str = "Jenkins CI/CD"
    security_scan: str = "Trivy"
    deployed: bool = True

    def to_payload(self) -> dict[str, object]:
        return {
            "deployed": self.deployed,
            "deployedAt": domain_format_timestamp(self.deployed_at),
            "infrastructure": self.infrastructure,
            "pipeline": self.pipeline,
            "securityScan": self.security_scan,
        }


def domain_format_timestamp(moment: datetime) -> str:
    """Render a moment as UTC ISO-8601 with millisecond precision.

    Args:
        moment: Aware or naive datetime; naive values are treated as UTC.

    Returns:
        str: Timestamp such as `2026-10-19T12:00:00.000Z`.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_moment.microsecond // 1000:03d}Z"


def domain_format_megabytes(byte_count: int) -> str:
    """Render a byte count as whole megabytes rounded half-up, e.g. `512 MB`."""

    if byte_count < 0:
        raise ValueError("byte_count must not be negative")
    megabytes = (byte_count + BYTES_PER_MEGABYTE // 2) // BYTES_PER_MEGABYTE
    return f"{megabytes} MB"
