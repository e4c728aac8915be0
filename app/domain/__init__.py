"""Domain models used across application layer boundaries."""

from .models import (
    AppMetadata,
    DeploymentInfo,
    HealthReport,
    MemoryUsage,
    ServerInfo,
    domain_format_megabytes,
    domain_format_timestamp,
)

__all__ = [
    "AppMetadata",
    "DeploymentInfo",
    "HealthReport",
    "MemoryUsage",
    "ServerInfo",
    "domain_format_megabytes",
    "domain_format_timestamp",
]
