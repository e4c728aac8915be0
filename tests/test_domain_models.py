"""Tests for domain payload formatting helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain import DeploymentInfo, MemoryUsage, domain_format_megabytes, domain_format_timestamp

MEGABYTE = 1024 * 1024


def test_domain_format_timestamp_uses_millisecond_utc_form() -> None:
    """Render UTC timestamps with millisecond precision and a `Z` suffix."""

    moment = datetime(2026, 10, 19, 8, 5, 3, 987654, tzinfo=timezone.utc)

    assert domain_format_timestamp(moment) == "2026-10-19T08:05:03.987Z"


def test_domain_format_timestamp_converts_offsets_to_utc() -> None:
    """Convert offset-aware timestamps to UTC before rendering."""

    moment = datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone(timedelta(hours=2)))

    assert domain_format_timestamp(moment) == "2026-10-19T08:00:00.000Z"


def test_domain_format_timestamp_treats_naive_values_as_utc() -> None:
    assert domain_format_timestamp(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02T03:04:05.000Z"


@pytest.mark.parametrize(
    ("byte_count", "expected"),
    [(0, "0 MB"), (MEGABYTE, "1 MB"), (MEGABYTE + MEGABYTE // 2, "2 MB"), (MEGABYTE + MEGABYTE // 2 - 1, "1 MB")],
)
def test_domain_format_megabytes_rounds_half_up(byte_count: int, expected: str) -> None:
    """Round byte counts to whole megabytes, halves rounding up."""

    assert domain_format_megabytes(byte_count) == expected


def test_domain_format_megabytes_rejects_negative_counts() -> None:
    with pytest.raises(ValueError):
        domain_format_megabytes(-1)


def test_memory_usage_payload_uses_megabyte_strings() -> None:
    """Render memory totals as `<N> MB` strings."""

    usage = MemoryUsage(total_bytes=4096 * MEGABYTE, free_bytes=1024 * MEGABYTE)

    assert usage.to_payload() == {"total": "4096 MB", "free": "1024 MB"}


def test_deployment_info_payload_has_fixed_labels() -> None:
    """Carry fixed infrastructure, pipeline and scanner labels."""

    payload = DeploymentInfo(deployed_at=datetime(2026, 10, 19, tzinfo=timezone.utc)).to_payload()

    assert payload == {
        "deployed": True,
        "deployedAt": "2026-10-19T00:00:00.000Z",
        "infrastructure": "AWS EC2",
        "pipeline": "Jenkins CI/CD",
        "securityScan": "Trivy",
    }
