"""Health endpoint router for load balancers and monitoring."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.api.errors import FaultBoundaryRoute
from app.domain import HealthReport
from app.system import SystemIntrospectionPort

HEALTHY_STATUS = "healthy"


def api_create_health_router(introspection_service: SystemIntrospectionPort) -> APIRouter:
    """Create health-check router reporting host identity and process uptime.

    Args:
        introspection_service: Host and process introspection service.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when introspection_service is invalid.
    """

    if introspection_service is None:
        raise ValueError("introspection_service must not be None")

    router = APIRouter(tags=["health"], route_class=FaultBoundaryRoute)

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return process health state.

        Returns:
            JSONResponse: Health payload with hostname, timestamp and uptime.

        Raises:
            SystemIntrospectionError: Raised when host metadata is unavailable.
        """

        report = HealthReport(
            status=HEALTHY_STATUS,
            hostname=introspection_service.system_hostname(),
            timestamp=introspection_service.system_now(),
            uptime_seconds=float(introspection_service.system_uptime_seconds()),
        )
        return JSONResponse(content=report.to_payload(), status_code=status.HTTP_200_OK)

    return router
