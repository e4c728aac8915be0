"""Deployment verification router."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.api.errors import FaultBoundaryRoute
from app.domain import DeploymentInfo
from app.system import SystemIntrospectionPort


def api_create_deployment_router(introspection_service: SystemIntrospectionPort) -> APIRouter:
    """Create router exposing `/api/deployment`.

    Args:
        introspection_service: Service supplying the current time.

    Returns:
        APIRouter: Router exposing `/api/deployment` endpoint.

    Raises:
        ValueError: Raised when introspection_service is invalid.
    """

    if introspection_service is None:
        raise ValueError("introspection_service must not be None")

    router = APIRouter(prefix="/api", tags=["deployment"], route_class=FaultBoundaryRoute)

    @router.get("/deployment")
    def api_deployment_status() -> JSONResponse:
        deployment = DeploymentInfo(deployed_at=introspection_service.system_now())
        return JSONResponse(content=deployment.to_payload(), status_code=status.HTTP_200_OK)

    return router
