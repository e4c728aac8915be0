"""Server information router describing the running application."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.api.errors import FaultBoundaryRoute
from app.config import AppSettings
from app.domain import AppMetadata, ServerInfo
from app.system import SystemIntrospectionPort


def api_create_info_router(settings: AppSettings, introspection_service: SystemIntrospectionPort) -> APIRouter:
    """Create router exposing `/api/info`.

    Args:
        settings: Validated settings providing application identity and environment label.
        introspection_service: Host and process introspection service.

    Returns:
        APIRouter: Router exposing `/api/info` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if introspection_service is None:
        raise ValueError("introspection_service must not be None")

    metadata = AppMetadata(
        application_name=settings.application_name,
        application_version=settings.application_version,
        environment_name=settings.environment,
    )
    router = APIRouter(prefix="/api", tags=["info"], route_class=FaultBoundaryRoute)

    @router.get("/info")
    def api_server_info() -> JSONResponse:
        """Return application identity, host platform and memory figures."""

        server_info = ServerInfo(
            metadata=metadata,
            hostname=introspection_service.system_hostname(),
            platform=introspection_service.system_platform(),
            python_version=introspection_service.system_runtime_version(),
            memory=introspection_service.system_memory(),
        )
        return JSONResponse(content=server_info.to_payload(), status_code=status.HTTP_200_OK)

    return router
