"""FastAPI application factory for the demo HTTP responder.

This module composes explicit routes, the landing page, the static asset mount
and centralized error handling into one application.
"""

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import AppSettings
from app.system import SystemIntrospectionPort

from .errors import FaultBoundaryRoute, api_handle_http_error, api_handle_unexpected_error
from .routers import api_create_deployment_router, api_create_health_router, api_create_info_router

LANDING_PAGE_FILENAME = "index.html"


def create_api_application(
    settings: AppSettings,
    introspection_service: SystemIntrospectionPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        introspection_service: Host and process introspection service used by API routes.

    Returns:
        FastAPI: Framework application instance with routes and static assets.

    Raises:
        RuntimeError: Raised when the public directory does not exist.
    """
    application = FastAPI(title=settings.application_name, version=settings.application_version)
    application.router.route_class = FaultBoundaryRoute
    application.add_exception_handler(StarletteHTTPException, api_handle_http_error)
    application.add_exception_handler(Exception, api_handle_unexpected_error)

    public_directory = settings.public_directory
    landing_page_path = public_directory / LANDING_PAGE_FILENAME

    @application.get("/", tags=["foundation"], include_in_schema=False)
    def foundation_index() -> FileResponse:
        """Return the landing page.

        Returns:
            FileResponse: Contents of `index.html` served as `text/html`.

        Raises:
            FileNotFoundError: Raised when the landing page is missing.
        """

        if not landing_page_path.is_file():
            raise FileNotFoundError(f"landing page not found: {landing_page_path}")
        return FileResponse(landing_page_path, media_type="text/html")

    application.include_router(api_create_health_router(introspection_service=introspection_service))
    application.include_router(
        api_create_info_router(settings=settings, introspection_service=introspection_service)
    )
    application.include_router(api_create_deployment_router(introspection_service=introspection_service))

    # Mounted last so explicit routes win; misses surface as 404 through api_handle_http_error.
    application.mount("/", StaticFiles(directory=public_directory), name="public")

    return application
