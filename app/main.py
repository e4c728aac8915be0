"""Main module entrypoint for local runtime execution.

This module validates startup configuration, configures logging and launches
the FastAPI service.
"""

import argparse
import logging
import socket

import uvicorn

from app.bootstrap import bootstrap_create_application
from app.config import AppSettings, config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run the HTTP server with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised by uvicorn when the listener cannot be bound.
    """

    settings = main_resolve_settings(argv)
    config_configure_logging(settings.log_level)
    application = bootstrap_create_application(settings)
    main_log_startup_banner(settings)
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main_resolve_settings(argv: list[str] | None = None) -> AppSettings:
    """Load settings and apply command-line overrides.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        AppSettings: Settings with `--host` and `--port` applied.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="LenDen DevSecOps demo web server")
    argument_parser.add_argument("--host", dest="host", type=str, help="Override the HOST bind address")
    argument_parser.add_argument("--port", dest="port", type=int, help="Override the PORT to listen on")
    parsed_arguments = argument_parser.parse_args(argv)

    overrides = {
        name: value
        for name, value in (("host", parsed_arguments.host), ("port", parsed_arguments.port))
        if value is not None
    }
    return config_load_settings(**overrides)


def main_log_startup_banner(settings: AppSettings) -> None:
    """Log where the server listens and what it runs as."""

    logger.info("%s starting", settings.application_name)
    logger.info("Server running on: http://%s:%s", settings.host, settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info("Hostname: %s", socket.gethostname())


if __name__ == "__main__":
    main()
