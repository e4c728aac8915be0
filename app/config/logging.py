"""Process-wide logging configuration for the runtime entrypoint."""

from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def config_configure_logging(log_level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Args:
        log_level: Standard logging level name applied to the root logger.

    Returns:
        None: Logging is configured as a side effect.
    """

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"handlers": ["console"], "level": log_level},
        }
    )
