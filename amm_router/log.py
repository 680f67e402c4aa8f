"""structlog setup for applications embedding the router."""

import logging

import structlog

from amm_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig


def configure_logging(config: RouterConfig = DEFAULT_ROUTER_CONFIG) -> None:
    """Configure structlog with console output filtered at config.log_level.

    Raises:
        ValueError: If the level name is unknown
    """
    log_level = logging.getLevelName(config.log_level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
