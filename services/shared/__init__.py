"""Shared utilities used across microservices."""

from .config import DatabaseConfig, ServiceConfig, load_service_config
from .cors import configure_cors, get_cors_origins
from .health import check_database_health, create_health_router
from .logging import RequestContextLogMiddleware, configure_logging
from .startup import database_lifespan, database_lifespan_factory

__all__ = [
    "DatabaseConfig",
    "ServiceConfig",
    "load_service_config",
    "configure_cors",
    "get_cors_origins",
    "check_database_health",
    "create_health_router",
    "RequestContextLogMiddleware",
    "configure_logging",
    "database_lifespan",
    "database_lifespan_factory",
]
