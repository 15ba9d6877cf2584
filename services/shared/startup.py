"""Async lifespan helpers shared by FastAPI services."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any, Callable, Optional

import structlog
from fastapi import FastAPI


@asynccontextmanager
async def database_lifespan(
    app: FastAPI,
    *,
    service_name: str,
    initializer: Callable[[], Any],
    on_shutdown: Optional[Callable[[], Any]] = None,
):
    """Run the database initializer once before the service starts handling requests.

    Falhas de conexão ou de permissão são fatais: o erro é registrado e
    propagado, sem novas tentativas, para que o processo encerre com código
    diferente de zero.
    """
    logger = structlog.get_logger("startup").bind(service=service_name)
    logger.info("startup_begin")
    try:
        result = await asyncio.to_thread(initializer)
    except Exception:
        logger.exception("startup_failed")
        raise
    logger.info("database_initialized", inserted=result)
    try:
        yield
    finally:
        if on_shutdown is not None:
            await asyncio.to_thread(on_shutdown)
        logger.info("shutdown_complete")


def database_lifespan_factory(
    *,
    service_name: str,
    initializer: Callable[[], Any],
    on_shutdown: Optional[Callable[[], Any]] = None,
):
    """Return a FastAPI lifespan callable pre-configured for database initialization."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        async with database_lifespan(
            app,
            service_name=service_name,
            initializer=initializer,
            on_shutdown=on_shutdown,
        ):
            yield

    return _lifespan
