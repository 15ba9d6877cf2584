# app/main.py
import os
from functools import partial
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from app.core.database import Database
from app.core.errors import register_error_handlers
from app.routers import endpoints
from app.seed import initialize_database
from shared import (
    RequestContextLogMiddleware,
    ServiceConfig,
    configure_cors,
    configure_logging,
    create_health_router,
    database_lifespan_factory,
    load_service_config,
)

tags_metadata = [
    {
        "name": "Tenants",
        "description": "Tenants cadastrados e o tema associado a cada um.",
    },
    {
        "name": "Themes",
        "description": "Configuração de tema (cores, fontes e componentes) resolvida por tenant.",
    },
]

_ROOT_PATH = os.getenv("APP_ROOT_PATH", "")


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    config = config or load_service_config("theme")
    logger = configure_logging(config.service_name)
    database = Database(config.database)

    lifespan = database_lifespan_factory(
        service_name=config.service_name,
        initializer=partial(initialize_database, database),
        on_shutdown=database.dispose,
    )

    app = FastAPI(
        title="Tenant Theme Service",
        version="0.1.0",
        description="API de leitura de tenants, temas e componentes para o dashboard white label.",
        openapi_tags=tags_metadata,
        root_path=_ROOT_PATH,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.config = config
    app.state.database = database

    configure_cors(app)
    app.add_middleware(RequestContextLogMiddleware, logger=logger)
    register_error_handlers(app)

    def custom_openapi_schema():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        schema["openapi"] = "3.0.3"
        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi_schema

    health_router = create_health_router(
        service_name=config.service_name,
        database_engine=database.engine,
    )
    app.include_router(health_router, prefix=config.api_prefix)
    app.include_router(endpoints.router, prefix=config.api_prefix)

    @app.get("/", include_in_schema=False)
    def root():
        return {
            "service": config.service_name,
            "status": "ok",
            "docs_url": "/docs",
            "api_prefix": config.api_prefix,
        }

    return app


app = create_app()


def run() -> None:
    config = app.state.config
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")


if __name__ == "__main__":
    run()
