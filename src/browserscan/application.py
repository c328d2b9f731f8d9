import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from dishka.integrations.fastapi import setup_dishka
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from browserscan.api import register_routers
from browserscan.api.middleware import DEFAULT_EXEMPT_PATHS, ApiKeyMiddleware
from browserscan.ioc import get_async_container
from browserscan.services.logging import setup_logging
from browserscan.settings import Config, get_config

logger = logging.getLogger(__name__)

_OPENAPI_API_KEY_SCHEME = "ApiKeyAuth"


def _install_openapi_api_key_security(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=app.title,
            version=app.version,
            routes=app.routes,
        )

        components = schema.setdefault("components", {})
        components.setdefault("securitySchemes", {})[_OPENAPI_API_KEY_SCHEME] = {
            "type": "apiKey",
            "in": "header",
            "name": "X-API-Key",
        }
        schema["security"] = [{_OPENAPI_API_KEY_SCHEME: []}]

        paths = schema.get("paths", {})
        for path in DEFAULT_EXEMPT_PATHS:
            for operation in paths.get(path, {}).values():
                operation["security"] = []

        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi


def _install_middleware(app: FastAPI, config: Config) -> None:
    if config.api.api_key:
        app.add_middleware(ApiKeyMiddleware, api_key=config.api.api_key)
        _install_openapi_api_key_security(app)
    else:
        logger.warning("API key is not configured; scan endpoints are public")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.allowed_hosts,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting %s %s", app.title, app.version)
    yield
    logger.info("Shutting down %s", app.title)
    await app.state.dishka_container.close()


def get_production_app(config: Config | None = None) -> FastAPI:
    """Build the FastAPI application; ``config`` defaults to the cached settings."""
    config = config or get_config()
    setup_logging(config.env)

    app = FastAPI(
        title=config.api.title,
        version=config.api.version,
        lifespan=lifespan,
    )
    _install_middleware(app, config)

    api_router = APIRouter()
    register_routers(api_router)
    app.include_router(api_router)

    setup_dishka(get_async_container(config), app)

    return app
