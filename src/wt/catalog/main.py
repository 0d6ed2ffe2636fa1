# wt/catalog/main.py
"""
Hotel catalog application factory.

Creates a FastAPI application exposing the read-only hotel catalog. Data
clients (the index and the content store) come from ``config/clients.yaml``
unless a ready :class:`ClientsRegistry` is handed to :func:`create_app`.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wt.catalog.api.discovery import router as discovery_router
from wt.catalog.api.errors import register_error_handlers
from wt.catalog.api.hotels import router as hotels_router
from wt.catalog.api.room_types import router as room_types_router
from wt.catalog.core.clients.content_store import HttpContentStoreClient
from wt.catalog.core.clients.index_api import HttpEntityIndexClient
from wt.catalog.core.clients.loader import load_and_register_clients
from wt.catalog.core.clients.registry import (
    CONTENT_STORE_CLIENT,
    INDEX_CLIENT,
    ClientsRegistry,
)
from wt.catalog.core.config import Settings, settings as default_settings
from wt.catalog.core.logging import configure_logging
from wt.catalog.core.service import CatalogService

logger = logging.getLogger(__name__)


# -- Helpers -------------------------------------------------------------------


def _default_clients(settings: Settings) -> ClientsRegistry:
    registry = ClientsRegistry()
    registry.register(
        INDEX_CLIENT,
        HttpEntityIndexClient(base_url=settings.index_api_url, timeout=settings.http_timeout),
    )
    registry.register(
        CONTENT_STORE_CLIENT,
        HttpContentStoreClient(timeout=settings.http_timeout),
    )
    return registry


def _load_clients(settings: Settings) -> ClientsRegistry:
    registry = ClientsRegistry()
    try:
        load_and_register_clients(
            patterns=settings.clients_config_paths,
            registry=registry,
            defaults={"timeout": settings.http_timeout},
        )
    except FileNotFoundError:
        logger.warning(
            "No clients config found, using HTTP index at %s", settings.index_api_url
        )
        return _default_clients(settings)
    except Exception:
        logger.exception("Failed to load clients")
        raise
    return registry


def build_catalog(clients: ClientsRegistry, settings: Settings) -> CatalogService:
    return CatalogService(
        index=clients.get(INDEX_CLIENT),
        content_store=clients.get(CONTENT_STORE_CLIENT),
        base_url=settings.base_url,
        max_backfill_rounds=settings.max_backfill_rounds,
    )


# -- Lifespan ------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load data clients unless they were injected at creation time."""
    settings: Settings = app.state.settings

    if getattr(app.state, "catalog", None) is None:
        clients = _load_clients(settings)
        app.state.clients_registry = clients
        app.state.catalog = build_catalog(clients, settings)
        logger.info("Catalog ready with clients %s", clients.list())

    yield

    for name, client in app.state.clients_registry.items():
        close = getattr(client, "aclose", None)
        if close is None:
            continue
        try:
            await close()
        except Exception:
            logger.exception("Client '%s' shutdown error", name)


# -- Application factory -------------------------------------------------------


def create_app(
    settings: Settings | None = None,
    *,
    clients: ClientsRegistry | None = None,
) -> FastAPI:
    """Build and wire the hotel catalog FastAPI application."""
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Creating catalog application (env=%s)", settings.app_env)

    app = FastAPI(
        title="Hotel catalog API",
        version=settings.version,
        description="Read-only hotel catalog with resilient pagination",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.catalog = None
    app.state.clients_registry = clients if clients is not None else ClientsRegistry()
    if clients is not None:
        app.state.catalog = build_catalog(clients, settings)

    register_error_handlers(app)

    app.include_router(discovery_router)
    app.include_router(hotels_router)
    app.include_router(room_types_router)

    return app
