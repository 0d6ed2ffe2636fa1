# wt/catalog/api/dependencies.py
"""
FastAPI dependencies for application-scoped services.
"""
from __future__ import annotations

from fastapi import Request

from wt.catalog.api.errors import HttpError
from wt.catalog.core.config import Settings
from wt.catalog.core.service import CatalogService


class ServiceUnavailableError(HttpError):
    status = 503
    default_short = "Service unavailable"


def get_catalog(request: Request) -> CatalogService:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise ServiceUnavailableError("catalogNotReady", "Hotel catalog is not configured yet.")
    return catalog


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
