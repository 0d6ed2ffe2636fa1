# wt/catalog/api/discovery.py
"""
Root-level discovery and health endpoints.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

from wt.catalog.api.schemas import RootInfoSchema

router = APIRouter()


@router.get("/", response_model=RootInfoSchema)
async def root(request: Request) -> RootInfoSchema:
    settings = request.app.state.settings
    return RootInfoSchema(
        docs=settings.docs_url,
        info=settings.info_url,
        version=settings.version,
    )


@router.get("/health")
async def health(request: Request) -> dict:
    clients = getattr(request.app.state, "clients_registry", None)
    catalog = getattr(request.app.state, "catalog", None)
    return {
        "status": "healthy" if catalog is not None else "starting",
        "clients": clients.list() if clients else [],
    }
