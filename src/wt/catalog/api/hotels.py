# wt/catalog/api/hotels.py
"""
Hotel listing and single-hotel endpoints.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from wt.catalog.api.dependencies import get_catalog, get_settings
from wt.catalog.api.errors import Http404Error, HttpBadGatewayError, HttpValidationError
from wt.catalog.api.schemas import ErrorSchema, HotelListSchema, HotelSchema
from wt.catalog.contracts.results import FailedEntity
from wt.catalog.core.config import Settings
from wt.catalog.core.errors import EntityNotFoundError, IndexUnreachableError
from wt.catalog.core.pagination import LimitValidationError, MissingStartWithError
from wt.catalog.core.responses import hotel_response, page_response
from wt.catalog.core.service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])


def unreachable_index(exc: IndexUnreachableError) -> HttpBadGatewayError:
    return HttpBadGatewayError(
        "unreachableIndex", str(exc), "Cannot access the hotel index."
    )


@router.get(
    "",
    response_model=None,
    operation_id="list_hotels",
    responses={
        200: {"model": HotelListSchema},
        404: {"model": ErrorSchema},
        422: {"model": ErrorSchema},
        502: {"model": ErrorSchema},
    },
)
async def list_hotels(
    request: Request,
    limit: str | None = Query(default=None, description="Positive integer page size"),
    start_with: str | None = Query(default=None, alias="startWith"),
    fields: str | None = Query(default=None, description="Comma-separated field names"),
    catalog: CatalogService = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    try:
        page = await catalog.list_hotels(
            path=request.url.path,
            fields_query=fields or settings.default_hotels_fields,
            limit=limit,
            start_with=start_with,
        )
    except LimitValidationError:
        raise HttpValidationError(
            "paginationLimitError", "Limit must be a natural number greater than 0."
        )
    except MissingStartWithError:
        raise Http404Error(
            "paginationStartWithError", "Cannot find startWith in hotel collection."
        )
    except IndexUnreachableError as exc:
        raise unreachable_index(exc)

    if page.errors:
        logger.info(
            "Listing %s: %d item(s), %d error(s)", request.url.path, len(page.items), len(page.errors)
        )
    return page_response(page)


@router.get(
    "/{hotel_address}",
    response_model=None,
    operation_id="get_hotel",
    responses={
        200: {"model": HotelSchema},
        404: {"model": ErrorSchema},
        502: {"model": ErrorSchema},
    },
)
async def get_hotel(
    hotel_address: str,
    fields: str | None = Query(default=None, description="Comma-separated field names"),
    catalog: CatalogService = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    try:
        resolved = await catalog.get_hotel(
            hotel_address, fields or settings.default_hotel_fields
        )
    except EntityNotFoundError:
        raise Http404Error("hotelNotFound", "Hotel not found")
    except IndexUnreachableError as exc:
        raise unreachable_index(exc)

    if isinstance(resolved, FailedEntity):
        raise HttpBadGatewayError(
            "hotelNotAccessible",
            f"{resolved.error}: {resolved.original_error}",
            "Hotel data is not accessible.",
        )
    return hotel_response(resolved)
