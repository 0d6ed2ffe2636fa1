# wt/catalog/api/room_types.py
"""
Room type endpoints, nested under a hotel.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from wt.catalog.api.dependencies import get_catalog
from wt.catalog.api.errors import Http404Error, HttpBadGatewayError
from wt.catalog.api.hotels import unreachable_index
from wt.catalog.api.schemas import ErrorSchema
from wt.catalog.core.errors import (
    ContentStoreError,
    EntityNotFoundError,
    IndexUnreachableError,
)
from wt.catalog.core.service import CatalogService, RoomTypeNotFoundError

router = APIRouter(prefix="/hotels/{hotel_address}/roomTypes", tags=["room types"])

_ERRORS = {404: {"model": ErrorSchema}, 502: {"model": ErrorSchema}}


async def _call(coro) -> Any:
    try:
        return await coro
    except EntityNotFoundError:
        raise Http404Error("hotelNotFound", "Hotel not found")
    except IndexUnreachableError as exc:
        raise unreachable_index(exc)
    except ContentStoreError as exc:
        raise HttpBadGatewayError(
            "hotelNotAccessible", str(exc), "Hotel data is not accessible."
        )


@router.get("", operation_id="list_room_types", responses=_ERRORS)
async def list_room_types(
    hotel_address: str,
    catalog: CatalogService = Depends(get_catalog),
) -> dict[str, Any]:
    return await _call(catalog.get_room_types(hotel_address))


@router.get("/{room_type_id}", operation_id="get_room_type", responses=_ERRORS)
async def get_room_type(
    hotel_address: str,
    room_type_id: str,
    catalog: CatalogService = Depends(get_catalog),
) -> dict[str, Any]:
    try:
        return await _call(catalog.get_room_type(hotel_address, room_type_id))
    except RoomTypeNotFoundError:
        raise Http404Error("roomTypeNotFound", f"Room type '{room_type_id}' not found")
