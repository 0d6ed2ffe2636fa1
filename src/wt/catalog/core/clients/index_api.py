# wt/catalog/core/clients/index_api.py
"""
Thin async client for the hotel index HTTP API.
"""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from wt.catalog.core.errors import EntityNotFoundError, IndexUnreachableError

logger = logging.getLogger(__name__)

CONTENT_POINTER_KEY = "dataUri"


class IndexedHotel:
    """Hotel record returned by the index API."""

    def __init__(self, address: str, record: dict[str, Any]) -> None:
        self.address = address
        self._record = record

    async def get(self, field: str) -> Any:
        if field == "id":
            return self.address
        return self._record.get(field)

    async def content_pointer(self) -> str:
        return self._record.get(CONTENT_POINTER_KEY) or ""

    def __repr__(self) -> str:
        return f"IndexedHotel({self.address!r})"


class HttpEntityIndexClient:
    """HTTP client for the hotel index.

    Contract::

        GET /hotels            -> { items: [address, ...] }
        GET /hotels/{address}  -> { address, manager, dataUri }
    """

    def __init__(self, *, base_url: str, timeout: float = 30.0) -> None:
        self._base = base_url.rstrip("/")
        self._timeout = timeout

    async def _get_json(self, url: str) -> Any:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                logger.warning(
                    "Index request failed url=%s status=%s", url, ex.response.status_code
                )
                raise
            except httpx.HTTPError as ex:
                logger.warning("Index unreachable url=%s: %s", url, ex)
                raise IndexUnreachableError(f"Index unreachable: {ex}") from ex
            try:
                return resp.json()
            except ValueError as ex:
                raise IndexUnreachableError(f"Invalid index response from {url}") from ex

    async def get_all(self) -> list[str]:
        try:
            payload = await self._get_json(f"{self._base}/hotels")
        except httpx.HTTPStatusError as ex:
            raise IndexUnreachableError(
                f"Index returned status {ex.response.status_code}"
            ) from ex
        if isinstance(payload, dict):
            payload = payload.get("items", [])
        if not isinstance(payload, list):
            raise IndexUnreachableError("Index listing is not a list")
        return [str(ref) for ref in payload]

    async def get(self, ref: str) -> IndexedHotel:
        try:
            record = await self._get_json(f"{self._base}/hotels/{quote(ref, safe='')}")
        except httpx.HTTPStatusError as ex:
            if ex.response.status_code == 404:
                raise EntityNotFoundError(ref) from ex
            raise IndexUnreachableError(
                f"Index returned status {ex.response.status_code}"
            ) from ex
        if not isinstance(record, dict):
            raise IndexUnreachableError(f"Index record for '{ref}' is not an object")
        return IndexedHotel(str(record.get("address") or ref), record)
