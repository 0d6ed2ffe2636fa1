# wt/catalog/core/clients/content_store.py
"""
HTTP content store client – dereferences content pointers into documents.
"""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

import httpx

from wt.catalog.core.errors import (
    ContentNotFoundError,
    ContentUnreachableError,
    MalformedContentError,
)

logger = logging.getLogger(__name__)


class HttpContentStoreClient:
    """Fetches JSON documents addressed by ``http(s)://`` pointers."""

    schemes = ("http", "https")

    def __init__(self, *, timeout: float = 30.0, headers: dict[str, str] | None = None) -> None:
        self._timeout = timeout
        self._headers = dict(headers or {})

    async def fetch(self, uri: str) -> dict[str, Any]:
        scheme = urlparse(uri).scheme
        if scheme not in self.schemes:
            raise MalformedContentError(f"Unsupported content pointer: {uri!r}", uri=uri)

        async with httpx.AsyncClient(timeout=self._timeout, headers=self._headers) as client:
            try:
                resp = await client.get(uri)
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                status = ex.response.status_code
                logger.warning("Content request failed uri=%s status=%s", uri, status)
                if status == 404:
                    raise ContentNotFoundError(f"Document not found: {uri}", uri=uri) from ex
                raise ContentUnreachableError(
                    f"Content store returned status {status} for {uri}", uri=uri
                ) from ex
            except httpx.HTTPError as ex:
                logger.warning("Content store unreachable uri=%s: %s", uri, ex)
                raise ContentUnreachableError(f"Cannot reach {uri}: {ex}", uri=uri) from ex

        try:
            document = resp.json()
        except ValueError as ex:
            raise MalformedContentError(f"Document at {uri} is not valid JSON", uri=uri) from ex
        if not isinstance(document, dict):
            raise MalformedContentError(f"Document at {uri} is not an object", uri=uri)
        return document
