from __future__ import annotations

import httpx
import pytest

from wt.catalog.core.clients.content_store import HttpContentStoreClient
from wt.catalog.core.clients.index_api import HttpEntityIndexClient
from wt.catalog.core.errors import (
    ContentNotFoundError,
    ContentUnreachableError,
    EntityNotFoundError,
    IndexUnreachableError,
    MalformedContentError,
)


@pytest.fixture
def mock_http(monkeypatch):
    """Route every ``httpx.AsyncClient`` through a handler."""

    def _install(handler):
        transport = httpx.MockTransport(handler)
        real_client = httpx.AsyncClient
        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda **kw: real_client(transport=transport, **kw),
        )

    return _install


class TestHttpEntityIndexClient:
    @pytest.mark.asyncio
    async def test_get_all(self, mock_http):
        async def handler(request):
            assert request.url.path == "/hotels"
            return httpx.Response(200, json={"items": ["0xA", "0xB"]})

        mock_http(handler)
        client = HttpEntityIndexClient(base_url="http://index/")

        assert await client.get_all() == ["0xA", "0xB"]

    @pytest.mark.asyncio
    async def test_get_all_accepts_bare_list(self, mock_http):
        mock_http(lambda request: httpx.Response(200, json=["0xA"]))
        client = HttpEntityIndexClient(base_url="http://index")

        assert await client.get_all() == ["0xA"]

    @pytest.mark.asyncio
    async def test_get_all_server_error(self, mock_http):
        mock_http(lambda request: httpx.Response(500))
        client = HttpEntityIndexClient(base_url="http://index")

        with pytest.raises(IndexUnreachableError):
            await client.get_all()

    @pytest.mark.asyncio
    async def test_get_all_connection_error(self, mock_http):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        mock_http(handler)
        client = HttpEntityIndexClient(base_url="http://index")

        with pytest.raises(IndexUnreachableError):
            await client.get_all()

    @pytest.mark.asyncio
    async def test_get_entity(self, mock_http):
        def handler(request):
            assert request.url.path == "/hotels/0xA"
            return httpx.Response(
                200, json={"address": "0xA", "manager": "0xM", "dataUri": "https://c/a"}
            )

        mock_http(handler)
        client = HttpEntityIndexClient(base_url="http://index")

        hotel = await client.get("0xA")

        assert hotel.address == "0xA"
        assert await hotel.get("id") == "0xA"
        assert await hotel.get("manager") == "0xM"
        assert await hotel.content_pointer() == "https://c/a"

    @pytest.mark.asyncio
    async def test_get_entity_not_found(self, mock_http):
        mock_http(lambda request: httpx.Response(404, json={}))
        client = HttpEntityIndexClient(base_url="http://index")

        with pytest.raises(EntityNotFoundError):
            await client.get("0xZ")


class TestHttpContentStoreClient:
    @pytest.mark.asyncio
    async def test_fetch_document(self, mock_http):
        mock_http(lambda request: httpx.Response(200, json={"name": "Hotel"}))
        store = HttpContentStoreClient()

        assert await store.fetch("https://content/doc.json") == {"name": "Hotel"}

    @pytest.mark.asyncio
    async def test_not_found(self, mock_http):
        mock_http(lambda request: httpx.Response(404))
        store = HttpContentStoreClient()

        with pytest.raises(ContentNotFoundError):
            await store.fetch("https://content/missing.json")

    @pytest.mark.asyncio
    async def test_server_error_is_unreachable(self, mock_http):
        mock_http(lambda request: httpx.Response(503))
        store = HttpContentStoreClient()

        with pytest.raises(ContentUnreachableError):
            await store.fetch("https://content/doc.json")

    @pytest.mark.asyncio
    async def test_timeout_is_unreachable(self, mock_http):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        mock_http(handler)
        store = HttpContentStoreClient()

        with pytest.raises(ContentUnreachableError):
            await store.fetch("https://content/doc.json")

    @pytest.mark.asyncio
    async def test_invalid_json_is_malformed(self, mock_http):
        mock_http(lambda request: httpx.Response(200, content=b"<html>"))
        store = HttpContentStoreClient()

        with pytest.raises(MalformedContentError):
            await store.fetch("https://content/doc.json")

    @pytest.mark.asyncio
    async def test_non_object_is_malformed(self, mock_http):
        mock_http(lambda request: httpx.Response(200, json=[1, 2]))
        store = HttpContentStoreClient()

        with pytest.raises(MalformedContentError):
            await store.fetch("https://content/doc.json")

    @pytest.mark.asyncio
    async def test_unsupported_scheme(self):
        store = HttpContentStoreClient()

        with pytest.raises(MalformedContentError, match="Unsupported"):
            await store.fetch("bzz://abcdef")
