"""Index and content store clients, registry and loading infrastructure."""

from wt.catalog.core.clients.content_store import HttpContentStoreClient
from wt.catalog.core.clients.index_api import HttpEntityIndexClient, IndexedHotel
from wt.catalog.core.clients.loader import build_client, load_and_register_clients
from wt.catalog.core.clients.memory import InMemoryContentStore, InMemoryEntityIndex
from wt.catalog.core.clients.registry import (
    CONTENT_STORE_CLIENT,
    INDEX_CLIENT,
    ClientsRegistry,
)

__all__ = [
    "HttpContentStoreClient",
    "HttpEntityIndexClient",
    "IndexedHotel",
    "InMemoryContentStore",
    "InMemoryEntityIndex",
    "ClientsRegistry",
    "INDEX_CLIENT",
    "CONTENT_STORE_CLIENT",
    "build_client",
    "load_and_register_clients",
]
