# wt/catalog/core/clients/loader.py
"""
Client loader – reads config/clients.yaml and registers live client instances.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any, Iterable, Mapping

from wt.catalog.core.clients.registry import ClientsRegistry
from wt.catalog.core.loader import import_attr, load_yaml_files, substitute_env_vars

logger = logging.getLogger(__name__)


def build_client(class_path: str, config: Mapping[str, Any], defaults: Mapping[str, Any]) -> Any:
    """Instantiate ``class_path`` with ``config``.

    Entries of ``defaults`` are passed only when the constructor accepts
    them and the config does not set them already.
    """
    cls = import_attr(class_path)
    kwargs = dict(config)

    params = inspect.signature(cls.__init__).parameters
    for name, value in defaults.items():
        if name in params and name not in kwargs:
            kwargs[name] = value

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise TypeError(f"Failed to instantiate '{class_path}': {exc}") from exc


def load_and_register_clients(
    *,
    patterns: Iterable[str],
    registry: ClientsRegistry,
    defaults: Mapping[str, Any] | None = None,
) -> None:
    """Load client definitions from YAML and register live instances.

    Expected YAML::

        clients:
          index:
            class: wt.catalog.core.clients.index_api:HttpEntityIndexClient
            config:
              base_url: "${WT_INDEX_API_URL:-http://localhost:3000}"
          content_store:
            class: wt.catalog.core.clients.content_store:HttpContentStoreClient

    Raises:
        FileNotFoundError: No file matches ``patterns``.
    """
    patterns = list(patterns)
    yamls = load_yaml_files(patterns)
    if not yamls:
        raise FileNotFoundError(f"No client config files matched: {patterns}")

    for data in yamls:
        for name, entry in (data.get("clients") or {}).items():
            class_path = entry.get("class")
            if not class_path:
                raise ValueError(f"Client '{name}' has no 'class'")
            raw_config = substitute_env_vars(entry.get("config") or {})
            registry.register(name, build_client(class_path, raw_config, defaults or {}))

    logger.info("Registered %d client(s): %s", len(registry), registry.list())
