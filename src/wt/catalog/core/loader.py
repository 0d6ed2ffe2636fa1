# wt/catalog/core/loader.py
"""
Helpers for YAML configuration: globbing, env substitution, dynamic imports.
"""
from __future__ import annotations

import importlib
import logging
import os
import re
from glob import glob
from pathlib import Path
from typing import Any, Iterable

import yaml

logger = logging.getLogger(__name__)

# ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def import_attr(path: str) -> Any:
    """Import ``attr`` from a ``'package.module:attr'`` path."""
    if ":" not in path:
        raise ValueError(f"Invalid import path '{path}', expected 'module:attr'")

    mod_name, attr = path.split(":", 1)
    try:
        mod = importlib.import_module(mod_name)
    except ImportError as exc:
        logger.error("Failed to import module '%s'", mod_name)
        raise ImportError(f"Cannot import module '{mod_name}'") from exc

    try:
        return getattr(mod, attr)
    except AttributeError as exc:
        raise AttributeError(f"Module '{mod_name}' has no attribute '{attr}'") from exc


def substitute_env_vars(value: Any) -> Any:
    """Recursively expand ``${VAR}`` / ``${VAR:-default}`` in strings.

    Raises:
        ValueError: A variable without default is not set.
    """
    if isinstance(value, str):
        return ENV_VAR_PATTERN.sub(_replace_env_var, value)
    if isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(v) for v in value]
    return value


def _replace_env_var(match: re.Match) -> str:
    name, default = match.group(1), match.group(2)
    env_value = os.environ.get(name)
    if env_value is not None:
        return env_value
    if default is not None:
        return default
    raise ValueError(f"Environment variable '{name}' is not set and no default provided")


def load_yaml_files(patterns: Iterable[str]) -> list[dict[str, Any]]:
    """Load every YAML file matching ``patterns``, in sorted path order."""
    patterns = list(patterns)
    files = sorted({Path(m).resolve() for p in patterns for m in glob(p)})

    if not files:
        logger.warning("No config files found matching patterns: %s", patterns)
        return []

    logger.info("Loading config files: %s", [str(f) for f in files])

    out: list[dict[str, Any]] = []
    for f in files:
        with f.open("r", encoding="utf-8") as fh:
            content = yaml.safe_load(fh) or {}
        if not isinstance(content, dict):
            raise ValueError(f"Config file '{f}' must contain a mapping")
        out.append(content)
    return out
