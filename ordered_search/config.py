"""Configuration models and loaders for the ordered search library.

Settings come from an optional YAML file and are overridden by environment
variables. Keys use a prefix (default ``ORDERED_SEARCH_``) and ``__`` to
express nesting: ``ORDERED_SEARCH_LOGGING__LEVEL=DEBUG`` becomes
``{"logging": {"level": "DEBUG"}}``. Values try to decode JSON so booleans
and numbers can be expressed easily.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "ORDERED_SEARCH_"
_ENV_SEPARATOR = "__"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_logs: bool = False
    log_dir: Optional[str] = None
    app_name: str = "ordered_search"


class SearchConfig(BaseModel):
    """Runtime settings for searches, the manager and logging.

    Parameters
    ----------
    check_sorted:
        Verify that inputs are non-decreasing before natural-order searches.
        Costs ``O(n)`` per call, so it is meant for debugging.
    enable_metrics:
        Record per-call metrics in :class:`~ordered_search.search_manager.SearchManager`.
    max_history:
        Number of metric records kept per search name.
    max_workers:
        Thread pool size used for asynchronous and batch searches.
    logging:
        Settings passed to :func:`~ordered_search.logging_setup.setup_logging`.
    """

    check_sorted: bool = False
    enable_metrics: bool = True
    max_history: int = Field(default=1000, ge=1)
    max_workers: int = Field(default=4, ge=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(
    path: Union[str, Path, None] = None,
    *,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> SearchConfig:
    """Load :class:`SearchConfig` from a YAML file and environment overrides."""
    data: Dict[str, Any] = {}
    if path is not None:
        data = _load_yaml(Path(path))
    overrides = env_overrides(env_prefix)
    if overrides:
        logger.debug("Applying environment overrides: %s", sorted(overrides))
    data = _deep_merge(data, overrides)
    try:
        return SearchConfig(**data)
    except ValidationError as err:
        raise ConfigError(f"Invalid search configuration: {err}") from err


def env_overrides(prefix: str = DEFAULT_ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect nested overrides from environment variables starting with ``prefix``."""
    environ = os.environ if environ is None else environ
    payload: Dict[str, Any] = {}
    for key, raw_value in environ.items():
        if not key.startswith(prefix):
            continue
        path = key[len(prefix):].lower().split(_ENV_SEPARATOR)
        cursor = payload
        for part in path[:-1]:
            cursor = cursor.setdefault(part, {})
            if not isinstance(cursor, dict):
                raise ConfigError(f"Conflicting environment override {key}")
        if isinstance(cursor.get(path[-1]), dict):
            raise ConfigError(f"Conflicting environment override {key}")
        cursor[path[-1]] = _coerce_env_value(raw_value)
    return payload


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file {path} not found")
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = yaml.safe_load(handle) or {}
        except yaml.YAMLError as err:
            raise ConfigError(f"Could not parse YAML config at {path}: {err}") from err
    if not isinstance(loaded, dict):
        raise ConfigError(f"YAML config at {path} must produce a mapping")
    return loaded


def _deep_merge(base: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in incoming.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _coerce_env_value(value: str) -> Any:
    try:
        return json.loads(value)
    except (json.JSONDecodeError, TypeError):
        lowered = value.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        return value
