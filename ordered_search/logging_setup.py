"""Logging for applications built on ordered_search.

Library modules only call ``logging.getLogger(__name__)``. :func:`setup_logging`
attaches handlers to the ``ordered_search`` logger alone, so the root logger
and handlers owned by the host application are left untouched. Records go to
``stderr`` by default; the benchmark CLI keeps ``stdout`` for its JSON output.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, List, Optional, Union

import structlog

from .config import LoggingConfig

PACKAGE_LOGGER = "ordered_search"

_handlers: List[logging.Handler] = []


def setup_logging(config: Union[LoggingConfig, dict, None] = None,
                  stream: Optional[IO[str]] = None) -> LoggingConfig:
    """Route ``ordered_search`` records to ``stream`` (default ``sys.stderr``).

    Calling it again replaces the handlers installed by the previous call.
    With ``log_dir`` set, records are also appended to ``<log_dir>/<app_name>.log``.
    """
    if config is None:
        resolved = LoggingConfig()
    elif isinstance(config, dict):
        resolved = LoggingConfig(**config)
    else:
        resolved = config

    logger = logging.getLogger(PACKAGE_LOGGER)
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(resolved.level.upper())
    logger.propagate = False

    formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
    _add_handler(logger, logging.StreamHandler(stream or sys.stderr), formatter)
    if resolved.log_dir:
        log_dir = Path(resolved.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        _add_handler(logger, logging.FileHandler(log_dir / f"{resolved.app_name}.log", encoding="utf-8"),
                     file_formatter)

    # structlog events are rendered to a string, then handed to the stdlib
    # logger of the same name so they share the handlers above.
    renderer = structlog.processors.JSONRenderer() if resolved.json_logs else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return resolved


def is_configured() -> bool:
    return bool(_handlers)


def _add_handler(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    _handlers.append(handler)
