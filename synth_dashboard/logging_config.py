from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "SYNTH_DASHBOARD_LOG_FORMAT"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _resolve_format(force_format: Optional[str]) -> str:
    """An explicit argument beats the environment; anything unknown means json."""
    mode = force_format if force_format is not None else os.getenv(LOG_FORMAT_ENV, "json")
    return "plain" if mode.strip().lower() == "plain" else "json"


def _build_formatter(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # extra={...} fields end up as top-level JSON keys
    return jsonlogger.JsonFormatter(JSON_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    :param level: root logger level
    :param force_format: "json" or "plain"; falls back to SYNTH_DASHBOARD_LOG_FORMAT, then json
    """
    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(_resolve_format(force_format)))

    root = logging.getLogger()
    root.setLevel(level)
    # Calling twice must not double every line
    root.handlers.clear()
    root.addHandler(handler)
