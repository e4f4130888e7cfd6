from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT_ENV = "WHISKEY_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "WHISKEY_BROWSER_LOG_LEVEL"

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def build_formatter(mode: str) -> logging.Formatter:
    """Plain text for "plain", structured JSON for anything else."""
    if mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    return JsonFormatter(
        JSON_FORMAT,
        rename_fields={"levelname": "level", "name": "logger"},
    )


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install one stream handler on the root logger.

    Format: `force_format`, else $WHISKEY_BROWSER_LOG_FORMAT, else json.
    Level: `level`, else $WHISKEY_BROWSER_LOG_LEVEL, else INFO.
    Calling it again replaces the handler instead of stacking another.
    """
    mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(mode))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
