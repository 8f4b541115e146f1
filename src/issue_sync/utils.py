"""Logging setup and event payload loading for the command line entry point."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import structlog


def configure_logger(level: str) -> structlog.BoundLogger:
    """Route structlog output through JSON lines filtered at ``level``.

    Only the first call configures structlog; later calls return a logger
    bound to the existing configuration.
    """
    if not structlog.is_configured():
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO
        logging.basicConfig(level=numeric_level)
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
            cache_logger_on_first_use=True,
        )
    return structlog.get_logger("issue_sync")


def load_github_event_payload(event_path: Optional[str]) -> Dict[str, Any]:
    """Read the webhook payload GitHub Actions writes for the triggering event.

    Raises:
        FileNotFoundError: If no path was configured or the file is missing.
        ValueError: If the file is not a JSON object.
    """
    if not event_path:
        raise FileNotFoundError("Set --event-path or GITHUB_EVENT_PATH to the GitHub event payload file")

    path = Path(event_path)
    if not path.is_file():
        raise FileNotFoundError(f"GitHub event payload not found at: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"GitHub event payload at {path} is not a JSON object")
    return payload


__all__ = ["configure_logger", "load_github_event_payload"]
