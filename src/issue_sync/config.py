"""Environment driven configuration for the issue synchronisation."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_REPOSITORY = "triggerdotdev/github-issues-to-notion"
DEFAULT_MAPPING = "linked_title"

_HEX_ID = re.compile(r"^[0-9a-fA-F]{32}$")
_UUID_ID = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")


class ConfigurationError(RuntimeError):
    """Base class for configuration problems detected before any API call."""


class MissingConfiguration(ConfigurationError):
    """Raised when a mandatory configuration value is absent."""


class InvalidConfiguration(ConfigurationError):
    """Raised when a configuration value is present but malformed."""


def normalise_database_id(value: str) -> str:
    """Return ``value`` in the hyphenated ``8-4-4-4-12`` form Notion uses.

    The 32 hex characters copied from a database URL are accepted as well.
    """

    candidate = value.strip()
    if _UUID_ID.match(candidate):
        return candidate.lower()
    if _HEX_ID.match(candidate):
        candidate = candidate.lower()
        return "-".join(
            (candidate[:8], candidate[8:12], candidate[12:16], candidate[16:20], candidate[20:])
        )
    raise InvalidConfiguration(f"{value!r} is not a valid Notion database identifier")


def validate_repository(value: str) -> str:
    owner, _, name = value.strip().partition("/")
    if not owner or not name or "/" in name:
        raise InvalidConfiguration(f"GITHUB_REPOSITORY must be in the form 'owner/repo', got {value!r}")
    return f"{owner}/{name}"


@dataclass(frozen=True)
class Settings:
    """Static configuration read once at startup."""

    repository: str = DEFAULT_REPOSITORY
    database_id: Optional[str] = None
    notion_token: Optional[str] = None
    mapping: str = DEFAULT_MAPPING
    log_level: str = "INFO"
    event_path: Optional[str] = None
    event_name: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        database_id = env.get("NOTION_DATABASE_ID") or None
        if database_id:
            database_id = normalise_database_id(database_id)

        return cls(
            repository=validate_repository(env.get("GITHUB_REPOSITORY") or DEFAULT_REPOSITORY),
            database_id=database_id,
            notion_token=env.get("NOTION_TOKEN") or None,
            mapping=env.get("NOTION_PAGE_MAPPING") or DEFAULT_MAPPING,
            log_level=env.get("NOTION_SYNC_LOG_LEVEL") or "INFO",
            event_path=env.get("GITHUB_EVENT_PATH") or None,
            event_name=env.get("GITHUB_EVENT_NAME") or None,
        )


__all__ = [
    "ConfigurationError",
    "DEFAULT_MAPPING",
    "DEFAULT_REPOSITORY",
    "InvalidConfiguration",
    "MissingConfiguration",
    "Settings",
    "normalise_database_id",
    "validate_repository",
]
