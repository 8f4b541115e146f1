"""Command line entry-point delivering a GitHub Actions event to the handler."""
from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Any, Dict, Optional, Tuple

from .client import NotionApi, NotionApiError
from .config import ConfigurationError, MissingConfiguration, Settings, normalise_database_id, validate_repository
from .dispatch import LocalEventSource, register_handler
from .handler import IssueSyncHandler
from .mappers import PAGE_MAPPINGS, get_mapping
from .utils import configure_logger, load_github_event_payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add newly opened GitHub issues to a Notion database")
    parser.add_argument("--event-path", help="Path to the GitHub event payload (defaults to GITHUB_EVENT_PATH)")
    parser.add_argument("--event-name", help="GitHub event name (defaults to GITHUB_EVENT_NAME)")
    parser.add_argument("--database-id", help="Target Notion database identifier (defaults to NOTION_DATABASE_ID)")
    parser.add_argument("--repository", help="Repository to listen on, as owner/repo (defaults to GITHUB_REPOSITORY)")
    parser.add_argument(
        "--mapping",
        choices=sorted(PAGE_MAPPINGS),
        help="How issue fields map onto Notion properties (defaults to NOTION_PAGE_MAPPING)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Log the Notion payload without creating a page")
    parser.add_argument("--log-level", help="Logging level (defaults to NOTION_SYNC_LOG_LEVEL, then INFO)")
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides: Dict[str, Any] = {}
    if args.database_id:
        overrides["database_id"] = normalise_database_id(args.database_id)
    if args.repository:
        overrides["repository"] = validate_repository(args.repository)
    for field_name in ("mapping", "log_level", "event_path", "event_name"):
        value = getattr(args, field_name)
        if value:
            overrides[field_name] = value
    return dataclasses.replace(settings, **overrides)


def _load_event(settings: Settings) -> Tuple[str, Dict[str, Any]]:
    if not settings.event_name:
        raise MissingConfiguration("GitHub event name is required. Provide --event-name or set GITHUB_EVENT_NAME")
    return settings.event_name, load_github_event_payload(settings.event_path)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except ConfigurationError as exc:
        configure_logger(args.log_level or "INFO").error("issue_sync_setup_failed", error=str(exc))
        return 1

    logger = configure_logger(settings.log_level)

    try:
        mapping = get_mapping(settings.mapping)
        event_name, payload = _load_event(settings)
    except (ConfigurationError, FileNotFoundError, ValueError) as exc:
        logger.error("issue_sync_setup_failed", error=str(exc))
        return 1

    dry_run = args.dry_run
    if not settings.notion_token:
        logger.warning("notion_token_missing_forcing_dry_run")
        dry_run = True

    handler = IssueSyncHandler(
        NotionApi(settings.notion_token or ""),
        database_id=settings.database_id,
        mapping=mapping,
        dry_run=dry_run,
        logger=logger,
    )
    source = LocalEventSource(logger=logger)
    register_handler(source, handler, repository=settings.repository)

    try:
        delivered = source.deliver(event_name, payload)
    except ConfigurationError as exc:
        logger.error("issue_sync_configuration_error", error=str(exc))
        return 1
    except NotionApiError as exc:
        logger.error("notion_api_error", status_code=exc.status_code, error=str(exc))
        return 1

    logger.info("issue_sync_completed", event_name=event_name, delivered=delivered)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
