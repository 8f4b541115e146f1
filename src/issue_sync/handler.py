"""Create a Notion page for every newly opened GitHub issue."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import structlog

from .client import NotionApi
from .config import MissingConfiguration
from .events import OPENED, IssueEvent
from .mappers import LINKED_TITLE, PageMapping


class IssueSyncHandler:
    """Callback invoked once per delivered ``issues`` event.

    The handler keeps no state between invocations. Failures raised by the
    Notion client are not caught here; the delivery framework decides whether
    to retry.
    """

    def __init__(
        self,
        notion_api: NotionApi,
        *,
        database_id: Optional[str],
        mapping: PageMapping = LINKED_TITLE,
        dry_run: bool = False,
        logger: Optional[structlog.BoundLogger] = None,
    ) -> None:
        self._notion = notion_api
        self._database_id = database_id
        self._mapping = mapping
        self._dry_run = dry_run
        self._logger = (logger or structlog.get_logger(__name__)).bind(component="issue_sync_handler")

    def __call__(self, event: Union[IssueEvent, Mapping[str, Any]]) -> Optional[Mapping[str, object]]:
        return self.handle(event)

    def handle(self, event: Union[IssueEvent, Mapping[str, Any]]) -> Optional[Mapping[str, object]]:
        if not self._database_id:
            raise MissingConfiguration(
                "Please set the NOTION_DATABASE_ID environment variable to the ID of your Notion database"
            )

        if isinstance(event, IssueEvent):
            action, opened = event.action, event.is_opened
        else:
            # Ignored events are not parsed, so their issue payload may be partial.
            action = event.get("action")
            opened = action == OPENED
        if not opened:
            self._logger.debug("issue_event_ignored", action=action)
            return None

        issue_event = event if isinstance(event, IssueEvent) else IssueEvent.from_payload(event)
        payload = self._mapping.build(issue_event.issue, database_id=self._database_id).to_payload()

        if self._dry_run:
            self._logger.info("dry_run_skipping_notion_page", issue_url=issue_event.issue.html_url, payload=payload)
            return None

        self._logger.info(
            "creating_notion_page",
            issue_url=issue_event.issue.html_url,
            database_id=self._database_id,
            mapping=self._mapping.name,
        )
        page = self._notion.create_page(payload)
        self._logger.info("notion_page_created", issue_url=issue_event.issue.html_url, page_id=page.get("id"))
        return page


__all__ = ["IssueSyncHandler"]
