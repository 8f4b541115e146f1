"""Value objects for the subset of GitHub ``issues`` webhook payloads we consume."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

OPENED = "opened"


@dataclass(frozen=True)
class Issue:
    """Fields of a GitHub issue copied into Notion."""

    title: str
    html_url: str
    body: Optional[str] = None
    assignees: Tuple[str, ...] = ()
    labels: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, issue: Mapping[str, Any]) -> "Issue":
        # title and html_url are required; a missing key surfaces as KeyError.
        assignees = tuple(
            str(assignee["login"])
            for assignee in issue.get("assignees") or []
            if isinstance(assignee, Mapping) and assignee.get("login")
        )
        labels = tuple(
            str(label["name"])
            for label in issue.get("labels") or []
            if isinstance(label, Mapping) and label.get("name")
        )
        return cls(
            title=issue["title"],
            html_url=issue["html_url"],
            body=issue.get("body") or None,
            assignees=assignees,
            labels=labels,
        )


@dataclass(frozen=True)
class IssueEvent:
    """A single delivered ``issues`` event."""

    action: str
    issue: Issue
    repository: Optional[str] = None

    @property
    def is_opened(self) -> bool:
        return self.action == OPENED

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "IssueEvent":
        repository = payload.get("repository")
        full_name = repository.get("full_name") if isinstance(repository, Mapping) else None
        return cls(
            action=str(payload.get("action") or ""),
            issue=Issue.from_payload(payload["issue"]),
            repository=full_name,
        )


__all__ = ["Issue", "IssueEvent", "OPENED"]
