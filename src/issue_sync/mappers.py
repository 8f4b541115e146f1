"""Translate GitHub issues into Notion page-creation payloads."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .config import InvalidConfiguration
from .events import Issue

NO_DESCRIPTION = "No description provided"
MAX_TEXT_LENGTH = 2000
MAX_RICH_TEXT_ITEMS = 100


@dataclass
class NotionPageRequest:
    """Representation of a Notion page creation request."""

    database_id: str
    properties: Dict[str, Any]
    children: List[Dict[str, Any]] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "parent": {"database_id": self.database_id},
            "properties": self.properties,
            "children": self.children,
        }


def _text_item(content: str, *, link: Optional[str] = None) -> Dict[str, Any]:
    text: Dict[str, Any] = {"content": content}
    if link:
        text["link"] = {"url": link}
    return {"type": "text", "text": text}


def _split_text(text: str, limit: int = MAX_TEXT_LENGTH) -> List[str]:
    """Split ``text`` into chunks of at most ``limit`` UTF-16 code units.

    Notion measures text length in UTF-16, so characters outside the basic
    multilingual plane count twice and are never split across chunks.
    """

    chunks: List[str] = []
    current: List[str] = []
    size = 0
    for char in text:
        width = 2 if ord(char) > 0xFFFF else 1
        if size + width > limit:
            chunks.append("".join(current))
            current, size = [], 0
        current.append(char)
        size += width
    if current:
        chunks.append("".join(current))
    return chunks


def _title_property(value: str, *, link: Optional[str] = None) -> Dict[str, Any]:
    title = (_split_text(value) or [""])[0]
    return {"title": [_text_item(title, link=link)]}


def _url_property(value: Optional[str]) -> Dict[str, Any]:
    return {"url": value or None}


def _multi_select_property(values: Iterable[str]) -> Dict[str, Any]:
    return {"multi_select": [{"name": value} for value in values]}


def _paragraph(body: Optional[str]) -> Dict[str, Any]:
    chunks = _split_text(body or NO_DESCRIPTION)
    return {
        "object": "block",
        "type": "paragraph",
        "paragraph": {
            "rich_text": [_text_item(chunk) for chunk in chunks[:MAX_RICH_TEXT_ITEMS]],
        },
    }


@dataclass(frozen=True)
class PageMapping:
    """Which Notion properties an issue is written to.

    A property name set to ``None`` is left out of the request entirely, so the
    mapping can follow whatever schema the target database exposes.
    """

    name: str
    title_property: str = "title"
    link_title: bool = False
    url_property: Optional[str] = None
    assignees_property: Optional[str] = None
    labels_property: Optional[str] = None

    def build(self, issue: Issue, *, database_id: str) -> NotionPageRequest:
        properties: Dict[str, Any] = {
            self.title_property: _title_property(
                issue.title,
                link=issue.html_url if self.link_title else None,
            ),
        }
        if self.url_property:
            properties[self.url_property] = _url_property(issue.html_url)
        if self.assignees_property:
            properties[self.assignees_property] = _multi_select_property(issue.assignees)
        if self.labels_property:
            properties[self.labels_property] = _multi_select_property(issue.labels)

        return NotionPageRequest(
            database_id=database_id,
            properties=properties,
            children=[_paragraph(issue.body)],
        )


# Title only. Assignees, labels and the URL property come from URL_PROPERTY.
LINKED_TITLE = PageMapping(name="linked_title", link_title=True)

URL_PROPERTY = PageMapping(
    name="url_property",
    url_property="GitHub",
    assignees_property="Assignees",
    labels_property="Labels",
)

PAGE_MAPPINGS: Dict[str, PageMapping] = {
    LINKED_TITLE.name: LINKED_TITLE,
    URL_PROPERTY.name: URL_PROPERTY,
}


def get_mapping(name: str) -> PageMapping:
    """Return the registered :class:`PageMapping` called ``name``."""
    try:
        return PAGE_MAPPINGS[name]
    except KeyError as exc:
        choices = ", ".join(sorted(PAGE_MAPPINGS))
        raise InvalidConfiguration(f"Unknown Notion page mapping {name!r}; expected one of: {choices}") from exc


__all__ = [
    "LINKED_TITLE",
    "NO_DESCRIPTION",
    "NotionPageRequest",
    "PAGE_MAPPINGS",
    "PageMapping",
    "URL_PROPERTY",
    "get_mapping",
]
