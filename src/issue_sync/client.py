"""Client helpers for writing pages into Notion."""
from __future__ import annotations

from typing import Mapping, Optional

import requests

NOTION_API_BASE_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
DEFAULT_TIMEOUT = 30


class NotionApiError(RuntimeError):
    """Raised when the Notion API returns an error."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotionApi:
    """Small wrapper around the Notion page-creation endpoint."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = NOTION_API_BASE_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Notion-Version": NOTION_VERSION,
                "Content-Type": "application/json",
            }
        )
        self._base_url = base_url.rstrip("/")

    def create_page(self, payload: Mapping[str, object]) -> Mapping[str, object]:
        response = self._session.post(
            f"{self._base_url}/pages",
            json=payload,
            timeout=DEFAULT_TIMEOUT,
        )
        if response.status_code >= 400:
            raise NotionApiError(
                f"Failed to create Notion page ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )
        return response.json()


__all__ = ["NotionApi", "NotionApiError"]
