from typing import Any, Dict, List

import pytest

from issue_sync.client import NotionApiError


class DummyNotionAPI:
    def __init__(self, *, should_fail: bool = False) -> None:
        self.should_fail = should_fail
        self.created: List[Dict[str, Any]] = []

    def create_page(self, payload: Dict[str, Any]):
        if self.should_fail:
            raise NotionApiError("create failed", status_code=400)
        self.created.append(payload)
        return {"id": f"page-{len(self.created)}"}


@pytest.fixture
def notion():
    return DummyNotionAPI()


@pytest.fixture
def opened_payload():
    return {
        "action": "opened",
        "issue": {
            "title": "Bug: crash on load",
            "html_url": "https://github.com/x/y/issues/1",
            "body": "Crashes on startup",
            "assignees": [],
            "labels": [{"name": "bug"}],
        },
        "repository": {"full_name": "x/y"},
    }


@pytest.fixture
def failing_notion():
    return DummyNotionAPI(should_fail=True)
