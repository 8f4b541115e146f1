import pytest

from issue_sync.events import IssueEvent


def test_from_payload_collects_fields(opened_payload):
    opened_payload["issue"]["assignees"] = [{"login": "alice"}, {"login": "bob"}]

    event = IssueEvent.from_payload(opened_payload)

    assert event.is_opened
    assert event.repository == "x/y"
    assert event.issue.assignees == ("alice", "bob")
    assert event.issue.labels == ("bug",)


def test_from_payload_defaults_optional_fields():
    payload = {
        "action": "opened",
        "issue": {"title": "t", "html_url": "u", "body": None, "assignees": None},
    }

    event = IssueEvent.from_payload(payload)

    assert event.issue.body is None
    assert event.issue.assignees == ()
    assert event.issue.labels == ()
    assert event.repository is None


def test_from_payload_treats_empty_body_as_missing(opened_payload):
    opened_payload["issue"]["body"] = ""

    assert IssueEvent.from_payload(opened_payload).issue.body is None


def test_missing_title_is_not_defaulted(opened_payload):
    del opened_payload["issue"]["title"]

    with pytest.raises(KeyError):
        IssueEvent.from_payload(opened_payload)
