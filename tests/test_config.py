import pytest

from issue_sync.config import (
    DEFAULT_REPOSITORY,
    InvalidConfiguration,
    Settings,
    normalise_database_id,
)


def test_from_env_defaults():
    settings = Settings.from_env({})

    assert settings.repository == DEFAULT_REPOSITORY
    assert settings.database_id is None
    assert settings.notion_token is None
    assert settings.mapping == "linked_title"
    assert settings.log_level == "INFO"
    assert settings.event_path is None
    assert settings.event_name is None


def test_from_env_reads_values():
    settings = Settings.from_env(
        {
            "GITHUB_REPOSITORY": "octo/repo",
            "NOTION_DATABASE_ID": "9257302b-0758-480e-bef1-10889636f107",
            "NOTION_TOKEN": "secret",
            "NOTION_PAGE_MAPPING": "url_property",
            "NOTION_SYNC_LOG_LEVEL": "DEBUG",
            "GITHUB_EVENT_PATH": "/tmp/event.json",
            "GITHUB_EVENT_NAME": "issues",
        }
    )

    assert settings.repository == "octo/repo"
    assert settings.database_id == "9257302b-0758-480e-bef1-10889636f107"
    assert settings.notion_token == "secret"
    assert settings.mapping == "url_property"
    assert settings.log_level == "DEBUG"
    assert settings.event_path == "/tmp/event.json"
    assert settings.event_name == "issues"


def test_database_id_from_url_is_hyphenated():
    assert normalise_database_id("9257302B0758480EBEF110889636F107") == "9257302b-0758-480e-bef1-10889636f107"


@pytest.mark.parametrize("value", ["not-a-uuid", "9257302b0758480e", "9257302b-0758-480e-bef1-10889636f10z"])
def test_invalid_database_id_is_rejected(value):
    with pytest.raises(InvalidConfiguration):
        Settings.from_env({"NOTION_DATABASE_ID": value})


@pytest.mark.parametrize("value", ["octo", "/repo", "octo/", "octo/repo/extra"])
def test_invalid_repository_is_rejected(value):
    with pytest.raises(InvalidConfiguration):
        Settings.from_env({"GITHUB_REPOSITORY": value})

