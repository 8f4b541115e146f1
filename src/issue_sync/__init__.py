"""Add newly opened GitHub issues to a Notion database."""

from .client import NotionApi, NotionApiError  # noqa: F401
from .config import ConfigurationError, InvalidConfiguration, MissingConfiguration, Settings  # noqa: F401
from .dispatch import EventFilter, LocalEventSource, register_handler  # noqa: F401
from .events import Issue, IssueEvent  # noqa: F401
from .handler import IssueSyncHandler  # noqa: F401
from .mappers import LINKED_TITLE, URL_PROPERTY, NotionPageRequest, PageMapping, get_mapping  # noqa: F401
