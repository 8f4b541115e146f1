"""Declarative event registration.

Delivery of webhook events belongs to whatever framework hosts the handler.
That framework is represented by an :class:`EventSource`: anything exposing
``subscribe(event_filter, callback)``. :class:`LocalEventSource` is the
in-process implementation used by the command line entry point, where GitHub
Actions has already delivered the event payload to disk.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Protocol, Tuple

import structlog

ISSUES_EVENT = "issues"

EventCallback = Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True)
class EventFilter:
    """Matches GitHub events by name and repository."""

    repository: str
    event: str = ISSUES_EVENT

    def matches(self, event_name: str, payload: Mapping[str, Any]) -> bool:
        if event_name != self.event:
            return False
        repository = payload.get("repository")
        if not isinstance(repository, Mapping):
            return False
        full_name = repository.get("full_name")
        return isinstance(full_name, str) and full_name.lower() == self.repository.lower()


class EventSource(Protocol):
    def subscribe(self, event_filter: EventFilter, callback: EventCallback) -> None:
        ...


class LocalEventSource:
    """Delivers already-received events to matching subscribers, in order."""

    def __init__(self, logger: Optional[structlog.BoundLogger] = None) -> None:
        self._subscriptions: List[Tuple[EventFilter, EventCallback]] = []
        self._logger = (logger or structlog.get_logger(__name__)).bind(component="event_source")

    def subscribe(self, event_filter: EventFilter, callback: EventCallback) -> None:
        self._subscriptions.append((event_filter, callback))
        self._logger.debug("subscribed", event_name=event_filter.event, repository=event_filter.repository)

    def deliver(self, event_name: str, payload: Mapping[str, Any]) -> int:
        """Invoke every matching callback and return how many ran.

        Exceptions raised by a callback propagate to the caller.
        """

        delivered = 0
        for event_filter, callback in self._subscriptions:
            if not event_filter.matches(event_name, payload):
                continue
            callback(payload)
            delivered += 1
        if not delivered:
            repository = payload.get("repository")
            self._logger.info(
                "event_not_matched",
                event_name=event_name,
                repository=repository.get("full_name") if isinstance(repository, Mapping) else None,
            )
        return delivered


def register_handler(source: EventSource, handler: EventCallback, *, repository: str) -> EventFilter:
    """Subscribe ``handler`` to ``issues`` events on ``repository``."""
    event_filter = EventFilter(repository=repository)
    source.subscribe(event_filter, handler)
    return event_filter


__all__ = ["EventFilter", "EventSource", "LocalEventSource", "ISSUES_EVENT", "register_handler"]
