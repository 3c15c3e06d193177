"""Event listeners and dispatch for the headless page.

Listeners are keyed by element identity (bs4 tags compare structurally, so
two identical cards would otherwise share listeners). Dispatch bubbles from
the target up through its ancestors.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from bs4 import Tag


@dataclass
class Event:
    """A dispatched DOM event."""

    type: str
    target: Tag
    key: str = ""
    detail: Any = None
    current_target: Tag | None = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


Listener = Callable[[Event], None]


@dataclass
class _Entry:
    element: Tag
    listeners: dict[str, list[Listener]] = field(default_factory=dict)


class EventRegistry:
    """Registry of element -> event type -> listeners."""

    def __init__(self) -> None:
        self._entries: dict[int, _Entry] = {}

    def add_listener(self, element: Tag, event_type: str, listener: Listener) -> None:
        entry = self._entries.setdefault(id(element), _Entry(element))
        entry.listeners.setdefault(event_type, []).append(listener)

    def remove_listener(self, element: Tag, event_type: str, listener: Listener) -> None:
        entry = self._entries.get(id(element))
        if entry is None:
            return
        listeners = entry.listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, element: Tag | None = None, event_type: str | None = None) -> int:
        """Count listeners, optionally for one element and/or one event type."""
        if element is not None:
            entry = self._entries.get(id(element))
            entries = [entry] if entry else []
        else:
            entries = list(self._entries.values())
        return sum(
            len(listeners)
            for entry in entries
            for kind, listeners in entry.listeners.items()
            if event_type is None or kind == event_type
        )

    def dispatch(self, element: Tag, event_type: str, **fields: Any) -> Event:
        """Dispatch an event at ``element`` and bubble it to the document root."""
        event = Event(type=event_type, target=element, **fields)
        node: Tag | None = element
        while node is not None and not event.propagation_stopped:
            entry = self._entries.get(id(node))
            if entry is not None:
                event.current_target = node
                for listener in list(entry.listeners.get(event_type, [])):
                    listener(event)
            node = node.parent
        event.current_target = None
        return event

    def discard_subtree(self, root: Tag) -> int:
        """Drop listeners of every descendant of ``root`` (not ``root`` itself).

        Returns:
            Number of elements whose listeners were dropped
        """
        doomed = [
            key
            for key, entry in self._entries.items()
            if any(parent is root for parent in entry.element.parents)
        ]
        for key in doomed:
            del self._entries[key]
        return len(doomed)
