"""Viewport intersection subscriptions.

One registry per concern (lazy loading, scroll reveal) instead of one
observer per element.
"""

from collections.abc import Callable
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .layout import Box, Viewport

IntersectionCallback = Callable[[Tag], None]


def is_attached(element: Tag) -> bool:
    """True while ``element`` is still part of a document tree."""
    return any(isinstance(parent, BeautifulSoup) for parent in element.parents)


@dataclass
class _Watch:
    element: Tag
    callback: IntersectionCallback


class IntersectionRegistry:
    """Watched element -> callback, checked against the viewport on demand."""

    def __init__(self, name: str, root_margin: float = 0.0, once: bool = True) -> None:
        self.name = name
        self.root_margin = root_margin
        self.once = once
        self._watches: dict[int, _Watch] = {}

    def observe(self, element: Tag, callback: IntersectionCallback) -> None:
        self._watches[id(element)] = _Watch(element, callback)

    def unobserve(self, element: Tag) -> None:
        self._watches.pop(id(element), None)

    def is_observing(self, element: Tag) -> bool:
        return id(element) in self._watches

    def prune(self) -> int:
        """Forget elements that were removed from the document."""
        stale = [key for key, watch in self._watches.items() if not is_attached(watch.element)]
        for key in stale:
            del self._watches[key]
        return len(stale)

    def __len__(self) -> int:
        return len(self._watches)

    def check(self, box_for: Callable[[Tag], Box], viewport: Viewport) -> list[Tag]:
        """Fire callbacks for watched elements inside the margin-expanded viewport.

        Returns:
            Elements whose callbacks ran
        """
        self.prune()
        top = viewport.scroll_top - self.root_margin
        bottom = viewport.bottom + self.root_margin
        hits = [
            watch
            for watch in list(self._watches.values())
            if box_for(watch.element).intersects(top, bottom)
        ]
        for watch in hits:
            if self.once:
                self.unobserve(watch.element)
            watch.callback(watch.element)
        return [watch.element for watch in hits]
