"""The headless page: document, events, clock, layout and browser services."""

from collections.abc import Callable
from pathlib import Path

from bs4 import Tag

from ..config import Settings
from .document import Document, is_displayed, load_shell
from .events import Event
from .layout import Box, FlowLayout, Viewport
from .observers import IntersectionRegistry
from .resources import ResourceLoader
from .storage import LocalStorage
from .timers import Scheduler


class Page:
    """Everything a renderer or helper can touch while the site is running.

    User interaction goes through ``click``, ``keydown``, ``type_text`` and
    ``scroll_to``; time only passes through ``advance``.
    """

    def __init__(
        self,
        document: Document,
        *,
        storage: LocalStorage | None = None,
        resources: ResourceLoader | None = None,
        viewport_height: float = 900.0,
        lazy_load_margin: float = 100.0,
        reveal_margin: float = 50.0,
    ) -> None:
        self.document = document
        self.events = document.events
        self.scheduler = Scheduler()
        self.viewport = Viewport(0.0, viewport_height)
        self.layout = FlowLayout()
        self.storage = storage or LocalStorage()
        self.resources = resources or ResourceLoader()
        self.lazy_load = IntersectionRegistry("lazy-load", lazy_load_margin)
        self.scroll_reveal = IntersectionRegistry("scroll-reveal", reveal_margin)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        html: str | None = None,
        resources: ResourceLoader | None = None,
    ) -> "Page":
        """Build a page from settings, loading the shell and local storage."""
        if html is None:
            html = load_shell(settings.shell_path)
        return cls(
            Document(html),
            storage=LocalStorage(settings.storage_path),
            resources=resources
            or ResourceLoader(settings.site_root, timeout=settings.http_timeout),
            viewport_height=settings.viewport_height,
            lazy_load_margin=settings.lazy_load_margin,
            reveal_margin=settings.reveal_margin,
        )

    @classmethod
    def from_html(cls, html: str, **kwargs) -> "Page":
        return cls(Document(html), **kwargs)

    @property
    def registries(self) -> tuple[IntersectionRegistry, ...]:
        return (self.lazy_load, self.scroll_reveal)

    def _resolve(self, target: Tag | str) -> Tag:
        if isinstance(target, Tag):
            return target
        element = self.document.select_one(target)
        if element is None:
            raise LookupError(f"No element matches {target!r}")
        return element

    def click(self, target: Tag | str) -> Event:
        return self.events.dispatch(self._resolve(target), "click")

    def keydown(self, target: Tag | str, key: str) -> Event:
        return self.events.dispatch(self._resolve(target), "keydown", key=key)

    def type_text(self, target: Tag | str, text: str) -> Event:
        element = self._resolve(target)
        element["value"] = text
        return self.events.dispatch(element, "input")

    def hover(self, target: Tag | str) -> Event:
        return self.events.dispatch(self._resolve(target), "mouseenter")

    def unhover(self, target: Tag | str) -> Event:
        return self.events.dispatch(self._resolve(target), "mouseleave")

    def scroll_to(self, y: float) -> None:
        """Scroll the window, then let observers and scroll listeners react."""
        self.viewport.scroll_top = max(0.0, y)
        self.check_observers()
        self.events.dispatch(self.document.root, "scroll")

    def advance(self, ms: float) -> int:
        return self.scheduler.advance(ms)

    def absolute_box(self, element: Tag) -> Box:
        return self.layout.box_for(self.document.soup, element)

    def bounding_box(self, element: Tag) -> Box:
        """Viewport-relative box, like getBoundingClientRect."""
        box = self.absolute_box(element)
        return Box(box.top - self.viewport.scroll_top, box.height)

    def is_visible(self, element: Tag) -> bool:
        """Point-in-time check that the element is displayed and in the viewport."""
        if not is_displayed(element):
            return False
        return self.absolute_box(element).intersects(
            self.viewport.scroll_top, self.viewport.bottom
        )

    def box_lookup(self) -> Callable[[Tag], Box]:
        """Snapshot of the current layout as an element -> box function."""
        boxes = self.layout.compute(self.document.soup)
        empty = Box(0.0, 0.0)
        return lambda element: boxes.get(id(element), empty)

    def check_observers(self) -> list[Tag]:
        """Run every intersection registry against one layout pass."""
        box_for = self.box_lookup()
        fired: list[Tag] = []
        for registry in self.registries:
            fired.extend(registry.check(box_for, self.viewport))
        return fired

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.document.serialize(), encoding="utf-8")
        return path
