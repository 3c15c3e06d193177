"""In-page navigation: smooth scrolling and the active nav link."""

from bs4 import Tag

from ..dom import Event, Page, add_class, remove_class
from ..utils.logging import get_logger

logger = get_logger(__name__)

SCROLL_PADDING = 20
SPY_OFFSET = 100


class SmoothScroller:
    """Scrolls to sections below the fixed header and tracks the active link."""

    def __init__(self, page: Page) -> None:
        self.page = page
        self.active_section: str | None = None

    def _header_height(self) -> float:
        header = self.page.document.get_element_by_id("header")
        return self.page.absolute_box(header).height if header is not None else 0.0

    def scroll_to_section(self, section_id: str) -> bool:
        section = self.page.document.get_element_by_id(section_id)
        if section is None:
            logger.warning("Cannot scroll to missing section #%s", section_id)
            return False
        target = self.page.absolute_box(section).top - self._header_height() - SCROLL_PADDING
        self.page.scroll_to(target)
        self.update_active_nav_link(section_id)
        return True

    def nav_links(self) -> list[Tag]:
        return self.page.document.select(".nav-link")

    def update_active_nav_link(self, section_id: str) -> None:
        if section_id == self.active_section:
            return
        self.active_section = section_id
        for link in self.nav_links():
            if link.get("href") == f"#{section_id}":
                add_class(link, "active")
                link["aria-current"] = "page"
            else:
                remove_class(link, "active")
                link["aria-current"] = "false"

    def current_section(self) -> str | None:
        """Section under the header at the current scroll position."""
        position = self.page.viewport.scroll_top + self._header_height() + SPY_OFFSET
        current = None
        for link in self.nav_links():
            section_id = str(link.get("href", ""))[1:]
            section = self.page.document.get_element_by_id(section_id) if section_id else None
            if section is None:
                continue
            box = self.page.absolute_box(section)
            if box.top <= position < box.bottom:
                current = section_id
        return current

    def wire(self) -> int:
        """Route every in-page anchor through ``scroll_to_section``.

        Returns:
            Number of anchors wired
        """
        anchors = [
            a for a in self.page.document.select('a[href^="#"]') if len(str(a["href"])) > 1
        ]
        for anchor in anchors:
            self.page.events.add_listener(anchor, "click", self._on_anchor_click)
        self.page.events.add_listener(self.page.document.root, "scroll", self._on_scroll)
        return len(anchors)

    def _on_anchor_click(self, event: Event) -> None:
        event.prevent_default()
        href = str(event.current_target.get("href", ""))
        self.scroll_to_section(href[1:])

    def _on_scroll(self, event: Event) -> None:
        section_id = self.current_section()
        if section_id is not None:
            self.update_active_nav_link(section_id)
