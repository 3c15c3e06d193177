"""Shared plumbing for section renderers."""

from collections.abc import Callable
from dataclasses import dataclass, field

from bs4 import Tag

from ..config import Settings
from ..data import PortfolioStore
from ..dom import Event, Page
from ..enhancements import Announcer, LazyImageLoader, ScrollAnimator
from ..utils.logging import get_logger

logger = get_logger(__name__)

ACTIVATION_KEYS = ("Enter", " ")


@dataclass
class SectionContext:
    """What a renderer may use besides its own container."""

    page: Page
    store: PortfolioStore
    settings: Settings
    announcer: Announcer
    images: LazyImageLoader
    animator: ScrollAnimator
    interactions: list[str] = field(default_factory=list)

    def listen(self, element: Tag, event_type: str, listener: Callable[[Event], None]) -> None:
        self.page.events.add_listener(element, event_type, listener)

    def click_on_activation_keys(self, element: Tag) -> None:
        """Make Enter and Space on ``element`` behave like a click."""

        def on_keydown(event: Event) -> None:
            if event.key in ACTIVATION_KEYS:
                event.prevent_default()
                self.page.click(element)

        self.listen(element, "keydown", on_keydown)

    def track_interaction(self, kind: str) -> None:
        self.interactions.append(kind)
        logger.info("Contact interaction: %s", kind)


Populate = Callable[[SectionContext, Tag], None]


def plural(count: int, singular: str, plural_form: str | None = None) -> str:
    """``1 project`` / ``2 projects``."""
    word = singular if count == 1 else (plural_form or f"{singular}s")
    return f"{count} {word}"


def paragraphs(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]
