"""Portfolio application: registers sections, populates them and signals load.

The app is an ordinary object handed to whoever bootstraps the page; there
is no global registry.
"""

import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..config import Settings
from ..data import PortfolioStore
from ..dom import Page, add_class, remove_class
from ..enhancements import (
    Announcer,
    LazyImageLoader,
    ScrollAnimator,
    SEOManager,
    SmoothScroller,
    ThemeManager,
)
from ..sections import SECTION_POPULATORS, Populate, SectionContext
from ..utils.html import escape_html
from ..utils.logging import get_logger
from .components import (
    ComponentDescriptor,
    ComponentSnapshot,
    ComponentState,
    Failed,
    Populated,
    SectionResult,
    Skipped,
)

logger = get_logger(__name__)

LOADED_EVENT = "portfolioLoaded"


@dataclass(frozen=True)
class LoadedEvent:
    components: list[str]
    timestamp: float


LoadedListener = Callable[[LoadedEvent], None]


def error_block(name: str) -> str:
    return (
        '<div class="container"><div class="error-message">'
        f"<h2>Unable to load {escape_html(name)} section</h2>"
        "<p>Please refresh the page to try again.</p>"
        "</div></div>"
    )


class PortfolioApp:
    """Drives the page from data load to the loaded notification."""

    def __init__(
        self,
        page: Page,
        store: PortfolioStore,
        settings: Settings,
        populators: Mapping[str, Populate] | None = None,
    ) -> None:
        self.page = page
        self.store = store
        self.settings = settings
        self._populators = dict(SECTION_POPULATORS if populators is None else populators)

        self.theme = ThemeManager(page, settings.theme_storage_key, settings.default_theme)
        self.scroller = SmoothScroller(page)
        self.announcer = Announcer(page, settings.announce_delay_ms)
        self.images = LazyImageLoader(page, settings.webp_supported, settings.reduced_motion)
        self.animator = ScrollAnimator(page, settings.reveal_stagger_ms, settings.reduced_motion)
        self.seo = SEOManager(page, settings.site_url)
        self.context = SectionContext(
            page=page,
            store=store,
            settings=settings,
            announcer=self.announcer,
            images=self.images,
            animator=self.animator,
        )

        self.components: dict[str, ComponentDescriptor] = {}
        self.results: dict[str, SectionResult] = {}
        self.is_loaded = False
        self.loaded_event: LoadedEvent | None = None
        self._listeners: list[LoadedListener] = []
        self.on_loaded(lambda event: self.seo.apply(self.store.get_data()))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def init(self) -> LoadedEvent:
        """Run the start-up sequence; a failing step is logged and skipped."""
        if self.loaded_event is not None:
            return self.loaded_event

        logger.info("Initializing portfolio app")
        self._step("apply saved theme", self.theme.apply_saved)
        self._step("register components", self.register_components)
        await self._async_step("load data", self.store.load_data)
        self._step("populate sections", self.populate_all)
        self._step("wire smooth scrolling", self.scroller.wire)
        self._step("wire theme toggle", self.theme.wire_toggle)
        self._step("start enhancements", self._start_enhancements)
        return self._handle_load_complete()

    def _step(self, label: str, fn: Callable[[], Any]) -> bool:
        try:
            fn()
        except Exception:
            logger.exception("Initialization step failed: %s", label)
            return False
        return True

    async def _async_step(self, label: str, fn: Callable[[], Awaitable[Any]]) -> bool:
        try:
            await fn()
        except Exception:
            logger.exception("Initialization step failed: %s", label)
            return False
        return True

    def _start_enhancements(self) -> None:
        self.animator.start()
        self.page.check_observers()

    def _handle_load_complete(self) -> LoadedEvent:
        if self.loaded_event is not None:
            return self.loaded_event
        self.is_loaded = True
        body = self.page.document.body
        add_class(body, "loaded", "app-loaded")
        self._optimize_sections()

        event = LoadedEvent(components=list(self.components), timestamp=time.time())
        self.loaded_event = event
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Loaded listener failed")
        self.page.events.dispatch(self.page.document.root, LOADED_EVENT, detail=event)
        logger.info("Portfolio load complete")
        return event

    def _optimize_sections(self) -> None:
        for descriptor in self.components.values():
            element = descriptor.element
            if element is None or not descriptor.populated:
                continue
            add_class(element, "section-optimized")
            if not element.get("aria-labelledby"):
                title = self.page.document.select_one(".section-title", element)
                if title is not None and title.get("id"):
                    element["aria-labelledby"] = title["id"]

    def on_loaded(self, listener: LoadedListener) -> None:
        """Subscribe to the one-time loaded notification.

        Listeners added after load are not called.
        """
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def register_components(self) -> None:
        for name, populate in self._populators.items():
            element = self.page.document.get_element_by_id(name)
            if element is None:
                logger.warning("Element not found for %s section", name)
            self.components[name] = ComponentDescriptor(name, element, populate)
        logger.info("Registered %d components", len(self.components))

    def _populate(self, descriptor: ComponentDescriptor) -> SectionResult:
        if descriptor.element is None:
            return Skipped(descriptor.name, "element not found")
        try:
            descriptor.populate(self.context, descriptor.element)
        except Exception as e:
            logger.error("Error populating %s section: %s", descriptor.name, e, exc_info=True)
            descriptor.state = ComponentState.ERRORED
            descriptor.error = str(e)
            add_class(descriptor.element, "section-error")
            self.page.document.set_inner_html(descriptor.element, error_block(descriptor.name))
            return Failed(descriptor.name, str(e))
        descriptor.state = ComponentState.POPULATED
        descriptor.error = None
        remove_class(descriptor.element, "section-error")
        return Populated(descriptor.name)

    def populate_all(self) -> dict[str, SectionResult]:
        results = {name: self._populate(d) for name, d in self.components.items()}
        self.results = results
        succeeded = sum(isinstance(r, Populated) for r in results.values())
        failed = sum(isinstance(r, Failed) for r in results.values())
        logger.info("Section population complete: %d successful, %d errors", succeeded, failed)
        return results

    def get_component(self, name: str) -> ComponentDescriptor | None:
        return self.components.get(name)

    def get_all_components(self) -> list[ComponentSnapshot]:
        return [
            ComponentSnapshot(
                name=name,
                element=d.element,
                populated=d.populated,
                is_visible=d.element is not None and self.page.is_visible(d.element),
            )
            for name, d in self.components.items()
        ]

    def refresh_component(self, name: str) -> bool:
        descriptor = self.components.get(name)
        if descriptor is None or descriptor.element is None:
            return False
        result = self._populate(descriptor)
        self.results[name] = result
        self._check_new_content()
        if isinstance(result, Populated):
            logger.info("%s component refreshed", name)
            return True
        return False

    def refresh_all_components(self) -> dict[str, SectionResult]:
        logger.info("Refreshing all components")
        results = self.populate_all()
        self._check_new_content()
        return results

    def _check_new_content(self) -> None:
        # re-rendered images and reveal targets already in view fire right away
        if self.is_loaded:
            self.page.check_observers()
