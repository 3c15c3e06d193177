"""Scroll-triggered reveal animations."""

from collections.abc import Callable, Iterable

from bs4 import Tag

from ..dom import Page, add_class

RevealHook = Callable[[Tag], None]


class ScrollAnimator:
    """Adds ``animate-in`` to elements as they scroll into view.

    Elements registered before ``start`` wait until the page has loaded;
    elements revealed in the same pass are staggered.
    """

    def __init__(self, page: Page, stagger_ms: float = 150, reduced_motion: bool = False) -> None:
        self.page = page
        self.stagger_ms = stagger_ms
        self.reduced_motion = reduced_motion
        self.started = False
        self._queued: list[tuple[Tag, RevealHook | None]] = []
        self._batch_time: float | None = None
        self._batch_index = 0

    def register(self, elements: Iterable[Tag], on_reveal: RevealHook | None = None) -> None:
        for element in elements:
            if self.started:
                self._observe(element, on_reveal)
            else:
                self._queued.append((element, on_reveal))

    def start(self) -> int:
        """Begin observing and reveal whatever is already in view.

        Returns:
            Number of elements revealed immediately
        """
        self.started = True
        queued, self._queued = self._queued, []
        for element, on_reveal in queued:
            self._observe(element, on_reveal)
        fired = self.page.scroll_reveal.check(self.page.box_lookup(), self.page.viewport)
        return len(fired)

    def _observe(self, element: Tag, on_reveal: RevealHook | None) -> None:
        self.page.scroll_reveal.observe(element, lambda el: self.reveal(el, on_reveal))

    def reveal(self, element: Tag, on_reveal: RevealHook | None = None) -> None:
        if self.reduced_motion:
            self._show(element, on_reveal)
            return
        now = self.page.scheduler.now
        if self._batch_time != now:
            self._batch_time = now
            self._batch_index = 0
        delay = self._batch_index * self.stagger_ms
        self._batch_index += 1
        self.page.scheduler.call_later(delay, self._show, element, on_reveal)

    def _show(self, element: Tag, on_reveal: RevealHook | None) -> None:
        add_class(element, "animate-in")
        if on_reveal is not None:
            on_reveal(element)
