"""Lazy image loading with WebP rewriting and generated placeholders."""

import base64
import re
from collections.abc import Callable

from bs4 import Tag

from ..dom import Page, add_class, is_attached, remove_class, set_style
from ..utils.html import escape_html
from ..utils.logging import get_logger

logger = get_logger(__name__)

FADE_IN_DELAY_MS = 16
_RASTER_SUFFIX = re.compile(r"\.(jpe?g|png)$", re.IGNORECASE)

ImageCallback = Callable[[Tag, bool], None]


def initials(text: str, limit: int = 2) -> str:
    """Initials of the leading alphabetic words, e.g. ``"Jane Doe - photo"`` -> ``"JD"``."""
    letters = [word[0].upper() for word in text.split() if word[:1].isalpha()]
    return "".join(letters[:limit]) or "?"


def placeholder_image(alt: str, width: int = 400, height: int = 300) -> str:
    """SVG placeholder as a data URI."""
    svg = (
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">'
        '<rect width="100%" height="100%" fill="#f3f4f6"/>'
        '<text x="50%" y="50%" text-anchor="middle" dy=".3em" fill="#6b7280" '
        f'font-family="Arial, sans-serif" font-size="48">{escape_html(initials(alt))}</text>'
        "</svg>"
    )
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


class LazyImageLoader:
    """Defers image loading until the lazy-load registry sees the image.

    Images waiting to load carry their source in ``data-src``. A failed load
    is replaced with a placeholder so no broken image is ever shown.
    """

    def __init__(
        self, page: Page, webp_supported: bool = False, reduced_motion: bool = False
    ) -> None:
        self.page = page
        self.webp_supported = webp_supported
        self.reduced_motion = reduced_motion
        self._callbacks: dict[int, tuple[Tag, ImageCallback]] = {}

    def optimized_url(self, src: str) -> str:
        if self.webp_supported and ".webp" not in src.lower():
            return _RASTER_SUFFIX.sub(".webp", src)
        return src

    def defer(self, img: Tag, src: str, on_done: ImageCallback | None = None) -> None:
        self.prune()
        if img.has_attr("src"):
            del img["src"]
        remove_class(img, "loaded", "error", "loading")
        img["data-src"] = src
        add_class(img, "lazy-load")
        if on_done is None:
            self._callbacks.pop(id(img), None)
        else:
            self._callbacks[id(img)] = (img, on_done)
        self.page.lazy_load.observe(img, self.load)

    def load(self, img: Tag) -> bool:
        """Load a deferred image now.

        Returns:
            True if the image loaded, False if the placeholder was used
        """
        src = img.get("data-src")
        if not src:
            return False
        self.page.lazy_load.unobserve(img)
        add_class(img, "loading")
        optimized = self.optimized_url(str(src))
        loaded = self.page.resources.can_load(optimized)
        del img["data-src"]
        remove_class(img, "loading", "lazy-load")
        if loaded:
            img["src"] = optimized
            add_class(img, "loaded")
            self._fade_in(img)
        else:
            logger.warning("Failed to load image: %s", src)
            add_class(img, "error")
            img["src"] = placeholder_image(str(img.get("alt", "")))

        entry = self._callbacks.pop(id(img), None)
        if entry is not None:
            entry[1](img, loaded)
        return loaded

    def prune(self) -> int:
        """Drop callbacks for images that were replaced before loading."""
        stale = [key for key, (img, _) in self._callbacks.items() if not is_attached(img)]
        for key in stale:
            del self._callbacks[key]
        return len(stale)

    @property
    def pending_callbacks(self) -> int:
        return len(self._callbacks)

    def _fade_in(self, img: Tag) -> None:
        if self.reduced_motion:
            return
        set_style(img, "opacity", "0")
        set_style(img, "transition", "opacity 0.5s ease, transform 0.5s ease")
        self.page.scheduler.call_later(FADE_IN_DELAY_MS, set_style, img, "opacity", "1")
