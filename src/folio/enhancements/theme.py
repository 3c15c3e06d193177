"""Light/dark theme handling with a persisted preference."""

from typing import get_args

from ..config import ThemeName
from ..dom import Event, Page, set_style
from ..utils.logging import get_logger

logger = get_logger(__name__)

THEMES: tuple[str, ...] = get_args(ThemeName)
TRANSITION_MS = 300

_TOGGLE_STATE = {
    "dark": ("☀️", "Switch to light mode", "true"),
    "light": ("🌙", "Switch to dark mode", "false"),
}
_NAV_BACKGROUND = {
    "dark": "rgba(10, 10, 10, 0.98)",
    "light": "rgba(255, 255, 255, 0.98)",
}


class ThemeManager:
    """Applies the theme to ``<html>`` and keeps the toggle button in sync.

    The stored preference is read once by ``apply_saved`` and written only
    when the theme is changed explicitly.
    """

    def __init__(
        self,
        page: Page,
        storage_key: str = "portfolio-theme",
        default: ThemeName = "dark",
    ) -> None:
        self.page = page
        self.storage_key = storage_key
        self.default = default
        self.current: str = default

    def saved_theme(self) -> str:
        saved = self.page.storage.get_item(self.storage_key)
        if saved in THEMES:
            return saved
        if saved is not None:
            logger.warning("Ignoring unknown saved theme %r", saved)
        return self.default

    def apply_saved(self) -> str:
        self._apply(self.saved_theme())
        return self.current

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self._apply(theme)
        self.page.storage.set_item(self.storage_key, theme)

    def toggle(self) -> str:
        self.set_theme("light" if self.current == "dark" else "dark")
        return self.current

    def _apply(self, theme: str) -> None:
        self.current = theme
        root = self.page.document.root
        if theme == "dark":
            root["data-theme"] = "dark"
        elif root.has_attr("data-theme"):
            del root["data-theme"]
        self.update_toggle()

        body = self.page.document.body
        set_style(body, "transition", "background-color 0.3s ease, color 0.3s ease")
        self.page.scheduler.call_later(TRANSITION_MS, set_style, body, "transition", "")

        nav_menu = self.page.document.get_element_by_id("nav-menu")
        if nav_menu is not None:
            set_style(nav_menu, "background-color", _NAV_BACKGROUND[theme])
        logger.debug("Theme set to %s", theme)

    def update_toggle(self) -> None:
        button = self.page.document.get_element_by_id("theme-toggle")
        if button is None:
            return
        icon_text, label, pressed = _TOGGLE_STATE[self.current]
        icon = self.page.document.select_one(".theme-toggle-icon", button)
        if icon is not None:
            self.page.document.set_text(icon, icon_text)
        button["aria-label"] = label
        button["title"] = label
        button["aria-pressed"] = pressed

    def wire_toggle(self) -> bool:
        """Attach click and keyboard handlers to ``#theme-toggle``."""
        button = self.page.document.get_element_by_id("theme-toggle")
        if button is None:
            logger.warning("Theme toggle button not found")
            return False
        self.update_toggle()

        def on_keydown(event: Event) -> None:
            if event.key in ("Enter", " "):
                event.prevent_default()
                self.toggle()

        self.page.events.add_listener(button, "click", lambda event: self.toggle())
        self.page.events.add_listener(button, "keydown", on_keydown)
        return True
