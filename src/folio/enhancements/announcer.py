"""Screen reader announcements through a polite live region."""

from bs4 import Tag

from ..dom import Page

LIVE_REGION_ID = "sr-live-region"


class Announcer:
    """Announces messages via ``#sr-live-region``.

    The region is cleared first and filled after a short delay so that
    repeating the same message is still read out.
    """

    def __init__(self, page: Page, delay_ms: float = 100) -> None:
        self.page = page
        self.delay_ms = delay_ms
        self.messages: list[str] = []

    def live_region(self) -> Tag:
        document = self.page.document
        region = document.get_element_by_id(LIVE_REGION_ID)
        if region is None:
            region = document.create_element(
                "div",
                id=LIVE_REGION_ID,
                **{"aria-live": "polite", "aria-atomic": "true", "class": "sr-only"},
            )
            document.body.append(region)
        return region

    def announce(self, message: str) -> None:
        region = self.live_region()
        self.page.document.set_text(region, "")
        self.page.scheduler.call_later(self.delay_ms, self._fill, region, message)

    def _fill(self, region: Tag, message: str) -> None:
        self.page.document.set_text(region, message)
        self.messages.append(message)
