"""Decides whether an image source would load."""

from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from ..utils.logging import get_logger

logger = get_logger(__name__)

USER_AGENT = "Folio/0.1 (Portfolio Site)"


class ResourceLoader:
    """Checks image sources the way a browser would find out: by trying them.

    ``data:`` URIs always load, http(s) URLs are probed with a HEAD request
    and anything else is a path under the site root.
    """

    def __init__(
        self,
        root: Path = Path("."),
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.root = root
        self._client = client
        self._timeout = timeout

    def can_load(self, src: str) -> bool:
        if not src:
            return False
        if src.startswith("data:"):
            return True
        if src.startswith(("http://", "https://")):
            return self._probe(src)
        path = unquote(urlparse(src).path).lstrip("/")
        return bool(path) and (self.root / path).is_file()

    def _probe(self, url: str) -> bool:
        try:
            if self._client is not None:
                response = self._client.head(url, follow_redirects=True)
            else:
                with httpx.Client(
                    timeout=self._timeout, headers={"User-Agent": USER_AGENT}
                ) as client:
                    response = client.head(url, follow_redirects=True)
        except httpx.HTTPError as e:
            logger.debug("Image probe failed for %s: %s", url, e)
            return False
        return response.status_code < 400
