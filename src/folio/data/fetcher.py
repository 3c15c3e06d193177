"""Fetching the portfolio document.

Single Responsibility: turn a data location into decoded JSON, or raise
DataSourceError. Retrying is the store's job.
"""

import json
from pathlib import Path
from typing import Any, Protocol

import httpx

from ..exceptions import DataSourceError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class DataSource(Protocol):
    """Protocol for fetching the document - enables dependency injection."""

    location: str

    async def fetch(self) -> Any:
        """Fetch and decode the document."""
        ...


class HTTPDataSource:
    """Fetch the document over HTTP with httpx.

    A shared ``AsyncClient`` may be injected (tests pass one built on
    ``httpx.MockTransport``); otherwise a client is created per fetch.
    """

    DEFAULT_TIMEOUT = 10.0
    USER_AGENT = "Folio/0.1 (Portfolio Site)"

    def __init__(
        self,
        url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.location = url
        self._client = client
        self._timeout = timeout

    async def fetch(self) -> Any:
        """Fetch the document.

        Raises:
            DataSourceError: On transport errors, non-2xx status or invalid JSON
        """
        logger.debug("Fetching: %s", self.location)
        try:
            if self._client is not None:
                response = await self._client.get(self.location)
            else:
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    follow_redirects=True,
                    max_redirects=5,
                    headers={"User-Agent": self.USER_AGENT},
                ) as client:
                    response = await client.get(self.location)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise DataSourceError(f"HTTP error fetching {self.location}: {e}") from e
        except ValueError as e:
            raise DataSourceError(f"Invalid JSON at {self.location}: {e}") from e


class FileDataSource:
    """Read the document from the local site root."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.location = str(path)

    async def fetch(self) -> Any:
        """Read and decode the document.

        Raises:
            DataSourceError: If the file is missing, unreadable or not JSON
        """
        try:
            content = self.path.read_bytes()
        except OSError as e:
            raise DataSourceError(f"Cannot read {self.path}: {e}") from e
        try:
            return json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DataSourceError(f"Invalid JSON in {self.path}: {e}") from e


def data_source_for(
    location: str,
    root: Path,
    client: httpx.AsyncClient | None = None,
    timeout: float = HTTPDataSource.DEFAULT_TIMEOUT,
) -> DataSource:
    """Pick a data source for a location: http(s) URLs or paths under ``root``."""
    if location.startswith(("http://", "https://")):
        return HTTPDataSource(location, client=client, timeout=timeout)
    return FileDataSource(root / location)
