"""Portfolio data store with retry and built-in fallback."""

import asyncio
import copy
from collections.abc import Awaitable, Callable
from typing import Any

from ..exceptions import DataSourceError
from ..utils.logging import get_logger
from ..validation import ValidationResult, validate_portfolio_data, validate_section
from .fallback import FALLBACK_DATA
from .fetcher import DataSource
from .models import Experience, PersonalInfo, PortfolioData, Project, SkillCategory

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[Any]]

_NOT_FETCHED = object()


class PortfolioStore:
    """Loads the portfolio document once and serves typed accessors.

    ``load_data`` never raises: after ``max_attempts`` failed fetches the
    built-in fallback document is used. Validation failures are recorded and
    logged but the data is still served as-is.
    """

    DEFAULT_MAX_ATTEMPTS = 3
    DEFAULT_BASE_DELAY = 1.0

    def __init__(
        self,
        source: DataSource,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """Initialize the store.

        Args:
            source: Where the document comes from
            max_attempts: Fetch attempts before falling back
            base_delay: Seconds; the wait after failed attempt n is base_delay * 2**n
            sleep: Awaitable sleep, injectable for tests
        """
        self._source = source
        self._max_attempts = max(1, max_attempts)
        self._base_delay = base_delay
        self._sleep = sleep
        self._raw: Any = None
        self._data: PortfolioData | None = None
        self._validation_errors: list[str] = []
        self.used_fallback = False
        self.attempts = 0

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    async def load_data(self) -> PortfolioData:
        """Fetch, validate and keep the document, falling back if every attempt fails."""
        raw = await self._fetch_with_retry()
        if raw is _NOT_FETCHED:
            logger.warning(
                "Using fallback data after %d failed attempts from %s",
                self.attempts,
                self._source.location,
            )
            raw = copy.deepcopy(FALLBACK_DATA)
            self.used_fallback = True

        validation = validate_portfolio_data(raw)
        if validation.is_valid:
            logger.info("Portfolio data validation passed")
        else:
            logger.warning("Portfolio data validation failed: %s", validation.errors)
        self._validation_errors = validation.errors

        self._raw = raw
        self._data = PortfolioData.from_raw(raw)
        return self._data

    async def _fetch_with_retry(self) -> Any:
        for attempt in range(1, self._max_attempts + 1):
            self.attempts = attempt
            try:
                raw = await self._source.fetch()
                logger.info("Portfolio data loaded from %s", self._source.location)
                return raw
            except DataSourceError as e:
                logger.warning("Data loading attempt %d failed: %s", attempt, e)
            except Exception:
                logger.exception("Data loading attempt %d failed unexpectedly", attempt)
            if attempt < self._max_attempts:
                await self._sleep(self._base_delay * 2**attempt)
        return _NOT_FETCHED

    def get_data(self) -> PortfolioData:
        return self._data or PortfolioData()

    def get_personal_info(self) -> PersonalInfo:
        return self.get_data().personal

    def get_experience(self) -> list[Experience]:
        return self.get_data().experience

    def get_projects(self) -> list[Project]:
        return self.get_data().projects

    def get_skills(self) -> list[SkillCategory]:
        return self.get_data().skills

    def get_validation_errors(self) -> list[str]:
        return list(self._validation_errors)

    def is_data_valid(self) -> bool:
        return not self._validation_errors

    def validate_section(self, name: str) -> ValidationResult:
        """Validate one top-level section of the loaded document."""
        raw = self._raw if isinstance(self._raw, dict) else {}
        default: Any = {} if name == "personal" else []
        return validate_section(name, raw.get(name, default))
