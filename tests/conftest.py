"""Shared test fixtures for Folio."""

import asyncio
import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from folio.config import Settings
from folio.data import PortfolioStore
from folio.dom import Page, ResourceLoader, load_shell
from folio.enhancements import Announcer, LazyImageLoader, ScrollAnimator
from folio.exceptions import DataSourceError
from folio.orchestrator import PortfolioApp
from folio.sections import Populate, SectionContext


class StaticSource:
    """Data source that returns a fixed document."""

    location = "memory://portfolio.json"

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        self.calls = 0

    async def fetch(self) -> Any:
        self.calls += 1
        return copy.deepcopy(self.raw)


class FailingSource:
    """Data source that fails a given number of times before succeeding."""

    location = "memory://broken.json"

    def __init__(self, failures: int, raw: Any = None) -> None:
        self.failures = failures
        self.raw = raw
        self.calls = 0

    async def fetch(self) -> Any:
        self.calls += 1
        if self.calls <= self.failures:
            raise DataSourceError(f"simulated failure {self.calls}")
        return copy.deepcopy(self.raw)


@pytest.fixture
def portfolio_dict() -> dict[str, Any]:
    """A complete, valid portfolio document."""
    return {
        "personal": {
            "name": "Jane Doe",
            "title": "Cloud Engineer",
            "bio": "First paragraph about Jane.\n\nSecond paragraph.",
            "summary": "Builds scalable Cloud infrastructure and API development tooling.",
            "headshot": "images/jane.jpg",
            "contact": {
                "email": "jane@example.com",
                "linkedin": "https://linkedin.com/in/jane",
                "github": "https://github.com/jane",
                "behance": "https://behance.net/jane",
            },
        },
        "experience": [
            {
                "id": "acme",
                "company": "Acme Corp",
                "title": "Senior Engineer",
                "duration": "2021 - Present",
                "achievements": ["Cut costs by 30%", "Led migration", "Mentored team"],
                "technologies": ["AWS", "Terraform"],
            },
            {
                "id": "initech",
                "company": "Initech",
                "title": "Engineer",
                "duration": "2018 - 2021",
                "achievements": ["Automated reports"],
            },
        ],
        "projects": [
            {
                "id": "p1",
                "title": "Security Platform",
                "description": "Monitors cloud accounts.",
                "tools": ["Python", "AWS", "React"],
                "outcomes": ["Fewer incidents"],
                "images": ["images/p1.png"],
                "links": [{"name": "GitHub", "url": "https://github.com/jane/p1"}],
            },
            {
                "id": "p2",
                "title": "Data Pipeline",
                "description": "Moves data around.",
                "tools": ["Python", "Docker"],
                "outcomes": ["Faster reports"],
            },
            {
                "id": "p3",
                "title": "Design System",
                "description": "Shared UI components.",
                "tools": ["Figma", "React"],
                "outcomes": ["Consistent UI"],
            },
        ],
        "skills": [
            {
                "category": "Cloud Platforms",
                "skills": [
                    {"name": "AWS", "proficiency": "expert"},
                    {"name": "Azure", "proficiency": "advanced"},
                    {"name": "Docker"},
                ],
            },
            {
                "category": "Programming",
                "skills": [
                    {"name": "Python", "proficiency": "expert"},
                    {"name": "Go", "proficiency": "beginner"},
                ],
            },
        ],
    }


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment, with no retry delay."""
    return Settings(_env_file=None, site_root=tmp_path, fetch_base_delay=0.0)


@pytest.fixture
def page(tmp_path: Path) -> Page:
    """The packaged shell with images resolved under tmp_path."""
    return Page.from_html(load_shell(), resources=ResourceLoader(tmp_path))


@pytest.fixture
def make_store() -> Callable[..., PortfolioStore]:
    """Factory for a loaded store serving ``raw``."""

    def factory(raw: Any) -> PortfolioStore:
        store = PortfolioStore(StaticSource(raw), base_delay=0.0)
        asyncio.run(store.load_data())
        return store

    return factory


@pytest.fixture
def store(make_store, portfolio_dict) -> PortfolioStore:
    return make_store(portfolio_dict)


@pytest.fixture
def ctx(page: Page, store: PortfolioStore, test_settings: Settings) -> SectionContext:
    """Section context over the shared page and store."""
    return SectionContext(
        page=page,
        store=store,
        settings=test_settings,
        announcer=Announcer(page),
        images=LazyImageLoader(page),
        animator=ScrollAnimator(page),
    )


@pytest.fixture
def make_app(page: Page, test_settings: Settings) -> Callable[..., PortfolioApp]:
    """Factory for an app over the shared page; the source may be any data source."""

    def factory(source: Any, populators: dict[str, Populate] | None = None) -> PortfolioApp:
        store = PortfolioStore(source, base_delay=0.0)
        return PortfolioApp(page, store, test_settings, populators=populators)

    return factory


@pytest.fixture
def static_source() -> Callable[[Any], StaticSource]:
    return StaticSource


@pytest.fixture
def failing_source() -> Callable[..., FailingSource]:
    return FailingSource
