"""Tests for fetching and the portfolio data store."""

import asyncio
import json
from pathlib import Path

import httpx
import pytest

from folio.data import (
    FALLBACK_NAME,
    FileDataSource,
    HTTPDataSource,
    PortfolioStore,
    data_source_for,
)
from folio.exceptions import DataSourceError


class RecordingSleep:
    """Async sleep stand-in that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def fetch(source):
    return asyncio.run(source.fetch())


class TestHTTPDataSource:
    """Test HTTP fetching against a mock transport."""

    URL = "https://example.com/data/portfolio.json"

    def test_success(self, portfolio_dict: dict) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert str(request.url) == self.URL
            return httpx.Response(200, json=portfolio_dict)

        source = HTTPDataSource(self.URL, client=mock_client(handler))
        assert fetch(source)["personal"]["name"] == "Jane Doe"

    def test_server_error_raises(self) -> None:
        source = HTTPDataSource(
            self.URL, client=mock_client(lambda request: httpx.Response(500))
        )
        with pytest.raises(DataSourceError, match="HTTP error"):
            fetch(source)

    def test_invalid_json_raises(self) -> None:
        source = HTTPDataSource(
            self.URL, client=mock_client(lambda request: httpx.Response(200, text="{oops"))
        )
        with pytest.raises(DataSourceError, match="Invalid JSON"):
            fetch(source)


class TestFileDataSource:
    """Test reading the document from disk."""

    def test_reads_json(self, tmp_path: Path, portfolio_dict: dict) -> None:
        path = tmp_path / "portfolio.json"
        path.write_text(json.dumps(portfolio_dict), encoding="utf-8")
        assert fetch(FileDataSource(path)) == portfolio_dict

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataSourceError, match="Cannot read"):
            fetch(FileDataSource(tmp_path / "missing.json"))

    def test_bad_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(DataSourceError, match="Invalid JSON"):
            fetch(FileDataSource(path))

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"personal": {"name": "\xff\xfe"}}')
        with pytest.raises(DataSourceError, match="Invalid JSON"):
            fetch(FileDataSource(path))

    def test_source_selection(self, tmp_path: Path) -> None:
        """Test URLs pick HTTP and anything else is a file under the root."""
        assert isinstance(data_source_for("https://x.io/p.json", tmp_path), HTTPDataSource)
        source = data_source_for("data/p.json", tmp_path)
        assert isinstance(source, FileDataSource)
        assert source.path == tmp_path / "data" / "p.json"


class TestPortfolioStore:
    """Test loading, retry and fallback."""

    def test_getters_before_load(self, static_source, portfolio_dict: dict) -> None:
        """Test accessors return empty defaults until data is loaded."""
        store = PortfolioStore(static_source(portfolio_dict))
        assert store.is_loaded is False
        assert store.get_personal_info().name == ""
        assert store.get_experience() == []
        assert store.get_projects() == []
        assert store.get_skills() == []

    def test_happy_path(self, static_source, portfolio_dict: dict) -> None:
        source = static_source(portfolio_dict)
        store = PortfolioStore(source)
        asyncio.run(store.load_data())

        assert store.is_loaded
        assert source.calls == 1
        assert store.used_fallback is False
        assert store.is_data_valid()
        assert store.get_personal_info().name == "Jane Doe"
        assert [p.id for p in store.get_projects()] == ["p1", "p2", "p3"]

    def test_fallback_after_three_failures(self, failing_source) -> None:
        """Test exponential backoff between attempts and the built-in fallback."""
        sleep = RecordingSleep()
        source = failing_source(failures=3)
        store = PortfolioStore(source, max_attempts=3, base_delay=1.0, sleep=sleep)

        data = asyncio.run(store.load_data())

        assert source.calls == 3
        assert sleep.delays == [2.0, 4.0]
        assert store.used_fallback is True
        assert data.personal.name == FALLBACK_NAME
        assert store.get_experience()
        assert store.get_projects()
        assert store.get_skills()

    def test_recovers_on_second_attempt(self, failing_source, portfolio_dict: dict) -> None:
        sleep = RecordingSleep()
        source = failing_source(failures=1, raw=portfolio_dict)
        store = PortfolioStore(source, sleep=sleep)

        asyncio.run(store.load_data())

        assert source.calls == 2
        assert sleep.delays == [2.0]
        assert store.used_fallback is False
        assert store.get_personal_info().name == "Jane Doe"

    def test_invalid_data_is_kept(self, static_source, portfolio_dict: dict) -> None:
        """Test validation errors are recorded while the data is still served."""
        portfolio_dict["personal"]["contact"]["email"] = "not-an-email"
        store = PortfolioStore(static_source(portfolio_dict))
        asyncio.run(store.load_data())

        assert not store.is_data_valid()
        assert store.get_validation_errors() == ["Personal info: Invalid email address"]
        assert store.get_personal_info().contact.email == "not-an-email"

    def test_validate_section(self, store: PortfolioStore) -> None:
        assert store.validate_section("projects").is_valid
        assert store.validate_section("personal").is_valid
        assert not store.validate_section("education").is_valid

    def test_unreadable_file_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "portfolio.json"
        path.write_bytes(b'{"personal": {"name": "\xff\xfe"}}')
        store = PortfolioStore(FileDataSource(path), sleep=RecordingSleep())

        data = asyncio.run(store.load_data())

        assert store.used_fallback is True
        assert data.personal.name == FALLBACK_NAME == "Your Name"

    def test_unexpected_source_error_counts_as_failure(self, portfolio_dict: dict) -> None:
        class FlakySource:
            location = "flaky"

            def __init__(self) -> None:
                self.calls = 0

            async def fetch(self) -> dict:
                self.calls += 1
                if self.calls == 1:
                    raise RuntimeError("boom")
                return portfolio_dict

        source = FlakySource()
        store = PortfolioStore(source, sleep=RecordingSleep())
        asyncio.run(store.load_data())

        assert source.calls == 2
        assert store.used_fallback is False
        assert store.get_personal_info().name == "Jane Doe"
