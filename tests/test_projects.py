"""Tests for the projects grid and its filters."""

from pathlib import Path

import pytest

from folio.data.models import Project
from folio.dom import get_style, has_class, is_displayed
from folio.sections import SectionContext
from folio.sections.projects import (
    ProjectsView,
    count_text,
    matches_filter,
    render_projects,
    technologies,
)


@pytest.fixture
def view(ctx: SectionContext) -> ProjectsView:
    container = ctx.page.document.get_element_by_id("projects")
    return render_projects(ctx, container, ctx.store.get_projects())


def shown_ids(view: ProjectsView) -> list[str]:
    return [project.id for card, project in view.cards if is_displayed(card)]


class TestFilterHelpers:
    """Test the pure filter helpers."""

    def test_technologies_sorted_unique(self, store) -> None:
        assert technologies(store.get_projects()) == ["AWS", "Docker", "Figma", "Python", "React"]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("all", True), ("python", True), ("PYTH", True), ("Go", False)],
    )
    def test_matches_filter(self, value: str, expected: bool) -> None:
        assert matches_filter(["Python", "AWS"], value) is expected

    def test_count_text(self) -> None:
        assert count_text(3, "all") == "3 projects"
        assert count_text(1, "React") == "1 project with React"
        assert count_text(0, "Go") == "0 projects with Go"


class TestProjectsMarkup:
    """Test rendered cards and buttons."""

    def test_filter_buttons(self, view: ProjectsView) -> None:
        labels = [b.get_text() for b in view.buttons]
        assert labels == ["All Projects", "AWS", "Docker", "Figma", "Python", "React"]
        assert has_class(view.buttons[0], "active")
        assert view.count.get_text() == "3 projects"

    def test_card_structure(self, view: ProjectsView) -> None:
        card, _ = view.cards[0]
        assert card["aria-labelledby"] == "project-title-p1"
        assert card.select_one("h3.project-title").get_text() == "Security Platform"
        assert [t["data-tech"] for t in card.select(".tool-tag")] == ["python", "aws", "react"]
        assert card.select_one(".outcomes-list li").get_text() == "Fewer incidents"
        link = card.select_one(".project-link")
        assert link["href"] == "https://github.com/jane/p1"
        assert link["rel"] == ["noopener", "noreferrer"]

    def test_image_or_fallback(self, view: ProjectsView) -> None:
        (first, _), (second, _), _ = view.cards
        assert first.select_one("img.project-image")["data-src"] == "images/p1.png"
        assert second.select_one("img") is None
        assert second.select_one(".project-image-fallback") is not None

    def test_unsafe_links_dropped(self, ctx: SectionContext) -> None:
        container = ctx.page.document.get_element_by_id("projects")
        project = Project.model_validate(
            {
                "id": "x",
                "title": "<b>X</b>",
                "tools": ["Go"],
                "links": [{"name": "Bad", "url": "javascript:alert(1)"}],
            }
        )
        render_projects(ctx, container, [project])
        assert container.select_one(".project-link") is None
        assert container.find("b") is None

    def test_empty_list(self, ctx: SectionContext) -> None:
        container = ctx.page.document.get_element_by_id("projects")
        view = render_projects(ctx, container, [])
        assert [b["data-filter"] for b in view.buttons] == ["all"]
        assert view.count.get_text() == "0 projects"


class TestFiltering:
    """Test filter interactions."""

    def test_filter_button(self, ctx: SectionContext, view: ProjectsView) -> None:
        python = next(b for b in view.buttons if b["data-filter"] == "Python")
        ctx.page.click(python)

        assert has_class(python, "active")
        assert not has_class(view.buttons[0], "active")
        assert shown_ids(view) == ["p1", "p2"]
        assert view.count.get_text() == "2 projects with Python"
        hidden, _ = view.cards[2]
        assert has_class(hidden, "filter-hide")

        ctx.page.advance(100)
        shown = [card for card, _ in view.cards[:2]]
        assert all(has_class(card, "filter-show") for card in shown)

    def test_all_restores_every_card(self, ctx: SectionContext, view: ProjectsView) -> None:
        view.apply_filter("Figma")
        assert shown_ids(view) == ["p3"]
        ctx.page.click(view.buttons[0])
        assert shown_ids(view) == ["p1", "p2", "p3"]
        assert view.count.get_text() == "3 projects"

    def test_tool_tag_clicks_matching_button(self, ctx: SectionContext, view: ProjectsView) -> None:
        card, _ = view.cards[2]
        react_tag = card.select_one('.tool-tag[data-tech="react"]')
        event = ctx.page.click(react_tag)

        assert event.propagation_stopped
        assert view.active == "React"
        assert shown_ids(view) == ["p1", "p3"]

    def test_filter_moves_later_sections_up(self, ctx: SectionContext, view: ProjectsView) -> None:
        skills = ctx.page.document.get_element_by_id("skills")
        before = ctx.page.absolute_box(skills).top
        view.apply_filter("Figma")
        assert ctx.page.absolute_box(skills).top < before

    def test_rerender_keeps_single_listener(self, ctx: SectionContext, view: ProjectsView) -> None:
        container = ctx.page.document.get_element_by_id("projects")
        fresh = render_projects(ctx, container, ctx.store.get_projects())
        button = fresh.buttons[1]
        assert ctx.page.events.listener_count(button, "click") == 1


class TestCardInteractions:
    """Test hover and lazy images."""

    def test_hover(self, ctx: SectionContext, view: ProjectsView) -> None:
        card, _ = view.cards[0]
        ctx.page.hover(card)
        assert get_style(card.select_one(".project-overlay"), "opacity") == "1"
        assert get_style(card.select_one(".project-image"), "transform") == "scale(1.05)"
        ctx.page.unhover(card)
        assert get_style(card.select_one(".project-overlay"), "opacity") == "0"

    def test_fallback_image_is_not_scaled(self, ctx: SectionContext, view: ProjectsView) -> None:
        card, _ = view.cards[1]
        ctx.page.hover(card)
        assert get_style(card.select_one(".project-image"), "transform") == ""

    def test_image_loaded(self, ctx: SectionContext, view: ProjectsView, tmp_path: Path) -> None:
        (tmp_path / "images").mkdir()
        (tmp_path / "images" / "p1.png").write_bytes(b"png")
        card, _ = view.cards[0]
        img = card.select_one("img.project-image")

        assert ctx.images.load(img)
        placeholder = card.select_one(".project-image-placeholder")
        assert get_style(placeholder, "display") == "none"

    def test_image_failed(self, ctx: SectionContext, view: ProjectsView) -> None:
        card, _ = view.cards[0]
        img = card.select_one("img.project-image")

        assert not ctx.images.load(img)
        assert card.select_one(".placeholder-text").get_text() == "Failed to load"
        assert has_class(img, "error")
