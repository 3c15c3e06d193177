"""Tests for the skills browser."""

import pytest

from folio.data.models import Skill, SkillCategory
from folio.dom import get_style, has_class, is_displayed
from folio.sections import SectionContext
from folio.sections.skills import (
    SkillsView,
    category_icon,
    category_slug,
    render_skills,
    skill_description,
    summary_text,
)


@pytest.fixture
def view(ctx: SectionContext) -> SkillsView:
    container = ctx.page.document.get_element_by_id("skills")
    return render_skills(ctx, container, ctx.store.get_skills())


def visible_skills(view: SkillsView) -> list[str]:
    return [str(item["data-skill"]) for item in view.items if is_displayed(item)]


class TestHelpers:
    """Test the pure helpers."""

    def test_summary_text(self) -> None:
        assert summary_text(5, 2) == "Showing 5 skills across 2 categories"
        assert summary_text(1, 1, query="aws") == 'Showing 1 skill across 1 category matching "aws"'
        assert summary_text(2, 1, category="Programming") == (
            "Showing 2 skills across 1 category in Programming"
        )
        assert summary_text(0, 0, query="zzz") == 'Showing 0 skills matching "zzz"'

    def test_category_icon(self) -> None:
        assert category_icon("Cloud Platforms") == "☁️"
        assert category_icon("Gardening") == "📋"

    def test_skill_description(self) -> None:
        assert skill_description("Go", "Programming") == (
            "Professional experience with Go in programming contexts."
        )
        assert skill_description("Terraform", "Cloud").startswith("Infrastructure as Code")

    def test_category_slug(self) -> None:
        assert category_slug("Cloud  Platforms") == "cloud-platforms"


class TestSkillsMarkup:
    """Test the rendered browser."""

    def test_structure(self, view: SkillsView) -> None:
        labels = [b.get_text() for b in view.filter_buttons]
        assert labels == ["All Skills", "Cloud Platforms", "Programming"]
        assert has_class(view.filter_buttons[0], "active")
        assert [c["data-category"] for c in view.categories] == ["Cloud Platforms", "Programming"]
        assert view.summary.get_text() == "Showing 5 skills across 2 categories"

    def test_items(self, view: SkillsView) -> None:
        aws = view.items[0]
        assert aws["data-skill"] == "aws"
        assert aws["data-category"] == "cloud platforms"
        assert has_class(aws, "proficiency-expert")
        assert aws.select_one(".proficiency-fill")["data-level"] == "expert"
        assert get_style(aws.select_one(".skill-details"), "display") == "none"

    def test_missing_proficiency_defaults(self, view: SkillsView) -> None:
        docker = next(item for item in view.items if item["data-skill"] == "docker")
        assert has_class(docker, "proficiency-intermediate")
        assert docker.select_one(".skill-proficiency") is None
        assert docker["title"] == "Docker"


class TestSearch:
    """Test the debounced search."""

    def test_search_by_name(self, view: SkillsView) -> None:
        assert view.search("AWS") == 1
        assert visible_skills(view) == ["aws"]
        programming = view.categories[1]
        assert get_style(programming, "display") == "none"
        assert has_class(view.items[0], "search-highlight")
        assert view.summary.get_text() == 'Showing 1 skill across 1 category matching "aws"'

    def test_search_by_category(self, view: SkillsView) -> None:
        assert view.search("cloud") == 3
        assert visible_skills(view) == ["aws", "azure", "docker"]

    def test_no_match(self, view: SkillsView) -> None:
        assert view.search("cobol") == 0
        assert all(get_style(c, "display") == "none" for c in view.categories)

    def test_empty_search_shows_everything(self, view: SkillsView) -> None:
        view.search("go")
        assert view.search("  ") == 5
        assert not any(has_class(item, "search-highlight") for item in view.items)

    def test_typing_is_debounced(self, ctx: SectionContext, view: SkillsView) -> None:
        ctx.page.type_text(view.search_input, "a")
        ctx.page.advance(200)
        ctx.page.type_text(view.search_input, "aws")
        ctx.page.advance(299)
        assert len(visible_skills(view)) == 5
        ctx.page.advance(1)
        assert visible_skills(view) == ["aws"]

    def test_escape_clears_immediately(self, ctx: SectionContext, view: SkillsView) -> None:
        view.search("python")
        ctx.page.type_text(view.search_input, "pyth")
        ctx.page.keydown(view.search_input, "Escape")
        assert view.search_input["value"] == ""
        assert not view.debouncer.pending
        assert len(visible_skills(view)) == 5


class TestCategoryFilter:
    """Test category buttons."""

    def test_filter_category(self, ctx: SectionContext, view: SkillsView) -> None:
        ctx.page.click(view.filter_buttons[2])
        assert has_class(view.filter_buttons[2], "active")
        assert not has_class(view.filter_buttons[0], "active")
        assert visible_skills(view) == ["python", "go"]
        assert view.summary.get_text() == "Showing 2 skills across 1 category in Programming"

    def test_filter_clears_search(self, ctx: SectionContext, view: SkillsView) -> None:
        """Test the last interaction wins between search and filter."""
        ctx.page.type_text(view.search_input, "aws")
        ctx.page.click(view.filter_buttons[1])
        ctx.page.advance(1000)
        assert view.search_input["value"] == ""
        assert visible_skills(view) == ["aws", "azure", "docker"]

    def test_search_resets_filter(self, view: SkillsView) -> None:
        view.filter("Programming")
        view.search("aws")
        assert has_class(view.filter_buttons[0], "active")
        assert visible_skills(view) == ["aws"]

    def test_category_named_all(self, ctx: SectionContext) -> None:
        """Test a category called "all" filters like any other category."""
        categories = [
            SkillCategory(category="all", skills=[Skill(name="Bash")]),
            SkillCategory(category="Programming", skills=[Skill(name="Go")]),
        ]
        view = render_skills(ctx, ctx.page.document.get_element_by_id("skills"), categories)
        assert "data-category" not in view.filter_buttons[0].attrs

        ctx.page.click(view.filter_buttons[1])
        assert visible_skills(view) == ["bash"]
        assert [is_displayed(c) for c in view.categories] == [True, False]
        assert has_class(view.filter_buttons[1], "active")
        assert not has_class(view.filter_buttons[0], "active")
        assert view.summary.get_text() == "Showing 1 skill across 1 category in all"

        ctx.page.click(view.filter_buttons[0])
        assert visible_skills(view) == ["bash", "go"]
        assert has_class(view.filter_buttons[0], "active")


class TestCategoryToggleAndDetails:
    """Test collapsible categories and expandable skills."""

    def test_toggle_category(self, ctx: SectionContext, view: SkillsView) -> None:
        toggle = view.categories[0].select_one(".category-toggle")
        skills_list = view.categories[0].select_one(".skills-list")

        ctx.page.click(toggle)
        assert toggle["aria-expanded"] == "false"
        assert toggle.select_one(".toggle-icon").get_text() == "▶"
        assert get_style(skills_list, "max-height") == "0"

        ctx.page.click(toggle)
        assert toggle["aria-expanded"] == "true"
        assert toggle.select_one(".toggle-icon").get_text() == "▼"
        ctx.page.advance(200)
        assert all(get_style(s, "opacity") == "1" for s in skills_list.select(".skill-item"))

    def test_one_skill_expanded_at_a_time(self, ctx: SectionContext, view: SkillsView) -> None:
        aws, azure = view.items[0], view.items[1]
        ctx.page.click(aws)
        assert view.expanded_items() == [aws]
        assert get_style(aws.select_one(".skill-details"), "display") == "block"

        ctx.page.keydown(azure, "Enter")
        assert view.expanded_items() == [azure]
        assert get_style(aws.select_one(".skill-details"), "display") == "none"

        ctx.page.click(azure)
        assert view.expanded_items() == []
