"""Tests for summary keyword highlighting."""

from folio.data.models import PersonalInfo
from folio.sections import SectionContext
from folio.sections.summary import format_summary, highlight_keywords, render_summary


class TestHighlightKeywords:
    """Test keyword wrapping."""

    def test_wraps_keywords(self) -> None:
        result = highlight_keywords("Secure Cloud automation")
        assert result == (
            'Secure <span class="keyword-highlight">Cloud</span> '
            '<span class="keyword-highlight">automation</span>'
        )

    def test_longest_phrase_wins(self) -> None:
        result = highlight_keywords("Expert in API development")
        assert result.count("keyword-highlight") == 1
        assert '<span class="keyword-highlight">API development</span>' in result

    def test_case_insensitive_keeps_original_case(self) -> None:
        assert '<span class="keyword-highlight">SECURITY</span>' in highlight_keywords(
            "SECURITY first"
        )

    def test_whole_words_only(self) -> None:
        assert "keyword-highlight" not in highlight_keywords("Said the captain")

    def test_text_is_escaped(self) -> None:
        result = highlight_keywords("<b>Cloud</b> & more")
        assert "<b>" not in result
        assert "&lt;b&gt;" in result
        assert "&amp; more" in result


class TestSummarySection:
    """Test rendering the summary."""

    def test_paragraphs(self) -> None:
        assert format_summary("One.\n\nTwo.") == (
            '<p class="summary-paragraph">One.</p><p class="summary-paragraph">Two.</p>'
        )

    def test_render(self, ctx: SectionContext) -> None:
        container = ctx.page.document.get_element_by_id("summary")
        render_summary(ctx, container, ctx.store.get_personal_info())
        target = container.find(id="summary-text")
        highlights = [s.get_text() for s in target.select(".keyword-highlight")]
        assert highlights == ["scalable", "Cloud", "infrastructure", "API development"]

    def test_default_text(self, ctx: SectionContext) -> None:
        container = ctx.page.document.get_element_by_id("summary")
        render_summary(ctx, container, PersonalInfo())
        assert container.find(id="summary-text").get_text() == (
            "Professional summary will be displayed here."
        )
