"""Summary section with keyword highlighting."""

import re

from bs4 import Tag

from ..data.models import PersonalInfo
from ..exceptions import RenderError
from ..utils.html import escape_html
from .base import SectionContext, paragraphs

DEFAULT_SUMMARY = "Professional summary will be displayed here."

# Longer phrases first so "API development" wins over "API".
KEYWORDS = (
    "API development",
    "threat analysis",
    "business success",
    "Cloud",
    "Cybersecurity",
    "AI",
    "API",
    "infrastructure",
    "automation",
    "security",
    "scalable",
    "optimization",
)


def _keyword_spans(text: str) -> list[tuple[int, int]]:
    taken: list[tuple[int, int]] = []
    for keyword in KEYWORDS:
        pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
        for match in pattern.finditer(text):
            start, end = match.span()
            if all(end <= s or start >= e for s, e in taken):
                taken.append((start, end))
    return sorted(taken)


def highlight_keywords(text: str) -> str:
    """Escape ``text`` and wrap keywords in ``keyword-highlight`` spans."""
    parts = []
    cursor = 0
    for start, end in _keyword_spans(text):
        parts.append(escape_html(text[cursor:start]))
        parts.append(f'<span class="keyword-highlight">{escape_html(text[start:end])}</span>')
        cursor = end
    parts.append(escape_html(text[cursor:]))
    return "".join(parts)


def format_summary(text: str) -> str:
    return "".join(
        f'<p class="summary-paragraph">{highlight_keywords(p)}</p>' for p in paragraphs(text)
    )


def render_summary(ctx: SectionContext, container: Tag, personal: PersonalInfo) -> None:
    target = ctx.page.document.get_element_by_id("summary-text", container)
    if target is None:
        raise RenderError("summary section has no #summary-text container")
    ctx.page.document.set_inner_html(target, format_summary(personal.summary or DEFAULT_SUMMARY))


def populate(ctx: SectionContext, container: Tag) -> None:
    render_summary(ctx, container, ctx.store.get_personal_info())
