"""Experience timeline with collapsible achievement lists."""

from bs4 import Tag

from ..data.models import Experience
from ..dom import Event, add_class, remove_class, set_style
from ..exceptions import RenderError
from ..utils.html import escape_html
from .base import SectionContext

SHOW_LABEL = "Show Achievements"
HIDE_LABEL = "Hide Achievements"


def _timeline_item(exp: Experience) -> str:
    exp_id = escape_html(exp.id)
    parts = [
        f'<div class="timeline-item" data-experience-id="{exp_id}">',
        '<div class="timeline-card">',
        f'<h3 class="timeline-company">{escape_html(exp.company)}</h3>',
        f'<h4 class="timeline-title">{escape_html(exp.title)}</h4>',
        f'<p class="timeline-duration">{escape_html(exp.duration)}</p>',
    ]
    if exp.achievements:
        parts.append(
            f'<button class="timeline-achievements-toggle" data-target="achievements-{exp_id}" '
            f'aria-expanded="true" aria-controls="achievements-{exp_id}" '
            f'aria-label="Toggle achievement details">{HIDE_LABEL}</button>'
        )
        items = "".join(f"<li>{escape_html(a)}</li>" for a in exp.achievements)
        parts.append(f'<ul class="timeline-achievements" id="achievements-{exp_id}">{items}</ul>')
    if exp.technologies:
        tags = "".join(
            f'<span class="timeline-tech-tag">{escape_html(t)}</span>' for t in exp.technologies
        )
        parts.append(f'<div class="timeline-technologies">{tags}</div>')
    parts.append("</div></div>")
    return "".join(parts)


def render_experience(ctx: SectionContext, container: Tag, experience: list[Experience]) -> None:
    document = ctx.page.document
    timeline = document.get_element_by_id("experience-timeline", container)
    if timeline is None:
        raise RenderError("experience section has no #experience-timeline container")
    document.set_inner_html(timeline, "".join(_timeline_item(exp) for exp in experience))

    for button in document.select(".timeline-achievements-toggle", timeline):
        ctx.listen(button, "click", lambda event, button=button: _toggle(ctx, button, event))
        ctx.click_on_activation_keys(button)

    ctx.animator.register(document.select(".timeline-item", timeline))


def _toggle(ctx: SectionContext, button: Tag, event: Event) -> None:
    event.prevent_default()
    # ids may repeat across entries; resolve the list next to its button
    achievements = button.find_next_sibling("ul", class_="timeline-achievements")
    if achievements is None:
        return
    expanded = button.get("aria-expanded") == "true"
    document = ctx.page.document
    items = document.select("li", achievements)
    if expanded:
        add_class(achievements, "collapsed")
        add_class(button, "collapsed")
        button["aria-expanded"] = "false"
        document.set_text(button, SHOW_LABEL)
        for item in items:
            set_style(item, "transition", "all 0.2s ease")
            set_style(item, "opacity", "0")
            set_style(item, "transform", "translateX(-10px)")
        ctx.announcer.announce("Achievements collapsed")
    else:
        remove_class(achievements, "collapsed")
        remove_class(button, "collapsed")
        button["aria-expanded"] = "true"
        document.set_text(button, HIDE_LABEL)
        stride = ctx.settings.achievement_stagger_ms
        for index, item in enumerate(items):
            set_style(item, "opacity", "0")
            set_style(item, "transform", "translateX(-20px)")
            ctx.page.scheduler.call_later(index * stride, _reveal_item, item)
        ctx.announcer.announce("Achievements expanded")


def _reveal_item(item: Tag) -> None:
    set_style(item, "transition", "all 0.3s ease")
    set_style(item, "opacity", "1")
    set_style(item, "transform", "translateX(0)")


def populate(ctx: SectionContext, container: Tag) -> None:
    render_experience(ctx, container, ctx.store.get_experience())
