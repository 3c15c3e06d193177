"""Projects grid with technology filters."""

from bs4 import Tag

from ..data.models import Project
from ..dom import Event, add_class, has_class, remove_class, set_style
from ..utils.html import escape_html
from .base import SectionContext, plural

ALL_FILTER = "all"
SHOW_STAGGER_MS = 100


def is_http_url(url: str) -> bool:
    return url.startswith(("http://", "https://"))


def technologies(projects: list[Project]) -> list[str]:
    """Sorted union of every project's tools."""
    return sorted({tool for project in projects for tool in project.tools})


def matches_filter(tools: list[str], value: str) -> bool:
    if value == ALL_FILTER:
        return True
    needle = value.lower()
    return any(needle in tool.lower() for tool in tools)


def count_text(visible: int, value: str) -> str:
    text = plural(visible, "project")
    return text if value == ALL_FILTER else f"{text} with {value}"


def _image_block(project: Project) -> str:
    if project.thumbnail:
        return (
            f'<img data-src="{escape_html(project.thumbnail)}" '
            f'alt="Screenshot of {escape_html(project.title)} project showing the main interface" '
            'class="project-image" loading="lazy">'
            '<div class="project-image-placeholder" aria-hidden="true">'
            '<div class="placeholder-icon">📁</div><div class="placeholder-text">Loading...</div>'
            "</div>"
        )
    return (
        '<div class="project-image project-image-fallback" role="img" '
        'aria-label="Project placeholder image">'
        '<div class="fallback-icon" aria-hidden="true">💻</div>'
        '<div class="fallback-text" aria-hidden="true">Project</div>'
        "</div>"
    )


def project_card(project: Project) -> str:
    project_id = escape_html(project.id)
    title = escape_html(project.title)
    technologies_attr = ",".join(project.tools).lower()
    tools = "".join(
        f'<span class="tool-tag" role="listitem" data-tech="{escape_html(tool.lower())}" '
        f'aria-label="Technology: {escape_html(tool)}">{escape_html(tool)}</span>'
        for tool in project.tools
    )
    parts = [
        f'<article class="project-card" data-technologies="{escape_html(technologies_attr)}" '
        f'aria-labelledby="project-title-{project_id}" tabindex="0">',
        '<div class="project-image-container">',
        _image_block(project),
        '<div class="project-overlay" aria-hidden="true"><div class="project-overlay-content">'
        '<p class="overlay-heading">View Details</p><p>Click to explore</p></div></div>',
        "</div>",
        '<div class="project-content">',
        f'<h3 class="project-title" id="project-title-{project_id}">{title}</h3>',
        f'<p class="project-description">{escape_html(project.description)}</p>',
        f'<div class="project-tools" role="list" aria-label="Technologies used">{tools}</div>',
    ]
    if project.outcomes:
        outcomes = "".join(f'<li role="listitem">{escape_html(o)}</li>' for o in project.outcomes)
        parts.append(
            '<div class="project-outcomes"><h4 class="outcomes-title">Key Outcomes</h4>'
            f'<ul class="outcomes-list" role="list">{outcomes}</ul></div>'
        )
    links = [link for link in project.links if is_http_url(link.url)]
    if links:
        anchors = "".join(
            f'<a href="{escape_html(link.url)}" class="project-link" role="listitem" '
            'target="_blank" rel="noopener noreferrer" '
            f'aria-label="Open {escape_html(link.name)} for {title} (opens in new tab)">'
            f"{escape_html(link.name)}</a>"
            for link in links
        )
        parts.append(
            f'<div class="project-links" role="list" aria-label="Project links">{anchors}</div>'
        )
    parts.append("</div></article>")
    return "".join(parts)


def projects_markup(projects: list[Project]) -> str:
    buttons = "".join(
        f'<button class="filter-btn" data-filter="{escape_html(tech)}">{escape_html(tech)}</button>'
        for tech in technologies(projects)
    )
    cards = "".join(project_card(project) for project in projects)
    return (
        '<div class="container">'
        '<h2 class="section-title" id="projects-title">Projects</h2>'
        '<div class="projects-filter">'
        f'<button class="filter-btn active" data-filter="{ALL_FILTER}">All Projects</button>'
        f"{buttons}"
        f'<div class="projects-count" aria-live="polite">{count_text(len(projects), ALL_FILTER)}</div>'
        "</div>"
        f'<div class="projects-grid" id="projects-grid">{cards}</div>'
        "</div>"
    )


class ProjectsView:
    """Filtering and card interactions for one rendering of the grid."""

    def __init__(self, ctx: SectionContext, container: Tag, projects: list[Project]) -> None:
        self.ctx = ctx
        document = ctx.page.document
        self.buttons = document.select(".filter-btn", container)
        self.count = document.select_one(".projects-count", container)
        self.cards = list(zip(document.select(".project-card", container), projects))
        self.active = ALL_FILTER

    def wire(self) -> None:
        for button in self.buttons:
            self.ctx.listen(
                button, "click", lambda event, button=button: self._on_filter_click(button, event)
            )
        for card, project in self.cards:
            self.ctx.listen(card, "mouseenter", lambda event, card=card: self.hover(card, True))
            self.ctx.listen(card, "mouseleave", lambda event, card=card: self.hover(card, False))
            for tag in self.ctx.page.document.select(".tool-tag", card):
                self.ctx.listen(tag, "click", lambda event, tag=tag: self._on_tag_click(tag, event))
            img = self.ctx.page.document.select_one("img.project-image", card)
            if img is not None and project.thumbnail:
                self.ctx.images.defer(img, project.thumbnail, self._image_done)
        self.ctx.animator.register(card for card, _ in self.cards)

    def _on_filter_click(self, button: Tag, event: Event) -> None:
        event.prevent_default()
        for other in self.buttons:
            remove_class(other, "active")
        add_class(button, "active")
        self.apply_filter(str(button.get("data-filter", ALL_FILTER)))

    def _on_tag_click(self, tag: Tag, event: Event) -> None:
        event.stop_propagation()
        tech = str(tag.get("data-tech", ""))
        for button in self.buttons:
            if str(button.get("data-filter", "")).lower() == tech:
                self.ctx.page.click(button)
                return

    def apply_filter(self, value: str) -> int:
        """Show only matching cards and update the count.

        Returns:
            Number of visible cards
        """
        self.active = value
        scheduler = self.ctx.page.scheduler
        visible = 0
        for card, project in self.cards:
            if matches_filter(project.tools, value):
                set_style(card, "display", "")
                remove_class(card, "filter-hide")
                scheduler.call_later(visible * SHOW_STAGGER_MS, self._mark_shown, card)
                visible += 1
            else:
                set_style(card, "display", "none")
                add_class(card, "filter-hide")
                remove_class(card, "filter-show")
        if self.count is not None:
            self.ctx.page.document.set_text(self.count, count_text(visible, value))
        return visible

    @staticmethod
    def _mark_shown(card: Tag) -> None:
        if not has_class(card, "filter-hide"):
            add_class(card, "filter-show")

    def hover(self, card: Tag, hovering: bool) -> None:
        document = self.ctx.page.document
        overlay = document.select_one(".project-overlay", card)
        image = document.select_one(".project-image", card)
        if overlay is not None:
            set_style(overlay, "opacity", "1" if hovering else "0")
            set_style(overlay, "transform", "translateY(0)" if hovering else "translateY(20px)")
        if image is not None and not has_class(image, "project-image-fallback"):
            set_style(image, "transform", "scale(1.05)" if hovering else "scale(1)")

    def _image_done(self, img: Tag, loaded: bool) -> None:
        placeholder = img.find_next_sibling("div", class_="project-image-placeholder")
        if placeholder is None:
            return
        if loaded:
            set_style(placeholder, "display", "none")
        else:
            self.ctx.page.document.set_inner_html(
                placeholder,
                '<div class="placeholder-icon">❌</div>'
                '<div class="placeholder-text">Failed to load</div>',
            )


def render_projects(ctx: SectionContext, container: Tag, projects: list[Project]) -> ProjectsView:
    ctx.page.document.set_inner_html(container, projects_markup(projects))
    view = ProjectsView(ctx, container, projects)
    view.wire()
    return view


def populate(ctx: SectionContext, container: Tag) -> None:
    render_projects(ctx, container, ctx.store.get_projects())
