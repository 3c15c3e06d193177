"""Skills browser: search, category filter, collapsible categories and skill details."""

import re

from bs4 import Tag

from ..data.models import Skill, SkillCategory
from ..dom import Debouncer, Event, add_class, get_style, has_class, remove_class, set_style
from ..utils.html import escape_html
from .base import SectionContext, plural

# the "All Skills" button has no data-category, so no category name can match it
ALL_CATEGORIES = None
SKILL_REVEAL_STAGGER_MS = 100
EXPAND_STAGGER_MS = 50

CATEGORY_ICONS = {
    "Cloud Platforms": "☁️",
    "Cloud": "☁️",
    "Cybersecurity": "🔒",
    "Security": "🔒",
    "Programming": "💻",
    "Tools & Technologies": "🛠️",
    "Tools": "🛠️",
    "Design": "🎨",
    "Database": "🗄️",
    "DevOps": "⚙️",
    "AI/ML": "🤖",
    "Mobile": "📱",
    "Web": "🌐",
}
DEFAULT_CATEGORY_ICON = "📋"

SKILL_DESCRIPTIONS = {
    "AWS": "Amazon Web Services - Cloud computing platform with extensive experience in EC2, S3, Lambda, and more.",
    "Azure": "Microsoft Azure cloud platform - Experience with virtual machines, storage, and cloud services.",
    "Docker": "Containerization technology for application deployment and development environments.",
    "Kubernetes": "Container orchestration platform for managing scalable applications.",
    "Python": "Versatile programming language used for automation, web development, and data analysis.",
    "JavaScript": "Dynamic programming language for web development and modern applications.",
    "React": "Modern JavaScript library for building user interfaces and web applications.",
    "Security Auditing": "Comprehensive security assessments and vulnerability analysis.",
    "Penetration Testing": "Ethical hacking and security testing methodologies.",
    "SIEM": "Security Information and Event Management systems for threat detection.",
    "Terraform": "Infrastructure as Code tool for cloud resource management.",
    "Git": "Version control system for collaborative software development.",
    "CI/CD": "Continuous Integration and Deployment practices for automated software delivery.",
}


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def skill_description(name: str, category: str) -> str:
    return SKILL_DESCRIPTIONS.get(
        name, f"Professional experience with {name} in {category.lower()} contexts."
    )


def category_slug(category: str) -> str:
    return re.sub(r"\s+", "-", category).lower()


def summary_text(
    skills: int, categories: int, query: str = "", category: str | None = None
) -> str:
    text = f"Showing {plural(skills, 'skill')}"
    if categories > 0:
        text += f" across {plural(categories, 'category', 'categories')}"
    if query:
        text += f' matching "{query}"'
    elif category:
        text += f" in {category}"
    return text


def skill_item(skill: Skill, category: str) -> str:
    level = skill.level.value
    name = escape_html(skill.name)
    title = skill.name + (f" - {skill.proficiency.value} level" if skill.proficiency else "")
    proficiency = ""
    level_tag = ""
    if skill.proficiency:
        proficiency = (
            '<div class="skill-proficiency">'
            f'<span class="proficiency-label">{level}</span>'
            f'<div class="proficiency-bar"><div class="proficiency-fill" data-level="{level}"></div></div>'
            "</div>"
        )
        level_tag = f'<span class="skill-level-tag">{level}</span>'
    return (
        f'<div class="skill-item proficiency-{level}" data-skill="{escape_html(skill.name.lower())}" '
        f'data-category="{escape_html(category.lower())}" data-proficiency="{level}" '
        f'title="{escape_html(title)}" tabindex="0">'
        f'<div class="skill-content"><span class="skill-name">{name}</span>{proficiency}</div>'
        '<div class="skill-details" style="display: none">'
        f'<p class="skill-description">{escape_html(skill_description(skill.name, category))}</p>'
        f'<div class="skill-meta"><span class="skill-category-tag">{escape_html(category)}</span>'
        f"{level_tag}</div>"
        "</div></div>"
    )


def skill_category(category: SkillCategory) -> str:
    name = escape_html(category.category)
    slug = escape_html(category_slug(category.category))
    items = "".join(skill_item(skill, category.category) for skill in category.skills)
    return (
        f'<div class="skill-category" data-category="{name}">'
        '<div class="skill-category-header">'
        f'<h3 class="skill-category-title"><span class="category-icon">{category_icon(category.category)}</span> {name}</h3>'
        f'<button class="category-toggle" data-target="skills-{slug}" aria-expanded="true" '
        f'aria-label="Toggle {name} skills"><span class="toggle-icon">▼</span></button>'
        "</div>"
        f'<div class="skills-list" id="skills-{slug}">{items}</div>'
        f'<div class="category-summary"><span class="skills-count">{plural(len(category.skills), "skill")}</span></div>'
        "</div>"
    )


def skills_markup(categories: list[SkillCategory]) -> str:
    buttons = "".join(
        f'<button class="skills-filter-btn" data-category="{escape_html(c.category)}">'
        f"{escape_html(c.category)}</button>"
        for c in categories
    )
    total = sum(len(c.skills) for c in categories)
    return (
        '<div class="container">'
        '<h2 class="section-title" id="skills-title">Skills &amp; Expertise</h2>'
        '<div class="skills-controls">'
        '<div class="skills-search-container">'
        '<input type="text" id="skills-search" class="skills-search" '
        'placeholder="Search skills..." aria-label="Search skills" value="">'
        '<div class="search-icon">🔍</div>'
        "</div>"
        '<div class="skills-filter">'
        '<button class="skills-filter-btn active">All Skills</button>'
        f"{buttons}</div>"
        "</div>"
        f'<div class="skills-grid" id="skills-grid">{"".join(skill_category(c) for c in categories)}</div>'
        '<div class="skills-summary" id="skills-summary">'
        f'<p class="skills-count">{summary_text(total, len(categories))}</p>'
        "</div>"
        "</div>"
    )


class SkillsView:
    """Interactions for one rendering of the skills browser.

    Search and the category filter are alternatives: whichever the user
    touched last decides what is shown.
    """

    def __init__(self, ctx: SectionContext, container: Tag) -> None:
        self.ctx = ctx
        document = ctx.page.document
        self.search_input = document.select_one(".skills-search", container)
        self.filter_buttons = document.select(".skills-filter-btn", container)
        self.categories = document.select(".skill-category", container)
        self.items = document.select(".skill-item", container)
        self.summary = document.select_one("#skills-summary .skills-count", container)
        self.debouncer = Debouncer(ctx.page.scheduler, ctx.settings.search_debounce_ms, self.search)

    def wire(self) -> None:
        ctx = self.ctx
        if self.search_input is not None:
            ctx.listen(self.search_input, "input", self._on_input)
            ctx.listen(self.search_input, "keydown", self._on_search_keydown)
        for button in self.filter_buttons:
            ctx.listen(
                button, "click", lambda event, button=button: self._on_filter_click(button, event)
            )
        for category in self.categories:
            toggle = ctx.page.document.select_one(".category-toggle", category)
            if toggle is not None:
                ctx.listen(
                    toggle, "click", lambda event, toggle=toggle: self._on_toggle(toggle, event)
                )
        for item in self.items:
            ctx.listen(item, "click", lambda event, item=item: self._on_item_click(item, event))
            ctx.click_on_activation_keys(item)
        ctx.animator.register(self.categories, self._reveal_skills)

    def _on_input(self, event: Event) -> None:
        self.debouncer.call(str(event.target.get("value", "")))

    def _on_search_keydown(self, event: Event) -> None:
        if event.key == "Escape":
            self.debouncer.cancel()
            event.target["value"] = ""
            self.search("")

    def _set_active_filter(self, category: str | None) -> None:
        for button in self.filter_buttons:
            if button.get("data-category") == category:
                add_class(button, "active")
            else:
                remove_class(button, "active")

    def _update_summary(
        self, skills: int, categories: int, query: str = "", category: str | None = None
    ) -> None:
        if self.summary is not None:
            self.ctx.page.document.set_text(
                self.summary, summary_text(skills, categories, query, category)
            )

    def search(self, query: str) -> int:
        """Show skills whose name or category contains ``query``.

        Returns:
            Number of visible skills
        """
        term = query.lower().strip()
        self._set_active_filter(ALL_CATEGORIES)
        visible_skills = 0
        visible_categories = 0
        for category in self.categories:
            category_visible = False
            for item in self.ctx.page.document.select(".skill-item", category):
                hit = not term or term in str(item.get("data-skill", "")) or term in str(
                    item.get("data-category", "")
                )
                set_style(item, "display", "" if hit else "none")
                if hit and term:
                    add_class(item, "search-highlight")
                else:
                    remove_class(item, "search-highlight")
                if hit:
                    visible_skills += 1
                    category_visible = True
            # an empty category still shows when nothing is being searched
            category_visible = category_visible or not term
            set_style(category, "display", "" if category_visible else "none")
            if category_visible:
                visible_categories += 1
        self._update_summary(visible_skills, visible_categories, term)
        return visible_skills

    def _on_filter_click(self, button: Tag, event: Event) -> None:
        event.prevent_default()
        category = button.get("data-category")
        self.filter(ALL_CATEGORIES if category is None else str(category))

    def filter(self, category_name: str | None = ALL_CATEGORIES) -> int:
        """Show only ``category_name`` (or every category), clearing any search.

        Returns:
            Number of visible skills
        """
        self.debouncer.cancel()
        if self.search_input is not None:
            self.search_input["value"] = ""
        for item in self.items:
            set_style(item, "display", "")
            remove_class(item, "search-highlight")
        self._set_active_filter(category_name)
        visible_skills = 0
        visible_categories = 0
        for category in self.categories:
            shown = category_name is ALL_CATEGORIES or (
                category_name == category.get("data-category")
            )
            set_style(category, "display", "" if shown else "none")
            if shown:
                visible_categories += 1
                visible_skills += len(self.ctx.page.document.select(".skill-item", category))
        self._update_summary(visible_skills, visible_categories, category=category_name)
        return visible_skills

    def _on_toggle(self, toggle: Tag, event: Event) -> None:
        event.prevent_default()
        header = toggle.parent
        skills_list = header.find_next_sibling("div", class_="skills-list") if header else None
        if skills_list is None:
            return
        icon = self.ctx.page.document.select_one(".toggle-icon", toggle)
        if toggle.get("aria-expanded") == "true":
            set_style(skills_list, "max-height", "0")
            set_style(skills_list, "opacity", "0.5")
            toggle["aria-expanded"] = "false"
            add_class(toggle, "collapsed")
            if icon is not None:
                self.ctx.page.document.set_text(icon, "▶")
        else:
            set_style(skills_list, "max-height", "none")
            set_style(skills_list, "opacity", "1")
            toggle["aria-expanded"] = "true"
            remove_class(toggle, "collapsed")
            if icon is not None:
                self.ctx.page.document.set_text(icon, "▼")
            self._animate_in(skills_list)

    def _animate_in(self, skills_list: Tag) -> None:
        scheduler = self.ctx.page.scheduler
        for index, skill in enumerate(self.ctx.page.document.select(".skill-item", skills_list)):
            set_style(skill, "opacity", "0")
            set_style(skill, "transform", "translateY(20px)")
            scheduler.call_later(index * EXPAND_STAGGER_MS, _settle, skill)

    def _on_item_click(self, item: Tag, event: Event) -> None:
        event.prevent_default()
        details = self.ctx.page.document.select_one(".skill-details", item)
        if details is None:
            return
        was_open = get_style(details, "display") != "none"
        for other in self.items:
            if other is item:
                continue
            other_details = self.ctx.page.document.select_one(".skill-details", other)
            if other_details is not None:
                set_style(other_details, "display", "none")
            remove_class(other, "expanded")
        if was_open:
            set_style(details, "display", "none")
            remove_class(item, "expanded")
        else:
            set_style(details, "display", "block")
            add_class(item, "expanded")

    def expanded_items(self) -> list[Tag]:
        return [item for item in self.items if has_class(item, "expanded")]

    def _reveal_skills(self, category: Tag) -> None:
        scheduler = self.ctx.page.scheduler
        for index, skill in enumerate(self.ctx.page.document.select(".skill-item", category)):
            scheduler.call_later(index * SKILL_REVEAL_STAGGER_MS, add_class, skill, "animate-in")


def _settle(skill: Tag) -> None:
    set_style(skill, "transition", "all 0.3s ease")
    set_style(skill, "opacity", "1")
    set_style(skill, "transform", "translateY(0)")


def render_skills(
    ctx: SectionContext, container: Tag, categories: list[SkillCategory]
) -> SkillsView:
    ctx.page.document.set_inner_html(container, skills_markup(categories))
    view = SkillsView(ctx, container)
    view.wire()
    return view


def populate(ctx: SectionContext, container: Tag) -> None:
    render_skills(ctx, container, ctx.store.get_skills())
