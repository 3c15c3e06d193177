"""Search engine and social metadata written into ``<head>``."""

import json
import re
from typing import Any

from bs4 import Tag

from ..data.models import ContactInfo, Experience, PortfolioData
from ..dom import Page
from ..utils.logging import get_logger
from ..validation import ValidationResult

logger = get_logger(__name__)

DEFAULT_TITLE = "Professional Portfolio - Cloud Engineer & Cybersecurity Professional"
DEFAULT_DESCRIPTION = (
    "Professional portfolio showcasing cloud engineering, cybersecurity, "
    "and API development expertise"
)
DEFAULT_IMAGE = "images/profile/headshot.svg"
STRUCTURED_DATA_ID = "structured-data"
COMMON_KEYWORDS = ("portfolio", "professional", "developer", "engineer")
MAX_KEYWORDS = 20
MAX_KNOWS_ABOUT = 10


def script_json(value: Any) -> str:
    """JSON for a ``<script>`` body; script text is never entity-escaped on output."""
    text = json.dumps(value, indent=2)
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3].strip() + "..."


def generate_keywords(data: PortfolioData) -> str:
    keywords: dict[str, None] = {}
    for word in re.split(r"[,&\s]+", data.personal.title):
        if len(word) > 2:
            keywords[word.lower()] = None
    for category in data.skills:
        keywords[category.category.lower()] = None
        for skill in category.skills:
            keywords[skill.name.lower()] = None
    for exp in data.experience:
        for tech in exp.technologies:
            keywords[tech.lower()] = None
    for word in COMMON_KEYWORDS:
        keywords[word] = None
    keywords.pop("", None)
    return ", ".join(list(keywords)[:MAX_KEYWORDS])


def same_as_links(contact: ContactInfo | None) -> list[str]:
    if contact is None:
        return []
    return [url for url in (contact.linkedin, contact.github, contact.behance) if url]


def current_employer(experience: list[Experience]) -> dict[str, str] | None:
    """Organization of the first "present"/"current" role, else the first role."""
    if not experience:
        return None
    current = next(
        (
            exp
            for exp in experience
            if "present" in exp.duration.lower() or "current" in exp.duration.lower()
        ),
        experience[0],
    )
    return {"@type": "Organization", "name": current.company}


def check_heading_hierarchy(headings: list[Tag]) -> ValidationResult:
    levels = [int(h.name[1]) for h in headings]
    errors: list[str] = []
    h1_count = levels.count(1)
    if h1_count > 1:
        errors.append(
            f"Multiple H1 tags found ({h1_count}). Should have only one H1 per page."
        )
    for position, (previous, current) in enumerate(zip(levels, levels[1:]), start=2):
        if current > previous + 1:
            errors.append(
                f"Heading level skipped: H{previous} followed by H{current} at position {position}"
            )
    return ValidationResult.from_errors(errors)


class SEOManager:
    """Writes title, meta, Open Graph, Twitter card and JSON-LD tags."""

    def __init__(self, page: Page, site_url: str = "", default_image: str = DEFAULT_IMAGE) -> None:
        self.page = page
        self.site_url = site_url.rstrip("/")
        self.default_image = default_image

    @property
    def head(self) -> Tag:
        return self.page.document.head

    def apply(self, data: PortfolioData) -> None:
        personal = data.personal
        if not personal.name:
            logger.warning("SEO: portfolio data not available, using defaults")
            self.update_title(DEFAULT_TITLE)
            self.update_meta("description", DEFAULT_DESCRIPTION)
            return

        self.update_title(f"{personal.name} - {personal.title} | Portfolio")
        description = personal.summary or personal.bio or DEFAULT_DESCRIPTION
        self.update_meta("description", truncate_text(description, 160))
        self.update_meta("author", personal.name)
        self.update_meta("keywords", generate_keywords(data))

        self._open_graph(data)
        self._twitter_card(data)
        self._structured_data(data)

        report = self.validate_heading_hierarchy()
        if report.is_valid:
            logger.info("SEO: heading hierarchy is valid")
        else:
            logger.warning("SEO: heading hierarchy issues found: %s", report.errors)

    def _image_url(self, headshot: str | None) -> str:
        return f"{self.site_url}/{headshot or self.default_image}"

    def _open_graph(self, data: PortfolioData) -> None:
        personal = data.personal
        first, _, last = personal.name.partition(" ")
        self.set_property("og:type", "profile")
        self.set_property("og:title", f"{personal.name} - {personal.title}")
        self.set_property("og:description", truncate_text(personal.summary or personal.bio, 200))
        self.set_property("og:url", self.site_url)
        self.set_property("og:site_name", f"{personal.name} Portfolio")
        self.set_property("profile:first_name", first)
        self.set_property("profile:last_name", last)
        self.set_property("og:image", self._image_url(personal.headshot))
        self.set_property("og:image:alt", f"Professional headshot of {personal.name}")
        self.set_property("og:image:width", "400")
        self.set_property("og:image:height", "400")

    def _twitter_card(self, data: PortfolioData) -> None:
        personal = data.personal
        self.update_meta("twitter:card", "summary")
        self.update_meta("twitter:title", f"{personal.name} - {personal.title}")
        description = truncate_text(personal.summary or personal.bio, 200)
        self.update_meta("twitter:description", description)
        self.update_meta("twitter:image", self._image_url(personal.headshot))
        self.update_meta("twitter:image:alt", f"Professional headshot of {personal.name}")

    def structured_data(self, data: PortfolioData) -> dict[str, Any]:
        personal = data.personal
        person: dict[str, Any] = {
            "@context": "https://schema.org",
            "@type": "Person",
            "name": personal.name,
            "jobTitle": personal.title,
            "description": personal.bio,
            "url": self.site_url,
            "sameAs": same_as_links(personal.contact),
            "knowsAbout": [
                skill.name for category in data.skills for skill in category.skills
            ][:MAX_KNOWS_ABOUT],
            "worksFor": current_employer(data.experience),
        }
        if personal.headshot:
            person["image"] = self._image_url(personal.headshot)
        if personal.contact is not None and personal.contact.email:
            person["email"] = personal.contact.email

        website = {
            "@context": "https://schema.org",
            "@type": "WebSite",
            "name": f"{personal.name} Portfolio",
            "description": personal.summary or personal.bio,
            "url": self.site_url,
            "author": {"@type": "Person", "name": personal.name},
        }
        return {"@context": "https://schema.org", "@graph": [person, website]}

    def _structured_data(self, data: PortfolioData) -> None:
        existing = self.page.document.get_element_by_id(STRUCTURED_DATA_ID)
        if existing is not None:
            existing.decompose()
        script = self.page.document.create_element(
            "script", id=STRUCTURED_DATA_ID, type="application/ld+json"
        )
        script.string = script_json(self.structured_data(data))
        self.head.append(script)

    def validate_heading_hierarchy(self) -> ValidationResult:
        return check_heading_hierarchy(
            self.page.document.select("h1, h2, h3, h4, h5, h6", self.page.document.body)
        )

    def update_title(self, title: str) -> None:
        element = self.head.find("title")
        if element is None:
            element = self.page.document.create_element("title")
            self.head.append(element)
        element.string = title

    def update_meta(self, name: str, content: str) -> None:
        meta = self.head.find("meta", attrs={"name": name})
        if meta is None:
            meta = self.page.document.create_element("meta", name=name)
            self.head.append(meta)
        meta["content"] = content

    def set_property(self, prop: str, content: str) -> None:
        meta = self.head.find("meta", attrs={"property": prop})
        if meta is None:
            meta = self.page.document.create_element("meta", property=prop)
            self.head.append(meta)
        meta["content"] = content

    def status(self) -> dict[str, Any]:
        """Current SEO state, for diagnostics."""

        def meta(attr: str, value: str) -> str | None:
            tag = self.head.find("meta", attrs={attr: value})
            return tag.get("content") if tag is not None else None

        title = self.head.find("title")
        script = self.page.document.get_element_by_id(STRUCTURED_DATA_ID)
        return {
            "title": title.get_text() if title is not None else None,
            "description": meta("name", "description"),
            "keywords": meta("name", "keywords"),
            "og_title": meta("property", "og:title"),
            "og_description": meta("property", "og:description"),
            "structured_data": script.get_text() if script is not None else None,
            "heading_hierarchy": self.validate_heading_hierarchy(),
        }
