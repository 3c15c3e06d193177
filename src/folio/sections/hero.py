"""Hero section: name, title and contact links."""

from bs4 import Tag

from ..data.models import PersonalInfo
from .base import SectionContext
from .contact import contact_links_markup, wire_contact_links

DEFAULT_NAME = "Your Name"
DEFAULT_TITLE = "Professional Title"


def render_hero(ctx: SectionContext, container: Tag, personal: PersonalInfo) -> None:
    document = ctx.page.document
    title = document.get_element_by_id("hero-title", container)
    subtitle = document.get_element_by_id("hero-subtitle", container)
    contact = document.get_element_by_id("hero-contact", container)

    if title is not None:
        document.set_text(title, personal.name or DEFAULT_NAME)
    if subtitle is not None:
        document.set_text(subtitle, personal.title or DEFAULT_TITLE)
    if contact is not None:
        document.set_inner_html(contact, contact_links_markup(personal.contact))
        wire_contact_links(ctx, contact)


def populate(ctx: SectionContext, container: Tag) -> None:
    render_hero(ctx, container, ctx.store.get_personal_info())
