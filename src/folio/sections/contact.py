"""Contact section and the contact link list shared with the hero."""

from datetime import date

from bs4 import Tag

from ..data.models import ContactInfo, PersonalInfo
from ..dom import Event, add_class, remove_class
from ..utils.html import escape_html
from .base import SectionContext

EXTERNAL_CHANNELS = (
    ("linkedin", "LinkedIn", "Visit LinkedIn profile (opens in new tab)"),
    ("github", "GitHub", "Visit GitHub profile (opens in new tab)"),
    ("behance", "Behance", "Visit Behance portfolio (opens in new tab)"),
)


def _link(href: str, kind: str, text: str, label: str, external: bool) -> str:
    target = ' target="_blank" rel="noopener noreferrer"' if external else ""
    return (
        f'<a href="{escape_html(href)}" class="contact-link"{target} '
        f'aria-label="{escape_html(label)}" data-contact-type="{kind}">'
        '<span class="contact-icon" aria-hidden="true">→</span>'
        f'<span class="contact-text">{escape_html(text)}</span>'
        "</a>"
    )


def contact_links_markup(contact: ContactInfo | None) -> str:
    """One link per present channel, in email, LinkedIn, GitHub, Behance order.

    Profile URLs that are not http(s) are left out.
    """
    if contact is None:
        return ""
    links = []
    if contact.email:
        links.append(
            _link(
                f"mailto:{contact.email}",
                "email",
                contact.email,
                f"Send email to {contact.email}",
                external=False,
            )
        )
    for kind, text, label in EXTERNAL_CHANNELS:
        url = getattr(contact, kind)
        if url and url.startswith(("http://", "https://")):
            links.append(_link(url, kind, text, label, external=True))
    return "".join(links)


def wire_contact_links(ctx: SectionContext, root: Tag) -> None:
    """Track clicks and make Enter/Space follow each contact link."""
    for link in ctx.page.document.select(".contact-link", root):
        kind = str(link.get("data-contact-type", ""))

        def on_click(event: Event, kind: str = kind) -> None:
            ctx.track_interaction(kind)

        ctx.listen(link, "click", on_click)
        ctx.listen(link, "mouseenter", lambda event, link=link: add_class(link, "hovered"))
        ctx.listen(link, "mouseleave", lambda event, link=link: remove_class(link, "hovered"))
        ctx.click_on_activation_keys(link)


def render_contact(ctx: SectionContext, container: Tag, personal: PersonalInfo) -> None:
    markup = f"""
<div class="container">
  <div class="contact-title-section">
    <h2 class="section-title" id="contact-title">Contact</h2>
  </div>
  <div class="contact-divider"></div>
  <div class="contact-content-section">
    <div class="contact-info">
      <div class="contact-label">Get in Touch</div>
      <p class="contact-message">Let's work together</p>
      <p class="contact-subtitle">Available for freelance projects, collaborations, and full-time opportunities.</p>
    </div>
    <div class="contact-links" id="contact-links">{contact_links_markup(personal.contact)}</div>
    <div class="contact-meta">
      <div class="contact-availability">
        <div class="availability-dot"></div>
        <span class="availability-text">Available for work</span>
      </div>
    </div>
  </div>
</div>
<div class="contact-footer">© {date.today().year} {escape_html(personal.name or "Portfolio")}</div>
"""
    ctx.page.document.set_inner_html(container, markup)
    wire_contact_links(ctx, container)


def populate(ctx: SectionContext, container: Tag) -> None:
    render_contact(ctx, container, ctx.store.get_personal_info())
