"""About section: headshot and bio."""

from bs4 import Tag

from ..data.models import PersonalInfo
from ..dom import set_style
from ..utils.html import escape_html
from .base import SectionContext, paragraphs

DEFAULT_BIO = "Professional bio will be displayed here."


def render_about(ctx: SectionContext, container: Tag, personal: PersonalInfo) -> None:
    """Fill the bio and lazily load the headshot.

    Without a headshot the image slot is hidden and the content reflows to a
    single column.
    """
    document = ctx.page.document
    headshot = document.get_element_by_id("about-headshot", container)
    bio = document.get_element_by_id("about-bio", container)
    image_slot = document.select_one(".about-image", container)
    content = document.select_one(".about-content", container)

    if headshot is not None:
        if personal.headshot:
            if image_slot is not None:
                set_style(image_slot, "display", "")
            if content is not None:
                set_style(content, "grid-template-columns", "")
            _load_headshot(ctx, headshot, personal.headshot, personal.name)
        else:
            if image_slot is not None:
                set_style(image_slot, "display", "none")
            if content is not None:
                set_style(content, "grid-template-columns", "1fr")

    if bio is not None:
        text = personal.bio or DEFAULT_BIO
        document.set_inner_html(
            bio, "".join(f"<p>{escape_html(p)}</p>" for p in paragraphs(text))
        )


def _load_headshot(ctx: SectionContext, img: Tag, src: str, name: str) -> None:
    img["alt"] = f"{name} - Professional headshot"

    def on_done(element: Tag, loaded: bool) -> None:
        if not loaded:
            element["alt"] = f"{name} - Professional headshot (image unavailable)"

    ctx.images.defer(img, src, on_done)


def populate(ctx: SectionContext, container: Tag) -> None:
    render_about(ctx, container, ctx.store.get_personal_info())
