"""Section renderers, one module per page section.

Each module exposes ``render_<section>(ctx, container, data)`` and a
``populate(ctx, container)`` that reads its data from the store.
"""

from . import about, contact, experience, hero, projects, skills, summary
from .base import Populate, SectionContext

SECTION_POPULATORS: dict[str, Populate] = {
    "hero": hero.populate,
    "about": about.populate,
    "summary": summary.populate,
    "experience": experience.populate,
    "projects": projects.populate,
    "skills": skills.populate,
    "contact": contact.populate,
}

__all__ = ["SECTION_POPULATORS", "Populate", "SectionContext"]
