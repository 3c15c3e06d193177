"""Typed portfolio entities.

The document is externally supplied and may not match the expected shape.
Every field here coerces leniently: a wrong type becomes an empty value or
``None`` instead of raising, so invalid data still renders as-is. Strict
checking is the job of ``folio.validation``.
"""

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_optional_text(value: Any) -> str | None:
    text = _as_text(value).strip()
    return text or None


def _as_text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [text for text in (_as_text(item) for item in value) if text.strip()]


def _dict_items(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


Text = Annotated[str, BeforeValidator(_as_text)]
OptionalText = Annotated[str | None, BeforeValidator(_as_optional_text)]
TextList = Annotated[list[str], BeforeValidator(_as_text_list)]


class Proficiency(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


DEFAULT_PROFICIENCY = Proficiency.INTERMEDIATE
_LEVELS = frozenset(level.value for level in Proficiency)


class _Entity(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ContactInfo(_Entity):
    email: OptionalText = None
    linkedin: OptionalText = None
    github: OptionalText = None
    behance: OptionalText = None


class PersonalInfo(_Entity):
    name: Text = ""
    title: Text = ""
    bio: Text = ""
    summary: Text = ""
    headshot: OptionalText = None
    contact: ContactInfo | None = None

    @field_validator("contact", mode="before")
    @classmethod
    def _contact_mapping(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else None


class Experience(_Entity):
    id: Text = ""
    company: Text = ""
    title: Text = ""
    duration: Text = ""
    achievements: TextList = Field(default_factory=list)
    technologies: TextList = Field(default_factory=list)


class ProjectLink(_Entity):
    name: Text = ""
    url: Text = ""


class Project(_Entity):
    id: Text = ""
    title: Text = ""
    description: Text = ""
    tools: TextList = Field(default_factory=list)
    outcomes: TextList = Field(default_factory=list)
    images: TextList = Field(default_factory=list)
    links: list[ProjectLink] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def _link_mappings(cls, v: Any) -> list[dict]:
        return _dict_items(v)

    @property
    def thumbnail(self) -> str | None:
        """First image, used as the card thumbnail."""
        return self.images[0] if self.images else None


class Skill(_Entity):
    name: Text = ""
    icon: OptionalText = None
    proficiency: Proficiency | None = None

    @field_validator("proficiency", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> str | None:
        if not isinstance(v, str):
            return None
        level = v.strip().lower()
        return level if level in _LEVELS else None

    @property
    def level(self) -> Proficiency:
        """Proficiency used for rendering."""
        return self.proficiency or DEFAULT_PROFICIENCY


class SkillCategory(_Entity):
    category: Text = ""
    skills: list[Skill] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _skill_mappings(cls, v: Any) -> list[dict]:
        return _dict_items(v)


class PortfolioData(_Entity):
    """The whole portfolio document."""

    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: list[SkillCategory] = Field(default_factory=list)

    @field_validator("personal", mode="before")
    @classmethod
    def _personal_mapping(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else {}

    @field_validator("experience", "projects", "skills", mode="before")
    @classmethod
    def _entity_lists(cls, v: Any) -> list[dict]:
        return _dict_items(v)

    @classmethod
    def from_raw(cls, raw: Any) -> "PortfolioData":
        """Build from decoded JSON of any shape."""
        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)
