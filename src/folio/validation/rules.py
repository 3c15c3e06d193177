"""Pure validation rules for raw portfolio JSON.

Each validator takes the decoded JSON value for one entity and returns a
ValidationResult. Nothing here raises on bad input: a parent entity collects
its children's errors under a readable prefix, in document order.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .models import (
    EMAIL_PATTERN,
    PROFICIENCY_LEVELS,
    REQUIRED_CONTACT_FIELDS,
    REQUIRED_EXPERIENCE_FIELDS,
    REQUIRED_PERSONAL_FIELDS,
    REQUIRED_PROJECT_FIELDS,
    REQUIRED_SKILL_CATEGORY_FIELDS,
    REQUIRED_SKILL_FIELDS,
    URL_PATTERN,
    ValidationResult,
)


def is_valid_email(email: Any) -> bool:
    return isinstance(email, str) and bool(EMAIL_PATTERN.match(email))


def is_valid_url(url: Any) -> bool:
    return isinstance(url, str) and bool(URL_PATTERN.match(url))


def has_required_fields(obj: Any, required: Iterable[str]) -> bool:
    """Check that every required key is present and not null."""
    if not isinstance(obj, Mapping):
        return False
    return all(obj.get(name) is not None for name in required)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _is_present(obj: Mapping[str, Any], name: str) -> bool:
    return obj.get(name) is not None


def _check_text_fields(obj: Mapping[str, Any], names: Iterable[str]) -> list[str]:
    return [f"{name} must be a non-empty string" for name in names if _is_blank(obj[name])]


def _check_text_list(value: Any, label: str, item_label: str, required: bool) -> list[str]:
    if not isinstance(value, list) or (required and not value):
        kind = "a non-empty array" if required else "an array"
        return [f"{label} must be {kind}"]
    return [
        f"{item_label} {index} must be a non-empty string"
        for index, item in enumerate(value)
        if _is_blank(item)
    ]


def validate_contact_info(contact: Any) -> ValidationResult:
    if not has_required_fields(contact, REQUIRED_CONTACT_FIELDS):
        return ValidationResult.from_errors(["Contact info missing required fields"])

    errors: list[str] = []
    if not is_valid_email(contact["email"]):
        errors.append("Invalid email address")
    for name in ("linkedin", "github", "behance"):
        if not is_valid_url(contact[name]):
            errors.append(f"Invalid {name} URL")
    return ValidationResult.from_errors(errors)


def validate_personal_info(personal: Any) -> ValidationResult:
    if not has_required_fields(personal, REQUIRED_PERSONAL_FIELDS):
        return ValidationResult.from_errors(["Personal info missing required fields"])

    errors = _check_text_fields(personal, ("name", "title", "bio", "summary"))
    errors.extend(validate_contact_info(personal["contact"]).errors)
    if _is_present(personal, "headshot") and not isinstance(personal["headshot"], str):
        errors.append("Headshot must be a string")
    return ValidationResult.from_errors(errors)


def validate_experience(experience: Any) -> ValidationResult:
    if not has_required_fields(experience, REQUIRED_EXPERIENCE_FIELDS):
        return ValidationResult.from_errors(["Experience missing required fields"])

    errors = _check_text_fields(experience, ("id", "company", "title", "duration"))
    errors.extend(
        _check_text_list(experience["achievements"], "Achievements", "Achievement", True)
    )
    if _is_present(experience, "technologies"):
        errors.extend(
            _check_text_list(experience["technologies"], "Technologies", "Technology", False)
        )
    return ValidationResult.from_errors(errors)


def _check_links(links: Any) -> list[str]:
    if not isinstance(links, list):
        return ["Links must be an array"]
    errors: list[str] = []
    for index, link in enumerate(links):
        if not isinstance(link, Mapping):
            errors.append(f"Link {index} must be an object")
            continue
        if _is_blank(link.get("name")):
            errors.append(f"Link {index} name must be a non-empty string")
        if not is_valid_url(link.get("url")):
            errors.append(f"Link {index} URL is invalid")
    return errors


def validate_project(project: Any) -> ValidationResult:
    if not has_required_fields(project, REQUIRED_PROJECT_FIELDS):
        return ValidationResult.from_errors(["Project missing required fields"])

    errors = _check_text_fields(project, ("id", "title", "description"))
    errors.extend(_check_text_list(project["tools"], "Tools", "Tool", True))
    errors.extend(_check_text_list(project["outcomes"], "Outcomes", "Outcome", True))
    if _is_present(project, "images"):
        errors.extend(_check_text_list(project["images"], "Images", "Image", False))
    if _is_present(project, "links"):
        errors.extend(_check_links(project["links"]))
    return ValidationResult.from_errors(errors)


def validate_skill(skill: Any) -> ValidationResult:
    if not has_required_fields(skill, REQUIRED_SKILL_FIELDS):
        return ValidationResult.from_errors(["Skill missing required fields"])

    errors: list[str] = []
    if _is_blank(skill["name"]):
        errors.append("Skill name must be a non-empty string")
    if _is_present(skill, "icon") and _is_blank(skill["icon"]):
        errors.append("Skill icon must be a non-empty string")
    if _is_present(skill, "proficiency") and skill["proficiency"] not in PROFICIENCY_LEVELS:
        errors.append(f"Skill proficiency must be one of: {', '.join(PROFICIENCY_LEVELS)}")
    return ValidationResult.from_errors(errors)


def validate_skill_category(category: Any) -> ValidationResult:
    if not has_required_fields(category, REQUIRED_SKILL_CATEGORY_FIELDS):
        return ValidationResult.from_errors(["Skill category missing required fields"])

    errors: list[str] = []
    if _is_blank(category["category"]):
        errors.append("Category name must be a non-empty string")

    skills = category["skills"]
    if not isinstance(skills, list) or not skills:
        errors.append("Skills must be a non-empty array")
    else:
        for index, skill in enumerate(skills):
            result = validate_skill(skill)
            if not result.is_valid:
                errors.append(f"Skill {index}: {', '.join(result.errors)}")
    return ValidationResult.from_errors(errors)


def _validate_list(items: Any, label: str, prefix: str, validator) -> list[str]:
    if not isinstance(items, list):
        return [f"{label} must be an array"]
    errors: list[str] = []
    for index, item in enumerate(items):
        result = validator(item)
        if not result.is_valid:
            errors.append(f"{prefix} {index}: {', '.join(result.errors)}")
    return errors


def validate_portfolio_data(data: Any) -> ValidationResult:
    """Validate a whole portfolio document."""
    if not isinstance(data, Mapping):
        return ValidationResult.from_errors(["Portfolio data must be an object"])

    errors: list[str] = []
    if not data.get("personal"):
        errors.append("Personal information is required")
    else:
        result = validate_personal_info(data["personal"])
        if not result.is_valid:
            errors.append(f"Personal info: {', '.join(result.errors)}")

    errors.extend(
        _validate_list(data.get("experience"), "Experience", "Experience", validate_experience)
    )
    errors.extend(_validate_list(data.get("projects"), "Projects", "Project", validate_project))
    errors.extend(
        _validate_list(data.get("skills"), "Skills", "Skill category", validate_skill_category)
    )
    return ValidationResult.from_errors(errors)


SECTION_VALIDATORS = {
    "experience": ("Experience", validate_experience),
    "projects": ("Project", validate_project),
    "skills": ("Skill category", validate_skill_category),
}


def validate_section(name: str, value: Any) -> ValidationResult:
    """Validate one top-level section of the document by name."""
    if name == "personal":
        return validate_personal_info(value)
    entry = SECTION_VALIDATORS.get(name)
    if entry is None:
        return ValidationResult.from_errors([f"Unknown section: {name}"])
    prefix, validator = entry
    items = value if isinstance(value, list) else []
    return ValidationResult.from_errors(_validate_list(items, prefix, prefix, validator))
