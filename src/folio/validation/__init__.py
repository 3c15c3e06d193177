"""Portfolio data validation."""

from .models import PROFICIENCY_LEVELS, BuildInput, ValidateFileInput, ValidationResult
from .rules import (
    has_required_fields,
    is_valid_email,
    is_valid_url,
    validate_contact_info,
    validate_experience,
    validate_personal_info,
    validate_portfolio_data,
    validate_project,
    validate_section,
    validate_skill,
    validate_skill_category,
)

__all__ = [
    "PROFICIENCY_LEVELS",
    "BuildInput",
    "ValidateFileInput",
    "ValidationResult",
    "has_required_fields",
    "is_valid_email",
    "is_valid_url",
    "validate_contact_info",
    "validate_experience",
    "validate_personal_info",
    "validate_portfolio_data",
    "validate_project",
    "validate_section",
    "validate_skill",
    "validate_skill_category",
]
