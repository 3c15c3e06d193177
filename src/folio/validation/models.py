"""Validation result types, constants and CLI input models."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN: Final = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN: Final = re.compile(r"^https?://.+")

PROFICIENCY_LEVELS: Final[tuple[str, ...]] = ("beginner", "intermediate", "advanced", "expert")

REQUIRED_PERSONAL_FIELDS: Final = ("name", "title", "bio", "summary", "contact")
REQUIRED_CONTACT_FIELDS: Final = ("email", "linkedin", "github", "behance")
REQUIRED_EXPERIENCE_FIELDS: Final = ("id", "company", "title", "duration", "achievements")
REQUIRED_PROJECT_FIELDS: Final = ("id", "title", "description", "tools", "outcomes")
REQUIRED_SKILL_FIELDS: Final = ("name",)
REQUIRED_SKILL_CATEGORY_FIELDS: Final = ("category", "skills")


@dataclass
class ValidationResult:
    """Outcome of validating one entity."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=list(errors))


class ValidateFileInput(BaseModel):
    """Validated input for the ``validate`` command."""

    path: Path = Field(description="Path to the portfolio JSON document")

    @field_validator("path")
    @classmethod
    def validate_json_file(cls, v: Path) -> Path:
        """Validate the file exists and looks like JSON."""
        if not v.exists():
            raise ValueError(f"Data file not found: {v}")
        if v.suffix.lower() != ".json":
            raise ValueError(f"Expected .json file, got: {v.suffix or 'no extension'}")
        return v


class BuildInput(BaseModel):
    """Validated input for the ``build`` command."""

    shell_path: Path | None = Field(default=None, description="Custom HTML shell")
    output_path: Path = Field(description="Where the rendered page is written")

    @field_validator("shell_path")
    @classmethod
    def validate_shell(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_file():
            raise ValueError(f"Shell template not found: {v}")
        return v

    @field_validator("output_path")
    @classmethod
    def validate_output(cls, v: Path) -> Path:
        if v.exists() and v.is_dir():
            raise ValueError(f"Output path is a directory: {v}")
        return v
