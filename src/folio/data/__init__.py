"""Portfolio document: typed entities, fetching and the data store."""

from .fallback import FALLBACK_DATA, FALLBACK_NAME
from .fetcher import DataSource, FileDataSource, HTTPDataSource, data_source_for
from .models import (
    ContactInfo,
    Experience,
    PersonalInfo,
    PortfolioData,
    Proficiency,
    Project,
    ProjectLink,
    Skill,
    SkillCategory,
)
from .store import PortfolioStore

__all__ = [
    "FALLBACK_DATA",
    "FALLBACK_NAME",
    "ContactInfo",
    "DataSource",
    "Experience",
    "FileDataSource",
    "HTTPDataSource",
    "PersonalInfo",
    "PortfolioData",
    "PortfolioStore",
    "Proficiency",
    "Project",
    "ProjectLink",
    "Skill",
    "SkillCategory",
    "data_source_for",
]
