from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class CompanyInfo:
    """Company summary produced from the company-details file."""

    summary: str
    website: str = ""


class ActivityLevel(Enum):
    """Coarse LinkedIn posting-frequency classification."""

    ACTIVE = "Active"
    LESS_ACTIVE = "Less Active"
    INACTIVE = "Inactive"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Author:
    """A post author with a generated profile URL."""

    name: str
    profile_url: str


@dataclass(frozen=True)
class LinkedInAnalysis:
    """Output of the LinkedIn-posts analysis."""

    activity_level: ActivityLevel
    authors: list[Author] = field(default_factory=list)
    post_summary: str = ""


@dataclass(frozen=True)
class KeyEmployee:
    """An employee likely to be a valuable point of contact."""

    name: str
    role: str
    profile_url: str
