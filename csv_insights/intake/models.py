from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SlotRole(Enum):
    """The three fixed upload roles, in display order."""

    COMPANY = "company"
    LINKEDIN_POSTS = "linkedin_posts"
    EMPLOYEES = "employees"

    @property
    def label(self) -> str:
        return _SLOT_LABELS[self]


_SLOT_LABELS: dict[SlotRole, str] = {
    SlotRole.COMPANY: "Company Details CSV",
    SlotRole.LINKEDIN_POSTS: "LinkedIn Posts CSV",
    SlotRole.EMPLOYEES: "Employee List CSV",
}


@dataclass
class FileSlot:
    """One upload slot; independent of the other two."""

    role: SlotRole
    path: Path | None = None

    @property
    def is_empty(self) -> bool:
        return self.path is None


@dataclass(frozen=True)
class ParsedHeaderSet:
    """Header row extracted from one non-empty slot."""

    file_name: str
    headers: list[str] = field(default_factory=list)
    error: str | None = None
