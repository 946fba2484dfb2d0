"""Explicit per-session state for one user's uploads and derived results.

Every write to derived state carries the run generation that produced it.
Writes from a generation that is no longer current are dropped, so a slow
response from an earlier run cannot overwrite state after the inputs were
changed, cleared, or a new run was started.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from csv_insights.analysis.models import CompanyInfo, KeyEmployee, LinkedInAnalysis
from csv_insights.intake.models import FileSlot, ParsedHeaderSet, SlotRole
from csv_insights.logging.logger import Log

T = TypeVar("T")


@dataclass(frozen=True)
class DownloadableProfile:
    """A person's name paired with a generated profile link."""

    name: str
    profile_url: str


@dataclass
class PipelineState(Generic[T]):
    result: T | None = None
    error: str | None = None
    loading: bool = False

    def reset(self) -> None:
        self.result = None
        self.error = None
        self.loading = False


def _empty_slots() -> dict[SlotRole, FileSlot]:
    return {role: FileSlot(role=role) for role in SlotRole}


@dataclass
class SessionContext:
    slots: dict[SlotRole, FileSlot] = field(default_factory=_empty_slots)
    header_sets: list[ParsedHeaderSet] = field(default_factory=list)
    is_processing: bool = False
    company: PipelineState[CompanyInfo] = field(default_factory=PipelineState)
    linkedin: PipelineState[LinkedInAnalysis] = field(default_factory=PipelineState)
    employees: PipelineState[list[KeyEmployee]] = field(default_factory=PipelineState)
    profiles: list[DownloadableProfile] = field(default_factory=list)
    generation: int = 0

    @property
    def has_files(self) -> bool:
        return any(not slot.is_empty for slot in self.slots.values())

    def filled_slots(self) -> list[FileSlot]:
        """Non-empty slots in role order."""
        return [self.slots[role] for role in SlotRole if not self.slots[role].is_empty]

    def pipeline(self, role: SlotRole) -> PipelineState:  # type: ignore[type-arg]
        return {
            SlotRole.COMPANY: self.company,
            SlotRole.LINKEDIN_POSTS: self.linkedin,
            SlotRole.EMPLOYEES: self.employees,
        }[role]

    def set_file(self, role: SlotRole, path: Path | None) -> None:
        """Replace one slot's file and discard everything derived from the old inputs."""
        self.slots[role].path = path
        self._invalidate()

    def clear(self) -> None:
        for slot in self.slots.values():
            slot.path = None
        self._invalidate()

    def begin_run(self) -> int:
        """Reset derived state, mark processing, and return the new run generation."""
        self._invalidate()
        self.is_processing = True
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def set_loading(self, role: SlotRole, generation: int, loading: bool) -> None:
        if self._accepts(generation, f"{role.value} loading flag"):
            self.pipeline(role).loading = loading

    def record(
        self,
        role: SlotRole,
        generation: int,
        *,
        result: object | None = None,
        error: str | None = None,
    ) -> None:
        """Store one pipeline's outcome; the only write path for pipeline results."""
        if not self._accepts(generation, f"{role.value} result"):
            return
        state = self.pipeline(role)
        state.result = result
        state.error = error

    def finish_run(
        self,
        generation: int,
        header_sets: list[ParsedHeaderSet],
        profiles: list[DownloadableProfile],
    ) -> None:
        if not self._accepts(generation, "run summary"):
            return
        self.header_sets = header_sets
        self.profiles = profiles
        self.is_processing = False

    def _invalidate(self) -> None:
        self.generation += 1
        self.header_sets = []
        self.is_processing = False
        self.company.reset()
        self.linkedin.reset()
        self.employees.reset()
        self.profiles = []

    def _accepts(self, generation: int, what: str) -> bool:
        if self.is_current(generation):
            return True
        Log.debug(f"Dropping stale {what} from run {generation} (current {self.generation})")
        return False
