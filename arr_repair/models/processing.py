"""Data models for repair run results."""

from dataclasses import dataclass, field


@dataclass
class RepairResult:
    """Result of a repair run."""

    candidates_found: int = 0
    files_renamed: int = 0
    entries_cleared: int = 0
    errors: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # Items deferred to a later run
    elapsed_time: float = 0.0

    @property
    def success(self) -> bool:
        """Check if the run finished without run-level errors."""
        return len(self.errors) == 0

    @property
    def has_candidates(self) -> bool:
        return self.candidates_found > 0

    def __str__(self) -> str:
        return (
            f"RepairResult(candidates={self.candidates_found}, "
            f"renamed={self.files_renamed}, cleared={self.entries_cleared}, "
            f"time={self.elapsed_time:.1f}s)"
        )
