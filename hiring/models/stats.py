"""Aggregate pipeline statistics."""

from pydantic import BaseModel, Field


class StageCount(BaseModel):
    """Number of applicants currently at one stage."""

    stage: str = Field(..., description="Stage name")
    count: int = Field(default=0, ge=0, description="Applicants at this stage")


class PipelineStats(BaseModel):
    """Snapshot of where applicants are in the pipeline."""

    stages: list[StageCount] = Field(default_factory=list, description="Counts in stage order")
    hired: int = Field(default=0, ge=0, description="Applicants hired")
    rejected: int = Field(default=0, ge=0, description="Applicants rejected")

    @property
    def in_progress(self) -> int:
        return sum(s.count for s in self.stages)

    def render(self) -> str:
        """Format as the STATS response line.

        Each stage contributes ``"<name> <count> "`` followed by the
        hired and rejected totals, e.g.
        ``"ManualReview 0 BackgroundCheck 1 Hired 0 Rejected 0"``.
        """
        response = "".join(f"{s.stage} {s.count} " for s in self.stages)
        return response + f"Hired {self.hired} Rejected {self.rejected}"
