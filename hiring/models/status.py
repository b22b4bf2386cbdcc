"""Applicant status as a tagged variant."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import Outcome


class AtStage(BaseModel):
    """Applicant currently sitting at a pipeline stage."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["at_stage"] = "at_stage"
    index: int = Field(..., ge=0, description="0-based index into the stage list")


class Decided(BaseModel):
    """Applicant with a terminal hire/reject outcome."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["decided"] = "decided"
    outcome: Outcome = Field(..., description="Hired or Rejected")


ApplicantStatus = Annotated[Union[AtStage, Decided], Field(discriminator="kind")]
