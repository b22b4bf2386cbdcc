"""Pydantic data models for the hiring pipeline."""

from .enums import CommandKind, DecisionCode, Outcome
from .stats import PipelineStats, StageCount
from .status import ApplicantStatus, AtStage, Decided

__all__ = [
    # Enums
    "CommandKind",
    "DecisionCode",
    "Outcome",
    # Status
    "ApplicantStatus",
    "AtStage",
    "Decided",
    # Stats
    "PipelineStats",
    "StageCount",
]
