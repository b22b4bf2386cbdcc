"""Command parsing, validation, and the interpreter itself."""

from .core import CommandInterpreter
from .errors import (
    ApplicantDecidedError,
    CommandError,
    EmailValidationError,
    ShapeError,
    UnknownApplicantError,
    UnknownStageError,
    wrap_error,
)
from .validation import is_email

__all__ = [
    "CommandInterpreter",
    "CommandError",
    "ShapeError",
    "EmailValidationError",
    "UnknownApplicantError",
    "UnknownStageError",
    "ApplicantDecidedError",
    "wrap_error",
    "is_email",
]
