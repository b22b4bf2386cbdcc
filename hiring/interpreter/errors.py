"""Errors raised by command handlers and the wrapped error response."""

from collections.abc import Sequence


class CommandError(Exception):
    """A recognized command that cannot be applied.

    The ``detail`` text is appended to the wrapped error response.
    """

    detail: str = ""

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ShapeError(CommandError):
    """Wrong number of arguments for the command."""

    pass


class EmailValidationError(CommandError):
    """Applicant email is malformed."""

    detail = "Email is invalid."


class UnknownApplicantError(CommandError):
    """Applicant email is not registered."""

    detail = "Email does not exist in database."


class UnknownStageError(CommandError):
    """Named stage is not in the stage list."""

    detail = "Stage does not exist."


class ApplicantDecidedError(CommandError):
    """Applicant was already hired or rejected."""

    detail = "Applicant has already been decided."


def wrap_error(tokens: Sequence[str], detail: str = "") -> str:
    """Format the response for a command that could not be applied."""
    return f"Error: Command {' '.join(tokens)} is invalid. {detail}"
