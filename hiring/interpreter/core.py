"""Line-by-line interpreter for hiring pipeline command files.

A CommandInterpreter owns the stage list and the applicant registry for
one run. Each input line is parsed into tokens, dispatched on its
CommandKind, and answered with exactly one response string:

- the echoed tokens when the command was applied,
- a wrapped ``Error: Command ... is invalid. ...`` string when it was not,
- ``Command not found for <line>`` for an unknown keyword,
- an informational string for business outcomes (duplicate applicant,
  already at stage, hired, rejected, failed to decide, stats).
"""

from collections.abc import Callable

import structlog

from hiring.interpreter.errors import (
    ApplicantDecidedError,
    CommandError,
    UnknownApplicantError,
    UnknownStageError,
    wrap_error,
)
from hiring.interpreter.validation import require_arg_count, require_email
from hiring.models import (
    ApplicantStatus,
    AtStage,
    CommandKind,
    Decided,
    DecisionCode,
    Outcome,
    PipelineStats,
    StageCount,
)

logger = structlog.get_logger(__name__)

Handler = Callable[[list[str]], str]


class CommandInterpreter:
    """Applies hiring commands to an in-memory stage list and applicant registry."""

    def __init__(self) -> None:
        self._stages: list[str] = []
        self._applicants: dict[str, ApplicantStatus] = {}
        self.handlers: dict[CommandKind, Handler] = {
            CommandKind.DEFINE: self._define,
            CommandKind.CREATE: self._create,
            CommandKind.ADVANCE: self._advance,
            CommandKind.DECIDE: self._decide,
            CommandKind.STATS: self._stats,
        }

    @property
    def stages(self) -> tuple[str, ...]:
        return tuple(self._stages)

    @property
    def applicant_count(self) -> int:
        return len(self._applicants)

    def status_of(self, email: str) -> ApplicantStatus | None:
        """Current status of an applicant, or None if not registered."""
        return self._applicants.get(email)

    def process_line(self, line: str) -> str:
        """Parse one line, apply it, and return its response.

        Args:
            line: Raw input line, as read.

        Returns:
            The response text for this line. Never raises for bad input.
        """
        tokens = line.split()
        kind = CommandKind.from_token(tokens[0] if tokens else None)
        if kind is None:
            logger.debug("command_not_found", line=line)
            return f"Command not found for {line}"

        try:
            response = self.handlers[kind](tokens)
        except CommandError as e:
            logger.debug("command_rejected", command=kind.value, tokens=tokens, detail=e.detail)
            return wrap_error(tokens, e.detail)

        logger.debug("command_applied", command=kind.value, response=response)
        return response

    def stats(self) -> PipelineStats:
        """Count applicants per stage plus hired and rejected totals."""
        counts = [0] * len(self._stages)
        hired = rejected = 0
        for status in self._applicants.values():
            if isinstance(status, Decided):
                if status.outcome == Outcome.HIRED:
                    hired += 1
                else:
                    rejected += 1
            elif status.index < len(counts):
                counts[status.index] += 1

        return PipelineStats(
            stages=[StageCount(stage=name, count=n) for name, n in zip(self._stages, counts)],
            hired=hired,
            rejected=rejected,
        )

    # =========================================================================
    # Command handlers
    # =========================================================================

    def _define(self, tokens: list[str]) -> str:
        require_arg_count(tokens, 1)
        self._stages.extend(tokens[1:])
        return " ".join(tokens)

    def _create(self, tokens: list[str]) -> str:
        require_arg_count(tokens, 1, 1)
        email = require_email(tokens[1])

        if email in self._applicants:
            return "Duplicate applicant"

        self._applicants[email] = AtStage(index=0)
        return " ".join(tokens)

    def _advance(self, tokens: list[str]) -> str:
        require_arg_count(tokens, 1, 2)
        email = tokens[1]
        current = self._current_stage(email)

        if len(tokens) == 2:
            target = current.index + 1
        else:
            target = self._stage_index(tokens[2])

        if target == current.index or target >= len(self._stages):
            return f"Already in {self._stage_name(current.index)}"

        self._applicants[email] = AtStage(index=target)
        return " ".join(tokens)

    def _decide(self, tokens: list[str]) -> str:
        require_arg_count(tokens, 2, 2)
        email, code = tokens[1], tokens[2]
        current = self._current_stage(email)

        if code == DecisionCode.REJECT.value:
            self._applicants[email] = Decided(outcome=Outcome.REJECTED)
            return f"Rejected {email}"

        if code == DecisionCode.HIRE.value and current.index == len(self._stages) - 1:
            self._applicants[email] = Decided(outcome=Outcome.HIRED)
            return f"Hired {email}"

        return f"Failed to decide for {email}"

    def _stats(self, tokens: list[str]) -> str:
        require_arg_count(tokens, 0, 0)
        return self.stats().render()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _current_stage(self, email: str) -> AtStage:
        """Look up an applicant who is still moving through the pipeline."""
        status = self._applicants.get(email)
        if status is None:
            raise UnknownApplicantError()
        if isinstance(status, Decided):
            raise ApplicantDecidedError()
        return status

    def _stage_index(self, name: str) -> int:
        # first match wins when a name was defined twice
        try:
            return self._stages.index(name)
        except ValueError:
            raise UnknownStageError() from None

    def _stage_name(self, index: int) -> str:
        return self._stages[index] if index < len(self._stages) else ""
