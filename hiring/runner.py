"""Batch driver: read a command file, interpret every line, write the transcript."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from hiring.interpreter import CommandInterpreter
from hiring.models import PipelineStats

logger = structlog.get_logger(__name__)

ERROR_PREFIXES = ("Error: Command ", "Command not found for ")


class HiringRunError(Exception):
    """Error reading the command file or writing the transcript."""

    pass


@dataclass
class HiringRun:
    """Result of one batch run."""

    input_path: Path
    output_path: Path | None
    responses: list[str] = field(default_factory=list)
    stats: PipelineStats = field(default_factory=PipelineStats)

    @property
    def lines_processed(self) -> int:
        return len(self.responses)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.responses if is_error_response(r))


def is_error_response(response: str) -> bool:
    """Whether a response reports an invalid or unknown command."""
    return response.startswith(ERROR_PREFIXES)


def read_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield lines from a command file with line terminators removed.

    Raises:
        HiringRunError: If the file is missing or cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise HiringRunError(f"Input file not found: {path}")

    # "\n" is the only line terminator; a stray "\r" stays inside the line
    try:
        with open(path, "r", encoding=encoding, newline="\n") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("input_read_failed", path=str(path), error=str(e))
        raise HiringRunError(f"Failed to read {path}: {e}") from e


def write_transcript(path: str | Path, responses: Iterable[str], encoding: str = "utf-8") -> None:
    """Write one response per line, in order, in a single pass."""
    path = Path(path)
    output = "".join(f"{r}\n" for r in responses)
    try:
        with open(path, "w", encoding=encoding) as f:
            f.write(output)
    except OSError as e:
        logger.error("output_write_failed", path=str(path), error=str(e))
        raise HiringRunError(f"Failed to write {path}: {e}") from e


def run_hiring(
    input_path: str | Path,
    output_path: str | Path | None,
    interpreter: CommandInterpreter | None = None,
    encoding: str = "utf-8",
) -> HiringRun:
    """Interpret every line of a command file and write the transcript.

    Args:
        input_path: Command file, one command per line.
        output_path: Transcript destination. None skips writing.
        interpreter: Interpreter to drive. A fresh one is created by default.
        encoding: Text encoding for both files.

    Returns:
        HiringRun with every response and the final stats.

    Raises:
        HiringRunError: If the input cannot be read or the output written.
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path is not None else None
    interpreter = interpreter or CommandInterpreter()

    logger.info("hiring_run_start", input=str(input_path))

    run = HiringRun(input_path=input_path, output_path=output_path)
    for line in read_lines(input_path, encoding=encoding):
        run.responses.append(interpreter.process_line(line))

    if output_path is not None:
        write_transcript(output_path, run.responses, encoding=encoding)

    run.stats = interpreter.stats()

    logger.info(
        "hiring_run_complete",
        lines=run.lines_processed,
        errors=run.error_count,
        applicants=interpreter.applicant_count,
        output=str(output_path) if output_path else None,
    )

    return run
