#!/usr/bin/env python
"""Standalone script to run the interpreter on a command file."""

import argparse
import sys
from pathlib import Path

# Add repo root to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent))

from hiring.logging_config import configure_logging
from hiring.runner import HiringRunError, run_hiring


def main():
    parser = argparse.ArgumentParser(
        description="Run the hiring pipeline interpreter"
    )
    parser.add_argument(
        "input_path",
        type=Path,
        nargs="?",
        default=Path("input.txt"),
        help="Command file to process (default: input.txt)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("output.txt"),
        help="Output path for the transcript (default: output.txt)",
    )

    args = parser.parse_args()
    configure_logging("WARNING")

    try:
        result = run_hiring(args.input_path, args.output)
    except HiringRunError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Processed {result.lines_processed} lines ({result.error_count} invalid)")
    print(f"Hiring Complete. Please check {args.output}")


if __name__ == "__main__":
    main()
