"""Command line entry point: run an input file and show the result."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

from fizik.io import OUTPUT_NAME, run_file


def _open_file(path: Path) -> None:
    if sys.platform.startswith("win"):
        command = ["cmd", "/c", "start", "", str(path)]
    elif sys.platform == "darwin":
        command = ["open", str(path)]
    else:
        command = ["xdg-open", str(path)]
    try:
        subprocess.run(command, check=False)
    except OSError as error:
        print(f"Could not open {path}: {error}", file=sys.stderr)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fizik", description="Run a particle simulation from an input file."
    )
    parser.add_argument("input", nargs="?", help="path of the input text file")
    parser.add_argument(
        "-o", "--output", help=f"output file (default: ./{OUTPUT_NAME})"
    )
    parser.add_argument(
        "--no-open", action="store_true", help="do not open the output file"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and open the rendered output."""
    args = _parser().parse_args(argv)
    input_path = args.input
    if input_path is None:
        print("Enter the input txt path:")
        line = sys.stdin.readline()
        parts = line.split()
        if not parts:
            print("No input path given", file=sys.stderr)
            return 1
        input_path = parts[0]
    output_path = Path(args.output) if args.output else Path.cwd() / OUTPUT_NAME
    try:
        run_file(input_path, output_path)
    except OSError as error:
        print(f"Could not open file: {error}", file=sys.stderr)
        return 1
    except (ValueError, IndexError) as error:
        print(f"Invalid input: {error}", file=sys.stderr)
        return 1
    if not args.no_open:
        _open_file(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())