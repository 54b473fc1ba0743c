"""Command-line interface for Convergent.

This module provides the CLI entry point. It handles argument parsing,
logging setup from settings, and dispatch to the subcommands:

    extract-json: Pull the JSON payload out of an LLM response and print it.
    branch: Create and check out a timestamped run branch.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from convergent.config import load_settings
from convergent.git.branch import create_run_branch
from convergent.git.core import GitCommandError
from convergent.helpers.errors import JSONExtractionError
from convergent.helpers.json import extract_json

logger = logging.getLogger("convergent.cli")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def read_input(path: str | None) -> str:
    """Read text from a file, or from stdin when path is None or "-".

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the path cannot be read, e.g. it is a directory.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="convergent")
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command")

    extract_parser = subparsers.add_parser("extract-json")
    extract_parser.add_argument("file", nargs="?", default=None)

    branch_parser = subparsers.add_parser("branch")
    branch_parser.add_argument("path", nargs="?", default=".")
    return parser


def main() -> None:
    """Main entry point for the Convergent CLI.

    Commands:
        extract-json: Read FILE (or stdin when omitted or "-"), extract the
            JSON payload and print it with a 2-space indent.
        branch: Create a run branch in PATH (default: current directory) and
            print its name.

    Raises:
        SystemExit: Exit code 0 for success, 1 for errors (file not found,
            unreadable input, no JSON found, git failure).

    Examples:
        convergent extract-json response.md
        cat response.md | convergent extract-json
        convergent -v branch ~/src/my-project
    """
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logger.debug(f"CLI args parsed: command={args.command}")

    if args.command == "extract-json":
        try:
            text = read_input(args.file)
        except FileNotFoundError:
            logger.error(f"Input file not found: {args.file}")
            print(f"Error: input file not found: {args.file}", file=sys.stderr)
            sys.exit(1)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read input {args.file}: {e}")
            print(f"Error: cannot read input {args.file}: {e}", file=sys.stderr)
            sys.exit(1)
        try:
            result = extract_json(text)
        except JSONExtractionError as e:
            logger.error(f"JSON extraction failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(result, indent=2))

    elif args.command == "branch":
        try:
            branch_name = create_run_branch(args.path, prefix=settings.branch_prefix)
        except GitCommandError as e:
            logger.error(f"Branch creation failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except FileNotFoundError:
            logger.error("git executable not found")
            print("Error: git executable not found", file=sys.stderr)
            sys.exit(1)
        print(branch_name)


if __name__ == "__main__":
    main()
