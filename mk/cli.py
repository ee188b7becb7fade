"""Command line entry point for mk.

Usage:
    mk notes/today.md            # creates notes/ and an empty today.md
    mk build/output              # creates build/ and build/output/
    mk -f bin/tool               # extensionless file
    mk -d assets/v1.2            # directory despite the dot
    echo hi | mk greet/hello.sh  # file with contents, marked executable
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from pydantic import ValidationError

from mk import __version__
from mk.exceptions import InvalidArgumentError, MkError
from mk.executor import create_entry
from mk.models import Invocation

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mk",
        description=(
            "Create a file or directory, making any missing parent directories. "
            "Paths whose final segment has an extension become files, anything "
            "else becomes a directory. Names starting with '.' and no further "
            "extension are treated as directories; use -f for dotfiles."
        ),
    )
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument(
        "-f",
        "--file",
        dest="force_file",
        action="store_true",
        help="Force the created entry to be a file.",
    )
    kind.add_argument(
        "-d",
        "--dir",
        "--directory",
        dest="force_dir",
        action="store_true",
        help="Force the created entry to be a directory.",
    )
    parser.add_argument(
        "-o",
        "--overwrite",
        action="store_true",
        help="Overwrite existing entries.",
    )
    parser.add_argument(
        "-x",
        "--executable",
        action="store_true",
        help="Force the created file to be executable.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Report what was created (-vv for debug output).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("path", help="The path to make.")
    return parser


def configure_logging(verbosity: int) -> None:
    """Send mk's log records to stderr at a level chosen by the -v count."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("mk")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


def _piped_stdin() -> Optional[BinaryIO]:
    """Return the binary stdin stream unless it is missing or a terminal."""
    if sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.buffer


def _validation_message(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        messages.append(str(cause) if cause is not None else error["msg"])
    return "; ".join(messages)


def _report(exc: MkError) -> int:
    logger.debug("Run failed", exc_info=exc)
    print(f"mk: error: {exc}", file=sys.stderr)
    return exc.exit_code


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[BinaryIO] = None,
    root: Optional[Path] = None,
) -> int:
    """Run mk and return the process exit code.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).
        stdin: Stream to copy into a created file. Defaults to the process
            stdin when it is piped, and to nothing when it is a terminal.
        root: Directory relative paths are resolved against (defaults to
            the current working directory).

    Returns:
        0 on success, otherwise the exit code of the error that ended the run.
        Usage errors and --version are reported by argparse and return its
        exit code instead of raising SystemExit.
    """
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    configure_logging(args.verbose)

    try:
        invocation = Invocation(
            target_path=args.path,
            force_file=args.force_file,
            force_dir=args.force_dir,
            overwrite=args.overwrite,
            executable=args.executable,
        )
    except ValidationError as exc:
        return _report(InvalidArgumentError(_validation_message(exc)))

    if stdin is None:
        stdin = _piped_stdin()

    try:
        create_entry(invocation, root=root, stdin=stdin)
    except MkError as exc:
        return _report(exc)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
