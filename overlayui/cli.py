"""Command-line options for running and packaging UI projects."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence, Tuple, Union

_DESCRIPTION = (
    "A tool for running and packaging UI files\n\n"
    "Available commands:\n"
    "  run       Run the UI from a packaged file\n"
    "  package   Package a UI project directory\n"
)


class Command(enum.Enum):
    RUN = "run"
    PACKAGE = "package"
    UNKNOWN = "unknown"


class OptionsError(Exception):
    """Raised for invalid or missing command-line options."""


@dataclass
class RunOptions:
    ui_file: Path
    initial_ui: str = ""
    covered: bool = False
    debug: bool = False
    target_window: str = ""


@dataclass
class PackageOptions:
    ui_project_dir: Path
    initial_ui: str
    width: int
    height: int


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise OptionsError(f"Options error: {message}")


def _top_parser() -> _Parser:
    parser = _Parser(
        prog="UI Tool",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    parser.add_argument("command", nargs="?", help="Command to execute (run or package)")
    return parser


def _run_parser() -> _Parser:
    parser = _Parser(prog="UI Tool - run", description="Run the UI", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    parser.add_argument("-f", "--file", help="UI file path (zip format, required)")
    parser.add_argument("-d", "--debug", action="store_true", help="Show the box area")
    parser.add_argument(
        "-i", "--initiativeui", default="", help="Initial UI interface (optional)"
    )
    parser.add_argument(
        "-c",
        "--covered",
        action="store_true",
        help="Whether to cover (optional, requires target window if true)",
    )
    parser.add_argument(
        "-t", "--target", default=None, help="Target window name (required if covered is true)"
    )
    return parser


def _package_parser() -> _Parser:
    parser = _Parser(prog="UI Tool - package", description="Package the UI", add_help=False)
    parser.add_argument("-d", "--dir", help="UI project directory path (required)")
    parser.add_argument("-i", "--initiativeui", help="Initial UI interface (required)")
    parser.add_argument("-w", "--width", type=int, help="Width of Window")
    parser.add_argument("-e", "--height", type=int, help="Height of Window")
    parser.add_argument("-h", "--help", action="store_true", help="Print usage")
    return parser


def _run_options(args: argparse.Namespace) -> RunOptions:
    if args.file is None:
        raise OptionsError("File path is required for run command")
    path = Path(args.file)
    if not path.exists():
        raise OptionsError(f"File does not exist: {args.file}")
    if path.is_dir():
        raise OptionsError(f"Path must be a file, not a directory: {args.file}")
    options = RunOptions(
        ui_file=path,
        initial_ui=args.initiativeui,
        covered=args.covered,
        debug=args.debug,
    )
    if options.covered:
        if args.target is None:
            raise OptionsError("Target window name is required when covered is true")
        options.target_window = args.target
    return options


def _package_options(args: argparse.Namespace) -> PackageOptions:
    if args.dir is None:
        raise OptionsError("Project directory path is required for package command")
    if args.initiativeui is None:
        raise OptionsError("Initial UI interface is required for package command")
    if args.width is None:
        raise OptionsError("Width of Window is required for package command")
    if args.height is None:
        raise OptionsError("Height of Window is required for package command")
    directory = Path(args.dir)
    if not directory.exists():
        raise OptionsError(f"Directory does not exist: {args.dir}")
    if not directory.is_dir():
        raise OptionsError(f"Path must be a directory: {args.dir}")
    if args.width <= 0 or args.height <= 0:
        raise OptionsError("Size of window must larger than zero")
    if not args.initiativeui:
        raise OptionsError("Initial UI interface cannot be empty")
    ui_path = directory / "ui" / args.initiativeui
    if not ui_path.exists():
        raise OptionsError(f"Initial UI does not exist: {args.initiativeui}")
    if not ui_path.is_file():
        raise OptionsError(f"Initial UI is not a regular file: {args.initiativeui}")
    return PackageOptions(
        ui_project_dir=directory,
        initial_ui=args.initiativeui,
        width=args.width,
        height=args.height,
    )


def parse_options(
    argv: Sequence[str],
) -> Tuple[Command, Optional[Union[RunOptions, PackageOptions]]]:
    """Parse the arguments after the program name.

    Returns the command and its options; when help was printed instead the
    command is ``Command.UNKNOWN`` and the options are ``None``.
    """
    args: List[str] = list(argv)
    command_at = next((i for i, arg in enumerate(args) if not arg.startswith("-")), None)
    top = _top_parser()
    if command_at is None:
        if not args or any(arg in ("-h", "--help") for arg in args):
            print(top.format_help())
            return Command.UNKNOWN, None
        raise OptionsError("No command specified")

    command = args[command_at]
    rest = args[:command_at] + args[command_at + 1 :]
    if command == "run":
        parser = _run_parser()
    elif command == "package":
        parser = _package_parser()
    else:
        raise OptionsError(f"Unknown command: {command}")

    parsed = parser.parse_args(rest)
    if parsed.help or not rest:
        print(parser.format_help())
        return Command.UNKNOWN, None
    if command == "run":
        return Command.RUN, _run_options(parsed)
    return Command.PACKAGE, _package_options(parsed)