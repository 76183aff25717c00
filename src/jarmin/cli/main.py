# Copyright 2026 Jarmin Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the jarmin command-line interface."""

import argparse
import signal
import sys
from pathlib import Path
from types import FrameType

from yachalk import chalk

from jarmin.config.settings import Settings, discover_settings, load_settings
from jarmin.errors import JarminError
from jarmin.model.classes import OutputMode
from jarmin.tools import analyzer_from_settings, archiver_from_settings, require_tools
from jarmin.workflow.finder import FindRequest, find_dependencies
from jarmin.workflow.minimizer import MinimizeRequest, minimize_archive

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the jarmin CLI."""
    parser = _build_parser()

    if len(sys.argv) < 2:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    args, extras = parser.parse_known_args()
    if args.command is None:
        parser.print_usage(sys.stderr)
        sys.exit(1)
    if extras:
        _accept_trailing_paths(parser, args, extras)

    previous_handler = signal.signal(signal.SIGTERM, _terminate)
    try:
        code = _dispatch(args)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        code = 130
    finally:
        signal.signal(signal.SIGTERM, previous_handler)
    sys.exit(code)


# ################
# Implementation
# ################

_USAGE = "%(prog)s [--config FILE] <command> <args>"

_DESCRIPTION = """\
Find the classes of a Java library that a project actually uses and build a
minimized copy of the library archive containing only those classes.

commands:
  find      searches for usages of the library in your project
  minimize  creates an archive containing the used classes and their
            transitive dependencies inside the library"""

_EPILOG = """\
Typically, you first create the list of library dependencies by running
"find" on your project classes and write the list into a file:

  jarmin find path-to-project > dependencies.txt

Then call "minimize" on the matching library archive to create a compact
version containing only the necessary classes:

  jarmin minimize fastutil.jar dependencies.txt

A hand-written class list with one .class path per line can be passed to
"minimize" just as well. The target library defaults to fastutil and can be
changed in a .jarmin.yaml file (see --config)."""


class _StderrArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that writes help to stderr, keeping stdout for results."""

    def print_help(self, file=None) -> None:
        super().print_help(file if file is not None else sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = _StderrArgumentParser(
        prog="jarmin",
        usage=_USAGE,
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Settings file to use (default: .jarmin.yaml in the current directory, if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # find subcommand
    find_parser = subparsers.add_parser(
        "find",
        help="Search for usages of the library in your project",
        description="Print the library classes referenced by the given class directories or archives.",
        allow_abbrev=False,
    )
    find_parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Archive or directory to analyse for usages of library classes",
    )
    find_parser.add_argument(
        "--cp",
        "--classpath",
        dest="classpath",
        action="append",
        default=[],
        metavar="PATH",
        help=(
            "Add an archive or directory to the searched classpath. Useful if a big "
            "dependency of yours uses a lot of the library but you only use a small "
            "part of it. Do not add the library itself here."
        ),
    )
    find_parser.add_argument(
        "--src",
        "--source",
        dest="mode",
        action="store_const",
        const=OutputMode.SOURCE,
        help="Output paths to the .java files (nested classes are omitted)",
    )
    find_parser.add_argument(
        "--cls",
        "--class",
        dest="mode",
        action="store_const",
        const=OutputMode.CLASS,
        help="Output paths to the .class files (default)",
    )
    find_parser.set_defaults(mode=OutputMode.CLASS)

    # minimize subcommand
    minimize_parser = subparsers.add_parser(
        "minimize",
        help="Create an archive containing the used classes and their dependencies",
        description=(
            "Write <archive>-min.<ext> next to the library archive, holding the classes "
            "of the class list, their transitive dependencies and the archive metadata."
        ),
        allow_abbrev=False,
    )
    minimize_parser.add_argument("archive", metavar="LIBRARY_ARCHIVE", help="The complete library archive")
    minimize_parser.add_argument(
        "class_list",
        metavar="CLASS_LIST",
        help="File with one .class path per line, as written by 'jarmin find --cls'",
    )
    minimize_parser.add_argument(
        "-o",
        "--output",
        metavar="DEST",
        help="Write the minimized archive here instead of next to the library archive",
    )

    return parser


def _accept_trailing_paths(parser: argparse.ArgumentParser, args: argparse.Namespace, extras: list[str]) -> None:
    """Take paths that follow find options, as in ``find DIR --src DIR2``.

    argparse fills a positional from one run of arguments only.
    """
    if args.command != "find" or any(arg.startswith("-") for arg in extras):
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    args.paths.extend(extras)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        settings = _load_settings(args)
    except JarminError as exc:
        _print_error(exc)
        return 1

    if args.command == "find":
        return _cmd_find(args, settings)
    if args.command == "minimize":
        return _cmd_minimize(args, settings)
    return 1


def _cmd_find(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the find subcommand."""
    request = FindRequest(
        paths=tuple(Path(p) for p in args.paths),
        classpath=tuple(Path(p) for p in args.classpath),
        mode=args.mode,
        library=settings.library,
    )
    try:
        require_tools(settings.tools.jdeps)
        result = find_dependencies(request, analyzer_from_settings(settings.tools), warn=_print_warning)
    except JarminError as exc:
        _print_error(exc)
        return 1

    sys.stdout.write(result.render())
    return 0


def _cmd_minimize(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the minimize subcommand."""
    request = MinimizeRequest(
        archive=Path(args.archive),
        class_list=Path(args.class_list),
        destination=Path(args.output) if args.output else None,
        library=settings.library,
        compression_level=settings.compression_level,
    )
    try:
        require_tools(settings.tools.jdeps, settings.tools.unzip, settings.tools.zip)
        result = minimize_archive(
            request,
            analyzer_from_settings(settings.tools),
            archiver_from_settings(settings.tools),
            progress=_print_progress,
        )
    except JarminError as exc:
        _print_error(exc)
        return 1

    print(
        f"Minimized archive written to {result.destination} ({result.packed} classes)",
        file=sys.stderr,
    )
    return 0


def _load_settings(args: argparse.Namespace) -> Settings:
    if args.config:
        return load_settings(Path(args.config))
    return discover_settings(Path.cwd())


def _print_progress(message: str) -> None:
    print(message, file=sys.stderr)


def _print_warning(message: str) -> None:
    print(f"{chalk.yellow('Warning:')} {message}", file=sys.stderr)


def _print_error(exc: Exception) -> None:
    message = "; ".join(line.strip() for line in str(exc).splitlines() if line.strip())
    print(f"{chalk.red('Error:')} {message}", file=sys.stderr)


def _terminate(signum: int, frame: FrameType | None) -> None:
    # Unwinds through the scratch directory context managers.
    raise SystemExit(128 + signum)
