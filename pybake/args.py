from pathlib import Path
from typing import Protocol
import argparse

from pybake.__version__ import __version__
from pybake.domain.entities import BuildMode
from pybake.types import Action


class ArgsConfig(Protocol):
    action: Action
    dir: Path
    mode: BuildMode
    name: str
    verbose: bool
    debug_log: bool


def _add_mode(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-m",
        "--mode",
        type=BuildMode,
        choices=tuple(BuildMode),
        default=BuildMode.DEBUG,
    )


def args_parse(argv: list[str]) -> tuple[ArgsConfig, list[str]]:
    parser = argparse.ArgumentParser(
        prog="pybake",
        description="A simple build system for C/C++",
        epilog="",
    )
    parser.add_argument("-d", "--dir", type=Path, default=Path.cwd())
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--debug-log", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)

    subparser = parser.add_subparsers(dest="action", required=True)

    new = subparser.add_parser("new", help="Create a new pybake project")
    new.add_argument("name")

    build = subparser.add_parser("build", help="Build the project")
    _add_mode(build)

    run = subparser.add_parser("run", help="Build and run the project")
    _add_mode(run)

    return parser.parse_known_args(argv)  # type: ignore
