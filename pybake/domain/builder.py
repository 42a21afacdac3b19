from collections.abc import Iterable
import logging
from pathlib import Path
import subprocess

from returns.io import IOFailure, IOResultE, IOSuccess
from returns.pipeline import flow, is_successful
from returns.pointfree import bind

from pybake.domain.compiler import compile_obj_file, link_exe_file
from pybake.domain.context import BuildContext
from pybake.domain.errors import BakeError, ExecutableLaunchFailed
from pybake.domain.files import (
    collect_obj_files,
    create_path,
    needs_recompilation,
    obj_file_path,
    scan_sources,
)

logger = logging.getLogger(__name__)


def display(status: str, subject: object) -> None:
    print(f"  \033[1;32m{status:>10}\033[0m {subject}")


def _compile_sources(context: BuildContext) -> IOResultE[BuildContext]:
    """Compiles every stale source, stopping at the first failure."""
    try:
        with scan_sources(context.files.src) as sources:
            create_path(context.files.output)
            for source in sources:
                obj_file = obj_file_path(context.files.output, source.path)
                if not needs_recompilation(source, obj_file):
                    logger.info("Up to date: '%s'", source.path)
                    continue

                result = compile_obj_file(
                    context.toolchain, context.mode, source, obj_file
                )
                if not is_successful(result):
                    return result.map(lambda _: context)
                display("Compiled", source.path)
    except BakeError as e:
        return IOFailure(e)
    return IOSuccess(context)


def _link_obj_files(context: BuildContext) -> IOResultE[Path]:
    try:
        obj_files = collect_obj_files(context.files.output)
    except BakeError as e:
        return IOFailure(e)

    logger.info("Linking %d object file(s)", len(obj_files))
    return link_exe_file(
        context.toolchain, context.mode, obj_files, context.files.executable
    ).map(lambda exe: display("Compiled", f"'{context.config.name}'") or exe)


def build_bin(context: BuildContext) -> IOResultE[Path]:
    return flow(
        context,
        _compile_sources,
        bind(_link_obj_files),
    )


def _run_exe(exe: Path, argv: Iterable[str]) -> IOResultE[int]:
    display("Running", exe)
    try:
        res = subprocess.run((str(exe), *argv))
    except OSError as e:
        return IOFailure(ExecutableLaunchFailed(exe, e))
    # The program's exit status never becomes pybake's.
    logger.info("'%s' exited with status %d", exe.name, res.returncode)
    return IOSuccess(0)


def run_bin(context: BuildContext, argv: Iterable[str] = ()) -> IOResultE[int]:
    """Builds the project and runs the executable, waiting for it to exit."""
    return build_bin(context).bind(lambda exe: _run_exe(exe, argv))
