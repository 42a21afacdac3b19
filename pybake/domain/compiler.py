from collections.abc import Iterable
import logging
from pathlib import Path
import subprocess

from returns.io import IOFailure, IOResultE, IOSuccess

from pybake.domain.entities import BuildMode, CommandEntity, SourceEntry
from pybake.domain.errors import CompileFailed, LinkFailed, ToolchainUnavailable
from pybake.domain.toolchain import Toolchain

logger = logging.getLogger(__name__)

DEBUG_INFO_FLAG = "-g"


def compile_obj(
    cc: str, mode: BuildMode, source: Path, obj_file: Path
) -> CommandEntity:
    return CommandEntity(
        output_path=obj_file,
        command=(
            cc,
            mode.flag,
            DEBUG_INFO_FLAG,
            "-c",
            str(source),
            "-o",
            str(obj_file),
        ),
    )


def link_exe(
    cc: str, mode: BuildMode, obj_files: Iterable[Path], exe: Path
) -> CommandEntity:
    return CommandEntity(
        output_path=exe,
        command=(
            cc,
            *map(str, obj_files),
            mode.flag,
            "-o",
            str(exe),
        ),
    )


def subprocess_run(cmd: CommandEntity) -> IOResultE[int]:
    """Runs the command to completion and returns its exit status."""
    logger.debug("%s", " ".join(cmd.command))
    try:
        res = subprocess.run(cmd.command)
    except OSError as e:
        return IOFailure(ToolchainUnavailable(cmd.command[0], e))
    return IOSuccess(res.returncode)


def compile_obj_file(
    toolchain: Toolchain, mode: BuildMode, source: SourceEntry, obj_file: Path
) -> IOResultE[Path]:
    cmd = compile_obj(toolchain.compiler_for(source.language), mode, source.path, obj_file)
    return subprocess_run(cmd).bind(
        lambda returncode: IOSuccess(cmd.output_path)
        if returncode == 0
        else IOFailure(CompileFailed(source.path))
    )


def link_exe_file(
    toolchain: Toolchain, mode: BuildMode, obj_files: Iterable[Path], exe: Path
) -> IOResultE[Path]:
    cmd = link_exe(toolchain.linker, mode, obj_files, exe)
    return subprocess_run(cmd).bind(
        lambda returncode: IOSuccess(cmd.output_path)
        if returncode == 0
        else IOFailure(LinkFailed(exe.name))
    )
