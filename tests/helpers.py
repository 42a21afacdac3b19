from __future__ import annotations

import os
from pathlib import Path

from returns.unsafe import unsafe_perform_io

from pybake.domain.context import BuildContext
from pybake.domain.entities import BuildMode

# 2020-09-13, far enough in the past that anything written by a test is newer.
OLD_MTIME_NS = 1_600_000_000 * 10**9
SECOND_NS = 10**9


def set_mtime(path: Path, mtime_ns: int) -> None:
    os.utime(path, ns=(mtime_ns, mtime_ns))


def write_source(
    path: Path, content: str = "int x;\n", mtime_ns: int | None = OLD_MTIME_NS
) -> Path:
    path.write_text(content)
    if mtime_ns is not None:
        set_mtime(path, mtime_ns)
    return path


def create_context(
    directory: Path, environ: dict[str, str], mode: BuildMode = BuildMode.DEBUG
) -> BuildContext:
    return unsafe_perform_io(
        BuildContext.create_from_config(directory, mode, environ).unwrap()
    )


def failure_of(result):
    return unsafe_perform_io(result.failure())


def value_of(result):
    return unsafe_perform_io(result.unwrap())
