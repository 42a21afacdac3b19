"""Shared fixtures for pybake tests.

The build tests drive a fake compiler script instead of a real C toolchain.
It records every invocation, writes the requested output file and fails
when a source file contains the word ``FAIL``. The executables it links run
the shell command in ``PYBAKE_TEST_EXE``, or ``exit 0`` when that is unset.
"""

from __future__ import annotations

import json
import stat
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

FAKE_COMPILER = """\
#!{python}
import json
import os
import sys

args = sys.argv[1:]
with open({log!r}, "a") as log:
    log.write(json.dumps(args) + "\\n")

output = args[args.index("-o") + 1]
if "-c" in args:
    source = args[args.index("-c") + 1]
    with open(source) as f:
        if "FAIL" in f.read():
            sys.exit(1)
    with open(output, "w") as f:
        f.write("object " + source)
else:
    if any("FAIL" in open(arg).read() for arg in args if arg.endswith(".o")):
        sys.exit(1)
    with open(output, "w") as f:
        f.write('#!/bin/sh\\neval "${{PYBAKE_TEST_EXE:-exit 0}}"\\n')
    os.chmod(output, 0o755)
"""


@dataclass
class FakeCompiler:
    command: Path
    log: Path

    def calls(self) -> list[list[str]]:
        if not self.log.exists():
            return []
        return [json.loads(line) for line in self.log.read_text().splitlines()]

    def compiled(self) -> list[str]:
        """Names of the source files compiled so far, in order."""
        return [Path(c[c.index("-c") + 1]).name for c in self.calls() if "-c" in c]

    def links(self) -> list[list[str]]:
        return [c for c in self.calls() if "-c" not in c]

    def reset(self) -> None:
        self.log.unlink(missing_ok=True)


@pytest.fixture
def fake_cc(tmp_path: Path) -> FakeCompiler:
    tools = tmp_path / "tools"
    tools.mkdir()
    log = tools / "calls.log"
    command = tools / "fakecc"
    command.write_text(FAKE_COMPILER.format(python=sys.executable, log=str(log)))
    command.chmod(command.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return FakeCompiler(command=command, log=log)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    directory = tmp_path / "demo"
    (directory / "src").mkdir(parents=True)
    (directory / "bake.toml").write_text('name = "demo"\n')
    return directory


@pytest.fixture
def environ(fake_cc: FakeCompiler) -> dict[str, str]:
    return {"CC": str(fake_cc.command), "CXX": str(fake_cc.command)}

