from pathlib import Path
import re

from returns.io import IOFailure, IOResultE, IOSuccess

from pybake.domain.builder import display
from pybake.domain.config import CONFIG_FILE
from pybake.domain.errors import BakeError, InvalidProjectName

PROJECT_NAME_REGEX = re.compile(r"[A-Za-z_][A-Za-z0-9\-_]*")

DEFAULT_MAIN_C = """\
#include <stdio.h>

int main(int argc, char *argv[]) {
    puts("Hello World");
    return 0;
}
"""


def _create_file(file: Path, content: str, what: str) -> Path:
    try:
        file.write_text(content)
    except OSError as e:
        raise BakeError(f"Failed to create '{what}'") from e
    return file


def _create_dir(directory: Path, what: str) -> Path:
    try:
        directory.mkdir()
    except OSError as e:
        raise BakeError(f"Failed to create {what} at '{directory}'") from e
    return directory


def create_project(parent: Path, name: str) -> Path:
    if not PROJECT_NAME_REGEX.fullmatch(name):
        raise InvalidProjectName(name)

    directory = _create_dir(Path(parent, name), "project directory")
    _create_file(directory / CONFIG_FILE, f'name="{name}"\n', CONFIG_FILE)
    src = _create_dir(directory / "src", "'src/'")
    _create_file(src / "main.c", DEFAULT_MAIN_C, "main.c")
    _create_file(directory / ".gitignore", "bin/\n", ".gitignore")
    return directory


def new_project(args) -> IOResultE[int]:
    try:
        directory = create_project(args.dir, args.name)
    except BakeError as e:
        return IOFailure(e)
    display("Created", f"project '{directory}'")
    return IOSuccess(0)
