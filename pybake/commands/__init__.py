from returns.io import IOResultE

from pybake.commands.build import build
from pybake.commands.new import new_project
from pybake.commands.run_cmd import run


def new(args) -> IOResultE[int]:
    return new_project(args)


__all__ = ["new", "build", "run"]
