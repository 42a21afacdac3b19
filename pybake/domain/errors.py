"""Errors raised or returned while building a pybake project.

Every error can carry the error that caused it. ``main`` walks that chain and
prints each message, outermost first.
"""

from collections.abc import Iterator
from pathlib import Path


class BakeError(Exception):
    """Base class for all pybake errors."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class ConfigError(BakeError):
    """'bake.toml' could not be read or parsed."""


class InvalidProject(BakeError):
    """'bake.toml' was parsed but does not describe a project."""


class InvalidProjectName(BakeError):
    def __init__(self, name: str):
        super().__init__(f"{name} is not a valid project name")
        self.name = name


class MissingSourceDirectory(BakeError):
    def __init__(self, path: Path, cause: BaseException | None = None):
        super().__init__(f"Failed to read '{path}'", cause)
        self.path = path


class MetadataUnavailable(BakeError):
    def __init__(self, path: Path, cause: BaseException | None = None):
        super().__init__(f"Failed to read metadata of '{path}'", cause)
        self.path = path


class ToolchainUnavailable(BakeError):
    """The compiler or linker executable could not be launched at all."""

    def __init__(self, command: str, cause: BaseException | None = None):
        super().__init__(f"Failed to launch '{command}'", cause)
        self.command = command


class CompileFailed(BakeError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to compile file '{path}'")
        self.path = path


class LinkFailed(BakeError):
    def __init__(self, name: str):
        super().__init__(f"Failed to link executable '{name}'")
        self.name = name


class ExecutableLaunchFailed(BakeError):
    def __init__(self, path: Path, cause: BaseException | None = None):
        super().__init__(f"Failed to run '{path}'", cause)
        self.path = path


def error_chain(error: BaseException) -> Iterator[BaseException]:
    """Yields the error followed by each of its causes."""
    current: BaseException | None = error
    while current is not None:
        yield current
        current = current.__cause__
